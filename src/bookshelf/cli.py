#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf API server.
"""

import json
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve and inspect the GraphQL API."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads settings at import time; export them so a reloader
    # subprocess sees the same values.
    os.environ["BOOKSHELF_API_HOST"] = host
    os.environ["BOOKSHELF_API_PORT"] = str(port)
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level
    settings.api_host = host
    settings.api_port = port
    settings.debug = settings.debug or log_level == "debug"

    try:
        if reload:
            # The reloader runs workers in subprocesses with uvicorn's own server
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
            started = True
        else:
            from bookshelf.api.app import app
            from bookshelf.api.server import run_server

            started = run_server(app, host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
        return
    except SystemExit as e:
        if e.code in (0, None):
            raise
        logger.error("Server startup failed", exit_code=e.code)
        sys.exit(1)
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)

    # run_server has already logged the failure
    if not started:
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    configure_logging(debug=settings.debug)

    from bookshelf.graphql.schema import print_schema

    click.echo(print_schema())


def _parse_variables(ctx: click.Context, param: click.Parameter, value: str | None) -> dict | None:
    _ = ctx
    if value is None:
        return None
    try:
        variables = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param=param) from e
    if not isinstance(variables, dict):
        raise click.BadParameter("must be a JSON object", param=param)
    return variables


@cli.command()
@click.argument("document")
@click.option(
    "--variables",
    callback=_parse_variables,
    help="Variables as a JSON object",
)
@click.option(
    "--operation-name",
    default=None,
    help="Operation to run when the document holds several",
)
def query(document: str, variables: dict | None, operation_name: str | None) -> None:
    """Execute a GraphQL DOCUMENT against the schema and print the response."""
    configure_logging(debug=settings.debug)

    from bookshelf.graphql.schema import schema as graphql_schema

    result = graphql_schema.execute_sync(
        document,
        variable_values=variables,
        operation_name=operation_name,
    )

    response: dict = {"data": result.data}
    if result.errors:
        response["errors"] = [error.formatted for error in result.errors]

    click.echo(json.dumps(response, indent=2))

    if result.errors:
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
