"""
uvicorn server that announces the bound address once it is accepting connections
"""

import socket

import click
import uvicorn

from ..config import server_url, settings
from ..logging import get_logger

logger = get_logger(__name__)


class AnnouncingServer(uvicorn.Server):
    """uvicorn server printing the GraphQL URL after the listening socket is bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)

        # Lifespan failures return without setting started; bind failures exit
        if not self.started:
            return

        url = server_url(*self.bound_address())
        logger.info("Server ready", url=url)
        click.echo(f"🚀 Server ready at {url}")

    def bound_address(self) -> tuple[str, int]:
        """Host and port of the first listening socket, falling back to the config."""
        for server in getattr(self, "servers", []):
            for sock in server.sockets or ():
                if sock.family in (socket.AF_INET, socket.AF_INET6):
                    host, port = sock.getsockname()[:2]
                    return host, port
        return self.config.host, self.config.port


def build_server(app, host: str, port: int, log_level: str) -> AnnouncingServer:
    """Create a server for ``app`` (an ASGI app or an import string)."""
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=True,
    )
    return AnnouncingServer(config)


def run_server(
    app,
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
) -> bool:
    """Run ``app`` until shutdown.

    Returns:
        True if the server came up, False if startup failed
    """
    server = build_server(
        app,
        host=host or settings.api_host,
        port=port if port is not None else settings.api_port,
        log_level=(log_level or settings.log_level).lower(),
    )

    try:
        server.run()
    except SystemExit as e:
        # uvicorn exits from startup when the socket cannot be bound
        if e.code not in (0, None):
            logger.error("Server startup failed", exit_code=e.code)
            return False
        raise

    if not server.started:
        logger.error("Server startup failed", reason="lifespan startup did not complete")
        return False
    return True
