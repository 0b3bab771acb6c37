"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    _ = app

    # Startup
    logger.info("Starting Bookshelf API...", environment=settings.environment)

    yield

    # Shutdown
    logger.info("Shutting down Bookshelf API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API serving a static book catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Add logging context middleware
    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not settings.disable_graphql:
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            # Validate schema at startup so a broken schema fails fast
            logger.info("Validating GraphQL schema...")
            validate_schema()

            graphql_router = create_graphql_router()
            app.include_router(graphql_router, prefix="")
            logger.info(
                "GraphQL endpoint initialized successfully", endpoint=settings.graphql_path
            )
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            # Server should not start with broken GraphQL
            raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import sys

    from .server import run_server

    sys.exit(0 if run_server(app) else 1)
