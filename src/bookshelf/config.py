"""
Configuration management for the Bookshelf API
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKSHELF_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/"
    graphiql: bool = True
    disable_graphql: bool = False  # serve only /health, for tests

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


def server_url(host: str | None = None, port: int | None = None, path: str | None = None) -> str:
    """Build the URL clients should use to reach the GraphQL endpoint.

    Wildcard bind addresses are not routable, so they are announced as
    ``localhost``.
    """
    host = host or settings.api_host
    port = port or settings.api_port
    path = path if path is not None else settings.graphql_path

    if host in ("0.0.0.0", "::", ""):
        host = "localhost"
    elif ":" in host:
        host = f"[{host}]"

    if not path.startswith("/"):
        path = f"/{path}"

    return f"http://{host}:{port}{path}"
