"""Application settings and configuration.

This module defines all configuration options for the PatiDestek API.
Settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCATIONS_DIR = Path(__file__).resolve().parents[1] / "data" / "locations"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="PatiDestek API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    seed_secret: str | None = Field(default=None, alias="SEED_SECRET")

    # Database configuration
    database_url: str = Field(default="sqlite:///./patidestek.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # CORS configuration for the web frontend
    frontend_url: str = Field(default="http://localhost:5173", alias="FRONTEND_URL")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        alias="CORS_ORIGINS",
    )
    # Preview deployments are served from per-branch subdomains.
    cors_origin_regex: str | None = Field(
        default=r"https://.*\.vercel\.app",
        alias="CORS_ORIGIN_REGEX",
    )

    # Static Turkish province/district/neighbourhood fixtures
    locations_data_dir: Path = Field(default=DEFAULT_LOCATIONS_DIR, alias="LOCATIONS_DATA_DIR")

    # Listing pagination
    default_page_size: int = Field(default=12, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Return the explicit CORS origins including the configured frontend.

        Returns:
            De-duplicated origins without trailing slashes
        """
        origins: list[str] = []
        for origin in [*self.cors_origins, self.frontend_url]:
            cleaned = origin.strip().rstrip("/")
            if cleaned and cleaned not in origins:
                origins.append(cleaned)
        return origins

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts async driver URLs to psycopg for synchronous database
        operations like Alembic migrations.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+psycopg://", 1)
        return url


settings = Settings()  # type: ignore[call-arg]
