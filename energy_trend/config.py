"""
Service configuration from environment variables using Pydantic BaseSettings.

All configuration values are loaded from environment variables (or a .env
file) at startup. Database credentials default to a local MySQL instance.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-001)
- 2026-10-07: Add DATABASE_URL override and DB_POOL_SIZE (STORY-004)
- 2026-10-09: Add CORS_ORIGINS and LOG_LEVEL (STORY-006)

TODO:
- None
"""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        PORT: Listen port. PORT + 1 is tried once if the port is in use.
        HOST: Listen address.
        DB_HOST: MySQL host.
        DB_PORT: MySQL port.
        DB_USER: MySQL user.
        DB_PASSWORD: MySQL password.
        DB_NAME: MySQL database name.
        DATABASE_URL: Optional full SQLAlchemy URL; overrides the DB_* values.
        DB_POOL_SIZE: Maximum number of pooled connections.
        CORS_ORIGINS: Comma-separated allowed origins ("*" for any).
        LOG_LEVEL: Root logger level name.
    """

    PORT: int = 3001
    HOST: str = "0.0.0.0"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "energy_market"
    DATABASE_URL: str | None = None
    DB_POOL_SIZE: int = 10
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def database_url(self) -> str | URL:
        """SQLAlchemy URL for the async engine.

        Returns:
            The DATABASE_URL override when set, otherwise a mysql+aiomysql
            URL assembled from the DB_* settings.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+aiomysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, dropping blank entries."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


def get_settings() -> Settings:
    """Create and return a Settings instance.

    Returns:
        Settings: Validated configuration from environment variables.
    """
    return Settings()
