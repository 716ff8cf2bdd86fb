"""Database configuration settings.

SQLite catalog location and driver options.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Catalog database configuration.

    Attributes:
        db_path: Path to the SQLite database file.
        url: Full connection URL (overrides db_path).
        echo: Log every emitted SQL statement.
        timeout: Driver busy timeout in seconds.
    """

    db_path: str = Field(default="sqlite.db", alias="CATALOG_DB_PATH")
    url: str | None = Field(default=None, alias="DATABASE_URL")
    echo: bool = Field(default=False, alias="DB_ECHO")
    timeout: float = Field(default=30.0, alias="DB_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def sync_url(self) -> str:
        """Generate SQLAlchemy connection URL."""
        if self.url:
            return self.url
        return f"sqlite:///{self.db_path}"
