"""
Document metadata database settings.

PostgreSQL in every deployed environment. POSTGRES_URL may supply a full
async URL instead of the individual parts (tests point it at SQLite).

Dependencies: pydantic, pydantic_settings
System role: Connection configuration for the documents table
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Connection and pool settings (env prefix POSTGRES_)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(default=None, description="Complete async SQLAlchemy URL (wins over the parts below)")
    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="memoryvault", description="Database name")
    sslmode: str = Field(default="require", description="'require' adds ssl=require for asyncpg")

    pool_size: int = Field(default=10, description="Persistent connections per process")
    max_overflow: int = Field(default=20, description="Burst connections above pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a free connection")
    echo_sql: bool = Field(default=False, description="Log every SQL statement")
    create_tables: bool = Field(default=False, description="Run metadata.create_all on startup")

    @property
    def async_database_url(self) -> str:
        """URL for create_async_engine (asyncpg driver unless `url` overrides it)."""
        if self.url:
            return self.url
        query = "?ssl=require" if self.sslmode == "require" else ""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}{query}"

    @property
    def is_postgres(self) -> bool:
        """Pool sizing only applies to PostgreSQL engines."""
        return self.async_database_url.startswith("postgresql")
