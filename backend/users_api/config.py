"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: str = Field(default="5432", alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(default="postgres", alias="DB_PASSWORD")
    db_name: str = Field(default="app", alias="DB_NAME")
    db_sslmode: str = Field(default="disable", alias="DB_SSLMODE")
    # Takes precedence over the DB_* parts when set (e.g. SQLite for tests)
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=8080, alias="SERVER_PORT")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def database_url(self) -> str:
        """Return the SQLAlchemy URL for the configured database."""

        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    values = {
        name: os.environ[field.alias]
        for name, field in Settings.model_fields.items()
        if field.alias and os.getenv(field.alias)
    }
    return Settings(**values)
