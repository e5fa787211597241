from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from league_results.core.enums import DataProviderEnum


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Active backend
    data_provider: DataProviderEnum = DataProviderEnum.LOCAL

    # Static league data (path or http(s) URL)
    league_data_source: str = "data/league-data.json"
    http_timeout_s: float = 30.0

    # Document store (MongoDB)
    mongodb_uri: str | None = Field(default=None, repr=False)
    mongodb_db_name: str = "league_results"
    mongodb_collection: str = "leagues"

    # Table store (SQL)
    database_url: str = "sqlite+pysqlite:///./league_results.db"
    db_echo: bool = False

    log_level: str = "INFO"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_mongodb_uri(self) -> str:
        if not self.mongodb_uri:
            raise RuntimeError("MONGODB_URI is not set. Set it in the environment or .env file.")
        return self.mongodb_uri


settings = Settings()
