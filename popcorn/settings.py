from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path.home() / ".config" / "popcorn"
CONFIG_ENV = CONFIG_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(CONFIG_ENV, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    omdb_api: str
    omdb_url: str = "http://www.omdbapi.com"
    initial_query: str = "inception"
