from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB = (
    Path.home()
    / "Library/Containers/com.culturedcode.ThingsMac/Data/Library/Application Support"
    / "Cultured Code/Things/Things.sqlite3"
)


class Settings(BaseSettings):
    db_path: Path = Field(
        default=DEFAULT_DB,
        validation_alias=AliasChoices("THINGSDB", "DB"),
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("THINGSQ_LOG_LEVEL", "LOG_LEVEL"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
