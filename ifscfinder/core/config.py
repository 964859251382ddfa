"""Library configuration loaded from the environment."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for dataset location and cache sizing.

    Every field can be overridden with an ``IFSCFINDER_``-prefixed
    environment variable, e.g. ``IFSCFINDER_CACHE_SIZE=4096``.
    """

    # Dataset
    db_path: str | None = None  # None -> bundled ifscfinder/data/ifsc.db
    immutable: bool = True  # open with immutable=1 (no locking)
    sqlite_cache_size: int = 1000  # PRAGMA cache_size, in pages

    # Lookup cache
    cache_size: int = Field(default=1024, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="IFSCFINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
