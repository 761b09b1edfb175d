"""
Runtime settings for the artist directory.

Values come from environment variables prefixed with ``DIRECTORY_`` or from a
``.env`` file next to the process working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIRECTORY_", env_file=".env", extra="ignore"
    )

    artists_url: str = Field(
        default="https://groupietrackers.herokuapp.com/api/artists",
        description="Endpoint returning the full artist collection",
    )
    http_timeout: float = Field(
        default=15.0, gt=0, description="Timeout in seconds for every upstream request"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    static_dir: str = Field(
        default="frontend/dist", description="Built SPA served at / when present"
    )
    port: int = Field(default=8000, description="Port used by the dev runner")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton Settings instance."""
    return Settings()
