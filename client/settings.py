"""
Client settings loaded from WORKOUT_TRACKER_* environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Where the API lives and where the session is kept."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default="http://localhost:8001",
        description="Base URL of the Workout Tracker API",
    )
    session_file: Path = Field(
        default=Path("~/.workout-tracker/session.json"),
        description="File holding the persisted token and user",
    )
    timeout: float = Field(
        default=15.0,
        gt=0,
        description="Request timeout in seconds",
    )

    @property
    def session_path(self) -> Path:
        return self.session_file.expanduser()


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
