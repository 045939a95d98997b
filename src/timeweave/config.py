"""Environment-driven settings for timeweave."""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Settings read from ``TIMEWEAVE_*`` environment variables or ``.env``."""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # Seed used by simulate() when the caller passes none
    DEFAULT_SEED: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="TIMEWEAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
