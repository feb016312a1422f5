from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_BASE_URL = (
    "https://raw.githubusercontent.com/frontendmu/frontend.mu/refs/heads/main"
    "/packages/frontendmu-data/data"
)


class Settings(BaseSettings):
    """Tool settings validated via Pydantic.

    Values are loaded from ``MEETUP_DATA_*`` environment variables and/or a
    .env file.  File paths are relative to the project root handed to the
    pipeline.
    """

    # Remote sources
    meetups_url: str = f"{DATA_BASE_URL}/meetups-raw.json"
    speakers_url: str = f"{DATA_BASE_URL}/speakers-raw.json"
    sponsors_url: str = f"{DATA_BASE_URL}/sponsors-raw.json"
    sponsor_logo_base_url: str = "https://frontend.mu/assets/"

    # Fetch limits
    fetch_timeout_seconds: float = 15.0
    fetch_deadline_seconds: float = 60.0

    # Project files
    config_file: str = "slides.config.ts"
    override_file: str = "meetup-data.override.json"
    output_file: str = "meetup-data.json"
    speakers_dir: str = "pages/generated/speakers"
    slide_references_file: str = "pages/generated/speakers-slides.txt"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MEETUP_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles an unreadable .env file by falling back to
    environment variables and defaults.
    """
    try:
        return Settings()
    except OSError:
        return Settings(_env_file=None)  # type: ignore[call-arg]
