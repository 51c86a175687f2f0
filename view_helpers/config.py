"""Helper configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Helper defaults, loaded from VIEW_HELPERS_* environment / .env file.

    Explicit helper arguments always take precedence over these values.
    """

    # -- Dates --
    short_format: str | None = None  # strftime override for same-year dates
    long_format: str | None = None  # strftime override for other-year dates

    # -- Lists --
    stripe: bool = True
    list_separator: str = "\n"

    # -- Preview app --
    preview_host: str = "127.0.0.1"
    preview_port: int = 7860

    model_config = {
        "env_prefix": "VIEW_HELPERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
