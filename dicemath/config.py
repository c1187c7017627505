"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


FractionStyle = Literal["improper", "mixed"]


class Settings(BaseSettings):
    """Application settings loaded from DICE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rolling
    seed: int | None = None  # None = system entropy

    # Output
    fraction_style: FractionStyle = "improper"  # "5/4" vs "1 1/4"

    # Debug
    debug: bool = False
    log_level: str = "WARNING"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
