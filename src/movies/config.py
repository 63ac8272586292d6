"""Movies configuration management."""

from datetime import date
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validation settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "movies"
    debug: bool = False

    # Release year bounds
    year_min: int = 1900
    year_max: int = 2024
    year_max_from_clock: bool = False  # use the current calendar year instead of year_max

    # Applied to an absent rate in full validation only
    rate_default: float = 5.5

    @property
    def effective_year_max(self) -> int:
        """Upper bound for the release year."""
        if self.year_max_from_clock:
            return date.today().year
        return self.year_max


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
