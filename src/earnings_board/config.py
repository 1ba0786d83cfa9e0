"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from earnings_board.core.constants import DEFAULT_FMP_API_URL, DEFAULT_REFRESH_CRON


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="BOARD_ENV"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="BOARD_LOG_LEVEL"
    )

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT", ge=1, le=65535)

    # Financial Modeling Prep
    fmp_api_key: SecretStr | None = Field(
        default=None,
        alias="FMP_API_KEY",
        description="Financial Modeling Prep API key for the earnings calendar",
    )
    fmp_base_url: str = Field(default=DEFAULT_FMP_API_URL, alias="FMP_BASE_URL")
    fmp_timeout: float = Field(
        default=30.0,
        alias="FMP_TIMEOUT",
        gt=0,
        description="Seconds before an earnings calendar request is abandoned",
    )

    # Refresh schedule (crontab, evaluated in UTC)
    refresh_cron: str = Field(default=DEFAULT_REFRESH_CRON, alias="REFRESH_CRON")

    # Snapshot persisted between restarts
    data_file: Path = Field(default=Path("earnings_data.json"), alias="DATA_FILE")

    @field_validator("refresh_cron")
    @classmethod
    def validate_refresh_cron(cls, v: str) -> str:
        """Require a standard five-field crontab expression."""
        v = " ".join(v.split())
        if len(v.split(" ")) != 5:
            raise ValueError(f"REFRESH_CRON must have 5 fields, got {v!r}")
        return v

    @field_validator("fmp_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
