"""
Application settings and configuration.
"""

import logging
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .simplybook import SimplyBookConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SimplyBook Bridge"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # SimplyBook API (required)
    simplybook_base_url: str = Field(min_length=1)
    simplybook_company: str = Field(min_length=1)
    simplybook_api_key: str = Field(min_length=1)
    simplybook_secret_key: str = Field(min_length=1)

    # SimplyBook API (tuning)
    rpc_timeout: float = 15.0
    service_duration_ttl: float = 600.0
    simplybook_auth_error_codes: List[int] = Field(default_factory=list)

    # Salon
    salon_timezone: str = "Asia/Singapore"
    salon_utc_offset_minutes: int = 480
    min_reschedule_hours: float = 24.0

    # Logging
    log_level: str = "INFO"

    def simplybook(self) -> SimplyBookConfig:
        """Build the remote API configuration."""
        return SimplyBookConfig(
            base_url=self.simplybook_base_url,
            company=self.simplybook_company,
            api_key=self.simplybook_api_key,
            secret_key=self.simplybook_secret_key,
            timeout=self.rpc_timeout,
            auth_error_codes=frozenset(self.simplybook_auth_error_codes),
        )

    def warn_about_defaults(self, logger: logging.Logger) -> None:
        """Log a warning for each salon setting left at its default."""
        defaults = {
            "salon_timezone": f"defaulting to {self.salon_timezone}",
            "salon_utc_offset_minutes": f"defaulting to {self.salon_utc_offset_minutes}",
            "min_reschedule_hours": f"defaulting to {self.min_reschedule_hours:g} hours",
        }
        for name, note in defaults.items():
            if name not in self.model_fields_set:
                logger.warning(f"{name.upper()} not set, {note}")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
