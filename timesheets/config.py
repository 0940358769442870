"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level when debug is off")

    # Database
    database_url: str = Field(default="sqlite:///./timesheets.db", description="SQLAlchemy database URL")

    # Time handling
    timezone: str = Field(default="UTC", description="Reference time zone for week boundaries")

    # Timesheet rules
    overtime_threshold_hours: Decimal = Field(default=Decimal("40"), ge=0)
    max_entry_hours: Decimal = Field(default=Decimal("24"), gt=0)
    max_description_length: int = Field(default=500, gt=0)
    max_hourly_rate: Decimal = Field(default=Decimal("1000"), ge=0)

    # Payroll approximation
    payroll_tax_rate: Decimal = Field(default=Decimal("0.25"), ge=0, le=1)

    # Reporting
    report_timeout_seconds: float = Field(default=30.0, gt=0)

    # Email Configuration
    notifications_enabled: bool = Field(default=True)
    smtp_host: Optional[str] = Field(default=None)
    smtp_port: int = Field(default=587)
    smtp_user: Optional[str] = Field(default=None)
    smtp_password: Optional[str] = Field(default=None)
    email_from_name: str = Field(default="Timesheets")
    email_from_address: str = Field(default="noreply@example.com")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject time zone names the zoneinfo database does not know."""
        ZoneInfo(v)
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def tzinfo(self) -> ZoneInfo:
        """Reference time zone as a tzinfo object."""
        return ZoneInfo(self.timezone)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()
