"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (NALO credentials, templates, secrets)
- Builds the immutable notification config handed to the dispatcher
- Validates configuration on startup
"""

from pydantic import Field, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, Optional, Literal

from app.schemas.notification import GatewayCredentials, NotificationConfig
from utils.constants import NALO_SEND_MESSAGE_URL, NALO_TIMEOUT_SECONDS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # NALO gateway
    NALO_API_URL: str = Field(
        default=NALO_SEND_MESSAGE_URL,
        description="NALO send-message endpoint"
    )
    NALO_TIMEOUT_SECONDS: float = Field(
        default=NALO_TIMEOUT_SECONDS,
        description="Gateway request timeout in seconds"
    )
    NALO_AUTH_KEY: Optional[str] = Field(
        default=None,
        description="NALO authentication key"
    )
    NALO_SENDER_ID: Optional[str] = Field(
        default=None,
        description="Sender ID shown on the customer's phone"
    )

    # Notification rules
    NALO_ENABLED_STATUSES: str = Field(
        default="",
        description="Comma-separated order statuses that trigger an SMS"
    )
    NALO_TPL_PROCESSING: Optional[str] = Field(
        default=None,
        description="Template for orders moving to processing"
    )
    NALO_TPL_COMPLETED: Optional[str] = Field(
        default=None,
        description="Template for orders moving to completed"
    )
    NALO_TPL_ON_HOLD: Optional[str] = Field(
        default=None,
        description="Template for orders moving to on-hold"
    )
    NALO_TPL_CANCELLED: Optional[str] = Field(
        default=None,
        description="Template for orders moving to cancelled"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api/v1",
        description="API route prefix"
    )

    # Security
    ADMIN_API_TOKEN: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Token required for manual SMS and the settings view"
    )

    @field_validator("ADMIN_API_TOKEN")
    @classmethod
    def validate_admin_token(cls, v, info: ValidationInfo):
        """Ensure admin token is set in production."""
        if info.data.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("ADMIN_API_TOKEN is required in production environment")
        return v

    @property
    def enabled_statuses(self) -> frozenset:
        """Parsed NALO_ENABLED_STATUSES."""
        return frozenset(
            status.strip() for status in self.NALO_ENABLED_STATUSES.split(",") if status.strip()
        )

    @property
    def templates(self) -> Dict[str, Optional[str]]:
        """Templates keyed by order status."""
        return {
            "processing": self.NALO_TPL_PROCESSING,
            "completed": self.NALO_TPL_COMPLETED,
            "on-hold": self.NALO_TPL_ON_HOLD,
            "cancelled": self.NALO_TPL_CANCELLED,
        }

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def load_notification_config(source: Optional[Settings] = None) -> NotificationConfig:
    """
    Builds the dispatcher's config from settings.

    Status names are checked here, once, rather than on every dispatch.

    Raises:
        ValueError: if an enabled status is not a known order status
    """
    source = source or settings

    return NotificationConfig(
        credentials=GatewayCredentials(
            auth_key=source.NALO_AUTH_KEY or "",
            sender_id=source.NALO_SENDER_ID or "",
        ),
        enabled_statuses=source.enabled_statuses,
        templates=source.templates,
    )


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.NALO_API_URL:
        errors.append("NALO_API_URL is required")

    if settings.NALO_TIMEOUT_SECONDS <= 0:
        errors.append("NALO_TIMEOUT_SECONDS must be > 0")

    try:
        load_notification_config(settings)
    except ValueError as e:
        errors.append(str(e))

    # Production-specific validations
    if settings.is_production:
        if not settings.NALO_AUTH_KEY:
            errors.append("NALO_AUTH_KEY is required in production")
        if not settings.NALO_SENDER_ID:
            errors.append("NALO_SENDER_ID is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
