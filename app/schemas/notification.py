"""
app/schemas/notification.py

Purpose: Notification value objects

- Gateway credentials (auth key kept secret)
- Validated per-status notification config
- Outbound request and dispatch outcome
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from typing import Dict, FrozenSet, Optional

from app.flow.states import HaltReason
from utils.validation_utils import is_known_status


class GatewayCredentials(BaseModel):
    """NALO credentials. The key never shows up in repr or logs."""

    model_config = ConfigDict(frozen=True)

    auth_key: SecretStr = SecretStr("")
    sender_id: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.auth_key.get_secret_value() and self.sender_id)


class NotificationConfig(BaseModel):
    """
    Everything the dispatcher reads: credentials, which statuses send
    an SMS and the template for each status.
    """

    model_config = ConfigDict(frozen=True)

    credentials: GatewayCredentials = Field(default_factory=GatewayCredentials)
    enabled_statuses: FrozenSet[str] = frozenset()
    templates: Dict[str, str] = Field(default_factory=dict)

    @field_validator("enabled_statuses")
    @classmethod
    def validate_enabled_statuses(cls, v):
        unknown = sorted(status for status in v if not is_known_status(status))
        if unknown:
            raise ValueError(f"Unknown order status in enabled statuses: {', '.join(unknown)}")
        return v

    @field_validator("templates", mode="before")
    @classmethod
    def drop_empty_templates(cls, v):
        if not v:
            return {}
        unknown = sorted(status for status in v if not is_known_status(status))
        if unknown:
            raise ValueError(f"Template configured for unknown order status: {', '.join(unknown)}")
        return {status: template for status, template in v.items() if template}

    def template_for(self, status: str) -> Optional[str]:
        return self.templates.get(status)


class NotificationRequest(BaseModel):
    """One SMS ready for the gateway."""

    model_config = ConfigDict(frozen=True)

    destination_phone: str = Field(..., description="Normalized MSISDN, e.g. +233241234567")
    body: str = Field(..., description="Plain-text message body")


class DispatchResult(BaseModel):
    """
    Outcome of one dispatch attempt.

    Callers on the status-change path ignore it; it exists for logging
    and for the manual-send response.
    """

    dispatched: bool
    halt_reason: Optional[HaltReason] = None
    msisdn: Optional[str] = None

    @classmethod
    def sent(cls, msisdn: str) -> "DispatchResult":
        return cls(dispatched=True, msisdn=msisdn)

    @classmethod
    def halted(cls, reason: HaltReason, msisdn: Optional[str] = None) -> "DispatchResult":
        return cls(dispatched=False, halt_reason=reason, msisdn=msisdn)
