"""
app/schemas/response.py

Purpose: Response bodies shared by the API routes
"""

from pydantic import BaseModel
from typing import Optional, Any, Literal


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None


class WebhookAck(BaseModel):
    """Returned to the shop once a status change has been handled."""
    status: Literal["accepted"] = "accepted"


class ManualSmsResponse(BaseModel):
    """Outcome of a custom SMS request; reason is set when nothing was sent."""
    status: Literal["sent", "skipped"]
    reason: Optional[str] = None
