"""
app/api/admin.py

Purpose: Operator endpoints

- Send a custom SMS to an order's billing phone
- Read-only view of the effective notification settings
- Both gated by the admin token
"""

import secrets
from fastapi import APIRouter, Depends, Header
from typing import Optional

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.core.logging import get_logger
from app.flow.dispatcher import NotificationDispatcher, get_dispatcher
from app.schemas.order import ManualSmsRequest, OrderFact
from app.schemas.response import ManualSmsResponse
from utils.constants import MANUAL_SMS_SENT, MANUAL_SMS_SKIPPED, ORDER_STATUS_LABELS

logger = get_logger(__name__)
router = APIRouter()


def require_admin_token(x_admin_token: Optional[str] = Header(None)):
    """
    Checks the X-Admin-Token header.

    Without ADMIN_API_TOKEN configured the endpoints are only open in
    development.
    """
    expected = settings.ADMIN_API_TOKEN
    if not expected:
        if settings.is_development:
            return
        raise AuthenticationError("Admin token is not configured")

    if not x_admin_token or not secrets.compare_digest(x_admin_token.encode(), expected.encode()):
        logger.warning("Rejected admin request with missing or invalid token")
        raise AuthenticationError("Invalid admin token")


@router.post(
    "/orders/{order_id}/sms",
    response_model=ManualSmsResponse,
    dependencies=[Depends(require_admin_token)],
)
def send_order_sms(
    order_id: str,
    body: ManualSmsRequest,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """
    Sends a custom SMS for one order

    Returns:
        {"status": "sent"} or {"status": "skipped", "reason": "..."}
    """
    logger.info(f"✉️ Manual SMS requested for order {order_id}")

    order = OrderFact(order_number=order_id, billing_phone=body.billing_phone)
    result = dispatcher.send_custom_text(order, body.message)

    if result.dispatched:
        return ManualSmsResponse(status=MANUAL_SMS_SENT)

    return ManualSmsResponse(status=MANUAL_SMS_SKIPPED, reason=result.halt_reason.value)


@router.get("/settings", dependencies=[Depends(require_admin_token)])
def get_notification_settings(
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """
    Shows the notification settings in effect. The auth key is never returned.
    """
    config = dispatcher.config

    return {
        "sender_id": config.credentials.sender_id,
        "auth_key_configured": bool(config.credentials.auth_key.get_secret_value()),
        "statuses": [
            {
                "status": status,
                "label": label,
                "enabled": status in config.enabled_statuses,
                "template": config.template_for(status),
            }
            for status, label in ORDER_STATUS_LABELS.items()
        ],
    }
