"""
app/api/webhook.py

Purpose: Order status webhook endpoint

- Receives order status transitions from the shop
- Validates the payload into an OrderFact
- Passes control to the notification dispatcher
- Always acknowledges: SMS problems never fail the shop's request
"""

from fastapi import APIRouter, Depends

from app.core.logging import get_logger
from app.flow.dispatcher import NotificationDispatcher, get_dispatcher
from app.schemas.order import OrderStatusWebhook
from app.schemas.response import WebhookAck

logger = get_logger(__name__)
router = APIRouter()


@router.post("/webhooks/order-status", status_code=202, response_model=WebhookAck)
def order_status_webhook(
    payload: OrderStatusWebhook,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """
    Order status change hook

    Called by the shop on every status transition. The notification is
    sent (or skipped) before this returns; the outcome is only logged.
    """
    logger.info(
        f"📦 Order {payload.order_id} status change: "
        f"{payload.old_status or '-'} -> {payload.new_status}"
    )

    dispatcher.on_status_change(
        order_id=payload.order_id,
        old_status=payload.old_status,
        new_status=payload.new_status,
        order=payload.to_order_fact(),
    )

    return WebhookAck()


@router.get("/webhooks/order-status")
def webhook_verification():
    """
    Webhook verification endpoint (for shops that ping the URL before saving it)
    """
    return {"status": "ok", "message": "Webhook endpoint is active"}
