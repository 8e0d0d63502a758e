"""
app/flow/dispatcher.py

Purpose: Central notification dispatcher

- Receives order status changes and manual SMS requests
- Decides whether a notification should go out
- Builds the message and hands it to the NALO gateway
- Never raises to the caller: order processing must not fail because SMS did
"""

from typing import Optional, Union

from app.flow.states import HaltReason, get_halt_state
from app.schemas.notification import DispatchResult, NotificationConfig, NotificationRequest
from app.schemas.order import OrderFact
from app.services.nalo_service import NaloService
from app.core.config import load_notification_config
from app.core.logging import get_logger, LogContext
from utils.sms_utils import build_placeholder_values, render_template
from utils.validation_utils import normalize_phone, strip_tags

logger = get_logger(__name__)

# Halts that are normal configuration outcomes rather than problems
_QUIET_HALTS = {HaltReason.INELIGIBLE_STATUS, HaltReason.MISSING_TEMPLATE}


class NotificationDispatcher:
    """
    Turns order events into SMS notifications.

    The host application wires its status-change hook to on_status_change
    and its "send custom SMS" action to send_custom_text.
    """

    def __init__(self, config: NotificationConfig, gateway: Optional[NaloService] = None):
        self.config = config
        self.gateway = gateway or NaloService()

    def on_status_change(
        self,
        order_id: Union[int, str],
        old_status: str,
        new_status: str,
        order: OrderFact
    ) -> DispatchResult:
        """
        Sends the template for new_status if SMS is enabled for it.

        Args:
            order_id: Shop's internal order id (used for logging)
            old_status: Previous status
            new_status: Status the order moved to
            order: Order details

        Returns:
            DispatchResult (callers on this path may ignore it)
        """
        with LogContext(order_id=str(order_id), status=new_status):
            logger.debug(f"Order status changed: {old_status} -> {new_status}")
            try:
                return self._dispatch_status_change(new_status, order)
            except Exception as e:
                logger.error(f"❌ Dispatcher error: {e}", exc_info=True)
                return DispatchResult.halted(HaltReason.INTERNAL_ERROR)

    def send_custom_text(self, order: OrderFact, text: str) -> DispatchResult:
        """
        Sends operator-written text to the order's billing phone.
        No status or template checks apply.

        Args:
            order: Order details (only billing_phone is used)
            text: Message typed by the operator

        Returns:
            DispatchResult
        """
        with LogContext(order_id=order.order_number):
            try:
                msisdn = normalize_phone(order.billing_phone)
                if not msisdn:
                    return self._halt(HaltReason.INVALID_PHONE)

                body = strip_tags(text)
                if not body:
                    return self._halt(HaltReason.EMPTY_MESSAGE, msisdn)

                return self._deliver(msisdn, body)
            except Exception as e:
                logger.error(f"❌ Dispatcher error: {e}", exc_info=True)
                return DispatchResult.halted(HaltReason.INTERNAL_ERROR)

    def _dispatch_status_change(self, new_status: str, order: OrderFact) -> DispatchResult:
        if new_status not in self.config.enabled_statuses:
            return self._halt(HaltReason.INELIGIBLE_STATUS)

        template = self.config.template_for(new_status)
        if not template:
            return self._halt(HaltReason.MISSING_TEMPLATE)

        msisdn = normalize_phone(order.billing_phone)
        if not msisdn:
            return self._halt(HaltReason.INVALID_PHONE)

        values = build_placeholder_values(
            order_number=order.order_number,
            order_total=order.total_amount,
            order_status=new_status,
            customer_name=order.billing_first_name,
            template=template
        )
        message = render_template(template, values)

        return self._deliver(msisdn, message)

    def _deliver(self, msisdn: str, message: str) -> DispatchResult:
        credentials = self.config.credentials
        if not credentials.is_complete:
            return self._halt(HaltReason.MISSING_CREDENTIALS, msisdn)

        request = NotificationRequest(destination_phone=msisdn, body=strip_tags(message))

        try:
            result = self.gateway.send_message(request, credentials)
        except Exception as e:
            logger.error(f"Gateway raised while sending to {msisdn}: {e}", exc_info=True)
            return self._halt(HaltReason.TRANSPORT_FAILURE, msisdn)

        if not result.get("success"):
            return self._halt(HaltReason.TRANSPORT_FAILURE, msisdn)

        logger.info("✅ SMS dispatched", extra={"msisdn": msisdn})
        return DispatchResult.sent(msisdn)

    def _halt(self, reason: HaltReason, msisdn: Optional[str] = None) -> DispatchResult:
        state = get_halt_state(reason)
        if reason in _QUIET_HALTS:
            logger.info(f"SMS skipped at {state.value}: {reason.value}")
        else:
            logger.warning(f"⚠️ SMS not sent, halted at {state.value}: {reason.value}")
        return DispatchResult.halted(reason, msisdn)


_dispatcher: Optional[NotificationDispatcher] = None


def get_dispatcher() -> NotificationDispatcher:
    """
    Returns the shared dispatcher, built from settings on first use.
    Config is immutable, so one instance serves every request.
    """
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher(load_notification_config())
    return _dispatcher
