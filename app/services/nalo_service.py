"""
app/services/nalo_service.py

Purpose: NALO SMS gateway client

- Sends one SMS per call via the NALO send-message API
- Form-encoded POST with a bounded timeout
- Never raises: failures are logged and reported in the result dict
- No response parsing and no retries
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.notification import GatewayCredentials, NotificationRequest

logger = get_logger(__name__)


class NaloService:
    """Service for sending SMS via the NALO gateway"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.api_url = api_url or settings.NALO_API_URL
        self.timeout = timeout or settings.NALO_TIMEOUT_SECONDS
        self.transport = transport

    def send_message(
        self,
        request: NotificationRequest,
        credentials: GatewayCredentials
    ) -> Dict[str, Any]:
        """
        Sends an SMS via NALO

        Args:
            request: Normalized phone and plain-text body
            credentials: Auth key and sender ID

        Returns:
            {
                "success": True/False,
                "status_code": HTTP status or None,
                "error": "Optional error message"
            }
        """
        data = {
            "key": credentials.auth_key.get_secret_value(),
            "sender_id": credentials.sender_id,
            "msisdn": request.destination_phone,
            "message": request.body,
        }

        logger.info(f"📤 Sending NALO SMS to {request.destination_phone}: {request.body}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.api_url, data=data)

            if response.is_success:
                logger.info(f"✅ NALO accepted request: HTTP {response.status_code}")
            else:
                logger.warning(f"⚠️ NALO responded with HTTP {response.status_code}")

            return {
                "success": True,
                "status_code": response.status_code,
                "error": None
            }

        except httpx.TimeoutException:
            logger.error(f"NALO API timeout after {self.timeout}s")
            return {
                "success": False,
                "status_code": None,
                "error": "NALO API timeout"
            }
        except httpx.RequestError as e:
            logger.error(f"Network error sending NALO SMS: {e}")
            return {
                "success": False,
                "status_code": None,
                "error": "Network error connecting to NALO"
            }
