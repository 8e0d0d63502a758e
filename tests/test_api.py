from fastapi.testclient import TestClient
import pytest

from app.core.config import settings
from app.flow.dispatcher import NotificationDispatcher, get_dispatcher
from app.main import app
from app.schemas.notification import GatewayCredentials, NotificationConfig

client = TestClient(app)

PREFIX = settings.API_PREFIX


class FakeGateway:
    def __init__(self):
        self.calls = []

    def send_message(self, request, credentials):
        self.calls.append(request)
        return {"success": True, "status_code": 200, "error": None}


@pytest.fixture
def gateway():
    gateway = FakeGateway()
    config = NotificationConfig(
        credentials=GatewayCredentials(auth_key="k-secret", sender_id="MyShop"),
        enabled_statuses={"completed"},
        templates={
            "completed": "Order {order_number} total {order_total}",
            "cancelled": "Order {order_number} was cancelled",
        },
    )
    app.dependency_overrides[get_dispatcher] = lambda: NotificationDispatcher(config, gateway)
    yield gateway
    app.dependency_overrides.clear()


def status_payload(**overrides):
    payload = {
        "order_id": 55,
        "old_status": "processing",
        "new_status": "completed",
        "order": {
            "order_number": "55",
            "total": 20,
            "billing_first_name": "Ama",
            "billing_phone": "0241234567",
        },
    }
    payload.update(overrides)
    return payload


def test_order_status_webhook_sends_sms(gateway):
    response = client.post(f"{PREFIX}/webhooks/order-status", json=status_payload())

    assert response.status_code == 202
    assert response.json() == {"status": "accepted"}
    assert len(gateway.calls) == 1
    assert gateway.calls[0].destination_phone == "+233241234567"
    assert gateway.calls[0].body == "Order 55 total GHS 20.00"


def test_order_status_webhook_accepts_disabled_status(gateway):
    response = client.post(f"{PREFIX}/webhooks/order-status", json=status_payload(new_status="cancelled"))

    assert response.status_code == 202
    assert gateway.calls == []


def test_order_status_webhook_accepts_bad_phone(gateway):
    payload = status_payload()
    payload["order"]["billing_phone"] = "+14155550123"

    response = client.post(f"{PREFIX}/webhooks/order-status", json=payload)

    assert response.status_code == 202
    assert gateway.calls == []


def test_order_status_webhook_string_total(gateway):
    payload = status_payload()
    payload["order"]["total"] = "1234.5"

    client.post(f"{PREFIX}/webhooks/order-status", json=payload)

    assert gateway.calls[0].body == "Order 55 total GHS 1,234.50"


def test_order_status_webhook_rejects_invalid_payload(gateway):
    response = client.post(f"{PREFIX}/webhooks/order-status", json={"order_id": 55})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert gateway.calls == []


def test_invalid_webhook_payload_is_logged(gateway, caplog):
    with caplog.at_level("WARNING"):
        client.post(f"{PREFIX}/webhooks/order-status", json={"order_id": 55})

    assert "invalid fields new_status, order" in caplog.text


def test_webhook_verification():
    response = client.get(f"{PREFIX}/webhooks/order-status")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_manual_sms_is_sent(gateway):
    response = client.post(
        f"{PREFIX}/orders/55/sms",
        json={"billing_phone": "024 123 4567", "message": "<b>Your rider is outside</b>"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "sent", "reason": None}
    assert gateway.calls[0].destination_phone == "+233241234567"
    assert gateway.calls[0].body == "Your rider is outside"


def test_manual_sms_with_empty_message_is_skipped(gateway):
    response = client.post(
        f"{PREFIX}/orders/55/sms",
        json={"billing_phone": "0241234567", "message": "   "},
    )

    assert response.json() == {"status": "skipped", "reason": "empty_message"}
    assert gateway.calls == []


def test_manual_sms_with_invalid_phone_is_skipped(gateway):
    response = client.post(
        f"{PREFIX}/orders/55/sms",
        json={"billing_phone": "12345", "message": "Hello"},
    )

    assert response.json() == {"status": "skipped", "reason": "invalid_phone"}
    assert gateway.calls == []


def test_manual_sms_requires_admin_token(gateway, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_TOKEN", "s3cret")
    body = {"billing_phone": "0241234567", "message": "Hello"}

    response = client.post(f"{PREFIX}/orders/55/sms", json=body)
    assert response.status_code == 401
    assert response.json()["code"] == "AUTHENTICATION_FAILED"

    response = client.post(f"{PREFIX}/orders/55/sms", json=body, headers={"X-Admin-Token": "wrong"})
    assert response.status_code == 401
    assert gateway.calls == []

    response = client.post(f"{PREFIX}/orders/55/sms", json=body, headers={"X-Admin-Token": "s3cret"})
    assert response.status_code == 200
    assert len(gateway.calls) == 1


def test_admin_endpoints_closed_without_token_outside_development(gateway, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "staging")

    response = client.get(f"{PREFIX}/settings")

    assert response.status_code == 401
    assert response.json()["error"] == "Admin token is not configured"


def test_settings_view_hides_auth_key(gateway):
    response = client.get(f"{PREFIX}/settings")

    assert response.status_code == 200
    data = response.json()
    assert data["sender_id"] == "MyShop"
    assert data["auth_key_configured"] is True
    assert "k-secret" not in response.text

    statuses = {item["status"]: item for item in data["statuses"]}
    assert list(statuses) == ["processing", "completed", "on-hold", "cancelled"]
    assert statuses["completed"]["enabled"] is True
    assert statuses["completed"]["template"] == "Order {order_number} total {order_total}"
    assert statuses["cancelled"]["enabled"] is False
    assert statuses["processing"]["template"] is None


def test_health_endpoints():
    assert client.get("/live").json() == {"status": "alive"}
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").status_code == 200
