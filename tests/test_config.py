import pytest

from app.core import config as config_module
from app.core.config import Settings, load_notification_config, validate_settings


def make_settings(**overrides):
    base = {
        "NALO_AUTH_KEY": "k-secret",
        "NALO_SENDER_ID": "MyShop",
        "NALO_ENABLED_STATUSES": "completed, processing",
        "NALO_TPL_COMPLETED": "Order {order_number} completed",
        "NALO_TPL_PROCESSING": "Order {order_number} is being processed",
    }
    base.update(overrides)
    return Settings(**base)


def test_load_notification_config():
    config = load_notification_config(make_settings())

    assert config.enabled_statuses == frozenset({"completed", "processing"})
    assert config.template_for("completed") == "Order {order_number} completed"
    assert config.template_for("on-hold") is None
    assert config.credentials.sender_id == "MyShop"
    assert config.credentials.auth_key.get_secret_value() == "k-secret"
    assert config.credentials.is_complete


def test_empty_templates_are_dropped():
    config = load_notification_config(make_settings(NALO_TPL_COMPLETED=""))

    assert "completed" not in config.templates
    assert config.template_for("completed") is None


def test_blank_enabled_statuses():
    config = load_notification_config(make_settings(NALO_ENABLED_STATUSES=" , "))
    assert config.enabled_statuses == frozenset()


def test_unknown_enabled_status_fails_at_load():
    with pytest.raises(ValueError):
        load_notification_config(make_settings(NALO_ENABLED_STATUSES="completed,shipped"))


def test_missing_credentials_are_not_complete():
    config = load_notification_config(make_settings(NALO_AUTH_KEY=None))
    assert not config.credentials.is_complete

    config = load_notification_config(make_settings(NALO_SENDER_ID=""))
    assert not config.credentials.is_complete


def test_auth_key_is_hidden_from_repr():
    config = load_notification_config(make_settings())

    assert "k-secret" not in repr(config)
    assert "k-secret" not in str(config.credentials)


def test_config_is_immutable():
    config = load_notification_config(make_settings())

    with pytest.raises(Exception):
        config.enabled_statuses = frozenset({"cancelled"})


def test_production_requires_admin_token():
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="production")

    prod = Settings(ENVIRONMENT="production", ADMIN_API_TOKEN="token")
    assert prod.is_production


def test_validate_settings_passes(monkeypatch):
    monkeypatch.setattr(config_module, "settings", make_settings())
    assert validate_settings() is True


def test_validate_settings_rejects_unknown_status(monkeypatch):
    monkeypatch.setattr(config_module, "settings", make_settings(NALO_ENABLED_STATUSES="completed,shipped"))

    with pytest.raises(ValueError) as exc_info:
        validate_settings()

    assert "Unknown order status in enabled statuses: shipped" in str(exc_info.value)


def test_validate_settings_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setattr(config_module, "settings", make_settings(NALO_TIMEOUT_SECONDS=0))

    with pytest.raises(ValueError, match="NALO_TIMEOUT_SECONDS must be > 0"):
        validate_settings()


def test_validate_settings_requires_credentials_in_production(monkeypatch):
    prod = make_settings(
        ENVIRONMENT="production",
        ADMIN_API_TOKEN="token",
        NALO_AUTH_KEY=None,
        NALO_SENDER_ID=None,
    )
    monkeypatch.setattr(config_module, "settings", prod)

    with pytest.raises(ValueError) as exc_info:
        validate_settings()

    message = str(exc_info.value)
    assert "NALO_AUTH_KEY is required in production" in message
    assert "NALO_SENDER_ID is required in production" in message


def test_missing_credentials_allowed_outside_production(monkeypatch):
    monkeypatch.setattr(config_module, "settings", make_settings(NALO_AUTH_KEY=None, NALO_SENDER_ID=None))
    assert validate_settings() is True
