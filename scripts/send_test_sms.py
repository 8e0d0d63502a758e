"""
Check the NALO SMS configuration

Run this script to verify the NALO credentials and templates are
configured correctly and, optionally, send a real test SMS.

Usage: python scripts/send_test_sms.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from app.core.config import settings, load_notification_config
from app.flow.dispatcher import NotificationDispatcher
from app.schemas.order import OrderFact
from utils.constants import ORDER_STATUS_LABELS


def check_config():
    """Test if NALO is properly configured"""
    print("=" * 60)
    print("  NALO Configuration Check")
    print("=" * 60 + "\n")

    try:
        config = load_notification_config(settings)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return None

    print(f"Auth Key: {'✅ Set' if settings.NALO_AUTH_KEY else '❌ Not set'}")
    print(f"Sender ID: {settings.NALO_SENDER_ID or '❌ Not set'}")
    print(f"Endpoint: {settings.NALO_API_URL}")
    print("\nStatuses:")
    for status, label in ORDER_STATUS_LABELS.items():
        enabled = "✅ enabled" if status in config.enabled_statuses else "❌ disabled"
        template = "template set" if config.template_for(status) else "no template"
        print(f"  {label:<12} {enabled:<12} ({template})")

    print(f"\nCredentials valid: {'✅ Yes' if config.credentials.is_complete else '❌ No'}\n")

    if not config.credentials.is_complete:
        print("⚠️  Please set NALO_AUTH_KEY and NALO_SENDER_ID in .env file")
        return None

    return config


def send_test_message(config):
    """Send one custom SMS through the dispatcher"""
    print("=" * 60)
    print("  Test Message Sending")
    print("=" * 60 + "\n")

    phone = input("Enter a Ghanaian phone number (e.g. 0241234567): ")

    dispatcher = NotificationDispatcher(config)
    result = dispatcher.send_custom_text(
        OrderFact(order_number="TEST", billing_phone=phone),
        "Test message from NALO SMS Order Notifications. If you received this, the integration works."
    )

    if result.dispatched:
        print(f"\n✅ SMS handed to NALO for {result.msisdn}")
        print("\n📱 Check your phone!")
    else:
        print(f"\n❌ SMS not sent: {result.halt_reason.value}")


def main():
    print("\n🧪 NALO SMS Integration Check\n")

    config = check_config()
    if config is None:
        print("\n❌ Configuration check failed. Please fix .env file and try again.")
        return

    print("=" * 60)
    answer = input("\nDo you want to send a test SMS? (y/n): ")

    if answer.lower() == "y":
        send_test_message(config)
    else:
        print("\n✅ Configuration check passed!")

    print("\nNext steps:")
    print("1. Start server: uvicorn app.main:app --reload")
    print(f"2. Point the shop's status webhook at {settings.API_PREFIX}/webhooks/order-status")
    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    main()
