"""
utils/constants.py

Purpose: Centralized static values

- NALO gateway endpoint and defaults
- Numbering plan and currency constants
- Order statuses and template placeholders

(Prevents hardcoding across the codebase)
"""

# ============================================================
# NALO GATEWAY
# ============================================================

NALO_SEND_MESSAGE_URL = "https://sms.nalosolutions.com/smsbackend/clientapi/Resl_Nalo/send-message/"

NALO_TIMEOUT_SECONDS = 20


# ============================================================
# NUMBERING PLAN & CURRENCY
# ============================================================

# Ghana: 0XXXXXXXXX locally, 233XXXXXXXXX internationally
COUNTRY_CODE = "233"
LOCAL_NUMBER_LENGTH = 10
INTERNATIONAL_NUMBER_LENGTH = 12

CURRENCY_CODE = "GHS"


# ============================================================
# ORDER STATUSES
# ============================================================

ORDER_STATUS_LABELS = {
    "processing": "Processing",
    "completed": "Completed",
    "on-hold": "On Hold",
    "cancelled": "Cancelled",
}


# ============================================================
# TEMPLATE PLACEHOLDERS
# ============================================================

PLACEHOLDER_ORDER_NUMBER = "{order_number}"
PLACEHOLDER_ORDER_TOTAL = "{order_total}"
PLACEHOLDER_ORDER_STATUS = "{order_status}"
PLACEHOLDER_CUSTOMER_NAME = "{customer_name}"

TEMPLATE_PLACEHOLDERS = [
    PLACEHOLDER_ORDER_NUMBER,
    PLACEHOLDER_ORDER_TOTAL,
    PLACEHOLDER_ORDER_STATUS,
    PLACEHOLDER_CUSTOMER_NAME,
]


# ============================================================
# MANUAL SEND RESPONSES
# ============================================================

MANUAL_SMS_SENT = "sent"
MANUAL_SMS_SKIPPED = "skipped"
