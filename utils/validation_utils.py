"""
utils/validation_utils.py

Purpose: Input validation and sanitization

- Phone number normalization to the gateway's MSISDN format
- Markup stripping for outbound SMS text
- Order status name checks
"""

import re
from typing import Optional

from utils.constants import (
    COUNTRY_CODE,
    INTERNATIONAL_NUMBER_LENGTH,
    LOCAL_NUMBER_LENGTH,
    ORDER_STATUS_LABELS,
)


_NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
_SCRIPT_STYLE_PATTERN = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_PATTERN = re.compile(r"<[^>]*>")


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    Normalizes a Ghanaian phone number to +233XXXXXXXXX.

    Every non-digit character is dropped first, then exactly two shapes
    are accepted:
    - 10 digits with a leading 0 (0241234567 -> +233241234567)
    - 12 digits starting with 233 (233241234567 -> +233241234567)

    "+233 24 123 4567" also passes since stripping the "+" and spaces
    leaves the 12-digit form. Other international numbers are rejected.

    Args:
        phone: Raw phone string as typed by the customer

    Returns:
        Normalized MSISDN, or None if the format is not recognized
    """
    if not phone:
        return None

    digits = _NON_DIGIT_PATTERN.sub("", str(phone))

    if len(digits) == LOCAL_NUMBER_LENGTH and digits.startswith("0"):
        return f"+{COUNTRY_CODE}{digits[1:]}"

    if len(digits) == INTERNATIONAL_NUMBER_LENGTH and digits.startswith(COUNTRY_CODE):
        return f"+{digits}"

    return None


def strip_tags(text: Optional[str]) -> str:
    """
    Removes markup from text so only plain text reaches the SMS gateway.

    <script> and <style> blocks are removed along with their content,
    every other tag is removed and the text is trimmed.

    Args:
        text: Text that may contain markup

    Returns:
        Plain text
    """
    if not text:
        return ""

    text = _SCRIPT_STYLE_PATTERN.sub("", str(text))
    text = _TAG_PATTERN.sub("", text)

    return text.strip()


def is_known_status(status: str) -> bool:
    """
    Checks whether a status is one of the order statuses SMS can be enabled for.

    Args:
        status: Order status slug (e.g. "on-hold")

    Returns:
        True if the status is supported
    """
    return status in ORDER_STATUS_LABELS
