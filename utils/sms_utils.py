"""
utils/sms_utils.py

Purpose: SMS message builders

- Formats order totals for display
- Renders per-status message templates
"""

import html
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, Optional, Union

from utils.constants import (
    CURRENCY_CODE,
    PLACEHOLDER_CUSTOMER_NAME,
    PLACEHOLDER_ORDER_NUMBER,
    PLACEHOLDER_ORDER_STATUS,
    PLACEHOLDER_ORDER_TOTAL,
    TEMPLATE_PLACEHOLDERS,
)
from utils.validation_utils import strip_tags

Amount = Union[int, float, Decimal, str]

# Numeric strings the way a shop backend stores them: "12", " 12.50", "-3", "1e3", ".5"
_NUMERIC_STRING_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_NON_AMOUNT_PATTERN = re.compile(r"[^0-9.]")
_PLACEHOLDER_PATTERN = re.compile("|".join(re.escape(p) for p in TEMPLATE_PLACEHOLDERS))


def _is_numeric(amount: Amount) -> bool:
    if isinstance(amount, bool):
        return False
    if isinstance(amount, int):
        return True
    if isinstance(amount, (float, Decimal)):
        return math.isfinite(amount)
    return bool(_NUMERIC_STRING_PATTERN.match(str(amount)))


def format_currency(amount: Amount) -> str:
    """
    Formats an order total for an SMS.

    Numeric amounts are rounded half-up to two decimals with a comma
    thousands separator:
        12 -> "GHS 12.00", "1234.5" -> "GHS 1,234.50"

    Anything else (e.g. a price already rendered as HTML) has entities
    decoded, tags removed and every character other than digits and "."
    dropped:
        "<b>100</b>" -> "GHS 100", "12.5abc" -> "GHS 12.5"

    Args:
        amount: Order total as a number or string

    Returns:
        Display string prefixed with the currency code
    """
    if _is_numeric(amount):
        value = Decimal(str(amount).strip())
        # Room for every integer digit plus the two decimals
        with localcontext() as ctx:
            ctx.prec = max(len(value.as_tuple().digits), value.adjusted() + 1) + 3
            value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
            if value == 0:
                value = abs(value)
            return f"{CURRENCY_CODE} {value:,.2f}"

    text = strip_tags(html.unescape(str(amount)))
    return f"{CURRENCY_CODE} {_NON_AMOUNT_PATTERN.sub('', text)}"


def capitalize_status(status: str) -> str:
    """Uppercases the first character only ("on-hold" -> "On-hold")."""
    return status[:1].upper() + status[1:]


def build_placeholder_values(
    order_number: str,
    order_total: Amount,
    order_status: str,
    customer_name: str,
    template: Optional[str] = None
) -> Dict[str, str]:
    """
    Maps each template placeholder to its value for one order.

    Args:
        template: When given, only placeholders used by this template are
            built, so an odd order total cannot affect a message that
            never shows it

    Returns:
        Dict of placeholder token -> replacement text
    """
    builders = {
        PLACEHOLDER_ORDER_NUMBER: lambda: str(order_number),
        PLACEHOLDER_ORDER_TOTAL: lambda: format_currency(order_total),
        PLACEHOLDER_ORDER_STATUS: lambda: capitalize_status(order_status),
        PLACEHOLDER_CUSTOMER_NAME: lambda: customer_name or "",
    }
    return {
        token: build()
        for token, build in builders.items()
        if template is None or token in template
    }


def render_template(template: str, values: Dict[str, str]) -> str:
    """
    Substitutes placeholders in one pass.

    All placeholders are replaced simultaneously, so a value that itself
    looks like a placeholder is left as typed. Unknown placeholders such as
    "{shop_name}" are kept verbatim.

    Args:
        template: Message template
        values: Output of build_placeholder_values

    Returns:
        Rendered message
    """
    return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)
