from decimal import Decimal

import pytest

from utils.sms_utils import (
    build_placeholder_values,
    capitalize_status,
    format_currency,
    render_template,
)


@pytest.mark.parametrize("amount, expected", [
    (12, "GHS 12.00"),
    (20, "GHS 20.00"),
    (12.5, "GHS 12.50"),
    ("12", "GHS 12.00"),
    ("20.00", "GHS 20.00"),
    (" 7.1 ", "GHS 7.10"),
    (Decimal("99.999"), "GHS 100.00"),
    ("2.675", "GHS 2.68"),
    (1234.5, "GHS 1,234.50"),
    ("1000000", "GHS 1,000,000.00"),
    ("1e3", "GHS 1,000.00"),
    (0, "GHS 0.00"),
    ("-0.001", "GHS 0.00"),
    (-0.004, "GHS 0.00"),
    ("-1.005", "GHS -1.01"),
    (1e30, "GHS 1" + ",000" * 10 + ".00"),
    ("1e30", "GHS 1" + ",000" * 10 + ".00"),
    ("123456789012345678901234567890.125", "GHS 123,456,789,012,345,678,901,234,567,890.13"),
])
def test_numeric_amounts(amount, expected):
    assert format_currency(amount) == expected


@pytest.mark.parametrize("amount, expected", [
    ("12.5abc", "GHS 12.5"),
    ("<b>100</b>", "GHS 100"),
    ('<span class="amount">&#8373;&nbsp;20.00</span>', "GHS 20.00"),
    ("GH₵ 45", "GHS 45"),
    ("free", "GHS "),
])
def test_non_numeric_amounts_are_cleaned(amount, expected):
    assert format_currency(amount) == expected


def test_capitalize_status_only_touches_first_character():
    assert capitalize_status("completed") == "Completed"
    assert capitalize_status("on-hold") == "On-hold"
    assert capitalize_status("") == ""


def _values(**overrides):
    base = {
        "order_number": "1001",
        "order_total": 20,
        "order_status": "completed",
        "customer_name": "Ama",
    }
    base.update(overrides)
    return build_placeholder_values(**base)


def test_render_template_replaces_all_placeholders():
    template = "Hi {customer_name}, order {order_number} is {order_status}"
    assert render_template(template, _values()) == "Hi Ama, order 1001 is Completed"


def test_render_template_formats_total():
    assert render_template("Order {order_number} total {order_total}", _values(order_number="55")) == \
        "Order 55 total GHS 20.00"


def test_render_template_replaces_every_occurrence():
    assert render_template("{order_number}/{order_number}", _values()) == "1001/1001"


def test_render_template_keeps_unknown_placeholders():
    assert render_template("Thanks from {shop_name}!", _values()) == "Thanks from {shop_name}!"


def test_render_template_does_not_resubstitute_values():
    values = _values(customer_name="{order_number}")
    assert render_template("Hi {customer_name}, order {order_number}", values) == \
        "Hi {order_number}, order 1001"


def test_render_template_without_placeholders():
    assert render_template("Thank you for shopping", _values()) == "Thank you for shopping"


def test_placeholder_values_only_built_for_used_placeholders():
    values = _values(order_total="<b>n/a</b>", template="Order {order_number} is {order_status}")

    assert set(values) == {"{order_number}", "{order_status}"}
    assert render_template("Order {order_number} is {order_status}", values) == "Order 1001 is Completed"
