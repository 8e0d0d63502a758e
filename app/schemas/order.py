"""
app/schemas/order.py

Purpose: Order payload schemas

- OrderFact: the order details a notification needs
- Webhook payload posted by the shop on every status transition
- Manual SMS request from the order screen
"""

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Union


class OrderFact(BaseModel):
    """
    Order details for one dispatch. Immutable.
    For a manual SMS only order_number and billing_phone matter.
    """

    model_config = ConfigDict(frozen=True)

    order_number: str = Field(..., description="Order number shown to the customer")
    total_amount: Union[int, float, Decimal, str] = Field(default="", description="Order total, numeric or pre-formatted")
    new_status: str = Field(default="", description="Status the order just moved to")
    billing_first_name: str = Field(default="", description="Customer first name")
    billing_phone: str = Field(default="", description="Billing phone as entered")


class WebhookOrder(BaseModel):
    """Order block of the status-change webhook."""

    order_number: str
    total: Union[int, float, Decimal, str] = ""
    billing_first_name: str = ""
    billing_phone: str = ""


class OrderStatusWebhook(BaseModel):
    """
    Posted by the shop whenever an order changes status.

    {
        "order_id": 55,
        "old_status": "processing",
        "new_status": "completed",
        "order": {
            "order_number": "55",
            "total": "20.00",
            "billing_first_name": "Ama",
            "billing_phone": "0241234567"
        }
    }
    """

    order_id: Union[int, str]
    old_status: str = ""
    new_status: str
    order: WebhookOrder

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "order_id": 55,
                "old_status": "processing",
                "new_status": "completed",
                "order": {
                    "order_number": "55",
                    "total": "20.00",
                    "billing_first_name": "Ama",
                    "billing_phone": "0241234567",
                },
            }
        }
    )

    def to_order_fact(self) -> OrderFact:
        return OrderFact(
            order_number=self.order.order_number,
            total_amount=self.order.total,
            new_status=self.new_status,
            billing_first_name=self.order.billing_first_name,
            billing_phone=self.order.billing_phone,
        )


class ManualSmsRequest(BaseModel):
    """Custom SMS typed by an operator on the order screen."""

    billing_phone: str = Field(..., description="Billing phone of the order")
    message: str = Field(..., description="Operator-authored text")
