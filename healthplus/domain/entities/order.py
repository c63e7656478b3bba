"""
Order Entities

Represents a pharmacy order placed at checkout. Items are snapshots of the
product at checkout time.
"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import OrderStatus, PaymentMethod, PaymentStatus


@dataclass(frozen=True)
class OrderItem:
    """
    Individual line of an order.

    Name and price are copied from the product so later catalog edits cannot
    alter a placed order.
    """

    product_id: str
    name: str
    quantity: int
    price: float

    @property
    def total(self) -> float:
        """Line total (price x quantity)."""
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """
    Placed pharmacy order.

    ``total_amount`` is always ``subtotal + shipping``; both are computed once
    by the checkout workflow.
    """

    id: str
    items: tuple[OrderItem, ...]
    subtotal: float
    shipping: float
    total_amount: float
    patient_id: str
    tracking_id: str
    status: OrderStatus = OrderStatus.PLACED
    payment_method: PaymentMethod = PaymentMethod.UPI
    payment_status: PaymentStatus = PaymentStatus.COMPLETED
    address: str = ""
    patient_name: str = ""
    created_at: datetime | None = None
    estimated_delivery: datetime | None = None

    # Status timestamps
    updated_at: datetime | None = None
    shipped_at: datetime | None = None
    delivered_at: datetime | None = None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
