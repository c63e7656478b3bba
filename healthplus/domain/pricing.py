"""
Pricing Service

Checkout arithmetic that does not belong to a single entity: line totals,
subtotal, the free-shipping rule and the order total.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .entities import OrderItem

FREE_SHIPPING_THRESHOLD = 1000
SHIPPING_FEE = 99


@dataclass(frozen=True)
class OrderTotals:
    subtotal: float
    shipping: float
    total_amount: float


class PricingService:
    """
    Computes order totals.

    Shipping is free only when the subtotal is strictly greater than the
    threshold; a subtotal exactly at the threshold still pays the fee.

    Example:
        ```python
        service = PricingService()
        totals = service.calculate_totals([OrderItem("prod_1", "Monitor", 3, 500)])
        totals.shipping      # 0
        totals.total_amount  # 1500
        ```
    """

    def __init__(self, free_shipping_threshold: float = FREE_SHIPPING_THRESHOLD, shipping_fee: float = SHIPPING_FEE):
        self.free_shipping_threshold = free_shipping_threshold
        self.shipping_fee = shipping_fee

    def shipping_for(self, subtotal: float) -> float:
        return 0 if subtotal > self.free_shipping_threshold else self.shipping_fee

    def calculate_totals(self, items: Iterable[OrderItem]) -> OrderTotals:
        subtotal = sum(item.total for item in items)
        shipping = self.shipping_for(subtotal)
        return OrderTotals(subtotal=subtotal, shipping=shipping, total_amount=subtotal + shipping)
