"""
Order Status Value Objects

Represents the lifecycle states of a pharmacy order and how it was paid.
"""

from healthplus.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Happy path: PLACED -> CONFIRMED -> PACKED -> SHIPPED -> DELIVERED.
    CANCELLED is reachable from any non-terminal state. Status changes are
    admin-driven and not otherwise guarded.
    """

    PLACED = "placed"
    CONFIRMED = "confirmed"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def is_pending(self) -> bool:
        """Check if the order is still on its way to the patient."""
        return not self.is_terminal()


class PaymentStatus(StatusEnum):
    """Payment states. Checkout is simulated, so orders are born completed."""

    PENDING = "pending"
    COMPLETED = "completed"


class PaymentMethod(StatusEnum):
    """Payment methods offered at checkout."""

    UPI = "UPI"
    CARD = "Card"
    NET_BANKING = "NetBanking"
    COD = "COD"
