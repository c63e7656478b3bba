"""
Order Use Cases

Checkout turns the cart into an order in one atomic burst; administrators
move orders through their fulfilment statuses.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from healthplus.core.domain import (
    EntityNotFoundException,
    InsufficientStockException,
    ValidationException,
    find_by_id,
)
from healthplus.domain.actions import ClearCart, PlaceOrder, UpdateOrder, UpdateStock
from healthplus.domain.entities import Order, OrderItem
from healthplus.domain.value_objects import (
    NotificationType,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)

from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)


@dataclass
class CheckoutRequest:
    """Delivery and payment details entered at checkout."""

    address: str = ""
    city: str = ""
    pincode: str = ""
    payment_method: PaymentMethod = PaymentMethod.UPI

    def shipping_address(self) -> str:
        return f"{self.address}, {self.city} - {self.pincode}"


class CheckoutUseCase(PortalUseCase):
    """
    Use Case: Checkout

    Responsibilities:
    - Reject an empty cart, a missing user, unknown products and lines that
      exceed current stock
    - Price the order (free shipping strictly above the threshold)
    - Dispatch stock decrements, the order, the cart reset and the
      notification as one burst
    """

    async def execute(self, request: CheckoutRequest) -> WorkflowResult:
        if not self.store.snapshot.cart:
            logger.warning("Checkout rejected: cart is empty")
            raise ValidationException("Cart is empty", field="cart")
        user = self._require_user("Checkout")

        await self._network(self.settings.CHECKOUT_DELAY, "checkout")

        snapshot = self.store.snapshot
        if not snapshot.cart:
            raise ValidationException("Cart is empty", field="cart")
        items = self._build_items(snapshot)
        totals = self.context.pricing.calculate_totals(items)

        now = self.ids.now()
        order = Order(
            id=self.ids.new_id("order"),
            items=tuple(items),
            subtotal=totals.subtotal,
            shipping=totals.shipping,
            total_amount=totals.total_amount,
            patient_id=user.id,
            tracking_id=self.ids.tracking_id(),
            status=OrderStatus.PLACED,
            payment_method=request.payment_method,
            payment_status=PaymentStatus.COMPLETED,
            address=request.shipping_address(),
            patient_name=user.name,
            created_at=now,
            estimated_delivery=now + timedelta(days=self.settings.DELIVERY_DAYS),
        )

        actions = [UpdateStock(id=item.product_id, quantity=item.quantity) for item in items]
        actions += [
            PlaceOrder(order=order),
            ClearCart(),
            self._notification(
                "Order Placed",
                f"Order #{order.id.split('_')[1]} confirmed",
                NotificationType.ORDER,
            ),
        ]
        result = self._commit(actions, value=order)
        logger.info(f"Order placed: {order.id} ({order.item_count} items, total {order.total_amount})")
        return result

    def _build_items(self, snapshot) -> list[OrderItem]:
        items = []
        for product_id, quantity in snapshot.cart.items():
            product = find_by_id(snapshot.products, product_id)
            if product is None:
                logger.warning(f"Checkout rejected: unknown product {product_id}")
                raise EntityNotFoundException("Product", product_id)
            if not product.has_stock_for(quantity):
                logger.warning(f"Checkout rejected: {product_id} has {product.stock}, cart wants {quantity}")
                raise InsufficientStockException(product_id, requested=quantity, available=product.stock)
            items.append(OrderItem(product_id=product.id, name=product.name, quantity=quantity, price=product.price))
        return items


class UpdateOrderStatusUseCase(PortalUseCase):
    """
    Use Case: Update Order Status (admin)

    Any known status may be set. The reducer stamps ``shipped_at`` or
    ``delivered_at`` when the status calls for it.
    """

    async def execute(self, order_id: str, status: str | OrderStatus) -> WorkflowResult:
        if find_by_id(self.store.snapshot.orders, order_id) is None:
            logger.warning(f"Order status update rejected: unknown order {order_id}")
            raise EntityNotFoundException("Order", order_id)
        try:
            new_status = OrderStatus.from_string(str(status))
        except ValueError:
            logger.warning(f"Order status update rejected: unknown status {status!r}")
            raise ValidationException(f"Unknown order status {status}", field="status") from None

        updates = {"status": new_status, "updated_at": self.ids.now()}
        result = self._commit([UpdateOrder(id=order_id, updates=updates)])
        logger.info(f"Order {order_id} -> {new_status}")
        return WorkflowResult(
            actions=result.actions,
            value=find_by_id(result.snapshot.orders, order_id),
            snapshot=result.snapshot,
        )
