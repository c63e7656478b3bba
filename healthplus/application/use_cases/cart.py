"""
Cart Use Cases

The cart maps product ids to positive quantities. Stock is checked here,
against what is already in the cart; the reducer only does the arithmetic.
"""

import logging

from healthplus.core.domain import (
    EntityNotFoundException,
    InsufficientStockException,
    ValidationException,
    find_by_id,
)
from healthplus.domain.actions import AddToCart, ClearCart, RemoveFromCart
from healthplus.domain.value_objects import NotificationType

from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)


class AddToCartUseCase(PortalUseCase):
    """
    Use Case: Add to Cart

    Rejects unknown products, non-positive quantities and any quantity that
    would push the cart line above the product's stock.
    """

    async def execute(self, product_id: str, quantity: int = 1) -> WorkflowResult:
        snapshot = self.store.snapshot
        product = find_by_id(snapshot.products, product_id)
        if product is None:
            logger.warning(f"Add to cart rejected: unknown product {product_id}")
            raise EntityNotFoundException("Product", product_id)
        if quantity <= 0:
            raise ValidationException("Quantity must be positive", field="quantity")

        in_cart = snapshot.cart.get(product_id, 0)
        if not product.has_stock_for(in_cart + quantity):
            logger.warning(f"Insufficient stock for {product_id}: {in_cart} + {quantity} > {product.stock}")
            raise InsufficientStockException(product_id, requested=in_cart + quantity, available=product.stock)

        result = self._commit(
            [
                AddToCart(product_id=product_id, quantity=quantity),
                self._notification("Added to Cart", f"{product.name} x{quantity}", NotificationType.CART),
            ],
            value=in_cart + quantity,
        )
        logger.info(f"Added {quantity} x {product_id} to cart")
        return result


class DecrementCartLineUseCase(PortalUseCase):
    """Use Case: Decrease a cart line by one, removing it instead of leaving zero."""

    async def execute(self, product_id: str) -> WorkflowResult:
        quantity = self.store.snapshot.cart.get(product_id)
        if quantity is None:
            return self._unchanged(0)

        if quantity <= 1:
            return self._commit([RemoveFromCart(product_id=product_id)], value=0)
        return self._commit([AddToCart(product_id=product_id, quantity=-1)], value=quantity - 1)


class RemoveFromCartUseCase(PortalUseCase):
    async def execute(self, product_id: str) -> WorkflowResult:
        if product_id not in self.store.snapshot.cart:
            return self._unchanged()
        logger.info(f"Removed {product_id} from cart")
        return self._commit([RemoveFromCart(product_id=product_id)])


class ClearCartUseCase(PortalUseCase):
    async def execute(self) -> WorkflowResult:
        if not self.store.snapshot.cart:
            return self._unchanged()
        return self._commit([ClearCart()])
