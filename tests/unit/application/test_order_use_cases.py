"""
Unit Tests for checkout and order status updates.
"""

from datetime import timedelta

import pytest

from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    AddToCartUseCase,
    CheckoutRequest,
    CheckoutUseCase,
    UpdateOrderStatusUseCase,
)
from healthplus.core.domain import EntityNotFoundException, InsufficientStockException, ValidationException
from healthplus.domain import ActionType, selectors
from healthplus.domain.actions import AddProduct, AddToCart, UpdateStock
from healthplus.domain.value_objects import OrderStatus, PaymentMethod, PaymentStatus
from tests.utils import FIXED_NOW, ProductBuilder, assert_action_types, assert_stock_never_negative

DELIVERY = CheckoutRequest(address="12 MG Road", city="Bengaluru", pincode="560001", payment_method=PaymentMethod.CARD)


def _add_catalog_product(context: PortalContext, product_id: str, price: float, stock: int = 50) -> None:
    context.store.dispatch(
        AddProduct(product=ProductBuilder().with_id(product_id).with_name(product_id).with_price(price).with_stock(stock).build())
    )


class TestCheckoutUseCase:
    """Test cases for CheckoutUseCase"""

    @pytest.mark.asyncio
    async def test_checkout_places_order(self, patient_context: PortalContext):
        # Arrange
        _add_catalog_product(patient_context, "monitor", 500)
        await AddToCartUseCase(patient_context).execute("monitor", 3)

        # Act
        result = await CheckoutUseCase(patient_context).execute(DELIVERY)

        # Assert
        assert_action_types(
            result,
            [ActionType.UPDATE_STOCK, ActionType.PLACE_ORDER, ActionType.CLEAR_CART, ActionType.ADD_NOTIFICATION],
        )
        order = result.value
        assert (order.subtotal, order.shipping, order.total_amount) == (1500, 0, 1500)
        assert order.status == OrderStatus.PLACED
        assert order.payment_status == PaymentStatus.COMPLETED
        assert order.payment_method == PaymentMethod.CARD
        assert order.address == "12 MG Road, Bengaluru - 560001"
        assert order.tracking_id.startswith("TRK") and len(order.tracking_id) == 12
        assert order.tracking_id[3:].isalnum() and order.tracking_id[3:].upper() == order.tracking_id[3:]
        assert order.estimated_delivery == FIXED_NOW + timedelta(days=5)

        snapshot = patient_context.store.snapshot
        assert snapshot.orders[0] is order
        assert snapshot.cart == {}
        assert next(p for p in snapshot.products if p.id == "monitor").stock == 47
        assert snapshot.notifications[0].title == "Order Placed"
        assert snapshot.notifications[0].message == f"Order #{order.id.split('_')[1]} confirmed"

    @pytest.mark.asyncio
    async def test_adding_thermometer_keeps_free_shipping(self, patient_context: PortalContext):
        _add_catalog_product(patient_context, "monitor", 500)
        _add_catalog_product(patient_context, "thermometer", 200)
        await AddToCartUseCase(patient_context).execute("monitor", 3)
        assert selectors.cart_total(patient_context.store.snapshot) == 1500

        await AddToCartUseCase(patient_context).execute("thermometer", 1)
        result = await CheckoutUseCase(patient_context).execute(DELIVERY)

        assert (result.value.subtotal, result.value.shipping, result.value.total_amount) == (1700, 0, 1700)

    @pytest.mark.asyncio
    async def test_subtotal_exactly_threshold_pays_shipping(self, patient_context: PortalContext):
        _add_catalog_product(patient_context, "kit", 500)
        await AddToCartUseCase(patient_context).execute("kit", 2)

        result = await CheckoutUseCase(patient_context).execute(DELIVERY)

        assert (result.value.subtotal, result.value.shipping, result.value.total_amount) == (1000, 99, 1099)

    @pytest.mark.asyncio
    async def test_empty_cart_rejected(self, patient_context: PortalContext):
        with pytest.raises(ValidationException, match="Cart is empty"):
            await CheckoutUseCase(patient_context).execute(DELIVERY)

    @pytest.mark.asyncio
    async def test_requires_login(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_1", 1)

        with pytest.raises(ValidationException):
            await CheckoutUseCase(context).execute(DELIVERY)

        assert context.store.snapshot.orders == ()

    @pytest.mark.asyncio
    async def test_stock_drop_after_carting_rejects_without_decrement(self, patient_context: PortalContext):
        await AddToCartUseCase(patient_context).execute("prod_3", 5)
        patient_context.store.dispatch(UpdateStock(id="prod_3", quantity=6))
        before = patient_context.store.snapshot

        with pytest.raises(InsufficientStockException):
            await CheckoutUseCase(patient_context).execute(DELIVERY)

        assert patient_context.store.snapshot is before
        assert_stock_never_negative(patient_context.store.snapshot)

    @pytest.mark.asyncio
    async def test_unknown_product_in_cart_rejected(self, patient_context: PortalContext):
        patient_context.store.dispatch(AddToCart(product_id="prod_gone", quantity=1))

        with pytest.raises(EntityNotFoundException):
            await CheckoutUseCase(patient_context).execute(DELIVERY)

    @pytest.mark.asyncio
    async def test_buying_entire_stock_leaves_zero(self, patient_context: PortalContext):
        await AddToCartUseCase(patient_context).execute("prod_3", 8)

        await CheckoutUseCase(patient_context).execute(DELIVERY)

        assert next(p for p in patient_context.store.snapshot.products if p.id == "prod_3").stock == 0
        assert_stock_never_negative(patient_context.store.snapshot)


class TestUpdateOrderStatusUseCase:
    """Test cases for UpdateOrderStatusUseCase"""

    @pytest.fixture
    def use_case(self, patient_context: PortalContext) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(patient_context)

    async def _place(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_1", 1)
        return (await CheckoutUseCase(context).execute(DELIVERY)).value

    @pytest.mark.asyncio
    async def test_shipped_sets_shipped_at(self, patient_context: PortalContext, use_case):
        order = await self._place(patient_context)

        result = await use_case.execute(order.id, "shipped")

        assert result.value.status == OrderStatus.SHIPPED
        assert result.value.shipped_at == FIXED_NOW
        assert result.value.updated_at == FIXED_NOW
        assert result.value.delivered_at is None

    @pytest.mark.asyncio
    async def test_delivered_sets_delivered_at(self, patient_context: PortalContext, use_case):
        order = await self._place(patient_context)

        result = await use_case.execute(order.id, OrderStatus.DELIVERED)

        assert result.value.delivered_at == FIXED_NOW
        assert result.value.shipped_at is None

    @pytest.mark.asyncio
    async def test_other_status_only_updates_timestamp(self, patient_context: PortalContext, use_case):
        order = await self._place(patient_context)

        result = await use_case.execute(order.id, "packed")

        assert result.value.status == OrderStatus.PACKED
        assert result.value.shipped_at is None and result.value.delivered_at is None

    @pytest.mark.asyncio
    async def test_unknown_status_rejected(self, patient_context: PortalContext, use_case):
        order = await self._place(patient_context)

        with pytest.raises(ValidationException):
            await use_case.execute(order.id, "lost_in_transit")

    @pytest.mark.asyncio
    async def test_unknown_order_rejected(self, use_case):
        with pytest.raises(EntityNotFoundException):
            await use_case.execute("order_404", "shipped")
