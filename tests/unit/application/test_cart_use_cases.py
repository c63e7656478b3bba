"""
Unit Tests for cart use cases.
"""

import pytest

from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    AddToCartUseCase,
    ClearCartUseCase,
    DecrementCartLineUseCase,
    RemoveFromCartUseCase,
)
from healthplus.core.domain import EntityNotFoundException, InsufficientStockException, ValidationException
from healthplus.domain import ActionType
from tests.utils import assert_action_types, assert_cart_quantities_positive


class TestAddToCartUseCase:
    """Test cases for AddToCartUseCase"""

    @pytest.mark.asyncio
    async def test_add_creates_line_and_notifies(self, context: PortalContext):
        result = await AddToCartUseCase(context).execute("prod_4", 2)

        assert_action_types(result, [ActionType.ADD_TO_CART, ActionType.ADD_NOTIFICATION])
        assert context.store.snapshot.cart == {"prod_4": 2}
        notification = context.store.snapshot.notifications[0]
        assert notification.title == "Added to Cart"
        assert notification.message == "Digital Thermometer x2"

    @pytest.mark.asyncio
    async def test_add_accumulates(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_4", 2)
        result = await AddToCartUseCase(context).execute("prod_4", 3)

        assert result.value == 5
        assert context.store.snapshot.cart == {"prod_4": 5}

    @pytest.mark.asyncio
    async def test_more_than_stock_rejected(self, context: PortalContext):
        before = context.store.snapshot

        with pytest.raises(InsufficientStockException) as exc_info:
            await AddToCartUseCase(context).execute("prod_3", 9)

        assert exc_info.value.available == 8
        assert context.store.snapshot is before

    @pytest.mark.asyncio
    async def test_stock_check_counts_existing_line(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_3", 5)

        with pytest.raises(InsufficientStockException):
            await AddToCartUseCase(context).execute("prod_3", 4)

        assert context.store.snapshot.cart == {"prod_3": 5}

    @pytest.mark.asyncio
    async def test_exactly_remaining_stock_is_allowed(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_3", 5)
        await AddToCartUseCase(context).execute("prod_3", 3)

        assert context.store.snapshot.cart == {"prod_3": 8}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -1])
    async def test_non_positive_quantity_rejected(self, context: PortalContext, quantity):
        with pytest.raises(ValidationException):
            await AddToCartUseCase(context).execute("prod_1", quantity)

    @pytest.mark.asyncio
    async def test_unknown_product_rejected(self, context: PortalContext):
        with pytest.raises(EntityNotFoundException):
            await AddToCartUseCase(context).execute("prod_404")


class TestCartLineEditing:
    """Decrement, remove and clear."""

    @pytest.mark.asyncio
    async def test_decrement_reduces_quantity(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_1", 2)

        result = await DecrementCartLineUseCase(context).execute("prod_1")

        assert_action_types(result, [ActionType.ADD_TO_CART])
        assert context.store.snapshot.cart == {"prod_1": 1}

    @pytest.mark.asyncio
    async def test_decrement_last_unit_removes_line(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_1", 1)

        result = await DecrementCartLineUseCase(context).execute("prod_1")

        assert_action_types(result, [ActionType.REMOVE_FROM_CART])
        assert context.store.snapshot.cart == {}
        assert_cart_quantities_positive(context.store.snapshot)

    @pytest.mark.asyncio
    async def test_decrement_missing_line_changes_nothing(self, context: PortalContext):
        result = await DecrementCartLineUseCase(context).execute("prod_1")

        assert not result.changed

    @pytest.mark.asyncio
    async def test_remove_and_clear(self, context: PortalContext):
        await AddToCartUseCase(context).execute("prod_1", 1)
        await AddToCartUseCase(context).execute("prod_2", 1)

        await RemoveFromCartUseCase(context).execute("prod_1")
        assert context.store.snapshot.cart == {"prod_2": 1}

        await ClearCartUseCase(context).execute()
        assert context.store.snapshot.cart == {}

    @pytest.mark.asyncio
    async def test_clear_empty_cart_changes_nothing(self, context: PortalContext):
        assert not (await ClearCartUseCase(context).execute()).changed
        assert not (await RemoveFromCartUseCase(context).execute("prod_1")).changed
