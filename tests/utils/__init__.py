"""Test utilities and helpers."""

from tests.utils.assertions import (
    assert_action_types,
    assert_cart_quantities_positive,
    assert_stock_never_negative,
)
from tests.utils.builders import AppointmentBuilder, OrderBuilder, ProductBuilder
from tests.utils.factories import FIXED_NOW, create_doctor, create_notification, create_user

__all__ = [
    "FIXED_NOW",
    # Builders
    "AppointmentBuilder",
    "ProductBuilder",
    "OrderBuilder",
    # Factories
    "create_user",
    "create_notification",
    "create_doctor",
    # Assertions
    "assert_action_types",
    "assert_stock_never_negative",
    "assert_cart_quantities_positive",
]
