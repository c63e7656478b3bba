"""
Unit Tests for the portal reducer.

Covers every action, the "same object on no-op" contract and the fact that
input snapshots are never mutated.
"""

import copy
from datetime import date, datetime, timedelta

import pytest

from healthplus.config.catalog_seed import initial_snapshot
from healthplus.domain import Snapshot, reduce, selectors
from healthplus.domain.actions import (
    AddAppointment,
    AddDoctor,
    AddNotification,
    AddProduct,
    AddReview,
    AddToCart,
    ClearCart,
    EndSession,
    Login,
    Logout,
    PlaceOrder,
    ReadNotification,
    RemoveFromCart,
    RestoreCart,
    StartSession,
    UpdateAppointment,
    UpdateDoctor,
    UpdateOrder,
    UpdateProduct,
    UpdateProfile,
    UpdateStock,
)
from healthplus.domain.entities import Review, Session, TeleconsultationSession
from healthplus.domain.value_objects import AppointmentStatus, OrderStatus, UserRole
from tests.utils import AppointmentBuilder, OrderBuilder, ProductBuilder, create_doctor, create_notification, create_user

NOW = datetime(2024, 1, 20, 9, 0)


@pytest.fixture
def seeded() -> Snapshot:
    return initial_snapshot()


@pytest.fixture
def logged_in(seeded: Snapshot) -> Snapshot:
    session = Session(token="mock_jwt_token_1", expires_at=NOW + timedelta(days=7), last_login=NOW)
    return reduce(seeded, Login(user=create_user(), session=session))


class TestSessionActions:
    """LOGIN, LOGOUT and UPDATE_PROFILE."""

    def test_login_sets_user_and_session(self, logged_in: Snapshot):
        assert logged_in.user.id == "user_1"
        assert logged_in.session.token == "mock_jwt_token_1"
        assert logged_in.is_authenticated

    def test_logout_clears_user_and_session(self, logged_in: Snapshot):
        result = reduce(logged_in, Logout())

        assert result.user is None
        assert result.session is None

    def test_logout_when_logged_out_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, Logout()) is seeded

    def test_update_profile_merges_fields(self, logged_in: Snapshot):
        result = reduce(logged_in, UpdateProfile(updates={"name": "Jane Doe", "mobile": "+911234567890"}))

        assert result.user.name == "Jane Doe"
        assert result.user.mobile == "+911234567890"
        assert result.user.email == logged_in.user.email

    def test_update_profile_never_changes_id_or_role(self, logged_in: Snapshot):
        result = reduce(logged_in, UpdateProfile(updates={"id": "hacker", "role": UserRole.ADMIN, "name": "X"}))

        assert result.user.id == "user_1"
        assert result.user.role == UserRole.PATIENT
        assert result.user.name == "X"

    def test_update_profile_without_user_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, UpdateProfile(updates={"name": "Nobody"})) is seeded

    def test_update_profile_ignores_unknown_fields(self, logged_in: Snapshot):
        assert reduce(logged_in, UpdateProfile(updates={"favourite_colour": "blue"})) is logged_in


class TestAppointmentActions:
    """ADD_APPOINTMENT and guarded UPDATE_APPOINTMENT."""

    def test_add_appointment_appends(self, seeded: Snapshot):
        first = AppointmentBuilder().with_id("apt_1").build()
        second = AppointmentBuilder().with_id("apt_2").build()

        result = reduce(reduce(seeded, AddAppointment(appointment=first)), AddAppointment(appointment=second))

        assert [apt.id for apt in result.appointments] == ["apt_1", "apt_2"]

    def test_update_appointment_merges_by_id(self, seeded: Snapshot):
        state = reduce(seeded, AddAppointment(appointment=AppointmentBuilder().build()))

        result = reduce(
            state,
            UpdateAppointment(
                id="apt_1",
                updates={"status": AppointmentStatus.CANCELLED, "cancellation_reason": "Patient requested"},
            ),
        )

        assert result.appointments[0].status == AppointmentStatus.CANCELLED
        assert result.appointments[0].cancellation_reason == "Patient requested"

    def test_update_unknown_appointment_is_noop(self, seeded: Snapshot):
        state = reduce(seeded, AddAppointment(appointment=AppointmentBuilder().build()))

        assert reduce(state, UpdateAppointment(id="apt_missing", updates={"fee": 1})) is state

    @pytest.mark.parametrize(
        "current,target",
        [
            (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED),
            (AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED),
            (AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED),
            (AppointmentStatus.IN_SESSION, AppointmentStatus.CANCELLED),
        ],
    )
    def test_illegal_status_transition_is_noop(self, seeded, current, target):
        state = reduce(seeded, AddAppointment(appointment=AppointmentBuilder().with_status(current).build()))

        assert reduce(state, UpdateAppointment(id="apt_1", updates={"status": target})) is state

    def test_status_given_as_string_is_accepted(self, seeded: Snapshot):
        state = reduce(seeded, AddAppointment(appointment=AppointmentBuilder().build()))

        result = reduce(state, UpdateAppointment(id="apt_1", updates={"status": "in_session"}))

        assert result.appointments[0].status == AppointmentStatus.IN_SESSION

    def test_unknown_status_is_noop(self, seeded: Snapshot):
        state = reduce(seeded, AddAppointment(appointment=AppointmentBuilder().build()))

        assert reduce(state, UpdateAppointment(id="apt_1", updates={"status": "teleported"})) is state


class TestTeleconsultationActions:
    """START_SESSION and END_SESSION."""

    def _session(self) -> TeleconsultationSession:
        return TeleconsultationSession(appointment_id="apt_1", doctor_id="doc_1", patient_id="user_1", started_at=NOW)

    def test_start_session_sets_active(self, seeded: Snapshot):
        result = reduce(seeded, StartSession(session=self._session()))

        assert result.active_session.appointment_id == "apt_1"

    def test_second_start_is_ignored(self, seeded: Snapshot):
        state = reduce(seeded, StartSession(session=self._session()))
        other = TeleconsultationSession(appointment_id="apt_2", doctor_id="doc_2", patient_id="user_1", started_at=NOW)

        assert reduce(state, StartSession(session=other)) is state

    def test_end_session_records_history(self, seeded: Snapshot):
        state = reduce(seeded, StartSession(session=self._session()))

        result = reduce(state, EndSession(ended_at=NOW + timedelta(minutes=5), duration=300))

        assert result.active_session is None
        assert len(result.session_history) == 1
        assert result.session_history[0].duration == 300
        assert result.session_history[0].started_at == NOW

    def test_end_without_active_session_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, EndSession(ended_at=NOW, duration=0)) is seeded


class TestCartActions:
    """ADD_TO_CART, REMOVE_FROM_CART, CLEAR_CART and RESTORE_CART."""

    def test_add_creates_then_increments_line(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=2))
        state = reduce(state, AddToCart(product_id="prod_1", quantity=3))

        assert state.cart == {"prod_1": 5}

    def test_add_negative_quantity_decrements(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=2))

        assert reduce(state, AddToCart(product_id="prod_1", quantity=-1)).cart == {"prod_1": 1}

    def test_add_does_not_mutate_previous_cart(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=1))
        before = dict(state.cart)

        reduce(state, AddToCart(product_id="prod_1", quantity=1))

        assert state.cart == before

    def test_remove_deletes_line(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=1))
        state = reduce(state, AddToCart(product_id="prod_2", quantity=1))

        assert reduce(state, RemoveFromCart(product_id="prod_1")).cart == {"prod_2": 1}

    def test_remove_missing_line_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, RemoveFromCart(product_id="prod_1")) is seeded

    def test_clear_cart(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=1))

        assert reduce(state, ClearCart()).cart == {}

    def test_clear_empty_cart_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, ClearCart()) is seeded

    def test_restore_cart_drops_non_positive_lines(self, seeded: Snapshot):
        result = reduce(seeded, RestoreCart(cart={"prod_1": 2, "prod_2": 0, "prod_3": -1}))

        assert result.cart == {"prod_1": 2}


class TestOrderActions:
    """PLACE_ORDER and UPDATE_ORDER."""

    def test_place_order_prepends_and_clears_cart(self, seeded: Snapshot):
        state = reduce(seeded, AddToCart(product_id="prod_1", quantity=1))
        state = reduce(state, PlaceOrder(order=OrderBuilder().with_id("order_1").build()))
        state = reduce(state, PlaceOrder(order=OrderBuilder().with_id("order_2").build()))

        assert [order.id for order in state.orders] == ["order_2", "order_1"]
        assert state.cart == {}

    def test_update_order_merges(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))

        result = reduce(state, UpdateOrder(id="order_1", updates={"status": OrderStatus.SHIPPED, "updated_at": NOW}))

        assert result.orders[0].status == OrderStatus.SHIPPED
        assert result.orders[0].updated_at == NOW
        assert result.orders[0].shipped_at == NOW
        assert result.orders[0].delivered_at is None

    def test_delivered_status_stamps_delivered_at(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))

        result = reduce(state, UpdateOrder(id="order_1", updates={"status": "delivered", "updated_at": NOW}))

        assert result.orders[0].delivered_at == NOW
        assert result.orders[0].shipped_at is None

    def test_status_given_as_string_is_normalized(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))

        result = reduce(state, UpdateOrder(id="order_1", updates={"status": "packed", "updated_at": NOW}))

        assert result.orders[0].status is OrderStatus.PACKED
        assert selectors.order_status_counts(result) == {"delivered": 0, "pending": 1}

    def test_shipped_at_cannot_be_set_directly(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))
        earlier = datetime(2020, 1, 1)

        packed = reduce(
            state,
            UpdateOrder(id="order_1", updates={"status": "packed", "shipped_at": earlier, "delivered_at": earlier}),
        )

        assert packed.orders[0].status == OrderStatus.PACKED
        assert packed.orders[0].shipped_at is None
        assert packed.orders[0].delivered_at is None
        assert reduce(state, UpdateOrder(id="order_1", updates={"shipped_at": earlier})) is state

    def test_unknown_order_status_is_noop(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))

        assert reduce(state, UpdateOrder(id="order_1", updates={"status": "lost_in_transit"})) is state

    def test_update_unknown_order_is_noop(self, seeded: Snapshot):
        state = reduce(seeded, PlaceOrder(order=OrderBuilder().build()))

        assert reduce(state, UpdateOrder(id="order_404", updates={"status": OrderStatus.SHIPPED})) is state


class TestNotificationActions:
    """ADD_NOTIFICATION and READ_NOTIFICATION."""

    def test_add_notification_prepends(self, seeded: Snapshot):
        result = reduce(seeded, AddNotification(notification=create_notification("notif_new")))

        assert result.notifications[0].id == "notif_new"
        assert len(result.notifications) == len(seeded.notifications) + 1

    def test_read_notification_marks_read(self, seeded: Snapshot):
        result = reduce(seeded, ReadNotification(id="notif_1"))

        assert next(n for n in result.notifications if n.id == "notif_1").read is True

    def test_read_is_idempotent(self, seeded: Snapshot):
        once = reduce(seeded, ReadNotification(id="notif_1"))

        assert reduce(once, ReadNotification(id="notif_1")) is once

    def test_read_unknown_notification_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, ReadNotification(id="notif_404")) is seeded


class TestCatalogActions:
    """Products, doctors, reviews and stock."""

    def test_add_and_update_product(self, seeded: Snapshot):
        state = reduce(seeded, AddProduct(product=ProductBuilder().build()))
        state = reduce(state, UpdateProduct(id="prod_test", updates={"price": 650}))

        assert state.products[-1].price == 650

    def test_update_product_cannot_change_id(self, seeded: Snapshot):
        result = reduce(seeded, UpdateProduct(id="prod_1", updates={"id": "prod_99", "name": "Renamed"}))

        assert result.products[0].id == "prod_1"
        assert result.products[0].name == "Renamed"

    def test_add_and_update_doctor(self, seeded: Snapshot):
        state = reduce(seeded, AddDoctor(doctor=create_doctor()))
        state = reduce(state, UpdateDoctor(id="doc_test", updates={"available": False}))

        assert state.doctors[-1].available is False

    def test_update_unknown_doctor_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, UpdateDoctor(id="doc_404", updates={"available": False})) is seeded

    def test_add_review_appends(self, seeded: Snapshot):
        review = Review(id="review_1", doctor_id="doc_1", patient_id="user_1", rating=5)

        assert reduce(seeded, AddReview(review=review)).reviews == (review,)

    def test_update_stock_decrements(self, seeded: Snapshot):
        result = reduce(seeded, UpdateStock(id="prod_1", quantity=2))

        assert result.products[0].stock == seeded.products[0].stock - 2

    def test_update_stock_does_not_clamp(self, seeded: Snapshot):
        result = reduce(seeded, UpdateStock(id="prod_3", quantity=10))

        assert next(p for p in result.products if p.id == "prod_3").stock == -2

    def test_update_stock_unknown_product_is_noop(self, seeded: Snapshot):
        assert reduce(seeded, UpdateStock(id="prod_404", quantity=1)) is seeded


class TestReducerContract:
    """Determinism, purity and unknown actions."""

    def test_unknown_action_returns_input(self, seeded: Snapshot):
        assert reduce(seeded, object()) is seeded  # type: ignore[arg-type]

    def test_same_input_same_output(self, seeded: Snapshot):
        action = AddToCart(product_id="prod_1", quantity=1)

        assert reduce(seeded, action) == reduce(seeded, action)

    def test_input_snapshot_is_not_mutated(self, logged_in: Snapshot):
        state = reduce(logged_in, AddAppointment(appointment=AppointmentBuilder().build()))
        state = reduce(state, AddToCart(product_id="prod_1", quantity=1))
        before = copy.deepcopy(state)

        for action in (
            UpdateAppointment(id="apt_1", updates={"status": AppointmentStatus.CANCELLED}),
            UpdateStock(id="prod_1", quantity=1),
            ReadNotification(id="notif_1"),
            ClearCart(),
            Logout(),
        ):
            reduce(state, action)

        assert state == before

    def test_untouched_fields_are_shared(self, seeded: Snapshot):
        result = reduce(seeded, AddToCart(product_id="prod_1", quantity=1))

        assert result.products is seeded.products
        assert result.doctors is seeded.doctors
        assert result.notifications is seeded.notifications

    def test_appointment_date_is_kept(self, seeded: Snapshot):
        apt = AppointmentBuilder().on(date(2024, 2, 1), "15:00").build()

        assert reduce(seeded, AddAppointment(appointment=apt)).appointments[0].sort_key == (date(2024, 2, 1), "15:00")
