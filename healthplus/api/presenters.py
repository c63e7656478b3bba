"""
Response presenters.

Turns workflow results, snapshots and derived views into JSON-ready
dictionaries. Dataclasses, enums and datetimes go through FastAPI's
``jsonable_encoder``.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder

from healthplus.application import ConsultationRoom
from healthplus.application.use_cases import WorkflowResult
from healthplus.domain import selectors
from healthplus.domain.snapshot import Snapshot


def present_result(result: WorkflowResult) -> dict[str, Any]:
    return {
        "changed": result.changed,
        "actions": [action.type.value for action in result.actions],
        "data": jsonable_encoder(result.value),
    }


def present_views(snapshot: Snapshot, low_stock_threshold: int) -> dict[str, Any]:
    """Every derived view, recomputed from ``snapshot``."""
    return jsonable_encoder(
        {
            "unread_notification_count": selectors.unread_notification_count(snapshot),
            "upcoming_appointments": selectors.upcoming_appointments(snapshot),
            "cart_lines": [
                {"product_id": line.product_id, "quantity": line.quantity, "product": line.product, "total": line.total}
                for line in selectors.cart_lines(snapshot)
            ],
            "cart_total": selectors.cart_total(snapshot),
            "cart_item_count": selectors.cart_item_count(snapshot),
            "admin_stats": selectors.admin_stats(snapshot),
            "low_stock_products": selectors.low_stock_products(snapshot, low_stock_threshold),
            "available_doctors": selectors.available_doctors(snapshot),
            "active_consultations": selectors.active_consultations(snapshot),
            "completed_appointment_count": selectors.completed_appointment_count(snapshot),
            "order_status_counts": selectors.order_status_counts(snapshot),
        }
    )


def present_room(room: ConsultationRoom) -> dict[str, Any]:
    return {"elapsed": room.elapsed, "messages": jsonable_encoder(room.messages)}
