"""Admin dashboard routes: statistics and order fulfilment."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context, require_admin
from healthplus.api.presenters import present_result
from healthplus.api.schemas.portal import OrderStatusBody
from healthplus.application import PortalContext
from healthplus.application.use_cases import UpdateOrderStatusUseCase
from healthplus.domain import selectors

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats")
async def get_stats(context: PortalContext = Depends(get_context)):  # noqa: B008
    snapshot = context.store.snapshot
    return {
        "stats": jsonable_encoder(selectors.admin_stats(snapshot)),
        "orders": selectors.order_status_counts(snapshot),
        "active_consultations": len(selectors.active_consultations(snapshot)),
        "completed_appointments": selectors.completed_appointment_count(snapshot),
        "low_stock": jsonable_encoder(
            selectors.low_stock_products(snapshot, context.settings.LOW_STOCK_THRESHOLD)
        ),
    }


@router.get("/orders")
async def list_all_orders(context: PortalContext = Depends(get_context)):  # noqa: B008
    orders = context.store.snapshot.orders
    return {"data": jsonable_encoder(orders), "total": len(orders)}


@router.get("/appointments")
async def list_all_appointments(context: PortalContext = Depends(get_context)):  # noqa: B008
    appointments = context.store.snapshot.appointments
    return {"data": jsonable_encoder(appointments), "total": len(appointments)}


@router.patch("/orders/{order_id}/status")
async def update_order_status(
    order_id: str,
    body: OrderStatusBody,
    context: PortalContext = Depends(get_context),  # noqa: B008
):
    return present_result(await UpdateOrderStatusUseCase(context).execute(order_id, body.status))
