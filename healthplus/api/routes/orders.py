"""Order routes."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context, get_current_user
from healthplus.application import PortalContext
from healthplus.domain import selectors
from healthplus.domain.entities import User

router = APIRouter()


@router.get("")
async def list_my_orders(
    context: PortalContext = Depends(get_context),  # noqa: B008
    user: User = Depends(get_current_user),  # noqa: B008
):
    orders = selectors.orders_for(context.store.snapshot, user.id)
    return {"data": jsonable_encoder(orders), "total": len(orders)}
