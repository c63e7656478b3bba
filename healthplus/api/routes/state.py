"""Whole-state route used by dashboards and for debugging."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context
from healthplus.api.presenters import present_room, present_views
from healthplus.application import PortalContext

router = APIRouter()


@router.get("/state")
async def get_state(context: PortalContext = Depends(get_context)):  # noqa: B008
    snapshot = context.store.snapshot
    return {
        "snapshot": jsonable_encoder(snapshot),
        "views": present_views(snapshot, context.settings.LOW_STOCK_THRESHOLD),
        "room": present_room(context.room),
    }
