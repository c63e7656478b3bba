"""Notification feed routes."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context
from healthplus.api.presenters import present_result
from healthplus.application import PortalContext
from healthplus.application.use_cases import MarkAllNotificationsReadUseCase, MarkNotificationReadUseCase
from healthplus.domain import selectors

router = APIRouter()


@router.get("")
async def list_notifications(context: PortalContext = Depends(get_context)):  # noqa: B008
    snapshot = context.store.snapshot
    return {
        "data": jsonable_encoder(snapshot.notifications),
        "unread": selectors.unread_notification_count(snapshot),
    }


@router.post("/{notification_id}/read")
async def mark_read(notification_id: str, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await MarkNotificationReadUseCase(context).execute(notification_id))


@router.post("/read-all")
async def mark_all_read(context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await MarkAllNotificationsReadUseCase(context).execute())
