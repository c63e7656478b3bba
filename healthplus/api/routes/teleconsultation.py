"""Teleconsultation routes: start, end, chat transcript."""

from fastapi import APIRouter, Depends

from healthplus.api.dependencies import get_context
from healthplus.api.presenters import present_result, present_room
from healthplus.api.schemas.portal import ChatMessageBody
from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    EndTeleconsultationUseCase,
    SendChatMessageUseCase,
    StartTeleconsultationUseCase,
)

router = APIRouter()


@router.post("/{appointment_id}/start")
async def start_consultation(appointment_id: str, context: PortalContext = Depends(get_context)):  # noqa: B008
    result = await StartTeleconsultationUseCase(context).execute(appointment_id)
    return {**present_result(result), "room": present_room(context.room)}


@router.post("/end")
async def end_consultation(context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await EndTeleconsultationUseCase(context).execute())


@router.get("/room")
async def get_room(context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_room(context.room)


@router.post("/chat")
async def send_chat_message(body: ChatMessageBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    result = await SendChatMessageUseCase(context).execute(body.text)
    return {**present_result(result), "room": present_room(context.room)}
