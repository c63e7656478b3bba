"""Appointment routes."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context, get_current_user
from healthplus.api.presenters import present_result
from healthplus.api.schemas.portal import BookAppointmentBody, ReviewBody
from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    BookAppointmentRequest,
    BookAppointmentUseCase,
    CancelAppointmentUseCase,
    ReviewInput,
    SubmitReviewUseCase,
)
from healthplus.domain import selectors
from healthplus.domain.entities import User

router = APIRouter()


@router.get("")
async def list_my_appointments(
    context: PortalContext = Depends(get_context),  # noqa: B008
    user: User = Depends(get_current_user),  # noqa: B008
):
    appointments = selectors.appointments_for(context.store.snapshot, user.id)
    return {"data": jsonable_encoder(appointments), "total": len(appointments)}


@router.get("/doctors")
async def list_doctors(context: PortalContext = Depends(get_context)):  # noqa: B008
    snapshot = context.store.snapshot
    return {"data": jsonable_encoder(snapshot.doctors), "time_slots": list(snapshot.time_slots)}


@router.post("")
async def book_appointment(body: BookAppointmentBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    request = BookAppointmentRequest(doctor_id=body.doctor_id, date=body.date, time_slot=body.time_slot)
    return present_result(await BookAppointmentUseCase(context).execute(request))


@router.post("/{appointment_id}/cancel")
async def cancel_appointment(appointment_id: str, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await CancelAppointmentUseCase(context).execute(appointment_id))


@router.post("/reviews")
async def submit_review(body: ReviewBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await SubmitReviewUseCase(context).execute(ReviewInput(**body.model_dump())))
