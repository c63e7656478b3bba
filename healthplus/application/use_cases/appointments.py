"""
Appointment Use Cases

Booking and cancelling consultations with doctors from the catalog.
"""

import logging
from dataclasses import dataclass
from datetime import date

from healthplus.core.domain import (
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
    find_by_id,
)
from healthplus.domain.actions import AddAppointment, UpdateAppointment
from healthplus.domain.entities import Appointment
from healthplus.domain.value_objects import AppointmentStatus, NotificationType

from .base import PortalUseCase, WorkflowResult, format_amount

logger = logging.getLogger(__name__)

CANCELLATION_REASON = "Patient requested"


@dataclass
class BookAppointmentRequest:
    doctor_id: str
    date: date | None
    time_slot: str


class BookAppointmentUseCase(PortalUseCase):
    """
    Use Case: Book Appointment

    Responsibilities:
    - Require a doctor, a date and a slot
    - Require a logged-in patient and a bookable doctor
    - Copy the doctor's name, specialty and fee onto the appointment
    - Notify the patient
    """

    async def execute(self, request: BookAppointmentRequest) -> WorkflowResult:
        if not request.doctor_id or not request.date or not request.time_slot:
            logger.warning("Booking rejected: missing doctor, date or slot")
            raise ValidationException("Please select all fields")

        user = self._require_user("Booking")
        await self._network(self.settings.BOOKING_DELAY, "book_appointment")

        snapshot = self.store.snapshot
        doctor = find_by_id(snapshot.doctors, request.doctor_id)
        if doctor is None:
            logger.warning(f"Booking rejected: unknown doctor {request.doctor_id}")
            raise EntityNotFoundException("Doctor", request.doctor_id)
        if not doctor.available:
            logger.warning(f"Booking rejected: {doctor.id} is not available")
            raise InvalidOperationException("book_appointment", "unavailable", f"{doctor.name} is not available")
        if snapshot.time_slots and request.time_slot not in snapshot.time_slots:
            logger.warning(f"Booking rejected: unknown slot {request.time_slot}")
            raise ValidationException(f"Unknown time slot {request.time_slot}", field="time_slot")

        appointment = Appointment(
            id=self.ids.new_id("apt"),
            doctor_id=doctor.id,
            patient_id=user.id,
            date=request.date,
            time_slot=request.time_slot,
            fee=doctor.fee,
            status=AppointmentStatus.CONFIRMED,
            doctor_name=doctor.name,
            specialty=doctor.specialty,
            patient_name=user.name,
            created_at=self.ids.now(),
        )

        result = self._commit(
            [
                AddAppointment(appointment=appointment),
                self._notification(
                    "Appointment Booked",
                    f"With {doctor.name} at {request.time_slot}",
                    NotificationType.APPOINTMENT,
                ),
            ],
            value=appointment,
        )
        logger.info(f"Appointment booked: {appointment.id} with {doctor.id} on {request.date} {request.time_slot}")
        return result


class CancelAppointmentUseCase(PortalUseCase):
    """
    Use Case: Cancel Appointment

    Completed or already cancelled appointments stay as they are; the result
    then carries no actions.
    """

    async def execute(self, appointment_id: str) -> WorkflowResult:
        await self._network(self.settings.CANCEL_DELAY, "cancel_appointment")

        appointment = find_by_id(self.store.snapshot.appointments, appointment_id)
        if appointment is None:
            logger.warning(f"Cancellation rejected: unknown appointment {appointment_id}")
            raise EntityNotFoundException("Appointment", appointment_id)

        if not appointment.status.can_be_cancelled():
            logger.info(f"Appointment {appointment_id} is {appointment.status}, nothing to cancel")
            return self._unchanged(appointment)

        result = self._commit(
            [
                UpdateAppointment(
                    id=appointment_id,
                    updates={
                        "status": AppointmentStatus.CANCELLED,
                        "cancelled_at": self.ids.now(),
                        "cancellation_reason": CANCELLATION_REASON,
                    },
                ),
                self._notification(
                    "Appointment Cancelled",
                    f"Refund of ₹{format_amount(appointment.fee)} initiated",
                    NotificationType.APPOINTMENT,
                ),
            ]
        )
        cancelled = find_by_id(result.snapshot.appointments, appointment_id)
        logger.info(f"Appointment cancelled: {appointment_id}")
        return WorkflowResult(actions=result.actions, value=cancelled, snapshot=result.snapshot)
