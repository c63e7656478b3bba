"""
Teleconsultation Use Cases

Opening and closing the live video consultation for a confirmed appointment,
plus the in-call chat. The chat transcript and the call timer live in the
consultation room, outside the snapshot.
"""

import logging

from healthplus.core.domain import (
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
    find_by_id,
)
from healthplus.domain.actions import EndSession, StartSession, UpdateAppointment
from healthplus.domain.entities import TeleconsultationSession
from healthplus.domain.value_objects import AppointmentStatus, ChatSender

from ..consultation_room import ChatMessage
from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)

DOCTOR_JOINED_MESSAGE = "Doctor has joined the consultation"
DOCTOR_CANNED_REPLY = "Thank you for sharing that. Continue with your prescribed medication."


class StartTeleconsultationUseCase(PortalUseCase):
    """
    Use Case: Start Teleconsultation

    Moves a confirmed appointment into session, opens the single active
    session and starts a fresh call timer.
    """

    async def execute(self, appointment_id: str) -> WorkflowResult:
        appointment = find_by_id(self.store.snapshot.appointments, appointment_id)
        if appointment is None:
            logger.warning(f"Teleconsultation rejected: unknown appointment {appointment_id}")
            raise EntityNotFoundException("Appointment", appointment_id)

        await self._network(self.settings.CONSULTATION_START_DELAY, "start_teleconsultation")

        snapshot = self.store.snapshot
        appointment = find_by_id(snapshot.appointments, appointment_id)
        if appointment is None or appointment.status != AppointmentStatus.CONFIRMED:
            state = appointment.status.value if appointment else "missing"
            logger.warning(f"Teleconsultation rejected: appointment {appointment_id} is {state}")
            raise InvalidOperationException("start_teleconsultation", state)
        if snapshot.active_session is not None:
            logger.warning("Teleconsultation rejected: another session is active")
            raise InvalidOperationException(
                "start_teleconsultation",
                "session_active",
                f"Session for appointment {snapshot.active_session.appointment_id} is still active",
            )

        now = self.ids.now()
        session = TeleconsultationSession(
            appointment_id=appointment.id,
            doctor_id=appointment.doctor_id,
            patient_id=appointment.patient_id,
            started_at=now,
        )
        result = self._commit(
            [
                UpdateAppointment(
                    id=appointment.id,
                    updates={"status": AppointmentStatus.IN_SESSION, "session_started_at": now},
                ),
                StartSession(session=session),
            ],
            value=session,
        )

        self.context.room.open(
            ChatMessage(id=self.ids.new_id("msg"), sender=ChatSender.SYSTEM, text=DOCTOR_JOINED_MESSAGE, time=now)
        )
        logger.info(f"Teleconsultation started for appointment {appointment.id}")
        return result


class EndTeleconsultationUseCase(PortalUseCase):
    """
    Use Case: End Teleconsultation

    Stops the call timer and records its count as the appointment duration.
    """

    async def execute(self) -> WorkflowResult:
        active = self.store.snapshot.active_session
        if active is None:
            logger.warning("End teleconsultation rejected: no active session")
            raise InvalidOperationException("end_teleconsultation", "no_session", "No active teleconsultation")

        duration = await self.context.room.close()
        if self.store.snapshot.active_session is not active:
            logger.warning("End teleconsultation rejected: session already ended")
            raise InvalidOperationException("end_teleconsultation", "no_session", "No active teleconsultation")
        now = self.ids.now()

        result = self._commit(
            [
                UpdateAppointment(
                    id=active.appointment_id,
                    updates={"status": AppointmentStatus.COMPLETED, "completed_at": now, "duration": duration},
                ),
                EndSession(ended_at=now, duration=duration),
            ]
        )
        record = result.snapshot.session_history[-1] if result.snapshot.session_history else None
        logger.info(f"Teleconsultation ended for appointment {active.appointment_id} after {duration}s")
        return WorkflowResult(actions=result.actions, value=record, snapshot=result.snapshot)


class SendChatMessageUseCase(PortalUseCase):
    """
    Use Case: Send Chat Message

    Appends the patient's message to the transcript and schedules the canned
    doctor reply. Nothing is dispatched.
    """

    async def execute(self, text: str) -> WorkflowResult:
        if self.store.snapshot.active_session is None:
            logger.warning("Chat message rejected: no active session")
            raise InvalidOperationException("send_chat_message", "no_session", "No active teleconsultation")
        if not text or not text.strip():
            raise ValidationException("Message cannot be empty", field="text")

        room = self.context.room
        message = ChatMessage(id=self.ids.new_id("msg"), sender=ChatSender.PATIENT, text=text, time=self.ids.now())
        room.post(message)
        room.schedule_reply(self.settings.CHAT_REPLY_DELAY, self._doctor_reply)
        logger.debug(f"Chat message posted: {message.id}")
        return self._unchanged(message)

    def _doctor_reply(self) -> ChatMessage:
        return ChatMessage(
            id=self.ids.new_id("msg"),
            sender=ChatSender.DOCTOR,
            text=DOCTOR_CANNED_REPLY,
            time=self.ids.now(),
        )
