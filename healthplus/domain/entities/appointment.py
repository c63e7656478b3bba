"""
Appointment Entities

Booked consultations, the live teleconsultation linked to one of them, and
the history of finished teleconsultations.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ..value_objects import AppointmentStatus


@dataclass(frozen=True)
class Appointment:
    """
    Booked consultation with a doctor.

    Doctor name, specialty and fee are copied at booking time so later
    catalog edits do not rewrite history.

    Example:
        ```python
        appointment = Appointment(
            id="apt_1700000000000",
            doctor_id="doc_1",
            patient_id="user_1",
            date=date(2024, 1, 22),
            time_slot="10:00",
            fee=800,
        )
        appointment.status.can_be_cancelled()  # True
        ```
    """

    id: str
    doctor_id: str
    patient_id: str
    date: date
    time_slot: str
    fee: float
    status: AppointmentStatus = AppointmentStatus.CONFIRMED
    doctor_name: str = ""
    specialty: str = ""
    patient_name: str = ""
    created_at: datetime | None = None

    # Cancellation
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None

    # Teleconsultation
    session_started_at: datetime | None = None
    completed_at: datetime | None = None
    duration: int | None = None  # seconds on call

    @property
    def sort_key(self) -> tuple[date, str]:
        return (self.date, self.time_slot)


@dataclass(frozen=True)
class TeleconsultationSession:
    """The single live call linking one appointment, doctor and patient."""

    appointment_id: str
    doctor_id: str
    patient_id: str
    started_at: datetime


@dataclass(frozen=True)
class SessionRecord:
    """A finished teleconsultation kept for the patient's history."""

    appointment_id: str
    doctor_id: str
    patient_id: str
    started_at: datetime
    ended_at: datetime
    duration: int
