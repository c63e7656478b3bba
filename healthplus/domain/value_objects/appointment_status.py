"""
Appointment Status Value Object

Lifecycle states of a booked consultation with transition rules.
"""

from healthplus.core.domain import StatusEnum


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - CONFIRMED -> IN_SESSION, CANCELLED
    - IN_SESSION -> COMPLETED
    - COMPLETED, CANCELLED -> (terminal states)
    """

    CONFIRMED = "confirmed"
    IN_SESSION = "in_session"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status.value in _APPOINTMENT_TRANSITIONS[self.value]

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return not _APPOINTMENT_TRANSITIONS[self.value]

    def is_upcoming(self) -> bool:
        """Check if the appointment still lies ahead of the patient."""
        return self in (AppointmentStatus.CONFIRMED, AppointmentStatus.IN_SESSION)

    def can_be_cancelled(self) -> bool:
        """Check if appointment can be cancelled."""
        return self.can_transition_to(AppointmentStatus.CANCELLED)


_APPOINTMENT_TRANSITIONS: dict[str, tuple[str, ...]] = {
    "confirmed": ("in_session", "cancelled"),
    "in_session": ("completed",),
    "completed": (),
    "cancelled": (),
}
