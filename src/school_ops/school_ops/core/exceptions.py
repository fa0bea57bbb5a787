class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required field is missing."""


class StoreError(Exception):
    """Raised when the underlying record store fails (network, permission, not-found)."""


class AppointmentNotFound(StoreError):
    """Raised by an appointment store asked to remove an unknown identifier."""

    def __init__(self, appointment_id: str):
        super().__init__(f"Appointment {appointment_id!r} not found")
        self.appointment_id = appointment_id


class StudentNotFound(StoreError):
    def __init__(self, student_id: str):
        super().__init__(f"Student {student_id!r} not found")
        self.student_id = student_id
