from __future__ import annotations

from typing import Callable, Protocol

from ..common.subscriptions import Unsubscribe
from .model import Appointment


class AppointmentStore(Protocol):
    """Contract of the appointment store; the storage engine is not the core's concern."""

    def create(self, appointment: Appointment) -> Appointment:
        """Persist a draft and return it with its assigned identifier."""

        raise NotImplementedError

    def remove(self, appointment_id: str) -> None:
        """Delete one appointment.

        Raises AppointmentNotFound when the identifier is unknown.
        """

        raise NotImplementedError

    def subscribe_all(self, on_update: Callable[[list[Appointment]], None]) -> Unsubscribe:
        raise NotImplementedError
