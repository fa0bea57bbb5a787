from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..common.subscriptions import Unsubscribe
from .model import StaffMember, Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def subscribe(self, on_update: Callable[[list[Student]], None]) -> Unsubscribe:
        """Deliver the full roster now and after every change."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def update(self, student: Student) -> None:
        raise NotImplementedError


class StaffRepository(Protocol):
    def subscribe(self, on_update: Callable[[list[StaffMember]], None]) -> Unsubscribe:
        raise NotImplementedError

    def list_all(self) -> Sequence[StaffMember]:
        raise NotImplementedError
