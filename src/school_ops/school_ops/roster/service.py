from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core import constants
from ..core.enums import EducationLevel
from ..core.exceptions import ValidationError
from .classifier import ClassLevelClassifier
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def search_students(students: Sequence[Student], query: Optional[str]) -> list[Student]:
    """Case-insensitive substring match on name or class."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(students)
    return [s for s in students if needle in s.name.lower() or needle in s.class_code.lower()]


class AEERosterService:
    """Special-education (AEE) roster: listing and enrollment of students."""

    def __init__(
        self,
        students: StudentRepository,
        *,
        classifier: ClassLevelClassifier | None = None,
        disorders: Sequence[str] = constants.DISORDERS,
    ):
        self._students = students
        self._classifier = classifier or ClassLevelClassifier()
        self._disorders = tuple(disorders)

    @property
    def disorders(self) -> tuple[str, ...]:
        return self._disorders

    def list_roster(
        self,
        *,
        level: Optional[EducationLevel] = None,
        query: Optional[str] = None,
        only_aee: bool = False,
    ) -> list[Student]:
        students = self._classifier.filter_by_level(self._students.list_all(), level)
        if only_aee:
            students = [s for s in students if s.is_aee]
        return search_students(students, query)

    def enroll(self, student_id: str, *, disorder: str, report_url: Optional[str] = None) -> Student:
        student_id = require_non_empty(student_id, "student_id")
        disorder = require_non_empty(disorder, "disorder")
        if disorder not in self._disorders:
            raise ValidationError(f"Unknown disorder: {disorder}")

        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError("Student does not exist")

        updated = replace(
            student,
            is_aee=True,
            disorder=disorder,
            report_url=(report_url or "").strip() or student.report_url,
        )
        self._students.update(updated)
        logger.info("student %s enrolled in AEE (%s)", student_id, disorder)
        return updated

    def unenroll(self, student_id: str) -> Student:
        student_id = require_non_empty(student_id, "student_id")
        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError("Student does not exist")

        updated = replace(student, is_aee=False, disorder=None)
        self._students.update(updated)
        logger.info("student %s removed from AEE", student_id)
        return updated
