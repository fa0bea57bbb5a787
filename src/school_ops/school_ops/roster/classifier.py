from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, TypeVar

from ..core import constants
from ..core.enums import EducationLevel
from ..core.exceptions import ValidationError
from .model import RosterMember

M = TypeVar("M", bound=RosterMember)


def normalize_class_code(class_code: object) -> str:
    if not isinstance(class_code, str):
        return ""
    return class_code.strip().upper()


def _normalized(codes: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_class_code(c) for c in codes)


@dataclass(frozen=True)
class ClassLevelClassifier:
    """Maps class codes to education-level buckets by fixed membership lists.

    Lists are checked in declaration order; the first match wins.
    """

    early_childhood: Sequence[str] = constants.EARLY_CHILDHOOD_CLASSES
    early_elementary: Sequence[str] = constants.EARLY_ELEMENTARY_CLASSES
    late_elementary: Sequence[str] = constants.LATE_ELEMENTARY_CLASSES
    secondary: Sequence[str] = constants.SECONDARY_CLASSES
    _buckets: tuple[tuple[EducationLevel, frozenset[str]], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_buckets",
            (
                (EducationLevel.EARLY_CHILDHOOD, _normalized(self.early_childhood)),
                (EducationLevel.EARLY_ELEMENTARY, _normalized(self.early_elementary)),
                (EducationLevel.LATE_ELEMENTARY, _normalized(self.late_elementary)),
                (EducationLevel.SECONDARY, _normalized(self.secondary)),
            ),
        )

    def classify(self, class_code: object) -> EducationLevel:
        code = normalize_class_code(class_code)
        if not code:
            return EducationLevel.UNCLASSIFIED
        for level, members in self._buckets:
            if code in members:
                return level
        return EducationLevel.UNCLASSIFIED

    def filter_by_level(self, members: Iterable[M], level: Optional[EducationLevel]) -> list[M]:
        """Keep members in ``level``; ``None`` means all, unclassified included."""
        if level is None:
            return list(members)
        return [m for m in members if self.classify(m.class_code) == level]


_default = ClassLevelClassifier()


def classify(class_code: object) -> EducationLevel:
    return _default.classify(class_code)


def parse_level(value: Optional[str]) -> Optional[EducationLevel]:
    """Parse a level filter from user input; empty or ``all`` means no filter."""
    if not value or value.strip().lower() == "all":
        return None
    try:
        return EducationLevel(value.strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown education level: {value}") from None
