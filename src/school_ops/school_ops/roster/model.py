from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import WorkPeriod


@dataclass(frozen=True)
class RosterMember:
    """Domain entity: anyone eligible for presence computations.

    Owned by the external store; the core only reads it.
    """

    member_id: str
    name: str
    class_code: str
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class Student(RosterMember):
    is_aee: bool = False
    disorder: Optional[str] = None
    report_url: Optional[str] = None


@dataclass(frozen=True)
class StaffMember(RosterMember):
    """Staff are partitioned by work period, carried in ``class_code``."""

    job_role: str = ""
    active: bool = True
    work_period: WorkPeriod = WorkPeriod.FULL
