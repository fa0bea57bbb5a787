from __future__ import annotations

import csv
import io

from ..core.enums import PresenceStatus
from .model import PresenceSnapshot

CSV_HEADER = ("Name", "Class", "Status", "Date")


def presence_rows(snapshot: PresenceSnapshot, day: str) -> list[tuple[str, str, str, str]]:
    """One row per member of the filtered roster: present first, then absent."""
    rows = [(m.name, m.class_code, PresenceStatus.PRESENT.value, day) for m in snapshot.present]
    rows += [(m.name, m.class_code, PresenceStatus.ABSENT.value, day) for m in snapshot.absent]
    return rows


def presence_csv(snapshot: PresenceSnapshot, day: str) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(presence_rows(snapshot, day))
    return out.getvalue()


def presence_csv_filename(day: str, class_filter: str | None) -> str:
    return f"presence_{day}_{class_filter or 'all'}.csv".replace(" ", "_")
