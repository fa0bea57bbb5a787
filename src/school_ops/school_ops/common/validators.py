from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_day_string(value: str, field_name: str = "date") -> str:
    value = require_non_empty(value, field_name)
    if not _DAY_RE.match(value):
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")
    return value


def require_hhmm(value: str, field_name: str = "time") -> str:
    """Accept only zero-padded 24-hour HH:MM so string order equals time order."""
    value = require_non_empty(value, field_name)
    if not _HHMM_RE.match(value):
        raise ValidationError(f"{field_name} must be HH:MM (24h)")
    return value
