from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify

from ..core.exceptions import DomainError, StoreError, ValidationError
from .datetime_utils import parse_iso_date, to_day_string

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(view):
    """Map domain and store failures to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return json_error(str(e), 400)
        except StoreError:
            logger.exception("store failure in %s", view.__name__)
            return json_error("Record store unavailable, try again", 503)

    return wrapper


def day_arg(value: Optional[str], *, field_name: str = "day") -> str:
    """Validate a YYYY-MM-DD query value; defaults to today."""
    if not value:
        return to_day_string(date.today())
    try:
        return to_day_string(parse_iso_date(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None


def int_arg(value: Optional[str], default: Optional[int], *, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer") from None
