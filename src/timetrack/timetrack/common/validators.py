from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_iso_date(value: Optional[str], field_name: str) -> date:
    raw = require_non_empty(value, field_name)
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {raw!r}") from None


def optional_hhmm(value: Optional[str], field_name: str) -> Optional[str]:
    """Accept None/empty as missing; otherwise require a zero-padded HH:mm time."""
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _HHMM.match(value):
        raise ValidationError(f"{field_name} must be an HH:mm time, got {value!r}")
    return value


def require_hhmm(value: Optional[str], field_name: str) -> str:
    parsed = optional_hhmm(value, field_name)
    if parsed is None:
        raise ValidationError(f"{field_name} is required")
    return parsed


def require_int_range(value, field_name: str, *, minimum: int, maximum: Optional[int] = None) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be <= {maximum}")
    return number


def optional_iso_datetime(value: Optional[str], field_name: str) -> Optional[datetime]:
    """Parse an ISO-8601 datetime ("2026-10-19T08:30"), or None when absent."""
    if value is None or value == "":
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO datetime, got {value!r}") from None
