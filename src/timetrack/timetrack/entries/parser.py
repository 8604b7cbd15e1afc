"""Build domain entries from JSON payloads.

The storage collaborator sends camelCase keys (``clockIn``, ``breakEnd``);
snake_case keys are accepted as well. Validation happens here, at the edge, so
the forecast engine can assume well-formed ``HH:mm`` values.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..common.validators import optional_hhmm, require_hhmm, require_iso_date
from ..core.enums import EntryType
from ..core.exceptions import ValidationError
from .model import TimeEntry, WorkSession


def _pick(data: Mapping[str, Any], camel: str, snake: str):
    if camel in data:
        return data[camel]
    return data.get(snake)


def session_from_payload(data: Mapping[str, Any], *, default_id: str) -> WorkSession:
    if not isinstance(data, Mapping):
        raise ValidationError("session must be an object")

    prefix = f"session {default_id}"
    return WorkSession(
        session_id=str(data.get("id") or default_id),
        clock_in=require_hhmm(_pick(data, "clockIn", "clock_in"), f"{prefix} clockIn"),
        clock_out=optional_hhmm(_pick(data, "clockOut", "clock_out"), f"{prefix} clockOut"),
        break_start=optional_hhmm(_pick(data, "breakStart", "break_start"), f"{prefix} breakStart"),
        break_end=optional_hhmm(_pick(data, "breakEnd", "break_end"), f"{prefix} breakEnd"),
    )


def entry_from_payload(data: Mapping[str, Any]) -> TimeEntry:
    if not isinstance(data, Mapping):
        raise ValidationError("entry must be an object")

    work_date = require_iso_date(data.get("date"), "date")
    entry_id = str(data.get("id") or work_date.isoformat())

    raw_type = data.get("type") or EntryType.WORK.value
    try:
        entry_type = EntryType(raw_type)
    except ValueError:
        raise ValidationError(f"entry {entry_id}: unknown type {raw_type!r}") from None

    raw_sessions = data.get("sessions") or []
    if not isinstance(raw_sessions, list):
        raise ValidationError(f"entry {entry_id}: sessions must be a list")

    sessions = tuple(
        session_from_payload(s, default_id=f"{entry_id}-{idx}") for idx, s in enumerate(raw_sessions)
    )
    return TimeEntry(
        entry_id=entry_id,
        work_date=work_date,
        entry_type=entry_type,
        sessions=sessions,
        notes=str(data.get("notes") or ""),
    )


def entries_from_payload(items: Iterable[Mapping[str, Any]] | None) -> list[TimeEntry]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValidationError("entries must be a list")
    return [entry_from_payload(item) for item in items]
