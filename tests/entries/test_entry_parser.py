from __future__ import annotations

from datetime import date

import pytest

from src.timetrack.timetrack.core.enums import EntryType
from src.timetrack.timetrack.core.exceptions import ValidationError
from src.timetrack.timetrack.entries.parser import entries_from_payload


def test_parses_camel_case_payload():
    entries = entries_from_payload(
        [
            {
                "id": "abc",
                "date": "2026-02-02",
                "type": "work",
                "sessions": [
                    {"id": "s1", "clockIn": "09:00", "clockOut": "17:00", "breakStart": "12:00", "breakEnd": None},
                ],
                "notes": "standup",
            },
            {"id": "lv", "date": "2026-02-03", "type": "leave", "sessions": [], "notes": ""},
        ]
    )

    work, leave = entries
    assert work.work_date == date(2026, 2, 2)
    assert work.entry_type == EntryType.WORK
    assert work.sessions[0].clock_out == "17:00"
    assert work.sessions[0].break_start == "12:00"
    assert work.sessions[0].break_end is None
    assert work.notes == "standup"
    assert leave.entry_type == EntryType.LEAVE
    assert leave.sessions == ()


def test_accepts_snake_case_and_fills_ids():
    (entry,) = entries_from_payload([{"date": "2026-02-02", "sessions": [{"clock_in": "08:00", "clock_out": ""}]}])

    assert entry.entry_id == "2026-02-02"
    assert entry.sessions[0].session_id == "2026-02-02-0"
    assert entry.sessions[0].clock_out is None


def test_none_is_empty():
    assert entries_from_payload(None) == []


@pytest.mark.parametrize(
    "payload",
    [
        [{"date": "02/02/2026", "sessions": []}],
        [{"date": "2026-02-02", "sessions": [{"clockIn": "9:00"}]}],
        [{"date": "2026-02-02", "sessions": [{"clockIn": "09:00", "clockOut": "24:10"}]}],
        [{"date": "2026-02-02", "sessions": [{"clockOut": "17:00"}]}],
        [{"date": "2026-02-02", "type": "holiday"}],
        [{"date": "2026-02-02", "sessions": "09:00-17:00"}],
        {"date": "2026-02-02"},
    ],
)
def test_rejects_malformed_payload(payload):
    with pytest.raises(ValidationError):
        entries_from_payload(payload)
