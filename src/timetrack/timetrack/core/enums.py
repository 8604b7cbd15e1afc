from __future__ import annotations

from enum import Enum


class EntryType(str, Enum):
    """Loại bản ghi thời gian: ngày làm việc hoặc ngày nghỉ phép."""

    WORK = "work"
    LEAVE = "leave"


class DayLabel(str, Enum):
    """Nhãn ngày tương đối dùng cho dự đoán ngắn hạn."""

    YESTERDAY = "Yesterday"
    TODAY = "Today"
    TOMORROW = "Tomorrow"
