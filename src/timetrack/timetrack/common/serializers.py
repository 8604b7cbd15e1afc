"""JSON key style for API output.

The storage and UI collaborators speak camelCase (``clockIn``,
``totalOfficeHours``); domain objects keep snake_case attributes.
"""
from __future__ import annotations

from typing import Any


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def camel_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {camel_case(k): camel_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [camel_keys(v) for v in value]
    return value
