from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..core.exceptions import MalformedEntryError


def require_record(value: Any, *, label: str, position: int) -> Mapping:
    if not isinstance(value, Mapping):
        raise MalformedEntryError(
            f"{label} #{position} is invalid. Expected an object.",
            label=label,
            position=position,
        )
    return value


def first_present(record: Mapping, *keys: str) -> Optional[Any]:
    """Return the first truthy value among ``keys`` (legacy field names last)."""
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []
