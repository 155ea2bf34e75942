"""Shared utility functions."""
from __future__ import annotations

import json
from typing import Any


def decode_object(raw: str | bytes | None) -> dict[str, Any] | None:
    """Decode a stored JSON document; anything but a non-empty object is None."""
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict) or not data:
        return None
    return data


def parse_csv(value: str | None) -> list[str]:
    """Split a comma-separated option into trimmed, non-empty parts."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
