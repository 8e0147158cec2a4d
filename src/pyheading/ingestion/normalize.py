"""Normalization helpers.

Centralizes defensive parsing of producer payloads.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

# Placeholder strings GPS producers use for "no value".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip() in _SENTINELS:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def is_placeholder(value: Any) -> bool:
    """Return True if *value* means "not available" in a producer payload."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() in _SENTINELS:
        return True
    return isinstance(value, float) and math.isnan(value)


def unwrap_position(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a payload whose position may be nested under ``data``.

    Placeholder values are dropped so a missing coordinate is reported as
    missing rather than as an unparseable string.
    """

    merged = dict(payload)
    nested = payload.get("data")
    if isinstance(nested, Mapping):
        merged.update(nested)
    merged.pop("data", None)
    return {key: value for key, value in merged.items() if not is_placeholder(value)}
