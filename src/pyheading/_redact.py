"""Helpers for safe debug logging.

Fixes describe where a vehicle is.  This module keeps raw positions out
of DEBUG logs unless the caller opted in, and then only at a reduced
precision.
"""

from __future__ import annotations

from typing import Any

from pyheading.config import HeadingConfig

_REDACTED = "<redacted>"


def redact_fix(fix: Any, config: HeadingConfig) -> str:
    """Return a log-safe representation of *fix*."""
    if fix is None:
        return "None"
    if not config.log_coordinates:
        return _REDACTED

    lat = getattr(fix, "lat", None)
    lng = getattr(fix, "lng", None)
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        # Never dump unknown objects; they may embed the full payload.
        return _REDACTED

    precision = config.coordinate_log_precision
    return f"({round(lat, precision)}, {round(lng, precision)})"
