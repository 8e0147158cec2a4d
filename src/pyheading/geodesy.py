"""Great-circle bearing and 8-point compass classification.

Both functions are pure and total: they never raise for the inputs they
are typed for, and degenerate input (a missing fix, or two identical
fixes) yields north rather than an undefined angle.
"""

from __future__ import annotations

import math

from pyheading.models.compass import CompassLabel
from pyheading.models.geo import GeoPoint

SECTOR_WIDTH = 45.0

_LABELS: tuple[CompassLabel, ...] = tuple(CompassLabel)


def bearing(start: GeoPoint | None, end: GeoPoint | None) -> float:
    """Initial great-circle bearing from *start* to *end*.

    Uses the spherical forward-azimuth formula (no ellipsoid correction),
    which is accurate enough over the short hops between successive
    vehicle fixes.

    Parameters
    ----------
    start : GeoPoint or None
        Previous fix.
    end : GeoPoint or None
        Current fix.

    Returns
    -------
    float
        Degrees clockwise from true north in ``[0, 360)``.  ``0.0`` when
        either fix is missing or both fixes are the same position.
    """
    if start is None or end is None:
        return 0.0
    if start.lat == end.lat and start.lng == end.lng:
        return 0.0

    start_lat = math.radians(start.lat)
    end_lat = math.radians(end.lat)
    delta_lng = math.radians(end.lng) - math.radians(start.lng)

    y = math.sin(delta_lng) * math.cos(end_lat)
    x = math.cos(start_lat) * math.sin(end_lat) - math.sin(start_lat) * math.cos(end_lat) * math.cos(delta_lng)

    result = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # Float modulo can land on 360.0 for angles a hair below zero.
    return 0.0 if result >= 360.0 else result


def classify(degrees: float) -> CompassLabel:
    """Map a bearing to its 8-point compass label.

    Sector boundaries round half-up: 22.5° is ``NE``, 337.5° wraps to
    ``N``.  Python's built-in :func:`round` would send exact boundaries to
    the even index instead, so it is not used here.
    """
    index = math.floor(degrees / SECTOR_WIDTH + 0.5) % len(_LABELS)
    return _LABELS[index]
