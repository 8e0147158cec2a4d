"""Data models for pyheading."""

from pyheading.models._base import HeadingBaseModel
from pyheading.models.compass import CompassLabel
from pyheading.models.geo import LAT_RANGE, LNG_RANGE, GeoPoint
from pyheading.models.heading import PresentationState

__all__ = [
    "CompassLabel",
    "GeoPoint",
    "HeadingBaseModel",
    "LAT_RANGE",
    "LNG_RANGE",
    "PresentationState",
]
