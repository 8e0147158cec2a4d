"""Geographic fix model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator, model_validator

from pyheading.ingestion.normalize import safe_float, unwrap_position
from pyheading.models._base import HeadingBaseModel

_logger = logging.getLogger(__name__)

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


class GeoPoint(HeadingBaseModel):
    """A single geographic position sample, in degrees.

    Accepts the key spellings GPS producers commonly use, and positions
    nested under a ``data`` key::

        GeoPoint.model_validate({"data": {"latitude": "52.37", "lon": 4.89}})

    Range is not checked here; see :meth:`in_range`.

    Parameters
    ----------
    lat : float
        Latitude in degrees.
    lng : float
        Longitude in degrees.
    """

    lat: float = Field(validation_alias=AliasChoices("lat", "latitude", "gpsLatitude"))
    lng: float = Field(validation_alias=AliasChoices("lng", "lon", "longitude", "gpsLongitude"))

    @model_validator(mode="before")
    @classmethod
    def _unwrap_payload(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        return unwrap_position(values)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coerce_degrees(cls, value: Any) -> float:
        parsed = safe_float(value)
        if parsed is None:
            raise ValueError(f"not a finite number: {value!r}")
        return parsed

    @classmethod
    def from_payload(cls, payload: Any) -> GeoPoint | None:
        """Parse a producer payload, returning ``None`` when it has no usable position."""
        if payload is None or isinstance(payload, GeoPoint):
            return payload
        if not isinstance(payload, Mapping):
            _logger.debug("Ignoring non-mapping fix payload of type %s", type(payload).__name__)
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            _logger.debug("Fix payload has no usable position (%d error(s))", exc.error_count())
            return None

    def in_range(self) -> bool:
        """Return ``True`` when both coordinates lie in their valid ranges."""
        return LAT_RANGE[0] <= self.lat <= LAT_RANGE[1] and LNG_RANGE[0] <= self.lng <= LNG_RANGE[1]
