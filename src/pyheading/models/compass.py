"""8-point compass labels."""

from __future__ import annotations

from enum import StrEnum


class CompassLabel(StrEnum):
    """Coarse compass direction, declared clockwise starting at north.

    Each label covers a 45° sector centred on its direction.
    """

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @property
    def center(self) -> float:
        """Centre of the sector in degrees clockwise from north."""
        return list(CompassLabel).index(self) * 45.0
