"""Published heading snapshot."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import model_validator

from pyheading.models._base import HeadingBaseModel
from pyheading.models.compass import CompassLabel


class PresentationState(HeadingBaseModel):
    """Heading as shown to the user: needle angle plus compass label.

    ``label`` is always the sector of ``degrees``; build instances with
    :meth:`from_bearing` (or :meth:`initial`) rather than setting the two
    fields independently.  A mismatched pair fails validation.
    """

    degrees: float = 0.0
    label: CompassLabel = CompassLabel.N

    @model_validator(mode="after")
    def _label_matches_degrees(self) -> PresentationState:
        # Imported lazily: pyheading.geodesy depends on this package.
        from pyheading.geodesy import classify

        expected = classify(self.degrees)
        if self.label != expected:
            raise ValueError(f"label {self.label} does not match {self.degrees}° (expected {expected})")
        return self

    @classmethod
    def initial(cls) -> PresentationState:
        return cls()

    @classmethod
    def from_bearing(cls, degrees: float) -> PresentationState:
        from pyheading.geodesy import classify

        return cls(degrees=degrees, label=classify(degrees))

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> PresentationState:
        """Copy the state, re-deriving ``label`` when ``degrees`` changes.

        Pydantic's default copy skips validation; an update that sets only
        ``degrees`` is relabelled, and an explicit mismatched ``label``
        fails validation like the constructor does.
        """
        if not update:
            return super().model_copy(deep=deep)
        merged: dict[str, Any] = {**self.model_dump(), **update}
        if "label" not in update:
            return type(self).from_bearing(merged["degrees"])
        return type(self).model_validate(merged)

    @property
    def rounded_degrees(self) -> int:
        """Whole degrees for display, rounded half-up, in ``[0, 360)``."""
        return math.floor(self.degrees + 0.5) % 360

    @property
    def display_text(self) -> str:
        return f"{self.rounded_degrees}°"

    @property
    def needle_rotation(self) -> str:
        """Clockwise rotation to apply to a north-pointing needle."""
        return f"rotate({self.degrees}deg)"
