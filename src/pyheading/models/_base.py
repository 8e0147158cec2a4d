"""Base model for pyheading value types.

Every value type inherits from :class:`HeadingBaseModel`, which makes it
immutable (``frozen=True``) so a published snapshot can be shared with
any number of readers without copying.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HeadingBaseModel(BaseModel):
    """Base for immutable pyheading models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
