"""Custom exception hierarchy for pyheading."""

from __future__ import annotations


class HeadingError(Exception):
    """Base exception for all pyheading errors."""


class HeadingConfigError(HeadingError):
    """Invalid or missing configuration."""


class InvalidFixError(HeadingError, ValueError):
    """A fix carries coordinates outside the valid geographic range.

    Only raised when coordinate validation is enabled on the presenter
    (``HeadingConfig.validate_coordinates``).  By default positions are
    trusted as delivered by the location producer.
    """

    def __init__(
        self,
        message: str,
        *,
        role: str = "",
        lat: float | None = None,
        lng: float | None = None,
    ) -> None:
        self.role = role
        self.lat = lat
        self.lng = lng
        super().__init__(message)
