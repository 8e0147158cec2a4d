"""Two-fix window feeding the heading presenter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyheading._redact import redact_fix
from pyheading.models.geo import GeoPoint
from pyheading.models.heading import PresentationState
from pyheading.presenter import HeadingPresenter

_logger = logging.getLogger(__name__)


class FixTracker:
    """Keeps the previous and current fix and forwards each new pair.

    Only the two most recent fixes are held; older positions are
    discarded as soon as a new fix arrives.
    """

    def __init__(self, presenter: HeadingPresenter) -> None:
        self._presenter = presenter
        self._previous: GeoPoint | None = None
        self._current: GeoPoint | None = None

    @property
    def presenter(self) -> HeadingPresenter:
        return self._presenter

    @property
    def previous(self) -> GeoPoint | None:
        return self._previous

    @property
    def current(self) -> GeoPoint | None:
        return self._current

    def push(self, fix: GeoPoint | None) -> PresentationState:
        """Record *fix* as the current position and update the presenter.

        ``None`` marks a lost fix: the presenter goes idle and ``previous``
        keeps the last known position, so the next fix resumes tracking
        from there.
        """
        if self._current is not None:
            self._previous = self._current
        self._current = fix
        return self._presenter.update(self._previous, self._current)

    def push_payload(self, payload: Mapping[str, Any] | None) -> PresentationState:
        """Parse a raw producer payload and push the resulting fix."""
        fix = GeoPoint.from_payload(payload)
        if fix is None and payload is not None:
            _logger.debug("Payload without position; treating as lost fix")
        return self.push(fix)

    def clear(self) -> None:
        """Forget both fixes and reset the presenter."""
        _logger.debug(
            "Clearing fixes (previous=%s, current=%s)",
            redact_fix(self._previous, self._presenter.config),
            redact_fix(self._current, self._presenter.config),
        )
        self._previous = None
        self._current = None
        self._presenter.reset()
