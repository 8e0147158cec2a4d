"""Heading presenter: keeps the published heading in step with the fix pair."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyheading._redact import redact_fix
from pyheading.config import HeadingConfig
from pyheading.exceptions import InvalidFixError
from pyheading.geodesy import bearing
from pyheading.models.geo import GeoPoint
from pyheading.models.heading import PresentationState

_logger = logging.getLogger(__name__)

StateListener = Callable[[PresentationState], None]


class HeadingPresenter:
    """Single writer of the :class:`PresentationState` shown to the user.

    The presenter is passive: whoever owns the fixes calls :meth:`update`
    each time the (previous, current) pair changes.  While both fixes are
    present the heading is recomputed and published on every call.  When
    either is missing the presenter goes idle and the last heading stays
    on screen.

    Usage::

        presenter = HeadingPresenter(on_state=render)
        presenter.update(previous_fix, current_fix)
    """

    def __init__(
        self,
        config: HeadingConfig | None = None,
        *,
        on_state: StateListener | None = None,
    ) -> None:
        self._config = config or HeadingConfig()
        self._state = PresentationState.initial()
        self._tracking = False
        # One entry per subscribe() call, keyed by an opaque token.
        self._listeners: dict[object, StateListener] = {}
        if on_state is not None:
            self._listeners[object()] = on_state

    @property
    def config(self) -> HeadingConfig:
        return self._config

    @property
    def state(self) -> PresentationState:
        """Most recently published heading (``0°``/``N`` before the first)."""
        return self._state

    @property
    def is_tracking(self) -> bool:
        """``True`` when the last update carried both fixes."""
        return self._tracking

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for every published state.

        Returns a callable that removes this registration again.  Calling
        it more than once is harmless.
        """
        token = object()
        self._listeners[token] = listener

        def _unsubscribe() -> None:
            self._listeners.pop(token, None)

        return _unsubscribe

    def update(self, previous: GeoPoint | None, current: GeoPoint | None) -> PresentationState:
        """Apply a new fix pair and return the resulting state.

        Raises
        ------
        InvalidFixError
            Only with ``validate_coordinates`` enabled, when a fix lies
            outside the valid latitude/longitude range.  State is left
            untouched.
        """
        if previous is None or current is None:
            if self._tracking:
                _logger.debug(
                    "Fix pair incomplete (previous=%s, current=%s); holding %s",
                    redact_fix(previous, self._config),
                    redact_fix(current, self._config),
                    self._state.label,
                )
            self._tracking = False
            return self._state

        if self._config.validate_coordinates:
            self._check_range(previous, "previous")
            self._check_range(current, "current")

        state = PresentationState.from_bearing(bearing(previous, current))
        self._state = state
        self._tracking = True
        _logger.debug(
            "Heading %s -> %s: %.1f° %s",
            redact_fix(previous, self._config),
            redact_fix(current, self._config),
            state.degrees,
            state.label,
        )
        self._publish(state)
        return state

    def reset(self) -> None:
        """Drop back to the initial ``0°``/``N`` heading without publishing."""
        self._state = PresentationState.initial()
        self._tracking = False

    def _check_range(self, fix: GeoPoint, role: str) -> None:
        if fix.in_range():
            return
        raise InvalidFixError(
            f"{role} fix out of range: lat={fix.lat}, lng={fix.lng}",
            role=role,
            lat=fix.lat,
            lng=fix.lng,
        )

    def _publish(self, state: PresentationState) -> None:
        for listener in list(self._listeners.values()):
            try:
                listener(state)
            except Exception:
                _logger.exception("Heading listener %r failed", listener)
