from __future__ import annotations

import pytest

from pyheading.models.compass import CompassLabel
from pyheading.models.geo import GeoPoint
from pyheading.models.heading import PresentationState
from pyheading.presenter import HeadingPresenter
from pyheading.tracker import FixTracker


def _tracker() -> tuple[FixTracker, list[PresentationState]]:
    published: list[PresentationState] = []
    return FixTracker(HeadingPresenter(on_state=published.append)), published


def test_first_fix_alone_does_not_publish() -> None:
    tracker, published = _tracker()

    state = tracker.push(GeoPoint(lat=0.0, lng=0.0))

    assert tracker.previous is None
    assert tracker.current == GeoPoint(lat=0.0, lng=0.0)
    assert state == PresentationState.initial()
    assert published == []


def test_window_shifts_and_keeps_two_fixes() -> None:
    tracker, published = _tracker()
    a = GeoPoint(lat=0.0, lng=0.0)
    b = GeoPoint(lat=0.0, lng=0.001)
    c = GeoPoint(lat=0.001, lng=0.001)

    tracker.push(a)
    tracker.push(b)
    tracker.push(c)

    assert tracker.previous == b
    assert tracker.current == c
    assert [state.label for state in published] == [CompassLabel.E, CompassLabel.N]


def test_lost_fix_goes_idle_and_holds_heading() -> None:
    tracker, published = _tracker()
    last_known = GeoPoint(lat=0.0, lng=0.001)
    tracker.push(GeoPoint(lat=0.0, lng=0.0))
    tracker.push(last_known)

    state = tracker.push(None)

    assert state.label == CompassLabel.E
    assert not tracker.presenter.is_tracking
    assert tracker.previous == last_known
    assert tracker.current is None
    assert len(published) == 1


def test_fix_after_signal_loss_resumes_from_last_known_position() -> None:
    tracker, published = _tracker()
    last_known = GeoPoint(lat=0.0, lng=0.001)
    tracker.push(GeoPoint(lat=0.0, lng=0.0))
    tracker.push(last_known)
    tracker.push(None)
    tracker.push(None)

    state = tracker.push(GeoPoint(lat=0.001, lng=0.001))

    assert tracker.previous == last_known
    assert tracker.presenter.is_tracking
    assert state.label == CompassLabel.N
    assert len(published) == 2


def test_push_payload_parses_aliases() -> None:
    tracker, published = _tracker()

    tracker.push_payload({"latitude": "0", "longitude": "0"})
    tracker.push_payload({"data": {"gpsLatitude": "0", "gpsLongitude": "0.001"}})

    assert tracker.current == GeoPoint(lat=0.0, lng=0.001)
    assert published[-1].degrees == pytest.approx(90.0)


def test_push_payload_without_position_is_lost_fix() -> None:
    tracker, _ = _tracker()
    tracker.push_payload({"lat": 1.0, "lng": 1.0})

    tracker.push_payload({"lat": "--", "lng": "--", "speed": 0})

    assert tracker.previous == GeoPoint(lat=1.0, lng=1.0)
    assert tracker.current is None


def test_clear_forgets_fixes_and_resets_presenter() -> None:
    tracker, _ = _tracker()
    tracker.push(GeoPoint(lat=0.0, lng=0.0))
    tracker.push(GeoPoint(lat=0.0, lng=0.001))

    tracker.clear()

    assert tracker.previous is None
    assert tracker.current is None
    assert tracker.presenter.state == PresentationState.initial()
