from __future__ import annotations

from pyheading._redact import redact_fix
from pyheading.config import HeadingConfig
from pyheading.models.geo import GeoPoint


def test_redact_fix_hides_position_by_default() -> None:
    assert redact_fix(GeoPoint(lat=52.37, lng=4.89), HeadingConfig()) == "<redacted>"


def test_redact_fix_rounds_when_enabled() -> None:
    config = HeadingConfig(log_coordinates=True, coordinate_log_precision=1)
    assert redact_fix(GeoPoint(lat=52.3712, lng=4.8952), config) == "(52.4, 4.9)"


def test_redact_fix_none_and_unknown_objects() -> None:
    config = HeadingConfig(log_coordinates=True)
    assert redact_fix(None, config) == "None"
    assert redact_fix({"lat": 1.0, "lng": 2.0}, config) == "<redacted>"
