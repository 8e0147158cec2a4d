"""pyheading - Live bearing and compass heading from successive GPS fixes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyheading")
except PackageNotFoundError:
    __version__ = "0+local"
from pyheading.config import HeadingConfig
from pyheading.exceptions import HeadingConfigError, HeadingError, InvalidFixError
from pyheading.geodesy import bearing, classify
from pyheading.models import CompassLabel, GeoPoint, PresentationState
from pyheading.presenter import HeadingPresenter
from pyheading.tracker import FixTracker

__all__ = [
    "__version__",
    "CompassLabel",
    "FixTracker",
    "GeoPoint",
    "HeadingConfig",
    "HeadingConfigError",
    "HeadingError",
    "HeadingPresenter",
    "InvalidFixError",
    "PresentationState",
    "bearing",
    "classify",
]
