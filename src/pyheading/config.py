"""Presenter configuration for pyheading."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyheading.exceptions import HeadingConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise HeadingConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class HeadingConfig:
    """Heading presenter configuration.

    Parameters
    ----------
    validate_coordinates : bool
        Reject fixes whose latitude is outside ``[-90, 90]`` or whose
        longitude is outside ``[-180, 180]`` with
        :class:`~pyheading.exceptions.InvalidFixError`.  Off by default:
        the location producer is expected to deliver valid positions.
    log_coordinates : bool
        Include (rounded) coordinates in DEBUG logs.  When disabled,
        positions are logged as ``<redacted>``.
    coordinate_log_precision : int
        Number of decimals kept when ``log_coordinates`` is enabled.
        Three decimals is roughly 100 m.
    """

    validate_coordinates: bool = False
    log_coordinates: bool = False
    coordinate_log_precision: int = 3

    def __post_init__(self) -> None:
        if self.coordinate_log_precision < 0:
            raise HeadingConfigError("coordinate_log_precision must be >= 0")

    @classmethod
    def from_env(cls, **overrides: Any) -> HeadingConfig:
        """Create configuration from ``HEADING_*`` environment variables.

        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        HeadingConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "validate_coordinates" not in overrides:
            config_kwargs["validate_coordinates"] = _env_bool(env.get("HEADING_VALIDATE_COORDINATES"), False)

        if "log_coordinates" not in overrides:
            config_kwargs["log_coordinates"] = _env_bool(env.get("HEADING_LOG_COORDINATES"), False)

        precision_env = env.get("HEADING_COORDINATE_LOG_PRECISION")
        if precision_env is not None and "coordinate_log_precision" not in overrides:
            config_kwargs["coordinate_log_precision"] = _env_int("HEADING_COORDINATE_LOG_PRECISION", precision_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
