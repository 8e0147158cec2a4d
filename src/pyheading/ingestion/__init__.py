"""Ingestion layer.

Helpers that turn fixes delivered by a location producer (raw GPS
payloads) into typed :class:`~pyheading.models.geo.GeoPoint` values.
"""

__all__: list[str] = []
