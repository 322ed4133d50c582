"""Coordinate validation against the region's validity box."""

from __future__ import annotations

from core.region import BoundingBox


def validate_coordinates(latitude: float, longitude: float, box: BoundingBox) -> bool:
    """Return whether a coordinate pair lies inside the validity box.

    Args:
        latitude: Decimal degrees north.
        longitude: Decimal degrees east.
        box: Inclusive region box.

    Returns:
        True when both values fall within the box edges.
    """
    return box.contains(latitude, longitude)
