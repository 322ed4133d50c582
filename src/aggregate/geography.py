"""Geographic aggregation helpers."""

from __future__ import annotations

from typing import Iterable, Sequence

from core.region import BoundingBox
from core.types import GeographicData, HasCoordinates, MapBounds


def unique_locations(records: Iterable[GeographicData]) -> list[GeographicData]:
    """Collapse records to one entry per (location, area).

    Args:
        records: Records sharing the geographic fields.

    Returns:
        Plain ``GeographicData`` values in first-seen order; the first
        record for a key supplies the coordinates.
    """
    locations: dict[tuple[str, str], GeographicData] = {}
    for record in records:
        key = (record.location, record.area)
        if key in locations:
            continue
        locations[key] = GeographicData(
            latitude=record.latitude,
            longitude=record.longitude,
            location=record.location,
            area=record.area,
        )
    return list(locations.values())


def calculate_bounds(records: Sequence[HasCoordinates], default: BoundingBox) -> MapBounds:
    """Compute the extent covering every record.

    Args:
        records: Records with coordinates.
        default: Extent returned when there are no records.

    Returns:
        North/south/east/west extent.
    """
    if not records:
        return default.to_map_bounds()
    latitudes = [record.latitude for record in records]
    longitudes = [record.longitude for record in records]
    return MapBounds(
        north=max(latitudes),
        south=min(latitudes),
        east=max(longitudes),
        west=min(longitudes),
    )
