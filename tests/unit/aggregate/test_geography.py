"""Unit tests for geographic aggregation helpers."""

from __future__ import annotations

import math

from aggregate.geography import calculate_bounds, unique_locations
from core.region import default_region
from core.types import CasualtyRecord, GeographicData, MapBounds


def _casualty(location: str, area: str, latitude: float, longitude: float) -> CasualtyRecord:
    return CasualtyRecord(
        latitude=latitude,
        longitude=longitude,
        location=location,
        area=area,
        date="2023-10-10",
        killed=1,
        injured=0,
        children_killed=0,
        women_killed=0,
        source="MoH",
    )


def test_unique_locations_keeps_first_seen_coordinates() -> None:
    """Records sharing (location, area) should collapse to the first one."""
    records = [
        _casualty("Gaza City", "North Gaza", 31.5017, 34.4668),
        _casualty("Gaza City", "North Gaza", 31.52, 34.47),
    ]

    locations = unique_locations(records)

    assert locations == [GeographicData(31.5017, 34.4668, "Gaza City", "North Gaza")]


def test_unique_locations_distinguishes_areas() -> None:
    """Same location name in different areas should stay separate."""
    records = [
        _casualty("Camp", "North Gaza", 31.5, 34.4),
        _casualty("Camp", "South Gaza", 31.3, 34.3),
    ]

    assert len(unique_locations(records)) == 2


def test_unique_locations_returns_plain_geographic_data() -> None:
    """Results should drop dataset-specific fields."""
    locations = unique_locations([_casualty("Rafah", "South Gaza", 31.29, 34.25)])

    assert type(locations[0]) is GeographicData


def test_calculate_bounds_covers_all_records() -> None:
    """Bounds should be the min/max of each axis."""
    records = [
        _casualty("A", "X", 31.5, 34.46),
        _casualty("B", "X", 31.29, 34.25),
        _casualty("C", "X", 31.41, 34.35),
    ]

    bounds = calculate_bounds(records, default_region().default_bounds)

    assert bounds == MapBounds(north=31.5, south=31.29, east=34.46, west=34.25)


def test_calculate_bounds_uses_default_for_empty_input() -> None:
    """Empty input should return the default region box, not infinities."""
    bounds = calculate_bounds([], default_region().default_bounds)

    assert bounds == MapBounds(north=31.6, south=31.2, east=34.5, west=34.2)
    assert all(math.isfinite(value) for value in vars(bounds).values())
