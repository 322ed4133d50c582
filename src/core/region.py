"""Target region model.

This module describes the geographic region a deployment serves:
its validity box, default map extent, and the place-name gazetteer.
Loaders and aggregators receive a ``RegionConfig`` instead of reading
module-level lookup tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from core.constants import (
    DEFAULT_FALLBACK_LOCATION,
    DEFAULT_GAZETTEER,
    DEFAULT_MAP_BOUNDS,
    DEFAULT_REGION_NAME,
    DEFAULT_SUBREGION_TOKEN,
    DEFAULT_TARGET_COUNTRY,
    DEFAULT_VALID_BOX,
)
from core.types import MapBounds


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive latitude/longitude rectangle."""

    south: float
    north: float
    west: float
    east: float

    def contains(self, latitude: float, longitude: float) -> bool:
        """Return whether a point lies inside the box, edges included."""
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def to_map_bounds(self) -> MapBounds:
        """Return the box as a map extent."""
        return MapBounds(north=self.north, south=self.south, east=self.east, west=self.west)


@dataclass(frozen=True)
class GazetteerPlace:
    """Known place with its coordinates and administrative area."""

    latitude: float
    longitude: float
    area: str


@dataclass(frozen=True)
class RegionConfig:
    """Validated region description.

    Attributes:
        name: Region identifier used in logs.
        valid_box: Coordinates outside this box are reported as suspicious.
        default_bounds: Map extent used when there is nothing to frame.
        target_country: Country name displacement events must match.
        subregion_token: Lowercase token marking the primary sub-region.
        gazetteer: Place name to coordinates lookup.
        fallback_location: Gazetteer key used when no place matches.
    """

    name: str
    valid_box: BoundingBox
    default_bounds: BoundingBox
    target_country: str
    subregion_token: str
    gazetteer: Mapping[str, GazetteerPlace] = field(default_factory=dict)
    fallback_location: str = DEFAULT_FALLBACK_LOCATION


def default_region() -> RegionConfig:
    """Build the built-in Gaza Strip region.

    Returns:
        Region config with the default box, bounds, and gazetteer.
    """
    gazetteer = {
        name: GazetteerPlace(latitude=lat, longitude=lng, area=area)
        for name, (lat, lng, area) in DEFAULT_GAZETTEER.items()
    }
    return RegionConfig(
        name=DEFAULT_REGION_NAME,
        valid_box=BoundingBox(*DEFAULT_VALID_BOX),
        default_bounds=BoundingBox(*DEFAULT_MAP_BOUNDS),
        target_country=DEFAULT_TARGET_COUNTRY,
        subregion_token=DEFAULT_SUBREGION_TOKEN,
        gazetteer=gazetteer,
        fallback_location=DEFAULT_FALLBACK_LOCATION,
    )
