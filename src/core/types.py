"""Shared typed models.

This module defines immutable record models used by the ingest,
aggregation, and serving layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, Protocol, TypeVar, Union

DatasetName = Literal["casualties", "infrastructure", "displacement", "events"]
NumericPolicy = Literal["strict", "zero"]


class HasCoordinates(Protocol):
    """Anything carrying a latitude/longitude pair."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True)
class GeographicData:
    """Location fields shared by every map-placed record.

    Attributes:
        latitude: Decimal degrees north.
        longitude: Decimal degrees east.
        location: Human-readable place name.
        area: Administrative area the place belongs to.
    """

    latitude: float
    longitude: float
    location: str
    area: str


@dataclass(frozen=True)
class CasualtyRecord(GeographicData):
    """One row of ``casualties.csv``."""

    date: str
    killed: int
    injured: int
    children_killed: int
    women_killed: int
    source: str


@dataclass(frozen=True)
class InfrastructureRecord(GeographicData):
    """One row of ``infrastructure.csv``."""

    date: str
    hospitals_damaged: int
    schools_damaged: int
    homes_destroyed: int
    type: str


@dataclass(frozen=True)
class DisplacementRecord(GeographicData):
    """One row of ``displacement.csv``."""

    date: str
    people_displaced: int
    displacement_centers: int
    capacity: int


@dataclass(frozen=True)
class DisplacementEvent:
    """One row of the IDMC-style displacement event export.

    Attributes:
        id: Source event identifier.
        country: Country name, compared against the region target country.
        iso3: ISO 3166 alpha-3 country code.
        latitude: Decimal degrees north, 0 when missing.
        longitude: Decimal degrees east, 0 when missing.
        figure: Number of people displaced, 0 when missing.
        displacement_date: Primary event date as written in the source.
        displacement_start_date: Start of the displacement window.
        displacement_end_date: End of the displacement window.
        year: Reporting year, 0 when missing.
        event_name: Short event title.
        locations_name: Free-text location names for the event.
        description: Long event description.
        source_url: Link to the reporting source.
        combined_type: Event type label.
        sources: Reporting organisations.
    """

    id: str
    country: str
    iso3: str
    latitude: float
    longitude: float
    figure: float
    displacement_date: str
    displacement_start_date: str
    displacement_end_date: str
    year: int
    event_name: str
    locations_name: str
    description: str
    source_url: str
    combined_type: str
    sources: str


@dataclass(frozen=True)
class MapBounds:
    """Rectangular map extent in decimal degrees."""

    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class DateRange:
    """Inclusive ISO date range."""

    start: str
    end: str


@dataclass(frozen=True)
class EventSummary:
    """Summary statistics over valid displacement events.

    Attributes:
        total_events: Number of valid events.
        total_displaced: Sum of figures across all valid events.
        gaza_displaced: Sum of figures inside the target sub-region.
        west_bank_displaced: Sum of figures outside the target sub-region.
        gaza_events_count: Event count inside the target sub-region.
        west_bank_events_count: Event count outside the target sub-region.
        date_range: Earliest and latest parseable displacement dates.
        largest_displacement: Largest single figure, if any events.
        most_recent_event: Event with the latest displacement date.
    """

    total_events: int
    total_displaced: float
    gaza_displaced: float
    west_bank_displaced: float
    gaza_events_count: int
    west_bank_events_count: int
    date_range: DateRange | None
    largest_displacement: float | None
    most_recent_event: DisplacementEvent | None


RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class LoadSuccess(Generic[RecordT]):
    """Loader outcome carrying parsed records."""

    dataset: DatasetName
    records: tuple[RecordT, ...]

    @property
    def ok(self) -> Literal[True]:
        """Tag for successful loads."""
        return True


@dataclass(frozen=True)
class LoadFailure:
    """Loader outcome carrying a caller-safe error message."""

    dataset: DatasetName
    error: str

    @property
    def ok(self) -> Literal[False]:
        """Tag for failed loads."""
        return False


LoadResult = Union[LoadSuccess[RecordT], LoadFailure]
