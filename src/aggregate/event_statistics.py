"""Displacement event filtering and summary statistics.

This module selects the events worth mapping for a region, splits them
into the primary sub-region and the rest, and computes the summary
figures shown next to the map.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

import pandas as pd

from core.logging_config import get_logger
from core.region import RegionConfig
from core.types import DateRange, DisplacementEvent, EventSummary

_LOGGER = get_logger(__name__)


def is_valid_event(event: DisplacementEvent, target_country: str) -> bool:
    """Return whether an event is mappable and belongs to the target country."""
    return bool(
        event.latitude
        and event.longitude
        and event.figure > 0
        and event.displacement_date
        and event.country == target_country
    )


def valid_events(
    events: Iterable[DisplacementEvent],
    region: RegionConfig,
) -> list[DisplacementEvent]:
    """Filter events down to the ones that can be mapped for the region.

    Args:
        events: Parsed events in file order.
        region: Region carrying the target country.

    Returns:
        Valid events in file order.
    """
    return [event for event in events if is_valid_event(event, region.target_country)]


def in_subregion(event: DisplacementEvent, token: str) -> bool:
    """Return whether the event's location names mention the sub-region token."""
    return token.lower() in event.locations_name.lower()


def partition_events(
    events: Iterable[DisplacementEvent],
    token: str,
) -> tuple[list[DisplacementEvent], list[DisplacementEvent]]:
    """Split events by sub-region membership.

    Args:
        events: Events to split.
        token: Case-insensitive substring identifying the sub-region.

    Returns:
        ``(inside, outside)`` lists, each in input order.
    """
    inside: list[DisplacementEvent] = []
    outside: list[DisplacementEvent] = []
    for event in events:
        if in_subregion(event, token):
            inside.append(event)
        else:
            outside.append(event)
    return inside, outside


def parse_event_date(raw_value: str) -> datetime | None:
    """Parse a displacement date.

    Args:
        raw_value: Date text from the export.

    Returns:
        UTC datetime, or None when the text is not a recognizable date.
    """
    if not raw_value.strip():
        return None
    parsed = pd.to_datetime(raw_value, errors="coerce", utc=True)
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def summarize_events(events: Sequence[DisplacementEvent], region: RegionConfig) -> EventSummary:
    """Compute summary statistics over valid events.

    Args:
        events: Events already passed through ``valid_events``.
        region: Region carrying the sub-region token.

    Returns:
        Totals, per-partition sums and counts, date range, largest figure,
        and most recent event. Unparseable dates are left out of the date
        range and rank as oldest when picking the most recent event.
    """
    inside, outside = partition_events(events, region.subregion_token)
    parsed_dates = [parse_event_date(event.displacement_date) for event in events]
    summary = EventSummary(
        total_events=len(events),
        total_displaced=sum(event.figure for event in events),
        gaza_displaced=sum(event.figure for event in inside),
        west_bank_displaced=sum(event.figure for event in outside),
        gaza_events_count=len(inside),
        west_bank_events_count=len(outside),
        date_range=_date_range(parsed_dates),
        largest_displacement=max((event.figure for event in events), default=None),
        most_recent_event=_most_recent_event(events, parsed_dates),
    )
    _LOGGER.info(
        "events_summarized",
        region=region.name,
        total_events=summary.total_events,
        total_displaced=summary.total_displaced,
    )
    return summary


def distinct_values(events: Iterable[DisplacementEvent], field_name: str) -> list[str]:
    """Return distinct values of a text field in first-seen order."""
    seen: dict[str, None] = {}
    for event in events:
        seen.setdefault(getattr(event, field_name), None)
    return list(seen)


def _date_range(parsed_dates: Iterable[datetime | None]) -> DateRange | None:
    known_dates = [value for value in parsed_dates if value is not None]
    if not known_dates:
        return None
    return DateRange(
        start=min(known_dates).date().isoformat(),
        end=max(known_dates).date().isoformat(),
    )


def _most_recent_event(
    events: Sequence[DisplacementEvent],
    parsed_dates: Sequence[datetime | None],
) -> DisplacementEvent | None:
    most_recent: DisplacementEvent | None = None
    most_recent_date: datetime | None = None
    for event, parsed_date in zip(events, parsed_dates):
        if most_recent is None:
            most_recent, most_recent_date = event, parsed_date
            continue
        if parsed_date is None:
            continue
        if most_recent_date is None or parsed_date > most_recent_date:
            most_recent, most_recent_date = event, parsed_date
    return most_recent
