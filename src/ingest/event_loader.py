"""Loader for the displacement events export.

The events file carries a metadata line directly after the header,
which is dropped before parsing. Numeric cells that cannot be parsed
become 0 so the row is later dropped by the validity filter instead of
aborting the whole file.
"""

from __future__ import annotations

from core.config import ReliefMapConfig
from core.constants import (
    DISPLACEMENT_EVENT_NUMERIC_COLUMNS,
    DISPLACEMENT_EVENTS_FILE_NAME,
    EVENTS_METADATA_LINE_INDEX,
)
from core.types import DisplacementEvent, LoadResult
from ingest.csv_parser import CsvRow, parse_csv_rows
from ingest.dataset_loaders import load_dataset, require_columns

_REQUIRED_EVENT_COLUMNS = (
    "country",
    "latitude",
    "longitude",
    "figure",
    "displacement_date",
    "locations_name",
)


def load_displacement_events(config: ReliefMapConfig) -> LoadResult[DisplacementEvent]:
    """Load ``event_data_pse.csv`` from the configured data root."""
    return load_dataset(
        "events",
        config.dataset_path(DISPLACEMENT_EVENTS_FILE_NAME),
        parse_event_rows,
        event_from_row,
    )


def parse_event_rows(csv_text: str) -> list[CsvRow]:
    """Parse events CSV text, skipping the metadata line.

    Coordinates are not checked against the region box because the
    export covers the whole country.
    """
    return parse_csv_rows(
        strip_metadata_line(csv_text),
        DISPLACEMENT_EVENT_NUMERIC_COLUMNS,
        numeric_policy="zero",
    )


def strip_metadata_line(csv_text: str) -> str:
    """Drop the line at the metadata index, keeping the header and data.

    Args:
        csv_text: Raw events file content.

    Returns:
        CSV text with only the header and data lines.
    """
    lines = csv_text.split("\n")
    kept_lines = lines[:EVENTS_METADATA_LINE_INDEX] + lines[EVENTS_METADATA_LINE_INDEX + 1 :]
    return "\n".join(kept_lines)


def event_from_row(row: CsvRow, row_number: int) -> DisplacementEvent:
    """Map a parsed events row to a record.

    Optional text columns absent from the header become empty strings.
    """
    require_columns(row, _REQUIRED_EVENT_COLUMNS, row_number)
    return DisplacementEvent(
        id=_text(row, "id"),
        country=_text(row, "country"),
        iso3=_text(row, "iso3"),
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        figure=_number(row, "figure"),
        displacement_date=_text(row, "displacement_date"),
        displacement_start_date=_text(row, "displacement_start_date"),
        displacement_end_date=_text(row, "displacement_end_date"),
        year=int(row.get("year", 0)),
        event_name=_text(row, "event_name"),
        locations_name=_text(row, "locations_name"),
        description=_text(row, "description"),
        source_url=_text(row, "source_url"),
        combined_type=_text(row, "combined_type"),
        sources=_text(row, "sources"),
    )


def _text(row: CsvRow, column: str) -> str:
    return str(row.get(column, ""))


def _number(row: CsvRow, column: str) -> float:
    value = row[column]
    return value if isinstance(value, (int, float)) else 0
