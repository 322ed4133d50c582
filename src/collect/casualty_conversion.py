"""Convert humanitarian CSV exports into the casualties format.

Exports from humanitarian data portals use arbitrary headers. This module
detects what an export describes, pulls date, counts, and location out of
each row by keyword, and places the row with the region gazetteer.

Row policy: rows without a parseable date are skipped, and counts that
cannot be read default to 0. Only rows with at least one killed or
injured person are emitted.
"""

from __future__ import annotations

import io
from pathlib import Path
import re
from typing import Iterable, Literal, Mapping

import pandas as pd

from core.constants import (
    CASUALTY_CSV_COLUMNS,
    CASUALTY_HEADER_KEYWORDS,
    DATE_FIELDS,
    DISPLACEMENT_HEADER_KEYWORDS,
    INJURED_KEYWORDS,
    KILLED_KEYWORDS,
    LOCATION_FIELDS,
)
from core.errors import ReliefMapConversionError
from core.logging_config import get_logger
from core.region import GazetteerPlace, RegionConfig

DatasetKind = Literal["casualties", "displacement"]

_LOGGER = get_logger(__name__)
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def detect_dataset_kind(headers: Iterable[str]) -> DatasetKind | None:
    """Guess the dataset an export describes from its headers.

    Args:
        headers: Column names, any case.

    Returns:
        ``casualties``, ``displacement``, or None when neither matches.
    """
    normalized = [header.strip().lower() for header in headers]
    if _any_header_contains(normalized, CASUALTY_HEADER_KEYWORDS):
        return "casualties"
    if _any_header_contains(normalized, DISPLACEMENT_HEADER_KEYWORDS):
        return "displacement"
    return None


def resolve_place(location: str, region: RegionConfig) -> GazetteerPlace:
    """Look up a place in the region gazetteer.

    Exact names win, then a case-insensitive containment match in either
    direction, then the region's fallback location.

    Raises:
        ReliefMapConversionError: If the region has no gazetteer entries.
    """
    gazetteer = region.gazetteer
    if location in gazetteer:
        return gazetteer[location]
    lowered = location.lower()
    for name, place in gazetteer.items():
        if lowered in name.lower() or name.lower() in lowered:
            return place
    if region.fallback_location not in gazetteer:
        raise ReliefMapConversionError(
            f"Region '{region.name}' has no gazetteer entry for '{location}' and no fallback. "
            "Add places to the region file."
        )
    return gazetteer[region.fallback_location]


def extract_location(row: Mapping[str, str], region: RegionConfig) -> str:
    """Return the first location-like field mentioning the sub-region."""
    for field_name in LOCATION_FIELDS:
        value = row.get(field_name, "")
        if value and region.subregion_token in value.lower():
            return value
    return region.fallback_location


def extract_number(row: Mapping[str, str], keywords: Iterable[str]) -> int:
    """Return the first integer found in a column whose name has a keyword."""
    keyword_list = tuple(keywords)
    for column, value in row.items():
        if not any(keyword in column for keyword in keyword_list):
            continue
        match = _LEADING_INTEGER.match(value)
        if match:
            return int(match.group(1))
    return 0


def extract_date(row: Mapping[str, str]) -> str | None:
    """Return the first parseable date field as an ISO date."""
    for field_name in DATE_FIELDS:
        value = row.get(field_name, "")
        if not value:
            continue
        parsed = pd.to_datetime(value, errors="coerce", utc=True)
        if not pd.isna(parsed):
            return parsed.date().isoformat()
    return None


def read_export_frame(csv_text: str) -> pd.DataFrame:
    """Read an export into an all-string frame with lowercased, trimmed headers.

    Raises:
        ReliefMapConversionError: If the export has no header or is malformed.
    """
    try:
        frame = pd.read_csv(
            io.StringIO(csv_text), dtype=str, keep_default_na=False, index_col=False
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as error:
        raise ReliefMapConversionError(f"Export is not readable CSV: {error}.") from error
    frame.columns = [str(column).strip().lower() for column in frame.columns]
    return frame.fillna("")


def read_export_rows(csv_text: str) -> list[dict[str, str]]:
    """Read an export into rows keyed by lowercased, trimmed headers."""
    return _frame_rows(read_export_frame(csv_text))


def _frame_rows(frame: pd.DataFrame) -> list[dict[str, str]]:
    return [
        {column: str(value).strip() for column, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]


def convert_casualty_rows(csv_text: str, source: str, region: RegionConfig) -> pd.DataFrame:
    """Convert an export into casualties rows.

    Args:
        csv_text: Raw export content.
        source: Value written into the ``source`` column.
        region: Region supplying the gazetteer and sub-region token.

    Returns:
        Frame with the casualties columns, possibly empty.
    """
    return _convert_rows(read_export_rows(csv_text), source, region)


def _convert_rows(
    rows: Iterable[Mapping[str, str]],
    source: str,
    region: RegionConfig,
) -> pd.DataFrame:
    converted: list[dict[str, object]] = []
    for row in rows:
        date = extract_date(row)
        if date is None:
            continue
        killed = extract_number(row, KILLED_KEYWORDS)
        injured = extract_number(row, INJURED_KEYWORDS)
        if killed <= 0 and injured <= 0:
            continue
        location = extract_location(row, region)
        place = resolve_place(location, region)
        converted.append(
            {
                "date": date,
                "killed": killed,
                "injured": injured,
                "children_killed": 0,
                "women_killed": 0,
                "latitude": place.latitude,
                "longitude": place.longitude,
                "location": location,
                "area": place.area,
                "source": source,
            }
        )
    return pd.DataFrame(converted, columns=list(CASUALTY_CSV_COLUMNS))


def convert_casualties_file(
    input_path: Path,
    output_path: Path,
    source: str,
    region: RegionConfig,
) -> int:
    """Convert an export file into a casualties CSV file.

    Args:
        input_path: Export to read.
        output_path: Casualties CSV to write.
        source: Value written into the ``source`` column.
        region: Region supplying the gazetteer.

    Returns:
        Number of rows written.

    Raises:
        ReliefMapConversionError: If the export is unreadable, is not casualty
            data, or yields no rows.
    """
    try:
        csv_text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ReliefMapConversionError(f"Failed to read export {input_path}: {error}.") from error
    export_frame = read_export_frame(csv_text)
    kind = detect_dataset_kind(export_frame.columns)
    if kind != "casualties":
        raise ReliefMapConversionError(
            f"Export {input_path} does not look like casualty data (detected: {kind}). "
            "Expected a killed, death, or casualty column."
        )
    frame = _convert_rows(_frame_rows(export_frame), source, region)
    if frame.empty:
        raise ReliefMapConversionError(
            f"Export {input_path} has no dated rows with killed or injured counts."
        )
    write_casualties_csv(frame, output_path)
    _LOGGER.info(
        "casualties_converted",
        input=str(input_path),
        output=str(output_path),
        row_count=len(frame),
    )
    return len(frame)


def write_casualties_csv(frame: pd.DataFrame, output_path: Path) -> None:
    """Write converted rows in the casualties column order.

    Raises:
        ReliefMapConversionError: If the file cannot be written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output_path, index=False, columns=list(CASUALTY_CSV_COLUMNS))
    except OSError as error:
        raise ReliefMapConversionError(f"Failed to write {output_path}: {error}.") from error


def _any_header_contains(headers: Iterable[str], keywords: Iterable[str]) -> bool:
    keyword_list = tuple(keywords)
    return any(keyword in header for header in headers for keyword in keyword_list)
