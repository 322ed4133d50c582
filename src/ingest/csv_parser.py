"""Generic CSV row parser with numeric coercion.

This module turns raw CSV text into rows keyed by header names.
Declared numeric columns are converted to numbers and every other
field is returned as a trimmed string.
"""

from __future__ import annotations

import io
import math
from typing import Iterable, Union

import pandas as pd

from core.constants import COORDINATE_COLUMNS
from core.errors import ReliefMapIngestError, ReliefMapParseError
from core.logging_config import get_logger
from core.region import BoundingBox
from core.types import NumericPolicy
from ingest.coordinate_validation import validate_coordinates

CsvValue = Union[str, int, float]
CsvRow = dict[str, CsvValue]

_LOGGER = get_logger(__name__)


def parse_csv_rows(
    csv_text: str,
    numeric_columns: Iterable[str],
    *,
    coordinate_columns: tuple[str, str] = COORDINATE_COLUMNS,
    valid_box: BoundingBox | None = None,
    numeric_policy: NumericPolicy = "strict",
) -> list[CsvRow]:
    """Parse CSV text into typed rows.

    Args:
        csv_text: Header row followed by data rows.
        numeric_columns: Columns that must hold numbers.
        coordinate_columns: Latitude and longitude column names; also coerced.
        valid_box: Box to check coordinates against, or None to skip the check.
        numeric_policy: ``strict`` raises on bad numbers, ``zero`` substitutes 0.

    Returns:
        Rows in file order with numeric columns coerced.

    Raises:
        ReliefMapParseError: If a numeric value is invalid under ``strict``.
        ReliefMapIngestError: If the text is not parseable CSV.
    """
    frame = _read_frame(csv_text)
    numeric_set = set(numeric_columns) | set(coordinate_columns)
    check_coordinates = valid_box is not None and all(
        column in frame.columns for column in coordinate_columns
    )
    rows: list[CsvRow] = []
    for row_number, raw_row in enumerate(frame.to_dict(orient="records"), 1):
        row = _coerce_row(raw_row, numeric_set, numeric_policy, row_number)
        if check_coordinates and valid_box is not None:
            _warn_on_invalid_coordinates(row, coordinate_columns, valid_box)
        rows.append(row)
    return rows


def coerce_number(raw_value: str) -> int | float | None:
    """Convert a text cell to a number.

    Args:
        raw_value: Cell text.

    Returns:
        An int for whole values, a float otherwise, or None if the text is
        not a finite number. Digit separators are not accepted.
    """
    text = raw_value.strip()
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _read_frame(csv_text: str) -> pd.DataFrame:
    """Read CSV text into an all-string frame.

    Args:
        csv_text: Raw CSV content.

    Returns:
        Frame with stripped header names and empty strings for blanks.

    Raises:
        ReliefMapIngestError: If the content has no header or is malformed.
    """
    try:
        frame = pd.read_csv(
            io.StringIO(csv_text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    except pd.errors.EmptyDataError as error:
        raise ReliefMapIngestError(
            "CSV content is empty. Provide a header row followed by data rows."
        ) from error
    except pd.errors.ParserError as error:
        raise ReliefMapIngestError(f"CSV content is malformed: {error}.") from error
    frame.columns = [str(column).strip() for column in frame.columns]
    return frame.fillna("")


def _coerce_row(
    raw_row: dict[str, object],
    numeric_set: set[str],
    numeric_policy: NumericPolicy,
    row_number: int,
) -> CsvRow:
    row: CsvRow = {}
    for column, raw_value in raw_row.items():
        text = str(raw_value)
        if column not in numeric_set:
            row[column] = text.strip()
            continue
        number = coerce_number(text)
        if number is None:
            if numeric_policy == "strict":
                raise ReliefMapParseError(
                    f'Invalid numeric value "{text}" in column "{column}" '
                    f"at data row {row_number}."
                )
            number = 0
        row[column] = number
    return row


def _warn_on_invalid_coordinates(
    row: CsvRow,
    coordinate_columns: tuple[str, str],
    valid_box: BoundingBox,
) -> None:
    latitude = float(row[coordinate_columns[0]])
    longitude = float(row[coordinate_columns[1]])
    if not validate_coordinates(latitude, longitude, valid_box):
        _LOGGER.warning(
            "invalid_coordinates",
            location=row.get("location", ""),
            latitude=latitude,
            longitude=longitude,
        )
