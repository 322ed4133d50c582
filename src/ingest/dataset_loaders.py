"""Loaders for the casualties, infrastructure, and displacement datasets.

Each loader reads one CSV file from the data root, parses it strictly,
and maps rows into typed records. A malformed value anywhere in the file
aborts the whole load. Failures are logged here and surfaced to callers
as a ``LoadFailure`` with a generic message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, TypeVar

from core.config import ReliefMapConfig
from core.constants import (
    CASUALTIES_FILE_NAME,
    CASUALTY_NUMERIC_COLUMNS,
    DISPLACEMENT_FILE_NAME,
    DISPLACEMENT_NUMERIC_COLUMNS,
    INFRASTRUCTURE_FILE_NAME,
    INFRASTRUCTURE_NUMERIC_COLUMNS,
)
from core.errors import ReliefMapIngestError, ReliefMapParseError
from core.logging_config import get_logger
from core.types import (
    CasualtyRecord,
    DatasetName,
    DisplacementRecord,
    InfrastructureRecord,
    LoadFailure,
    LoadResult,
    LoadSuccess,
)
from ingest.csv_parser import CsvRow, parse_csv_rows

_LOGGER = get_logger(__name__)

RecordT = TypeVar("RecordT")
RowMapper = Callable[[CsvRow, int], RecordT]

DATASET_LABELS: dict[DatasetName, str] = {
    "casualties": "casualties",
    "infrastructure": "infrastructure",
    "displacement": "displacement",
    "events": "displacement events",
}


def load_casualties(config: ReliefMapConfig) -> LoadResult[CasualtyRecord]:
    """Load ``casualties.csv`` from the configured data root."""
    return load_dataset(
        "casualties",
        config.dataset_path(CASUALTIES_FILE_NAME),
        lambda text: parse_csv_rows(
            text, CASUALTY_NUMERIC_COLUMNS, valid_box=config.region.valid_box
        ),
        casualty_from_row,
    )


def load_infrastructure(config: ReliefMapConfig) -> LoadResult[InfrastructureRecord]:
    """Load ``infrastructure.csv`` from the configured data root."""
    return load_dataset(
        "infrastructure",
        config.dataset_path(INFRASTRUCTURE_FILE_NAME),
        lambda text: parse_csv_rows(
            text, INFRASTRUCTURE_NUMERIC_COLUMNS, valid_box=config.region.valid_box
        ),
        infrastructure_from_row,
    )


def load_displacement(config: ReliefMapConfig) -> LoadResult[DisplacementRecord]:
    """Load ``displacement.csv`` from the configured data root."""
    return load_dataset(
        "displacement",
        config.dataset_path(DISPLACEMENT_FILE_NAME),
        lambda text: parse_csv_rows(
            text, DISPLACEMENT_NUMERIC_COLUMNS, valid_box=config.region.valid_box
        ),
        displacement_from_row,
    )


def load_dataset(
    dataset: DatasetName,
    file_path: Path,
    parse_rows: Callable[[str], list[CsvRow]],
    map_row: RowMapper[RecordT],
) -> LoadResult[RecordT]:
    """Read, parse, and map one dataset file into a tagged result.

    Args:
        dataset: Dataset name used for logs and the failure message.
        file_path: CSV file to read.
        parse_rows: Text to rows parser for this dataset.
        map_row: Row to record mapper; receives the one-based data row number.

    Returns:
        ``LoadSuccess`` with records, or ``LoadFailure`` with a generic message.
    """
    try:
        csv_text = read_dataset_text(file_path)
        rows = parse_rows(csv_text)
        records = tuple(map_row(row, row_number) for row_number, row in enumerate(rows, 1))
    except ReliefMapIngestError as error:
        _LOGGER.error(
            "dataset_load_failed",
            dataset=dataset,
            path=str(file_path),
            error=str(error),
        )
        return LoadFailure(dataset=dataset, error=f"Failed to load {DATASET_LABELS[dataset]} data")
    _LOGGER.info("dataset_loaded", dataset=dataset, path=str(file_path), record_count=len(records))
    return LoadSuccess(dataset=dataset, records=records)


def read_dataset_text(file_path: Path) -> str:
    """Read a dataset file as UTF-8 text.

    Args:
        file_path: Dataset file path.

    Returns:
        Full file content.

    Raises:
        ReliefMapIngestError: If the file is missing, unreadable, or not UTF-8.
    """
    if not file_path.is_file():
        raise ReliefMapIngestError(
            f"Dataset file does not exist at {file_path}. Place the CSV under the data root."
        )
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as error:
        raise ReliefMapIngestError(f"Failed to read dataset file {file_path}: {error}.") from error
    except UnicodeDecodeError as error:
        raise ReliefMapIngestError(
            f"Dataset file {file_path} is not valid UTF-8: {error.reason}."
        ) from error


def casualty_from_row(row: CsvRow, row_number: int) -> CasualtyRecord:
    """Map a parsed casualties row to a record."""
    return CasualtyRecord(
        latitude=_float_field(row, "latitude", row_number),
        longitude=_float_field(row, "longitude", row_number),
        location=_text_field(row, "location", row_number),
        area=_text_field(row, "area", row_number),
        date=_text_field(row, "date", row_number),
        killed=_count_field(row, "killed", row_number),
        injured=_count_field(row, "injured", row_number),
        children_killed=_count_field(row, "children_killed", row_number),
        women_killed=_count_field(row, "women_killed", row_number),
        source=_text_field(row, "source", row_number),
    )


def infrastructure_from_row(row: CsvRow, row_number: int) -> InfrastructureRecord:
    """Map a parsed infrastructure row to a record."""
    return InfrastructureRecord(
        latitude=_float_field(row, "latitude", row_number),
        longitude=_float_field(row, "longitude", row_number),
        location=_text_field(row, "location", row_number),
        area=_text_field(row, "area", row_number),
        date=_text_field(row, "date", row_number),
        hospitals_damaged=_count_field(row, "hospitals_damaged", row_number),
        schools_damaged=_count_field(row, "schools_damaged", row_number),
        homes_destroyed=_count_field(row, "homes_destroyed", row_number),
        type=_text_field(row, "type", row_number),
    )


def displacement_from_row(row: CsvRow, row_number: int) -> DisplacementRecord:
    """Map a parsed displacement row to a record."""
    return DisplacementRecord(
        latitude=_float_field(row, "latitude", row_number),
        longitude=_float_field(row, "longitude", row_number),
        location=_text_field(row, "location", row_number),
        area=_text_field(row, "area", row_number),
        date=_text_field(row, "date", row_number),
        people_displaced=_count_field(row, "people_displaced", row_number),
        displacement_centers=_count_field(row, "displacement_centers", row_number),
        capacity=_count_field(row, "capacity", row_number),
    )


def require_columns(row: CsvRow, columns: Sequence[str], row_number: int) -> None:
    """Raise if a parsed row lacks any of the given columns.

    Raises:
        ReliefMapIngestError: Naming the first missing column.
    """
    for column in columns:
        if column not in row:
            raise ReliefMapIngestError(
                f'Missing required column "{column}" at data row {row_number}. '
                "Check the CSV header."
            )


def _text_field(row: CsvRow, column: str, row_number: int) -> str:
    require_columns(row, (column,), row_number)
    return str(row[column])


def _float_field(row: CsvRow, column: str, row_number: int) -> float:
    require_columns(row, (column,), row_number)
    return float(row[column])


def _count_field(row: CsvRow, column: str, row_number: int) -> int:
    require_columns(row, (column,), row_number)
    value = row[column]
    if isinstance(value, int):
        return value
    raise ReliefMapParseError(
        f'Invalid count "{value}" in column "{column}" at data row {row_number}: '
        "expected a whole number."
    )
