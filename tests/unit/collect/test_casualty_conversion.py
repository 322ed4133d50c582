"""Unit tests for humanitarian export conversion."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pandas as pd
import pytest

from collect.casualty_conversion import (
    convert_casualties_file,
    convert_casualty_rows,
    detect_dataset_kind,
    extract_date,
    extract_location,
    extract_number,
    resolve_place,
)
from core.constants import CASUALTY_CSV_COLUMNS
from core.errors import ReliefMapConversionError
from core.region import default_region
from tests.fixture_paths import fixture_path, read_fixture


def test_detect_dataset_kind_by_headers() -> None:
    """Header keywords should identify casualties and displacement exports."""
    assert detect_dataset_kind(["Date", "Deaths"]) == "casualties"
    assert detect_dataset_kind(["date", "IDPs"]) == "displacement"
    assert detect_dataset_kind(["date", "price"]) is None


def test_resolve_place_exact_partial_and_fallback() -> None:
    """Lookup should try exact, then partial, then fallback names."""
    region = default_region()

    assert resolve_place("Rafah", region).area == "South Gaza"
    assert resolve_place("rafah crossing", region).area == "South Gaza"
    assert resolve_place("Hebron", region) == region.gazetteer["Gaza Strip"]


def test_resolve_place_raises_without_gazetteer() -> None:
    """A region without places cannot resolve anything."""
    region = replace(default_region(), gazetteer={})

    with pytest.raises(ReliefMapConversionError):
        resolve_place("Rafah", region)


def test_extract_location_requires_subregion_token() -> None:
    """Only location fields mentioning the sub-region should be used."""
    region = default_region()

    assert extract_location({"admin1": "Jenin", "admin2": "North Gaza"}, region) == "North Gaza"
    assert extract_location({"admin1": "Jenin"}, region) == "Gaza Strip"


def test_extract_number_reads_leading_integer() -> None:
    """Numbers are read from the first keyword column with a leading integer."""
    row = {"date": "2023-10-10", "killed_total": "12 confirmed", "injured": "n/a"}

    assert extract_number(row, ["killed"]) == 12
    assert extract_number(row, ["injured"]) == 0


def test_extract_date_returns_iso_date() -> None:
    """The first parseable date field should be normalized to ISO format."""
    assert extract_date({"date": "", "event_date": "10/12/2023"}) == "2023-10-12"
    assert extract_date({"date": "unknown"}) is None


def test_convert_casualty_rows_applies_row_policy(region) -> None:
    """Undated rows and rows without casualties should be dropped."""
    csv_text = read_fixture("exports/hdx_casualties.csv")

    frame = convert_casualty_rows(csv_text, "HDX", region)

    assert list(frame.columns) == list(CASUALTY_CSV_COLUMNS)
    assert frame["date"].tolist() == ["2023-10-10", "2023-10-11", "2023-10-13"]
    assert frame["location"].tolist() == ["Gaza City", "Gaza", "Gaza Strip"]
    assert frame["children_killed"].tolist() == [0, 0, 0]


def test_convert_casualties_file_writes_loader_format(tmp_path: Path, region) -> None:
    """Converted files should be readable with the casualties column order."""
    output_path = tmp_path / "out" / "casualties.csv"

    row_count = convert_casualties_file(
        fixture_path("exports/hdx_casualties.csv"), output_path, "HDX", region
    )

    written = pd.read_csv(output_path)
    assert row_count == 3
    assert tuple(written.columns) == CASUALTY_CSV_COLUMNS
    assert written["source"].unique().tolist() == ["HDX"]


def test_convert_casualties_file_rejects_displacement_exports(tmp_path: Path, region) -> None:
    """Exports without casualty columns should not be converted."""
    with pytest.raises(ReliefMapConversionError, match="does not look like casualty data"):
        convert_casualties_file(
            fixture_path("exports/hdx_displacement.csv"), tmp_path / "out.csv", "HDX", region
        )


def test_convert_casualties_file_rejects_missing_input(tmp_path: Path, region) -> None:
    """Missing export files should raise a conversion error."""
    with pytest.raises(ReliefMapConversionError):
        convert_casualties_file(tmp_path / "missing.csv", tmp_path / "out.csv", "HDX", region)


def test_convert_casualties_file_detects_kind_from_quoted_headers(
    tmp_path: Path, region
) -> None:
    """A quoted header spanning lines should not hide the casualty columns."""
    input_path = tmp_path / "export.csv"
    input_path.write_text(
        '"Notes\nand sources",killed,date,location\n"MoH, daily",5,2023-10-10,Gaza City\n',
        encoding="utf-8",
    )

    row_count = convert_casualties_file(input_path, tmp_path / "out.csv", "HDX", region)

    assert row_count == 1
