"""Unit tests for the casualties, infrastructure, and displacement loaders."""

from __future__ import annotations

from structlog.testing import capture_logs

from core.types import CasualtyRecord, LoadFailure, LoadSuccess
from ingest.dataset_loaders import load_casualties, load_displacement, load_infrastructure

_CASUALTY_HEADER = (
    "date,killed,injured,children_killed,women_killed,latitude,longitude,location,area,source\n"
)


def test_load_casualties_returns_typed_records(fixture_config) -> None:
    """Fixture casualties should load as frozen records in file order."""
    result = load_casualties(fixture_config)

    assert isinstance(result, LoadSuccess)
    assert len(result.records) == 4
    assert result.records[0] == CasualtyRecord(
        latitude=31.5017,
        longitude=34.4668,
        location="Gaza City",
        area="North Gaza",
        date="2023-10-10",
        killed=12,
        injured=30,
        children_killed=4,
        women_killed=3,
        source="MoH",
    )


def test_load_infrastructure_reads_type_column(fixture_config) -> None:
    """Infrastructure records should keep the damage type text."""
    result = load_infrastructure(fixture_config)

    assert result.ok
    assert [record.type for record in result.records] == ["airstrike", "shelling"]


def test_load_displacement_sums_people(fixture_config) -> None:
    """Displacement counts should be integers usable in sums."""
    result = load_displacement(fixture_config)

    assert result.ok
    assert sum(record.people_displaced for record in result.records) == 46000


def test_load_casualties_fails_for_missing_file(tmp_config) -> None:
    """A missing file should become a generic load failure."""
    result = load_casualties(tmp_config)

    assert result == LoadFailure(dataset="casualties", error="Failed to load casualties data")


def test_load_casualties_fails_whole_file_on_bad_number(tmp_config, write_dataset) -> None:
    """One malformed numeric cell should fail the entire load."""
    write_dataset(
        "casualties.csv",
        _CASUALTY_HEADER
        + "2023-10-10,12,30,4,3,31.5,34.46,Gaza City,North Gaza,MoH\n"
        + "2023-10-11,twelve,30,4,3,31.5,34.46,Gaza City,North Gaza,MoH\n",
    )

    result = load_casualties(tmp_config)

    assert result.ok is False


def test_load_casualties_logs_original_error(tmp_config, write_dataset) -> None:
    """The detailed parse error should be logged, not returned."""
    write_dataset(
        "casualties.csv",
        _CASUALTY_HEADER + "2023-10-11,twelve,30,4,3,31.5,34.46,Gaza City,North Gaza,MoH\n",
    )

    with capture_logs() as logs:
        result = load_casualties(tmp_config)

    failure_logs = [entry for entry in logs if entry["event"] == "dataset_load_failed"]
    assert "twelve" in failure_logs[0]["error"]
    assert isinstance(result, LoadFailure) and "twelve" not in result.error


def test_load_casualties_rejects_fractional_counts(tmp_config, write_dataset) -> None:
    """Count columns must hold whole numbers."""
    write_dataset(
        "casualties.csv",
        _CASUALTY_HEADER + "2023-10-11,1.5,30,4,3,31.5,34.46,Gaza City,North Gaza,MoH\n",
    )

    result = load_casualties(tmp_config)

    assert result.ok is False


def test_load_casualties_fails_for_missing_column(tmp_config, write_dataset) -> None:
    """A header without a required column should fail the load."""
    write_dataset(
        "casualties.csv",
        "date,killed,injured,children_killed,women_killed,latitude,longitude,location,area\n"
        "2023-10-11,1,30,4,3,31.5,34.46,Gaza City,North Gaza\n",
    )

    result = load_casualties(tmp_config)

    assert result.ok is False


def test_load_casualties_header_only_is_empty_success(tmp_config, write_dataset) -> None:
    """A file with only a header should load zero records."""
    write_dataset("casualties.csv", _CASUALTY_HEADER)

    result = load_casualties(tmp_config)

    assert isinstance(result, LoadSuccess) and result.records == ()


def test_load_casualties_keeps_out_of_box_rows(fixture_config) -> None:
    """Out-of-box coordinates should warn without dropping the record."""
    with capture_logs() as logs:
        result = load_casualties(fixture_config)

    assert result.ok
    assert any(record.location == "Tulkarm Checkpoint" for record in result.records)
    assert any(entry["event"] == "invalid_coordinates" for entry in logs)
