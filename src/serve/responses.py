"""Response payloads for dataset and displacement event requests.

Every builder reloads its dataset from disk, so each call reflects the
current files. A failed load becomes an error body with a 500 status
instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from aggregate.event_statistics import (
    distinct_values,
    partition_events,
    summarize_events,
    valid_events,
)
from aggregate.geography import calculate_bounds, unique_locations
from core.config import ReliefMapConfig
from core.constants import HTTP_OK, HTTP_SERVER_ERROR
from core.errors import ReliefMapConfigError
from core.types import LoadFailure, LoadResult
from ingest.dataset_loaders import load_casualties, load_displacement, load_infrastructure
from ingest.event_loader import load_displacement_events
from serve.json_payload import records_payload, to_payload

DatasetLoader = Callable[[ReliefMapConfig], LoadResult[Any]]

GEOGRAPHIC_DATASET_LOADERS: Mapping[str, DatasetLoader] = {
    "casualties": load_casualties,
    "infrastructure": load_infrastructure,
    "displacement": load_displacement,
}


@dataclass(frozen=True)
class ApiResponse:
    """Status code plus JSON-ready body."""

    status: int
    body: dict[str, object]

    @property
    def ok(self) -> bool:
        """Return whether the response reports success."""
        return self.status == HTTP_OK


def failure_response(failure: LoadFailure) -> ApiResponse:
    """Build the uniform error body for a failed load."""
    return ApiResponse(
        status=HTTP_SERVER_ERROR,
        body={"success": False, "error": failure.error},
    )


def build_events_response(config: ReliefMapConfig) -> ApiResponse:
    """Load displacement events and build the map payload.

    Args:
        config: Runtime config with data root and region.

    Returns:
        Success body with events, partitions, summary, bounds, sources,
        and event types; or the error body when loading fails.
    """
    result = load_displacement_events(config)
    if isinstance(result, LoadFailure):
        return failure_response(result)
    region = config.region
    events = valid_events(result.records, region)
    gaza_events, west_bank_events = partition_events(events, region.subregion_token)
    summary = summarize_events(events, region)
    bounds = calculate_bounds(events, region.default_bounds)
    return ApiResponse(
        status=HTTP_OK,
        body={
            "success": True,
            "data": records_payload(events),
            "gaza_events": records_payload(gaza_events),
            "west_bank_events": records_payload(west_bank_events),
            "summary": to_payload(summary),
            "bounds": to_payload(bounds),
            "sources": distinct_values(events, "sources"),
            "event_types": distinct_values(events, "combined_type"),
        },
    )


def build_dataset_response(dataset: str, config: ReliefMapConfig) -> ApiResponse:
    """Load one geographic dataset and build its map payload.

    Args:
        dataset: One of ``casualties``, ``infrastructure``, ``displacement``.
        config: Runtime config with data root and region.

    Returns:
        Success body with records, unique locations, and bounds; or the
        error body when loading fails.

    Raises:
        ReliefMapConfigError: If the dataset name is unknown.
    """
    loader = GEOGRAPHIC_DATASET_LOADERS.get(dataset)
    if loader is None:
        supported = ", ".join(GEOGRAPHIC_DATASET_LOADERS)
        raise ReliefMapConfigError(f"Unknown dataset '{dataset}'. Use one of: {supported}.")
    result = loader(config)
    if isinstance(result, LoadFailure):
        return failure_response(result)
    records = result.records
    return ApiResponse(
        status=HTTP_OK,
        body={
            "success": True,
            "data": records_payload(records),
            "locations": records_payload(unique_locations(records)),
            "bounds": to_payload(calculate_bounds(records, config.region.default_bounds)),
        },
    )
