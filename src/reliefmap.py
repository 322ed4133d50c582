"""Public SDK surface for ReliefMap.

This module provides a stable import path for library users.
It re-exports the loaders, aggregators, and response builders.
"""

from __future__ import annotations

from aggregate.event_statistics import partition_events, summarize_events, valid_events
from aggregate.geography import calculate_bounds, unique_locations
from collect.casualty_conversion import convert_casualties_file
from core.config import ReliefMapConfig
from core.region import BoundingBox, RegionConfig, default_region
from core.region_spec import load_region_config
from core.types import (
    CasualtyRecord,
    DisplacementEvent,
    DisplacementRecord,
    GeographicData,
    InfrastructureRecord,
    LoadFailure,
    LoadSuccess,
)
from ingest.dataset_loaders import load_casualties, load_displacement, load_infrastructure
from ingest.event_loader import load_displacement_events
from serve.responses import ApiResponse, build_dataset_response, build_events_response

__all__ = [
    "ApiResponse",
    "BoundingBox",
    "CasualtyRecord",
    "DisplacementEvent",
    "DisplacementRecord",
    "GeographicData",
    "InfrastructureRecord",
    "LoadFailure",
    "LoadSuccess",
    "RegionConfig",
    "ReliefMapConfig",
    "build_dataset_response",
    "build_events_response",
    "calculate_bounds",
    "convert_casualties_file",
    "default_region",
    "load_casualties",
    "load_displacement",
    "load_displacement_events",
    "load_infrastructure",
    "load_region_config",
    "partition_events",
    "summarize_events",
    "unique_locations",
    "valid_events",
]
