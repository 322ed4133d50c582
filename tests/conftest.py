"""Pytest configuration and shared fixtures for repository test runs."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from core.config import ReliefMapConfig
from core.region import RegionConfig, default_region
from tests.fixture_paths import fixture_path


@pytest.fixture
def region() -> RegionConfig:
    """Built-in Gaza Strip region."""
    return default_region()


@pytest.fixture
def fixture_config(region: RegionConfig) -> ReliefMapConfig:
    """Config pointing at the checked-in fixture datasets."""
    return ReliefMapConfig(data_root=fixture_path("data"), region=region)


@pytest.fixture
def tmp_config(tmp_path: Path, region: RegionConfig) -> ReliefMapConfig:
    """Config pointing at an empty temporary data root."""
    return ReliefMapConfig(data_root=tmp_path, region=region)


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes one dataset file under tmp_path."""

    def _write(file_name: str, content: str) -> Path:
        file_path = tmp_path / file_name
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
