"""Unit tests for the public SDK surface."""

from __future__ import annotations

import reliefmap


def test_sdk_exports_resolve() -> None:
    """Every exported name should be importable from the SDK module."""
    missing = [name for name in reliefmap.__all__ if not hasattr(reliefmap, name)]

    assert missing == []


def test_sdk_builds_events_response(fixture_config) -> None:
    """SDK callers should reach the events payload builder."""
    response = reliefmap.build_events_response(fixture_config)

    assert response.ok
