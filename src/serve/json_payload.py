"""JSON helpers for response payloads."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
import json
from typing import Iterable


def to_payload(value: object) -> object:
    """Convert dataclass records into JSON-ready structures."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


def records_payload(records: Iterable[object]) -> list[object]:
    """Convert an iterable of records into a JSON-ready list."""
    return [to_payload(record) for record in records]


def render_json(payload: object) -> str:
    """Render a response body as indented JSON text."""
    return json.dumps(payload, indent=2, sort_keys=False)
