"""ReliefMap CLI entry points.
This module exposes the map payloads and export conversion from a terminal.
It maps argparse commands onto response builders and converters.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from collect.casualty_conversion import convert_casualties_file
from core.config import ReliefMapConfig
from core.errors import ReliefMapConversionError
from serve.json_payload import render_json
from serve.responses import (
    GEOGRAPHIC_DATASET_LOADERS,
    build_dataset_response,
    build_events_response,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="reliefmap", description="ReliefMap dataset CLI")
    parser.add_argument("--data-root", help="Override RELIEFMAP_DATA_ROOT for this command")
    parser.add_argument("--region", help="Override RELIEFMAP_REGION_FILE for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_events_command(subparsers)
    _add_dataset_command(subparsers)
    _add_convert_casualties_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ReliefMap CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.data_root, args.region)
    if args.command == "events":
        return _run_events_command(config)
    if args.command == "dataset":
        return _run_dataset_command(config, args)
    if args.command == "convert-casualties":
        return _run_convert_casualties_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None, region_path: str | None) -> ReliefMapConfig:
    """Build runtime config with optional overrides.

    Args:
        data_root: Optional data root override.
        region_path: Optional region file override.

    Returns:
        Configured runtime config.
    """
    config = ReliefMapConfig.from_env(region_file=region_path)
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config


def _add_events_command(subparsers: Any) -> None:
    """Register events subcommand."""
    subparsers.add_parser("events", help="Print the displacement events payload")


def _add_dataset_command(subparsers: Any) -> None:
    """Register dataset subcommand."""
    dataset_parser = subparsers.add_parser("dataset", help="Print a geographic dataset payload")
    dataset_parser.add_argument("name", choices=sorted(GEOGRAPHIC_DATASET_LOADERS))


def _add_convert_casualties_command(subparsers: Any) -> None:
    """Register convert-casualties subcommand."""
    convert_parser = subparsers.add_parser(
        "convert-casualties",
        help="Convert a humanitarian export into casualties.csv format",
    )
    convert_parser.add_argument("input", help="Export CSV to convert")
    convert_parser.add_argument("output", help="Destination casualties CSV")
    convert_parser.add_argument("--source", required=True, help="Value for the source column")


def _run_events_command(config: ReliefMapConfig) -> int:
    """Handle events command.

    Args:
        config: Runtime config.

    Returns:
        Exit code.
    """
    response = build_events_response(config)
    print(render_json(response.body))
    return 0 if response.ok else 1


def _run_dataset_command(config: ReliefMapConfig, args: argparse.Namespace) -> int:
    """Handle dataset command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    response = build_dataset_response(args.name, config)
    print(render_json(response.body))
    return 0 if response.ok else 1


def _run_convert_casualties_command(config: ReliefMapConfig, args: argparse.Namespace) -> int:
    """Handle convert-casualties command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        row_count = convert_casualties_file(
            Path(args.input).expanduser(),
            Path(args.output).expanduser(),
            args.source,
            config.region,
        )
    except ReliefMapConversionError as error:
        print(f"error: {error}")
        return 1
    print(row_count)
    return 0
