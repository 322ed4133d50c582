"""ReliefMap exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ReliefMapError(Exception):
    """Base exception for all ReliefMap failures."""


class ReliefMapConfigError(ReliefMapError):
    """Raised for invalid runtime or region configuration."""


class ReliefMapIngestError(ReliefMapError):
    """Raised when a dataset file cannot be read or mapped to records."""


class ReliefMapParseError(ReliefMapIngestError):
    """Raised when a CSV field cannot be coerced to its declared type."""


class ReliefMapConversionError(ReliefMapError):
    """Raised when a foreign CSV cannot be converted to an upstream format."""
