"""Runtime configuration model for ReliefMap.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

from core.constants import DATA_ROOT_ENV_VAR, DEFAULT_DATA_ROOT, REGION_FILE_ENV_VAR
from core.errors import ReliefMapConfigError
from core.region import RegionConfig, default_region
from core.region_spec import load_region_config


@dataclass(frozen=True)
class ReliefMapConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Directory holding the dataset CSV files.
        region: Target region used for validation and aggregation.
    """

    data_root: Path
    region: RegionConfig = field(default_factory=default_region)

    @classmethod
    def from_env(cls, region_file: str | None = None) -> "ReliefMapConfig":
        """Build config from process environment variables.

        Args:
            region_file: Region file that takes precedence over the
                environment; the environment file is then never read.

        Returns:
            A validated config object.

        Raises:
            ReliefMapConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv(DATA_ROOT_ENV_VAR, str(DEFAULT_DATA_ROOT))
        region_file = region_file or os.getenv(REGION_FILE_ENV_VAR)
        return cls(
            data_root=_parse_data_root(data_root_value),
            region=load_region_config(region_file) if region_file else default_region(),
        )

    def dataset_path(self, file_name: str) -> Path:
        """Return the absolute path of a dataset file under the data root."""
        return self.data_root / file_name


def _parse_data_root(raw_value: str) -> Path:
    """Parse the data root environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Resolved data root path.

    Raises:
        ReliefMapConfigError: If the value is blank.
    """
    if not raw_value.strip():
        raise ReliefMapConfigError(
            f"Invalid {DATA_ROOT_ENV_VAR} value: expected a directory path, got an empty string. "
            f"Unset {DATA_ROOT_ENV_VAR} or point it at the dataset directory."
        )
    return Path(raw_value).expanduser().resolve()
