"""
Run configuration and tool settings.

RunConfiguration holds the five reporting flags for a check run and is
passed explicitly to the aggregator. ToolConfig adds algorithm, buffer and
logging settings, optionally loaded from a YAML file.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from digestcheck.core.primitive import ALGORITHMS, DEFAULT_ALGORITHM
from digestcheck.core.stream import DEFAULT_BUFFER_SIZE
from digestcheck.logger import LOG_LEVELS

CONFIG_ENVVAR = "DIGESTCHECK_CONFIG"


class RunConfiguration(BaseModel):
    """Reporting flags for a check run. Immutable for the run's lifetime."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_missing: bool = Field(
        default=False, description="Skip unreadable targets instead of aborting"
    )
    quiet: bool = Field(
        default=False, description="Suppress OK lines and non-fatal diagnostics"
    )
    status: bool = Field(
        default=False, description="Suppress per-file results; rely on exit status"
    )
    strict: bool = Field(
        default=False, description="Abort on the first badly formatted line"
    )
    warn: bool = Field(
        default=False, description="Warn about badly formatted lines"
    )

    def merged_with(self, **flags: bool) -> RunConfiguration:
        """
        Return a copy where any flag passed as True is switched on.

        Flags passed as False leave the current value untouched, so a config
        file can enable a flag that the command line does not mention.
        """
        enabled = {name: True for name, value in flags.items() if value}
        return self.model_copy(update=enabled)


class ToolConfig(BaseModel):
    """Tool settings, typically loaded from YAML."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: str = Field(default=DEFAULT_ALGORITHM, description="Digest algorithm")
    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE, gt=0, description="Read chunk size in bytes"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")
    check: RunConfiguration = Field(
        default_factory=RunConfiguration, description="Default check-mode flags"
    )

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        value = value.lower()
        if value not in ALGORITHMS:
            raise ValueError(f"unsupported algorithm {value!r}, expected one of {sorted(ALGORITHMS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {LOG_LEVELS}")
        return value


def load_tool_config(path: Path | str | None) -> ToolConfig:
    """
    Load tool settings from a YAML file.

    Args:
        path: Config file path, or None for defaults.

    Returns:
        Validated ToolConfig.

    Raises:
        FileNotFoundError: If path does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If values are invalid.
    """
    if path is None:
        return ToolConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    return ToolConfig.model_validate(data)
