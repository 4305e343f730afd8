"""Configuration model and loading."""

import argparse
import json
import os
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from homerowmods.core.combinations import CombinationMode
from homerowmods.core.errors import ConfigurationError
from homerowmods.utils.constants import Constants
from homerowmods.utils.helpers import expand_file_path

# CLI destinations that map one-to-one onto Config fields
CONFIG_FIELDS = (
    "variant",
    "profile",
    "output",
    "complex_modification",
    "dry_run",
    "output_format",
    "held_threshold_ms",
    "simultaneous_threshold_ms",
    "mode",
    "max_size",
    "verbose",
    "debug",
)


class Config(BaseModel):
    """Settings for one generator run."""

    # What to build
    variant: str = "permutations"
    mode: CombinationMode | None = None  # None = use the variant's policy
    max_size: int | None = None  # None = use the variant's policy

    # Where to put it
    profile: str | None = None  # None = the variant's default profile
    output: str | None = None
    complex_modification: str | None = None
    dry_run: bool = False
    output_format: Literal["json", "yaml"] = "json"

    # Karabiner parameters
    held_threshold_ms: int = Constants.HELD_DOWN_THRESHOLD_MS
    simultaneous_threshold_ms: int = Constants.SIMULTANEOUS_THRESHOLD_MS

    verbose: bool = False
    debug: bool = False

    @field_validator("variant")
    @classmethod
    def check_variant(cls, value: str) -> str:
        # variants imports core, so the registry is looked up at validation time
        from homerowmods.variants import available_variants

        names = available_variants()
        if value not in names:
            raise ValueError(f"unknown variant '{value}' (available: {', '.join(names)})")
        return value

    @field_validator("held_threshold_ms", "simultaneous_threshold_ms")
    @classmethod
    def check_positive_threshold(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("thresholds must be positive milliseconds")
        return value

    @field_validator("max_size")
    @classmethod
    def check_max_size(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("max_size must be zero or greater")
        return value

    @field_validator("output", "complex_modification")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        if self.dry_run and self.complex_modification:
            raise ValueError("--dry-run and --complex-modification are mutually exclusive")
        return self

    @property
    def karabiner_json(self) -> str:
        """Path of the karabiner.json to update."""
        return self.output or expand_file_path(Constants.KARABINER_CONFIG_PATH)


def read_config_file(config_path: str) -> dict[str, Any]:
    """Read a JSON or YAML configuration file into a dict.

    The format is picked from the extension; .yml and .yaml are YAML, anything
    else is JSON.

    Raises:
        ConfigurationError: If the file is missing, unparsable, or not a mapping
    """
    path = expand_file_path(config_path)
    try:
        with open(path, encoding="utf-8") as f:
            if os.path.splitext(path)[1].lower() in (".yml", ".yaml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at top level")
    return data


def _cli_overrides(args: argparse.Namespace | None) -> dict[str, Any]:
    """Collect CLI values that were actually given."""
    if args is None:
        return {}

    overrides = {}
    for name in CONFIG_FIELDS:
        value = getattr(args, name, None)
        # store_true flags default to False and must not mask the file
        if value is None or value is False:
            continue
        overrides[name] = value
    return overrides


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from an optional file plus CLI arguments (CLI wins).

    Args:
        config_path: JSON or YAML configuration file, or None
        args: Parsed command-line arguments
        parser: Parser used to report errors; without one errors are raised

    Returns:
        Validated Config
    """
    try:
        data = read_config_file(config_path) if config_path else {}
        data.update(_cli_overrides(args))
        return Config(**data)
    except (ConfigurationError, ValidationError) as e:
        if parser is None:
            raise
        parser.error(str(e))
