"""Writing generated rules into Karabiner-Elements configuration files."""

import json
import os
import sys
import tempfile
from typing import Any, TextIO

import yaml
from loguru import logger

from homerowmods.core import Config, ProfileNotFoundError, Rule
from homerowmods.utils.constants import Constants
from homerowmods.utils.helpers import ensure_parent_dir


def build_parameters(config: Config) -> dict[str, int]:
    """Karabiner's default parameters overlaid with the configured thresholds."""
    parameters = dict(Constants.KARABINER_DEFAULT_PARAMETERS)
    parameters["basic.to_if_held_down_threshold_milliseconds"] = config.held_threshold_ms
    parameters["basic.simultaneous_threshold_milliseconds"] = config.simultaneous_threshold_ms
    return parameters


def build_complex_modifications(rules: list[Rule], parameters: dict[str, int]) -> dict[str, Any]:
    """The complex_modifications block of a profile."""
    return {"parameters": parameters, "rules": rules}


def build_complex_modification(title: str, rules: list[Rule]) -> dict[str, Any]:
    """An importable asset for ~/.config/karabiner/assets/complex_modifications/."""
    return {"title": title, "rules": rules}


def _write_json(document: dict[str, Any], path: str) -> None:
    """Write document to path atomically.

    The JSON goes to a temporary file beside path first and is then renamed
    over it, so an interrupted write never leaves a truncated karabiner.json.
    """
    ensure_parent_dir(path)
    fd, tmp_path = tempfile.mkstemp(
        dir=os.path.dirname(path) or ".", prefix=".", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=Constants.JSON_INDENT, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


def find_profile(karabiner_config: dict[str, Any], profile_name: str) -> dict[str, Any] | None:
    """Return the profile dict named profile_name, or None."""
    for profile in karabiner_config.get("profiles", []):
        if profile.get("name") == profile_name:
            return profile
    return None


def write_to_profile(
    rules: list[Rule],
    profile_name: str,
    karabiner_json: str,
    parameters: dict[str, int],
    verbose: bool = False,
) -> None:
    """Replace a profile's complex modifications inside karabiner.json.

    Other profiles and every other key in the file are left as they were.

    Args:
        rules: Rules to install, in evaluation order
        profile_name: Name of an existing profile
        karabiner_json: Path to karabiner.json
        parameters: complex_modifications parameters
        verbose: Log what was written

    Raises:
        ProfileNotFoundError: If no profile has that name
    """
    with open(karabiner_json, encoding="utf-8") as f:
        karabiner_config = json.load(f)

    profile = find_profile(karabiner_config, profile_name)
    if profile is None:
        raise ProfileNotFoundError(profile_name, karabiner_json)

    profile["complex_modifications"] = build_complex_modifications(rules, parameters)
    _write_json(karabiner_config, karabiner_json)

    if verbose:
        manipulator_count = sum(len(r["manipulators"]) for r in rules)
        logger.info(
            f"Wrote {len(rules)} rules ({manipulator_count} manipulators) "
            f"to profile '{profile_name}' in {karabiner_json}"
        )


def write_complex_modification(
    path: str, title: str, rules: list[Rule], verbose: bool = False
) -> None:
    """Write rules as a standalone complex-modification asset file."""
    _write_json(build_complex_modification(title, rules), path)

    if verbose:
        logger.info(f"Wrote {len(rules)} rules to {path}")


def dump_document(document: dict[str, Any], stream: TextIO | None = None, fmt: str = "json") -> None:
    """Print a document for dry runs, as JSON or YAML."""
    stream = stream or sys.stdout
    if fmt == "yaml":
        yaml.safe_dump(
            document,
            stream,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
            width=float("inf"),
        )
    else:
        json.dump(document, stream, indent=Constants.JSON_INDENT, ensure_ascii=False)
        stream.write("\n")
