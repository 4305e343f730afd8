"""Command-line interface."""

import argparse

from homerowmods.core import CombinationMode
from homerowmods.utils.constants import Constants
from homerowmods.variants import available_variants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="homerowmods",
        description="Generate home row mod rules for Karabiner-Elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Install the permutation variant into the "Compiled" profile
  %(prog)s --variant permutations

  # Install the mixed variant into a profile of your choosing, verbosely
  %(prog)s --variant mixed --profile Default -v

  # Preview the generated block without touching karabiner.json
  %(prog)s --variant mixed --dry-run --format yaml

  # Write an importable complex modification instead
  %(prog)s --complex-modification ~/.config/karabiner/assets/complex_modifications/hrm.json

  # Using a config file (CLI overrides file values)
  %(prog)s --config hrm.yml --held-threshold 200

By default the rules replace the complex modifications of the variant's
profile in {Constants.KARABINER_CONFIG_PATH}. The profile must already exist.

Example hrm.yml:
  variant: mixed
  profile: Default
  held_threshold_ms: 220
  simultaneous_threshold_ms: 40
  verbose: true
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON or YAML configuration file (CLI args override file values)",
    )

    # Layout
    parser.add_argument(
        "--variant",
        choices=available_variants(),
        help="Layout variant to generate (default: permutations)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in CombinationMode],
        help="Override how chords of two or more keys are enumerated",
    )
    parser.add_argument(
        "--max-size", type=int, help="Override the largest chord size (0 disables chords)"
    )

    # Output
    parser.add_argument("--profile", type=str, help="Karabiner profile to write into")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help=f"karabiner.json to update (default: {Constants.KARABINER_CONFIG_PATH})",
    )
    parser.add_argument(
        "--complex-modification",
        type=str,
        help="Write an importable complex modification file instead of a profile",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the generated rules to stdout"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "yaml"],
        help="Dry run output format (default: json)",
    )

    # Parameters
    parser.add_argument(
        "--held-threshold",
        dest="held_threshold_ms",
        type=int,
        help=f"Hold time in ms before a key acts as a modifier "
        f"(default: {Constants.HELD_DOWN_THRESHOLD_MS})",
    )
    parser.add_argument(
        "--simultaneous-threshold",
        dest="simultaneous_threshold_ms",
        type=int,
        help=f"Window in ms for a simultaneous press "
        f"(default: {Constants.SIMULTANEOUS_THRESHOLD_MS})",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")

    return parser
