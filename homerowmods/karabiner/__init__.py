"""Karabiner-Elements document construction and output."""

from .builders import (
    ManipulatorBuilder,
    frontmost_application_if,
    frontmost_application_unless,
    key_event,
    map_key,
    map_simultaneous,
    rule,
)
from .profile import (
    build_complex_modification,
    build_complex_modifications,
    build_parameters,
    dump_document,
    write_complex_modification,
    write_to_profile,
)
from .rules import build_home_row_manipulators, build_rules

__all__ = [
    "ManipulatorBuilder",
    "build_complex_modification",
    "build_complex_modifications",
    "build_home_row_manipulators",
    "build_parameters",
    "build_rules",
    "dump_document",
    "frontmost_application_if",
    "frontmost_application_unless",
    "key_event",
    "map_key",
    "map_simultaneous",
    "rule",
    "write_complex_modification",
    "write_to_profile",
]
