"""Core domain logic for homerowmods."""

from .combinations import (
    CombinationMode,
    count_combinations,
    generate_custom_combinations,
    get_combinations,
    get_permutations,
    group_sizes,
)
from .config import Config, load_config
from .errors import (
    ConfigurationError,
    HomeRowModsError,
    InvalidSymbolsError,
    ProfileNotFoundError,
    UnknownVariantError,
)
from .types import Combination, KeyCode, Manipulator, Rule

__all__ = [
    "Combination",
    "CombinationMode",
    "Config",
    "ConfigurationError",
    "HomeRowModsError",
    "InvalidSymbolsError",
    "KeyCode",
    "Manipulator",
    "ProfileNotFoundError",
    "Rule",
    "UnknownVariantError",
    "count_combinations",
    "generate_custom_combinations",
    "get_combinations",
    "get_permutations",
    "group_sizes",
    "load_config",
]
