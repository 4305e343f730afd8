"""homerowmods - home row mods generator for Karabiner-Elements.

Enumerate chords of home row keys and emit tap/hold manipulators for them.
"""

from .core import CombinationMode, Config, generate_custom_combinations, load_config
from .pipeline import run_pipeline

__version__ = "0.3.0"
__all__ = [
    "CombinationMode",
    "Config",
    "generate_custom_combinations",
    "load_config",
    "run_pipeline",
]
