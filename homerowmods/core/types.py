"""Type definitions for homerowmods."""

from typing import Any

# Karabiner key code string, e.g. "d", "semicolon", "left_command"
KeyCode = str

# A group of keys pressed together: ("d",) or ("d", "s", "a")
Combination = tuple[KeyCode, ...]

# Karabiner manipulator record and rule record, kept as plain JSON-ready dicts
Manipulator = dict[str, Any]
Rule = dict[str, Any]
