"""Constants used throughout the homerowmods codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Karabiner paths
    KARABINER_CONFIG_PATH = "~/.config/karabiner/karabiner.json"
    """Default location of the Karabiner-Elements configuration file."""

    # Timing thresholds
    HELD_DOWN_THRESHOLD_MS = 250
    """Hold time after which a home row key acts as its modifier."""

    SIMULTANEOUS_THRESHOLD_MS = 50
    """Window in which several key downs count as one simultaneous press."""

    # Karabiner's own defaults, merged under the configured thresholds
    KARABINER_DEFAULT_PARAMETERS = {
        "basic.simultaneous_threshold_milliseconds": 50,
        "basic.to_delayed_action_delay_milliseconds": 500,
        "basic.to_if_alone_timeout_milliseconds": 1000,
        "basic.to_if_held_down_threshold_milliseconds": 500,
        "mouse_motion_to_scroll.speed": 100,
    }

    # Rule names
    HOME_ROW_RULE_DESCRIPTION = "Home row mods"
    """Description of the generated home row rule."""

    # Apps where home/end should send readline shortcuts
    TERMINAL_BUNDLE_IDENTIFIERS = [
        "^com\\.apple\\.Terminal$",
        "^com\\.googlecode\\.iterm2$",
    ]

    # Modifier groups
    HYPER_MODIFIERS = ["left_command", "left_control", "left_option", "left_shift"]
    MEH_MODIFIERS = ["left_control", "left_option", "left_shift"]

    # Output
    JSON_INDENT = 4
    """Indentation Karabiner itself uses when saving karabiner.json."""
