"""Hand-written rules shared by every variant."""

from homerowmods.core import Rule
from homerowmods.karabiner.builders import (
    frontmost_application_if,
    frontmost_application_unless,
    map_key,
    rule,
)
from homerowmods.utils.constants import Constants


def shift_backspace_rule() -> Rule:
    """Shift + backspace sends forward delete."""
    return rule(
        "Shift + backspace = delete",
        [map_key("delete_or_backspace", mandatory=["left_shift"]).to("delete_forward")],
    )


def home_end_rule() -> Rule:
    """Home/end jump to line start/end outside terminals (cmd + arrow)."""
    not_terminal = frontmost_application_unless(Constants.TERMINAL_BUNDLE_IDENTIFIERS)
    return rule(
        "Home, end",
        [
            map_key("home", optional=["any"])
            .condition(not_terminal)
            .to("left_arrow", ["left_command"]),
            map_key("end", optional=["any"])
            .condition(not_terminal)
            .to("right_arrow", ["left_command"]),
        ],
    )


def home_end_terminal_rule() -> Rule:
    """Home/end inside terminals send cmd+a / cmd+e."""
    terminal = frontmost_application_if(Constants.TERMINAL_BUNDLE_IDENTIFIERS)
    return rule(
        "Home, end, terminal",
        [
            map_key("home", optional=["any"]).condition(terminal).to("a", ["left_command"]),
            map_key("end", optional=["any"]).condition(terminal).to("e", ["left_command"]),
        ],
    )


def shared_rules() -> list[Rule]:
    return [shift_backspace_rule(), home_end_rule(), home_end_terminal_rule()]
