"""Mixed variant: GACS home row, every chord size, plus Hyper/Meh helpers."""

from collections.abc import Mapping

from homerowmods.core import CombinationMode, Config, KeyCode, Rule
from homerowmods.karabiner.builders import map_key, rule
from homerowmods.utils.constants import Constants
from homerowmods.variants.base import CombinationPolicy, LayoutVariant, freeze_key_map
from homerowmods.variants.shared import shared_rules

KEY_MAP = freeze_key_map(
    [
        ("a", "left_control"),
        ("s", "left_option"),
        ("d", "left_command"),
        ("f", "left_shift"),
        ("j", "right_shift"),
        ("k", "right_command"),
        ("l", "right_option"),
        ("semicolon", "right_control"),
    ]
)

# Vim-style arrows on the Hyper layer
HYPER_ARROWS = {
    "h": "left_arrow",
    "j": "down_arrow",
    "k": "up_arrow",
    "l": "right_arrow",
}


def hyper_meh_rule(config: Config) -> Rule:
    """Caps lock: Hyper when held, escape alone. Tab: Meh when held, tab alone."""
    hyper_first, *hyper_rest = Constants.HYPER_MODIFIERS
    meh_first, *meh_rest = Constants.MEH_MODIFIERS

    caps_lock = map_key("caps_lock", optional=["any"])
    caps_lock.to(hyper_first, hyper_rest).to_if_alone("escape")
    caps_lock.parameters(basic_to_if_alone_timeout_milliseconds=config.held_threshold_ms)

    tab = (
        map_key("tab", optional=["any"])
        .to_if_alone("tab")
        .to_if_held_down(meh_first, meh_rest, halt=True)
    )
    return rule("Hyper / Meh", [caps_lock, tab])


def hyper_arrows_rule() -> Rule:
    """Hyper + h/j/k/l send arrows that keep repeating while held."""
    return rule(
        "Hyper arrows",
        [
            map_key(key, mandatory=Constants.HYPER_MODIFIERS).to(arrow, repeat=True)
            for key, arrow in HYPER_ARROWS.items()
        ],
    )


def markdown_rule() -> Rule:
    """Hyper shortcuts that type markdown syntax."""
    bold = map_key("b", mandatory=Constants.HYPER_MODIFIERS)
    bold.to("8", ["left_shift"]).to("8", ["left_shift"])

    italic = map_key("i", mandatory=Constants.HYPER_MODIFIERS).to("hyphen", ["left_shift"])

    code_fence = map_key("c", mandatory=Constants.HYPER_MODIFIERS)
    for _ in range(3):
        code_fence.to("grave_accent_and_tilde")

    # []( ) then back into the brackets
    link = map_key("u", mandatory=Constants.HYPER_MODIFIERS)
    link.to("open_bracket").to("close_bracket")
    link.to("9", ["left_shift"]).to("0", ["left_shift"])
    for _ in range(3):
        link.to("left_arrow")

    return rule("Markdown helpers", [bold, italic, code_fence, link])


class MixedVariant(LayoutVariant):
    """
    Home row mods with ordered pairs and unordered larger chords.

    Characteristics:
    - GACS order: a/s/d/f = control/option/command/shift, mirrored on the right
    - Two key chords registered in both orders, larger chords once per key set
    - Every chord size up to all eight keys
    - Adds Hyper/Meh, Hyper arrows and markdown helpers
    """

    name = "mixed"
    profile_name = "Mixed"

    def get_key_map(self) -> Mapping[KeyCode, KeyCode]:
        return KEY_MAP

    def get_default_policy(self) -> CombinationPolicy:
        return CombinationPolicy(mode=CombinationMode.MIXED, max_size=None)

    def leading_rules(self, config: Config) -> list[Rule]:
        # h/j/k/l would otherwise be caught by the home row rule first
        return [hyper_arrows_rule()]

    def extra_rules(self, config: Config) -> list[Rule]:
        return shared_rules() + [hyper_meh_rule(config), markdown_rule()]
