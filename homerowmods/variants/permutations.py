"""Permutation variant: eight home row keys, chords of up to three keys in any order."""

from collections.abc import Mapping

from homerowmods.core import CombinationMode, Config, KeyCode, Rule
from homerowmods.variants.base import CombinationPolicy, LayoutVariant, freeze_key_map
from homerowmods.variants.shared import shared_rules

KEY_MAP = freeze_key_map(
    [
        ("d", "left_command"),
        ("s", "left_control"),
        ("a", "left_shift"),
        ("f", "left_option"),
        ("k", "right_command"),
        ("l", "right_control"),
        ("semicolon", "right_shift"),
        ("j", "right_option"),
    ]
)


class PermutationVariant(LayoutVariant):
    """
    Home row mods where every key order of a chord is its own manipulator.

    Characteristics:
    - d/s/a/f and k/l/;/j map to command/control/shift/option
    - Chords up to three keys, each ordering registered separately
    - Installs into the "Compiled" profile
    """

    name = "permutations"
    profile_name = "Compiled"

    def get_key_map(self) -> Mapping[KeyCode, KeyCode]:
        return KEY_MAP

    def get_default_policy(self) -> CombinationPolicy:
        return CombinationPolicy(mode=CombinationMode.PERMUTATIONS, max_size=3)

    def extra_rules(self, config: Config) -> list[Rule]:
        return shared_rules()
