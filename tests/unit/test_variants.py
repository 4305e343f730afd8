"""Unit tests for layout variants and their rule sets."""

import pytest

from homerowmods.core import CombinationMode, Config, UnknownVariantError
from homerowmods.karabiner import build_rules
from homerowmods.utils.constants import Constants
from homerowmods.variants import MixedVariant, PermutationVariant, available_variants, get_variant


def _descriptions(rules: list[dict]) -> list[str]:
    return [r["description"] for r in rules]


def _home_row(rules: list[dict]) -> dict:
    return next(r for r in rules if r["description"] == Constants.HOME_ROW_RULE_DESCRIPTION)


def _rule(rules: list[dict], description: str) -> dict:
    return next(r for r in rules if r["description"] == description)


def _markdown(key: str) -> dict:
    rules = build_rules(MixedVariant(), Config(variant="mixed"))
    return next(
        m for m in _rule(rules, "Markdown helpers")["manipulators"] if m["from"]["key_code"] == key
    )


class TestVariantRegistry:
    """Test variant lookup."""

    def test_lists_both_variants(self) -> None:
        """Both layouts are registered."""
        assert available_variants() == ["permutations", "mixed"]

    def test_returns_variant_by_name(self) -> None:
        """get_variant builds the requested variant."""
        assert isinstance(get_variant("mixed"), MixedVariant)

    def test_unknown_variant_raises(self) -> None:
        """Unknown names raise UnknownVariantError."""
        with pytest.raises(UnknownVariantError):
            get_variant("colemak")


class TestKeyMaps:
    """Test the read-only key tables."""

    def test_permutation_key_order(self) -> None:
        """Keys enumerate in the order they were declared."""
        assert list(PermutationVariant().get_key_map()) == [
            "d", "s", "a", "f", "k", "l", "semicolon", "j",
        ]

    def test_key_map_is_read_only(self) -> None:
        """Key tables cannot be mutated."""
        key_map = MixedVariant().get_key_map()
        with pytest.raises(TypeError):
            key_map["a"] = "left_shift"  # type: ignore[index]

    def test_each_key_maps_to_a_distinct_modifier(self) -> None:
        """Key -> modifier is one-to-one."""
        key_map = MixedVariant().get_key_map()
        assert len(set(key_map.values())) == len(key_map)


class TestPolicies:
    """Test variant policies and config overrides."""

    def test_permutation_policy(self) -> None:
        """Permutation variant: ordered chords up to three keys."""
        policy = PermutationVariant().get_policy(Config())
        assert (policy.mode, policy.max_size) == (CombinationMode.PERMUTATIONS, 3)

    def test_mixed_policy(self) -> None:
        """Mixed variant: mixed mode, unbounded."""
        policy = MixedVariant().get_policy(Config())
        assert (policy.mode, policy.max_size) == (CombinationMode.MIXED, None)

    def test_config_overrides_policy(self) -> None:
        """mode and max_size in config replace the variant's policy."""
        config = Config(mode="combinations", max_size=2)
        policy = PermutationVariant().get_policy(config)
        assert (policy.mode, policy.max_size) == (CombinationMode.COMBINATIONS, 2)


class TestPermutationRules:
    """Test the permutation variant's rules."""

    def test_rule_order(self) -> None:
        """Home row rule first, then the hand-written rules."""
        rules = build_rules(PermutationVariant(), Config())
        assert _descriptions(rules) == [
            "Home row mods",
            "Shift + backspace = delete",
            "Home, end",
            "Home, end, terminal",
        ]

    def test_home_row_manipulator_count(self) -> None:
        """8 + 56 + 336 manipulators."""
        rules = build_rules(PermutationVariant(), Config())
        assert len(_home_row(rules)["manipulators"]) == 400

    def test_terminal_home_sends_command_a(self) -> None:
        """In terminals, home sends cmd+a."""
        rules = build_rules(PermutationVariant(), Config())
        terminal_rule = rules[3]
        assert terminal_rule["manipulators"][0]["to"] == [
            {"key_code": "a", "modifiers": ["left_command"]}
        ]

    def test_shift_backspace_sends_forward_delete(self) -> None:
        """Shift + backspace is remapped to delete_forward."""
        rules = build_rules(PermutationVariant(), Config())
        assert _rule(rules, "Shift + backspace = delete")["manipulators"] == [
            {
                "type": "basic",
                "from": {
                    "key_code": "delete_or_backspace",
                    "modifiers": {"mandatory": ["left_shift"]},
                },
                "to": [{"key_code": "delete_forward"}],
            }
        ]

    def test_home_outside_terminal_sends_command_left(self) -> None:
        """Outside terminals, home sends cmd+left arrow."""
        rules = build_rules(PermutationVariant(), Config())
        home = _rule(rules, "Home, end")["manipulators"][0]
        assert home["to"] == [{"key_code": "left_arrow", "modifiers": ["left_command"]}]

    def test_end_outside_terminal_sends_command_right(self) -> None:
        """Outside terminals, end sends cmd+right arrow."""
        rules = build_rules(PermutationVariant(), Config())
        end = _rule(rules, "Home, end")["manipulators"][1]
        assert end["to"] == [{"key_code": "right_arrow", "modifiers": ["left_command"]}]

    def test_home_end_excludes_terminals(self) -> None:
        """The cmd+arrow mapping is skipped when a terminal is focused."""
        rules = build_rules(PermutationVariant(), Config())
        home = _rule(rules, "Home, end")["manipulators"][0]
        assert home["conditions"] == [
            {
                "type": "frontmost_application_unless",
                "bundle_identifiers": Constants.TERMINAL_BUNDLE_IDENTIFIERS,
            }
        ]


class TestMixedRules:
    """Test the mixed variant's rules."""

    def test_rule_order(self) -> None:
        """Hyper arrows lead, then home row, then the rest."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        assert _descriptions(rules) == [
            "Hyper arrows",
            "Home row mods",
            "Shift + backspace = delete",
            "Home, end",
            "Home, end, terminal",
            "Hyper / Meh",
            "Markdown helpers",
        ]

    def test_home_row_manipulator_count(self) -> None:
        """8 singles + 56 ordered pairs + 219 unordered larger chords."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        assert len(_home_row(rules)["manipulators"]) == 283

    def test_hyper_arrows_repeat(self) -> None:
        """Every Hyper arrow keeps repeating while held."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        arrows = rules[0]["manipulators"]
        assert all(m["to"][0]["repeat"] is True for m in arrows)

    def test_caps_lock_is_hyper(self) -> None:
        """Caps lock sends all four modifiers."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        hyper_meh = next(r for r in rules if r["description"] == "Hyper / Meh")
        caps_lock = hyper_meh["manipulators"][0]
        assert caps_lock["to"] == [
            {
                "key_code": "left_command",
                "modifiers": ["left_control", "left_option", "left_shift"],
            }
        ]

    def test_caps_lock_alone_timeout_follows_held_threshold(self) -> None:
        """Caps lock's alone timeout uses the configured held threshold."""
        rules = build_rules(MixedVariant(), Config(variant="mixed", held_threshold_ms=180))
        hyper_meh = next(r for r in rules if r["description"] == "Hyper / Meh")
        assert hyper_meh["manipulators"][0]["parameters"] == {
            "basic.to_if_alone_timeout_milliseconds": 180
        }

    def test_markdown_link_moves_cursor_back(self) -> None:
        """Hyper+u types []() and moves left three times."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        markdown = rules[-1]["manipulators"]
        link = next(m for m in markdown if m["from"]["key_code"] == "u")
        assert [e["key_code"] for e in link["to"]] == [
            "open_bracket",
            "close_bracket",
            "9",
            "0",
            "left_arrow",
            "left_arrow",
            "left_arrow",
        ]

    def test_caps_lock_alone_is_escape(self) -> None:
        """Tapping caps lock sends escape."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        caps_lock = _rule(rules, "Hyper / Meh")["manipulators"][0]
        assert caps_lock["to_if_alone"] == [{"key_code": "escape"}]

    def test_tab_held_is_meh(self) -> None:
        """Holding tab sends control, option and shift, and halts."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        tab = _rule(rules, "Hyper / Meh")["manipulators"][1]
        assert tab["to_if_held_down"] == [
            {
                "key_code": "left_control",
                "modifiers": ["left_option", "left_shift"],
                "halt": True,
            }
        ]

    def test_tab_alone_is_tab(self) -> None:
        """Tapping tab still types tab."""
        rules = build_rules(MixedVariant(), Config(variant="mixed"))
        tab = _rule(rules, "Hyper / Meh")["manipulators"][1]
        assert tab["to_if_alone"] == [{"key_code": "tab"}]

    def test_markdown_bold_types_two_asterisks(self) -> None:
        """Hyper+b types **."""
        assert _markdown("b")["to"] == [
            {"key_code": "8", "modifiers": ["left_shift"]},
            {"key_code": "8", "modifiers": ["left_shift"]},
        ]

    def test_markdown_italic_types_underscore(self) -> None:
        """Hyper+i types _."""
        assert _markdown("i")["to"] == [{"key_code": "hyphen", "modifiers": ["left_shift"]}]

    def test_markdown_code_fence_types_three_backticks(self) -> None:
        """Hyper+c types a code fence."""
        assert _markdown("c")["to"] == [{"key_code": "grave_accent_and_tilde"}] * 3

    def test_markdown_shortcuts_require_hyper(self) -> None:
        """Markdown shortcuts only fire with all four Hyper modifiers held."""
        assert _markdown("b")["from"]["modifiers"] == {
            "mandatory": Constants.HYPER_MODIFIERS
        }
