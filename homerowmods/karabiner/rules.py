"""Turn home row key groups into Karabiner manipulators."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from loguru import logger

from homerowmods.core import (
    Combination,
    Config,
    KeyCode,
    Manipulator,
    Rule,
    count_combinations,
    generate_custom_combinations,
    group_sizes,
)
from homerowmods.karabiner.builders import map_key, map_simultaneous, rule
from homerowmods.utils.constants import Constants

if TYPE_CHECKING:
    from homerowmods.variants.base import CombinationPolicy, LayoutVariant


def single_key_manipulator(key: KeyCode, modifier: KeyCode) -> Manipulator:
    """Tap for the key itself, hold for its modifier."""
    return (
        map_key(key, optional=["any"])
        .to_if_alone(key)
        .to_if_held_down(modifier, halt=True)
        .build()
    )


def chord_manipulator(combination: Combination, key_map: Mapping[KeyCode, KeyCode]) -> Manipulator:
    """Hold a chord of home row keys for the union of their modifiers.

    Tapping the chord types its keys in order; the last one halts so the
    held-down action never fires after a tap.
    """
    modifiers = [key_map[key] for key in combination]
    builder = map_simultaneous(combination, key_down_order="strict")

    last = len(combination) - 1
    for i, key in enumerate(combination):
        if i == last:
            builder.to_if_alone(key, halt=True)
        else:
            builder.to_if_alone(key)

    builder.to_if_held_down(modifiers[0], modifiers[1:], halt=True)
    return builder.build()


def build_home_row_manipulators(
    key_map: Mapping[KeyCode, KeyCode],
    policy: "CombinationPolicy",
    verbose: bool = False,
) -> list[Manipulator]:
    """Build one manipulator per key group, longest groups first.

    Args:
        key_map: Home row key -> modifier it stands for when held
        policy: Enumeration mode and size bound for key groups
        verbose: Log group counts per size

    Returns:
        Manipulators in first-match-wins order
    """
    combinations = generate_custom_combinations(list(key_map), policy.max_size, policy.mode)

    if verbose:
        bound = "unbounded" if policy.max_size is None else policy.max_size
        expected = count_combinations(len(key_map), policy.max_size, policy.mode)
        logger.info(
            f"  Generated {len(combinations)} key groups of {expected} expected "
            f"({policy.mode.value}, max size {bound})"
        )
        for size, count in group_sizes(combinations).items():
            logger.info(f"    {size} key(s): {count}")

    manipulators = []
    for combination in combinations:
        if len(combination) == 1:
            key = combination[0]
            manipulators.append(single_key_manipulator(key, key_map[key]))
        else:
            manipulators.append(chord_manipulator(combination, key_map))
        logger.debug(f"Manipulator for {'+'.join(combination)}")

    return manipulators


def build_rules(variant: "LayoutVariant", config: Config) -> list[Rule]:
    """Build the variant's rules in evaluation order.

    Leading rules come first, then the generated home row rule, then the
    remaining hand-written rules.
    """
    policy = variant.get_policy(config)
    key_map = variant.get_key_map()

    if config.verbose:
        logger.info(f"Building rules for variant '{variant.name}'")

    rules = list(variant.leading_rules(config))
    rules.append(
        rule(
            Constants.HOME_ROW_RULE_DESCRIPTION,
            build_home_row_manipulators(key_map, policy, config.verbose),
        )
    )
    rules.extend(variant.extra_rules(config))

    if config.verbose:
        for built in rules:
            logger.info(f"  {built['description']}: {len(built['manipulators'])} manipulator(s)")

    return rules
