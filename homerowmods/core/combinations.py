"""Bounded multi-arity combination generation.

Every group of home row keys that can be held together becomes one Karabiner
manipulator. Karabiner evaluates manipulators first-match-wins, so groups are
returned longest first: a three key chord must be registered before the two key
chords it contains.
"""

from collections.abc import Sequence
from enum import Enum
from math import comb, perm
from typing import TypeVar

from homerowmods.core.errors import InvalidSymbolsError

T = TypeVar("T")


class CombinationMode(Enum):
    """How groups of two or more keys are enumerated."""

    PERMUTATIONS = "permutations"  # Every ordering is its own group
    COMBINATIONS = "combinations"  # One group per set of keys
    MIXED = "mixed"  # Orderings up to two keys, sets above that


def get_permutations(symbols: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """Return all k-permutations of symbols, first-element-major.

    Picks each symbol in turn as the head and recurses on the remaining
    symbols, so the result has n!/(n-k)! entries.
    """
    if k <= 0 or k > len(symbols):
        return []
    if k == 1:
        return [(item,) for item in symbols]

    permutations = []
    for i, head in enumerate(symbols):
        remaining = list(symbols[:i]) + list(symbols[i + 1 :])
        for tail in get_permutations(remaining, k - 1):
            permutations.append((head, *tail))
    return permutations


def get_combinations(symbols: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """Return all k-combinations of symbols, preserving input order.

    Choose-or-skip recursion: every combination either starts with the first
    symbol (and picks k-1 from the rest) or skips it (and picks k from the rest).
    Sizes outside 1..len(symbols) yield nothing, matching get_permutations.
    """
    if k <= 0 or k > len(symbols):
        return []
    return _combinations(symbols, k)


def _combinations(symbols: Sequence[T], k: int) -> list[tuple[T, ...]]:
    if k == 0:
        return [()]
    if k > len(symbols):
        return []

    head, rest = symbols[0], symbols[1:]
    with_head = [(head, *tail) for tail in _combinations(rest, k - 1)]
    without_head = _combinations(rest, k)
    return with_head + without_head


def _uses_permutations(mode: CombinationMode, k: int) -> bool:
    if mode == CombinationMode.PERMUTATIONS:
        return True
    if mode == CombinationMode.MIXED:
        return k <= 2
    return False


def _resolve_max_size(length: int, max_size: int | None) -> int:
    if max_size is None:
        return length
    return max(0, min(length, max_size))


def _check_unique(symbols: Sequence[T]) -> None:
    seen = []
    for symbol in symbols:
        if symbol in seen:
            raise InvalidSymbolsError(f"Duplicate symbol in combination input: {symbol!r}")
        seen.append(symbol)


def generate_custom_combinations(
    symbols: Sequence[T],
    max_size: int | None = 3,
    mode: CombinationMode = CombinationMode.PERMUTATIONS,
) -> list[tuple[T, ...]]:
    """Generate every key group of size 1..max_size, longest first.

    Args:
        symbols: Ordered sequence of unique symbols
        max_size: Largest group size; clamped to len(symbols), None means unbounded
        mode: Enumeration policy for groups of two or more symbols

    Returns:
        Groups sorted by descending size. Within a size, groups keep the order
        the enumeration produced them (singles in input order).

    Raises:
        InvalidSymbolsError: If symbols contains duplicates
    """
    _check_unique(symbols)
    n = _resolve_max_size(len(symbols), max_size)

    result: list[tuple[T, ...]] = []
    for k in range(1, n + 1):
        if _uses_permutations(mode, k):
            result.extend(get_permutations(symbols, k))
        else:
            result.extend(get_combinations(symbols, k))

    # sorted() is stable with reverse=True, so generation order survives per size
    return sorted(result, key=len, reverse=True)


def count_combinations(
    length: int,
    max_size: int | None = 3,
    mode: CombinationMode = CombinationMode.PERMUTATIONS,
) -> int:
    """Return how many groups generate_custom_combinations yields for this input size."""
    n = _resolve_max_size(length, max_size)
    return sum(
        perm(length, k) if _uses_permutations(mode, k) else comb(length, k)
        for k in range(1, n + 1)
    )


def group_sizes(combinations: Sequence[Sequence[T]]) -> dict[int, int]:
    """Count groups per size, largest size first."""
    sizes: dict[int, int] = {}
    for combination in combinations:
        sizes[len(combination)] = sizes.get(len(combination), 0) + 1
    return dict(sorted(sizes.items(), reverse=True))
