"""Base classes and types for layout variants."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from homerowmods.core import CombinationMode, Config, KeyCode, Rule


@dataclass(frozen=True)
class CombinationPolicy:
    """How a variant enumerates its home row key groups."""

    mode: CombinationMode
    max_size: int | None  # None = every size up to the full key set


def freeze_key_map(pairs: list[tuple[KeyCode, KeyCode]]) -> Mapping[KeyCode, KeyCode]:
    """Build a read-only, insertion-ordered key -> modifier table."""
    return MappingProxyType(dict(pairs))


class LayoutVariant(ABC):
    """Abstract base class for a home row mods layout.

    A variant owns its key table, its combination policy, and the
    hand-written rules installed after the generated home row rule.
    """

    name: str = ""
    profile_name: str = ""

    @abstractmethod
    def get_key_map(self) -> Mapping[KeyCode, KeyCode]:
        """Return home row key -> modifier, in the order keys are enumerated."""

    @abstractmethod
    def get_default_policy(self) -> CombinationPolicy:
        """Return the variant's own combination policy."""

    def leading_rules(self, config: Config) -> list[Rule]:
        """Return hand-written rules that must be matched before the home row rule."""
        return []

    @abstractmethod
    def extra_rules(self, config: Config) -> list[Rule]:
        """Return hand-written rules appended after the home row rule."""

    def get_policy(self, config: Config) -> CombinationPolicy:
        """Return the variant policy with any mode/max_size overrides from config."""
        policy = self.get_default_policy()
        if config.mode is not None:
            policy = replace(policy, mode=config.mode)
        if config.max_size is not None:
            policy = replace(policy, max_size=config.max_size)
        return policy
