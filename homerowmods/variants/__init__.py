"""Layout variants."""

from homerowmods.core import UnknownVariantError
from homerowmods.variants.base import CombinationPolicy, LayoutVariant
from homerowmods.variants.mixed import MixedVariant
from homerowmods.variants.permutations import PermutationVariant

_VARIANTS: dict[str, type[LayoutVariant]] = {
    PermutationVariant.name: PermutationVariant,
    MixedVariant.name: MixedVariant,
}


def available_variants() -> list[str]:
    return list(_VARIANTS)


def get_variant(name: str) -> LayoutVariant:
    """Return a fresh variant instance by name.

    Raises:
        UnknownVariantError: If no variant is registered under name
    """
    try:
        return _VARIANTS[name]()
    except KeyError:
        raise UnknownVariantError(name, available_variants()) from None


__all__ = [
    "CombinationPolicy",
    "LayoutVariant",
    "MixedVariant",
    "PermutationVariant",
    "available_variants",
    "get_variant",
]
