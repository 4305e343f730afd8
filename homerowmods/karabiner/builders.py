"""Builders for Karabiner-Elements manipulator and rule records.

Everything here returns plain dicts shaped like Karabiner's JSON schema, so
the result can go straight to json.dump or yaml.safe_dump.
"""

from typing import Any

from homerowmods.core import KeyCode, Manipulator, Rule

# Order Karabiner itself writes manipulator keys in
_EVENT_KEYS = ("to", "to_if_alone", "to_if_held_down")


def key_event(
    key_code: KeyCode, modifiers: list[KeyCode] | None = None, **options: Any
) -> dict[str, Any]:
    """Create a to-event: {"key_code": ..., "modifiers": [...], **options}.

    Empty modifier lists are omitted; options carry flags such as halt,
    lazy or repeat.
    """
    event: dict[str, Any] = {"key_code": key_code}
    if modifiers:
        event["modifiers"] = list(modifiers)
    event.update(options)
    return event


def from_modifiers(
    mandatory: list[KeyCode] | None = None, optional: list[KeyCode] | None = None
) -> dict[str, list[KeyCode]]:
    """Create the from.modifiers block, skipping empty halves."""
    modifiers = {}
    if mandatory:
        modifiers["mandatory"] = list(mandatory)
    if optional:
        modifiers["optional"] = list(optional)
    return modifiers


def frontmost_application_if(bundle_identifiers: list[str]) -> dict[str, Any]:
    """Condition matching when one of the given apps is focused."""
    return {
        "type": "frontmost_application_if",
        "bundle_identifiers": list(bundle_identifiers),
    }


def frontmost_application_unless(bundle_identifiers: list[str]) -> dict[str, Any]:
    """Condition matching when none of the given apps is focused."""
    return {
        "type": "frontmost_application_unless",
        "bundle_identifiers": list(bundle_identifiers),
    }


class ManipulatorBuilder:
    """Fluent builder for a single basic manipulator.

    Example:
        map_key("d", optional=["any"]).to_if_alone("d").to_if_held_down(
            "left_command", halt=True
        ).build()
    """

    def __init__(self, from_block: dict[str, Any]):
        self._from = from_block
        self._events: dict[str, list[dict[str, Any]]] = {}
        self._conditions: list[dict[str, Any]] = []
        self._parameters: dict[str, int] = {}

    def _add_event(self, kind: str, event: dict[str, Any]) -> "ManipulatorBuilder":
        self._events.setdefault(kind, []).append(event)
        return self

    def to(
        self, key_code: KeyCode, modifiers: list[KeyCode] | None = None, **options: Any
    ) -> "ManipulatorBuilder":
        return self._add_event("to", key_event(key_code, modifiers, **options))

    def to_if_alone(
        self, key_code: KeyCode, modifiers: list[KeyCode] | None = None, **options: Any
    ) -> "ManipulatorBuilder":
        return self._add_event("to_if_alone", key_event(key_code, modifiers, **options))

    def to_if_held_down(
        self, key_code: KeyCode, modifiers: list[KeyCode] | None = None, **options: Any
    ) -> "ManipulatorBuilder":
        return self._add_event("to_if_held_down", key_event(key_code, modifiers, **options))

    def condition(self, condition: dict[str, Any]) -> "ManipulatorBuilder":
        self._conditions.append(condition)
        return self

    def parameters(self, **parameters: int) -> "ManipulatorBuilder":
        """Set per-manipulator parameters, e.g. basic_to_if_alone_timeout_milliseconds=300.

        Underscores after the "basic" prefix become dots, matching Karabiner's keys.
        """
        for name, value in parameters.items():
            self._parameters[name.replace("_", ".", 1)] = value
        return self

    def build(self) -> Manipulator:
        manipulator: Manipulator = {"type": "basic", "from": self._from}
        for kind in _EVENT_KEYS:
            if kind in self._events:
                manipulator[kind] = list(self._events[kind])
        if self._conditions:
            manipulator["conditions"] = list(self._conditions)
        if self._parameters:
            manipulator["parameters"] = dict(self._parameters)
        return manipulator


def map_key(
    key_code: KeyCode,
    mandatory: list[KeyCode] | None = None,
    optional: list[KeyCode] | None = None,
) -> ManipulatorBuilder:
    """Start a manipulator triggered by a single key."""
    from_block: dict[str, Any] = {"key_code": key_code}
    modifiers = from_modifiers(mandatory, optional)
    if modifiers:
        from_block["modifiers"] = modifiers
    return ManipulatorBuilder(from_block)


def map_simultaneous(
    keys: list[KeyCode] | tuple[KeyCode, ...], key_down_order: str = "strict"
) -> ManipulatorBuilder:
    """Start a manipulator triggered by several keys pressed together.

    Args:
        keys: Keys that make up the chord
        key_down_order: "strict" requires the keys to go down in the listed order,
            "insensitive" accepts any order
    """
    from_block = {
        "simultaneous": [{"key_code": key} for key in keys],
        "simultaneous_options": {"key_down_order": key_down_order},
    }
    return ManipulatorBuilder(from_block)


def rule(description: str, manipulators: list[Manipulator | ManipulatorBuilder]) -> Rule:
    """Create a complex-modification rule, building any pending builders."""
    return {
        "description": description,
        "manipulators": [
            m.build() if isinstance(m, ManipulatorBuilder) else m for m in manipulators
        ],
    }
