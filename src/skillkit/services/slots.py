"""Slot value resolution."""

from collections.abc import Mapping

from ..models.request import (
    RESOLUTION_SUCCESS_CODE,
    AlexaSlot,
    ResolutionPerAuthority,
    ResolutionStatus,
    Resolutions,
    ResolutionValue,
    ResolutionValueWrapper,
)


def resolve_slot(slot: AlexaSlot) -> str:
    """
    Return the value the rest of the skill should treat as authoritative.

    If the user spoke a synonym of a custom slot value (or something like
    "this month" that resolved to an ISO date), the canonical name from the
    first resolution authority wins. Otherwise you get back exactly what the
    user said, which may be an empty string.
    """
    if slot.resolutions and slot.resolutions.resolutions_per_authority:
        authority = slot.resolutions.resolutions_per_authority[0]
        if authority.status.code == RESOLUTION_SUCCESS_CODE and authority.values:
            return authority.values[0].value.name

    return slot.value or ""


def resolve(slots: Mapping[str, AlexaSlot] | None, slot_name: str) -> str:
    """Resolve the named slot, treating a missing slot as an empty value."""
    if not slots:
        return ""
    slot = slots.get(slot_name)
    if slot is None:
        return ""
    return resolve_slot(slot)


def clone_slots(slots: Mapping[str, AlexaSlot] | None) -> dict[str, AlexaSlot]:
    """
    Copy slots so they can be sent back in a response.

    Only the name and the resolved value survive; resolution authority data
    from the original request is dropped.
    """
    return {
        slot_name: AlexaSlot(name=slot.name, value=resolve_slot(slot))
        for slot_name, slot in (slots or {}).items()
    }


def new_slot(name: str, value: str) -> AlexaSlot:
    """Build a slot with an uttered value and no resolution data."""
    return AlexaSlot(name=name, value=value)


def new_resolved_slot(name: str, value: str, resolved_value: str) -> AlexaSlot:
    """Build a slot whose first authority successfully matched ``resolved_value``."""
    return AlexaSlot(
        name=name,
        value=value,
        resolutions=Resolutions(
            resolutions_per_authority=[
                ResolutionPerAuthority(
                    status=ResolutionStatus(code=RESOLUTION_SUCCESS_CODE),
                    values=[ResolutionValueWrapper(value=ResolutionValue(name=resolved_value))],
                )
            ]
        ),
    )


def new_slots(*slots: AlexaSlot) -> dict[str, AlexaSlot]:
    """Key the given slots by name."""
    return {slot.name: slot for slot in slots}
