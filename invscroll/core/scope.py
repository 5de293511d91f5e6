"""Slot scope classification.

A scope is an integer region tag. Slots sharing a scope never exchange items
within one gesture; scopes <= 0 are the "lower" regions (hotbar, offhand or the
player inventory of a container screen).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from invscroll.api.host import EMPTY_STACK, ScreenKind, Slot

INVALID_SCOPE = 2**31 - 1
HOTBAR_SIZE = 9
OFFHAND_START = 40


class HotbarScoping(StrEnum):
    """How strongly the hotbar is split from the rest of the player inventory."""

    OFF = "OFF"
    SOFT = "SOFT"
    HARD = "HARD"


ScopeRule = Callable[[Slot, ScreenKind, HotbarScoping, bool], int]


def is_hotbar_slot(slot: Slot) -> bool:
    return slot.inv_slot < HOTBAR_SIZE


def has_valid_binding(slot: Slot) -> bool:
    """Return whether slot is backed by an inventory position accepting items."""
    inventory = slot.inventory
    if inventory is None or slot.inv_slot >= inventory.size:
        return False
    return slot.can_insert(EMPTY_STACK)


def default_scope(
    slot: Slot,
    screen_kind: ScreenKind,
    hotbar_scoping: HotbarScoping,
    prefer_smaller_scopes: bool = False,
) -> int:
    """Classify slot for inventory-only and container screens."""
    inventory = slot.inventory
    if inventory is None or not has_valid_binding(slot):
        return INVALID_SCOPE
    is_player = inventory.is_player_inventory
    if screen_kind is ScreenKind.INVENTORY:
        if not is_player:
            return 2
        if is_hotbar_slot(slot):
            return 0
        if slot.inv_slot >= OFFHAND_START:
            return -1
        return 1
    if not is_player:
        return 1
    if is_hotbar_slot(slot):
        if hotbar_scoping is HotbarScoping.HARD:
            return -1
        if hotbar_scoping is HotbarScoping.SOFT and prefer_smaller_scopes:
            return -1
    return 0


def creative_scope(
    slot: Slot,
    screen_kind: ScreenKind,
    hotbar_scoping: HotbarScoping,
    prefer_smaller_scopes: bool = False,
) -> int:
    """Classify slot for the creative screen.

    Palette slots are excluded entirely; player slots follow the inventory-only
    layout regardless of hotbar scoping.
    """
    inventory = slot.inventory
    if inventory is None or not has_valid_binding(slot):
        return INVALID_SCOPE
    if not inventory.is_player_inventory:
        return INVALID_SCOPE
    if is_hotbar_slot(slot):
        return 0
    if slot.inv_slot >= OFFHAND_START:
        return -1
    return 1


def scope_rule_for(screen_kind: ScreenKind) -> ScopeRule:
    """Select the scope rule variant for a screen kind."""
    if screen_kind is ScreenKind.CREATIVE:
        return creative_scope
    return default_scope


def is_lower_scope(scope: int) -> bool:
    return scope <= 0
