"""Host game contracts consumed by the scroll helper."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class SlotActionType(StrEnum):
    """Atomic slot click kinds understood by the host."""

    PICKUP = "PICKUP"
    QUICK_MOVE = "QUICK_MOVE"
    THROW = "THROW"


class ScreenKind(StrEnum):
    """Screen taxonomy relevant for scope classification."""

    INVENTORY = "INVENTORY"
    CONTAINER = "CONTAINER"
    CREATIVE = "CREATIVE"


class ItemStack(Protocol):
    """Borrowed view of a host item stack."""

    @property
    def count(self) -> int: ...

    @property
    def kind(self) -> Hashable: ...

    @property
    def is_empty(self) -> bool: ...

    def copy(self) -> "ItemStack": ...


class Inventory(Protocol):
    """Backing inventory of a slot."""

    @property
    def size(self) -> int: ...

    @property
    def is_player_inventory(self) -> bool: ...


class Slot(Protocol):
    """One addressable cell of a screen."""

    @property
    def id(self) -> int: ...

    @property
    def inventory(self) -> Inventory | None: ...

    @property
    def inv_slot(self) -> int: ...

    @property
    def stack(self) -> ItemStack: ...

    def can_insert(self, stack: ItemStack) -> bool: ...


class Screen(Protocol):
    """Open handled screen with its ordered slots."""

    @property
    def kind(self) -> ScreenKind: ...

    @property
    def slots(self) -> Sequence[Slot]: ...


@dataclass(frozen=True, slots=True)
class ModifierKeys:
    """Modifier key state sampled at gesture time."""

    shift: bool = False
    control: bool = False


class ModifierSource(Protocol):
    """Host keyboard state query."""

    def modifiers(self) -> ModifierKeys:
        """Return the currently held modifier keys."""


@dataclass(frozen=True, slots=True)
class _EmptyStack:
    count: int = 0
    kind: Hashable = None
    is_empty: bool = True

    def copy(self) -> "_EmptyStack":
        return self


EMPTY_STACK: ItemStack = _EmptyStack()

ItemKindMatcher = Callable[[ItemStack, ItemStack], bool]


__all__ = [
    "EMPTY_STACK",
    "Inventory",
    "ItemKindMatcher",
    "ItemStack",
    "ModifierKeys",
    "ModifierSource",
    "Screen",
    "ScreenKind",
    "Slot",
    "SlotActionType",
]
