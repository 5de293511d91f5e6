from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from invscroll.api.host import ItemStack, ModifierKeys, ScreenKind, SlotActionType
from invscroll.api.interactions import CompletedWaiter, InteractionEvent, Waiter
from invscroll.core.scope import HotbarScoping
from invscroll.runtime.config import GeneralConfig, HelperConfig, ScrollingConfig

PLAYER_INVENTORY_SIZE = 41


@dataclass(frozen=True, slots=True)
class FakeStack:
    kind: Hashable = None
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.kind is None or self.count <= 0

    def copy(self) -> "FakeStack":
        return FakeStack(self.kind, self.count)


@dataclass(frozen=True, slots=True)
class FakeInventory:
    size: int
    is_player_inventory: bool = False


PLAYER = FakeInventory(PLAYER_INVENTORY_SIZE, is_player_inventory=True)
CHEST = FakeInventory(27)


@dataclass(slots=True)
class FakeSlot:
    id: int
    inventory: FakeInventory | None
    inv_slot: int
    stack: FakeStack = field(default_factory=FakeStack)
    accepts_items: bool = True

    def can_insert(self, stack: ItemStack) -> bool:
        return self.accepts_items


@dataclass(slots=True)
class FakeScreen:
    kind: ScreenKind
    slots: list[FakeSlot] = field(default_factory=list)

    def add(
        self,
        inventory: FakeInventory | None,
        inv_slot: int,
        stack: FakeStack | None = None,
        *,
        accepts_items: bool = True,
    ) -> FakeSlot:
        slot = FakeSlot(
            id=len(self.slots),
            inventory=inventory,
            inv_slot=inv_slot,
            stack=stack if stack is not None else FakeStack(),
            accepts_items=accepts_items,
        )
        self.slots.append(slot)
        return slot


@dataclass(slots=True)
class FakeModifiers:
    shift: bool = False
    control: bool = False

    def modifiers(self) -> ModifierKeys:
        return ModifierKeys(shift=self.shift, control=self.control)


@dataclass(frozen=True, slots=True)
class ClickEvent:
    slot_id: int
    button: int
    action_type: SlotActionType
    sent: list["ClickEvent"] = field(compare=False, repr=False)
    run_on_main: bool = False

    def send(self) -> Waiter:
        self.sent.append(self)
        return CompletedWaiter()

    def should_run_on_main_thread(self) -> bool:
        return self.run_on_main


class RecordingFactory:
    """Click factory recording every event it submits to `sent`."""

    def __init__(self, *, run_on_main: bool = False) -> None:
        self.sent: list[ClickEvent] = []
        self.created = 0
        self.run_on_main = run_on_main

    def create(self, slot: FakeSlot, button: int, action_type: SlotActionType) -> ClickEvent:
        self.created += 1
        return ClickEvent(slot.id, button, action_type, self.sent, self.run_on_main)


class RecordingQueue:
    def __init__(self) -> None:
        self.events: list[InteractionEvent] = []

    def push(self, event: InteractionEvent | None) -> None:
        if event is not None:
            self.events.append(event)

    def clicks(self) -> list[tuple[int, int, SlotActionType] | None]:
        """Describe queued click events; callback wrappers show up as None."""
        result: list[tuple[int, int, SlotActionType] | None] = []
        for event in self.events:
            if isinstance(event, ClickEvent):
                result.append((event.slot_id, event.button, event.action_type))
            else:
                result.append(None)
        return result


def described(events: list[ClickEvent]) -> list[tuple[int, int, SlotActionType]]:
    return [(event.slot_id, event.button, event.action_type) for event in events]


def make_config(
    *,
    directional_scrolling: bool = True,
    hotbar_scoping: HotbarScoping = HotbarScoping.SOFT,
) -> HelperConfig:
    return HelperConfig(
        scrolling=ScrollingConfig(directional_scrolling=directional_scrolling),
        general=GeneralConfig(hotbar_scoping=hotbar_scoping),
    )
