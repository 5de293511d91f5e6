"""Scroll gesture translation into ordered slot interactions."""

from __future__ import annotations

import logging
from collections.abc import Callable

from invscroll.api.host import (
    EMPTY_STACK,
    ItemKindMatcher,
    ModifierSource,
    Screen,
    Slot,
    SlotActionType,
)
from invscroll.api.interactions import (
    CallbackEvent,
    ClickEventFactory,
    EventQueue,
    InteractionEvent,
    Waiter,
)
from invscroll.core.item_kinds import are_items_of_same_kind
from invscroll.core.scope import (
    INVALID_SCOPE,
    ScopeRule,
    default_scope,
    is_hotbar_slot,
    is_lower_scope,
    scope_rule_for,
)
from invscroll.core.slot_locks import SlotLockRegistry
from invscroll.runtime.config import HelperConfig, get_helper_config

SlotAction = Callable[[Slot], None]
ConfigProvider = Callable[[], HelperConfig]

logger = logging.getLogger(__name__)


class ContainerScreenHelper:
    """Per-screen gesture helper.

    Owns the slot lock registry for the screen it is bound to. All emitters push
    events to `queue` in the exact order the host has to process them.
    """

    INVALID_SCOPE = INVALID_SCOPE

    def __init__(
        self,
        screen: Screen,
        click_event_factory: ClickEventFactory,
        *,
        queue: EventQueue,
        modifiers: ModifierSource,
        scope_rule: ScopeRule = default_scope,
        config_provider: ConfigProvider = get_helper_config,
        same_kind: ItemKindMatcher = are_items_of_same_kind,
    ) -> None:
        if screen is None:
            raise ValueError("screen is required")
        if click_event_factory is None:
            raise ValueError("click_event_factory is required")
        if queue is None:
            raise ValueError("queue is required")
        self.screen = screen
        self.click_event_factory = click_event_factory
        self._queue = queue
        self._modifiers = modifiers
        self._scope_rule = scope_rule
        self._config_provider = config_provider
        self._same_kind = same_kind
        self.locked_slots = SlotLockRegistry()

    @classmethod
    def of(
        cls,
        screen: Screen,
        click_event_factory: ClickEventFactory,
        *,
        queue: EventQueue,
        modifiers: ModifierSource,
        config_provider: ConfigProvider = get_helper_config,
        same_kind: ItemKindMatcher = are_items_of_same_kind,
    ) -> "ContainerScreenHelper":
        """Create helper with the scope rule matching the screen kind."""
        if screen is None:
            raise ValueError("screen is required")
        return cls(
            screen,
            click_event_factory,
            queue=queue,
            modifiers=modifiers,
            scope_rule=scope_rule_for(screen.kind),
            config_provider=config_provider,
            same_kind=same_kind,
        )

    # Locking

    def is_slot_locked(self, slot: Slot) -> bool:
        return self.locked_slots.is_locked(slot.id)

    def lock_slot(self, slot: Slot) -> None:
        self.locked_slots.lock(slot.id)

    def unlock_slot(self, slot: Slot) -> None:
        self.locked_slots.unlock(slot.id)

    def create_click_event(
        self, slot: Slot, button: int, action_type: SlotActionType
    ) -> InteractionEvent | None:
        """Create click event unless the slot is locked."""
        if self.is_slot_locked(slot):
            return None
        return self.click_event_factory.create(slot, button, action_type)

    def _unlock_after(self, event: InteractionEvent | None, slot: Slot) -> InteractionEvent | None:
        if event is None:
            return None
        wrapped: InteractionEvent = event

        def send_and_unlock() -> Waiter:
            waiter = wrapped.send()
            self.unlock_slot(slot)
            logger.debug("slot_unlocked slot_id=%d", slot.id)
            return waiter

        return CallbackEvent(send_and_unlock, wrapped.should_run_on_main_thread())

    # Scopes

    def get_scope(self, slot: Slot, prefer_smaller_scopes: bool = False) -> int:
        config = self._config_provider()
        return self._scope_rule(
            slot, self.screen.kind, config.general.hotbar_scoping, prefer_smaller_scopes
        )

    def shall_change_inventory(self, slot: Slot, scroll_up: bool) -> bool:
        """Return whether scrolling moves items out of `slot` into another scope."""
        return is_lower_scope(self.get_scope(slot)) == scroll_up

    def is_hotbar_slot(self, slot: Slot) -> bool:
        return is_hotbar_slot(slot)

    def run_in_scope(
        self, scope: int, action: SlotAction, *, prefer_smaller_scopes: bool = False
    ) -> None:
        """Apply action to every screen slot of `scope`, in screen order."""
        for slot in tuple(self.screen.slots):
            if self.get_scope(slot, prefer_smaller_scopes) == scope:
                action(slot)

    # Gestures

    def scroll(self, reference_slot: Slot, scroll_up: bool) -> None:
        """Handle one wheel step over `reference_slot`."""
        config = self._config_provider()
        if config.scrolling.directional_scrolling:
            shall_send = self.shall_change_inventory(reference_slot, scroll_up)
        else:
            shall_send = not scroll_up
            scroll_up = False

        keys = self._modifiers.modifiers()
        logger.debug(
            "scroll slot_id=%d scroll_up=%s shall_send=%s shift=%s control=%s",
            reference_slot.id,
            scroll_up,
            shall_send,
            keys.shift,
            keys.control,
        )

        if shall_send:
            if not reference_slot.can_insert(EMPTY_STACK):
                self.send_stack(reference_slot)
            if keys.control:
                self.send_all_of_a_kind(reference_slot)
            elif keys.shift:
                self.send_stack(reference_slot)
            else:
                self.send_single_item(reference_slot)
            return

        reference_stack = reference_slot.stack.copy()
        reference_scope = self.get_scope(reference_slot)
        if keys.shift or keys.control:
            for slot in tuple(self.screen.slots):
                if self.get_scope(slot) == reference_scope:
                    continue
                if self._same_kind(slot.stack, reference_stack):
                    self.send_stack(slot)
                    if not keys.control:
                        break
            return

        move_slot: Slot | None = None
        stack_size = 0
        for slot in tuple(self.screen.slots):
            scope = self.get_scope(slot)
            if scope == reference_scope:
                continue
            if is_lower_scope(scope) != scroll_up:
                continue
            if not self._same_kind(slot.stack, reference_stack):
                continue
            if move_slot is None or slot.stack.count < stack_size:
                stack_size = slot.stack.count
                move_slot = slot
                if stack_size == 1:
                    break
        if move_slot is not None:
            self.send_single_item(move_slot)

    # Emitters

    def send_single_item(self, slot: Slot) -> None:
        if self.is_slot_locked(slot):
            return

        factory = self.click_event_factory
        if slot.stack.count == 1:
            self._queue.push(factory.create(slot, 0, SlotActionType.QUICK_MOVE))
            return
        self._queue.push(factory.create(slot, 0, SlotActionType.PICKUP))
        self._queue.push(factory.create(slot, 1, SlotActionType.PICKUP))
        self._queue.push(factory.create(slot, 0, SlotActionType.QUICK_MOVE))
        self._queue.push(factory.create(slot, 0, SlotActionType.PICKUP))

    def send_single_item_locked(self, slot: Slot) -> None:
        """Like `send_single_item`, keeping the slot locked until the last step is submitted."""
        if self.is_slot_locked(slot):
            return

        self.lock_slot(slot)
        factory = self.click_event_factory
        if slot.stack.count == 1:
            self._queue.push(
                self._unlock_after(factory.create(slot, 0, SlotActionType.QUICK_MOVE), slot)
            )
            return
        self._queue.push(factory.create(slot, 0, SlotActionType.PICKUP))
        self._queue.push(factory.create(slot, 1, SlotActionType.PICKUP))
        self._queue.push(factory.create(slot, 0, SlotActionType.QUICK_MOVE))
        self._queue.push(self._unlock_after(factory.create(slot, 0, SlotActionType.PICKUP), slot))

    def send_stack(self, slot: Slot) -> None:
        self._queue.push(self.create_click_event(slot, 0, SlotActionType.QUICK_MOVE))

    def send_stack_locked(self, slot: Slot) -> None:
        if self.is_slot_locked(slot):
            return

        self.lock_slot(slot)
        self._queue.push(
            self._unlock_after(
                self.click_event_factory.create(slot, 0, SlotActionType.QUICK_MOVE), slot
            )
        )

    def send_all_of_a_kind(self, reference_slot: Slot) -> None:
        """Send every stack in the reference scope matching the reference item kind."""
        self._run_for_kind(reference_slot, self.send_stack)

    def send_all_from(self, reference_slot: Slot) -> None:
        """Send every stack of the reference scope, splitting the hotbar when preferred."""
        self.run_in_scope(
            self.get_scope(reference_slot, True), self.send_stack, prefer_smaller_scopes=True
        )

    def drop_stack(self, slot: Slot) -> None:
        if self.is_slot_locked(slot):
            return

        self._queue.push(self.create_click_event(slot, 1, SlotActionType.THROW))

    def drop_stack_locked(self, slot: Slot) -> None:
        if self.is_slot_locked(slot):
            return

        self.lock_slot(slot)
        self._queue.push(
            self._unlock_after(self.click_event_factory.create(slot, 1, SlotActionType.THROW), slot)
        )

    def drop_all_of_a_kind(self, reference_slot: Slot) -> None:
        self._run_for_kind(reference_slot, self.drop_stack)

    def drop_all_from(self, reference_slot: Slot) -> None:
        self.run_in_scope(
            self.get_scope(reference_slot, True), self.drop_stack, prefer_smaller_scopes=True
        )

    def _run_for_kind(self, reference_slot: Slot, action: SlotAction) -> None:
        reference_stack = reference_slot.stack.copy()

        def run_if_same_kind(slot: Slot) -> None:
            if self._same_kind(slot.stack, reference_stack):
                action(slot)

        self.run_in_scope(self.get_scope(reference_slot), run_if_same_kind)
