"""Public host and interaction contracts."""

from invscroll.api.host import (
    EMPTY_STACK,
    Inventory,
    ItemKindMatcher,
    ItemStack,
    ModifierKeys,
    ModifierSource,
    Screen,
    ScreenKind,
    Slot,
    SlotActionType,
)
from invscroll.api.interactions import (
    CallbackEvent,
    ClickEventFactory,
    CompletedWaiter,
    EventQueue,
    InteractionEvent,
    Waiter,
    create_interaction_queue,
)
from invscroll.api.logging import JsonFormatter, LoggingConfig, configure_logging

__all__ = [
    "CallbackEvent",
    "ClickEventFactory",
    "CompletedWaiter",
    "EMPTY_STACK",
    "EventQueue",
    "InteractionEvent",
    "Inventory",
    "ItemKindMatcher",
    "ItemStack",
    "JsonFormatter",
    "LoggingConfig",
    "ModifierKeys",
    "ModifierSource",
    "Screen",
    "ScreenKind",
    "Slot",
    "SlotActionType",
    "Waiter",
    "configure_logging",
    "create_interaction_queue",
]
