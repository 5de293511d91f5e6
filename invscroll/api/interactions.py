"""Public interaction event and queue contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from invscroll.api.host import Slot, SlotActionType


class Waiter(Protocol):
    """Handle returned by a submitted event."""

    def is_done(self) -> bool:
        """Return whether the host finished processing the event."""


class InteractionEvent(Protocol):
    """One atomic interaction that can be submitted to the host."""

    def send(self) -> Waiter:
        """Submit the event to the host and return its waiter."""

    def should_run_on_main_thread(self) -> bool:
        """Return whether submission must happen on the host main thread."""


class ClickEventFactory(Protocol):
    """Build slot click events."""

    def create(self, slot: Slot, button: int, action_type: SlotActionType) -> InteractionEvent | None:
        """Create one click event against `slot`."""


class EventQueue(Protocol):
    """Ordered sink for interaction events."""

    def push(self, event: InteractionEvent | None) -> None:
        """Enqueue event. None is ignored."""


@dataclass(frozen=True, slots=True)
class CompletedWaiter:
    """Waiter for events that finish on submission."""

    def is_done(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class CallbackEvent:
    """Deferred event whose submission runs `body`."""

    body: Callable[[], Waiter]
    run_on_main: bool = False

    def send(self) -> Waiter:
        return self.body()

    def should_run_on_main_thread(self) -> bool:
        return self.run_on_main


def create_interaction_queue(
    *,
    main_thread_executor: Callable[[Callable[[], Waiter]], Waiter] | None = None,
) -> EventQueue:
    """Create default in-process interaction queue implementation."""
    from invscroll.runtime.interaction_queue import InteractionQueue

    return InteractionQueue(main_thread_executor=main_thread_executor)


__all__ = [
    "CallbackEvent",
    "ClickEventFactory",
    "CompletedWaiter",
    "EventQueue",
    "InteractionEvent",
    "Waiter",
    "create_interaction_queue",
]
