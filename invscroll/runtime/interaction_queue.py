"""In-process ordered interaction queue."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from threading import Lock

from invscroll.api.interactions import InteractionEvent, Waiter

MainThreadExecutor = Callable[[Callable[[], Waiter]], Waiter]

logger = logging.getLogger(__name__)


class InteractionQueue:
    """FIFO of interaction events submitted one at a time.

    Pushing is safe from any thread. Submission order always equals push order.
    """

    def __init__(self, *, main_thread_executor: MainThreadExecutor | None = None) -> None:
        self._events: deque[InteractionEvent] = deque()
        self._lock = Lock()
        self._main_thread_executor = main_thread_executor

    @property
    def pending_count(self) -> int:
        """Return count of events waiting for submission."""
        with self._lock:
            return len(self._events)

    def push(self, event: InteractionEvent | None) -> None:
        """Enqueue event. None is ignored."""
        if event is None:
            return
        with self._lock:
            self._events.append(event)

    def clear(self) -> int:
        """Drop all pending events and return how many were dropped."""
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
        if dropped:
            logger.debug("interaction_queue_cleared dropped=%d", dropped)
        return dropped

    def send_next(self) -> Waiter | None:
        """Submit the oldest pending event. Return None when the queue is empty."""
        event = self._pop()
        if event is None:
            return None
        return self._submit(event)

    def drain(self, limit: int | None = None) -> int:
        """Submit pending events in order and return the submitted count."""
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")
        submitted = 0
        while limit is None or submitted < limit:
            event = self._pop()
            if event is None:
                break
            self._submit(event)
            submitted += 1
        return submitted

    def _pop(self) -> InteractionEvent | None:
        with self._lock:
            if not self._events:
                return None
            return self._events.popleft()

    def _submit(self, event: InteractionEvent) -> Waiter:
        if self._main_thread_executor is not None and event.should_run_on_main_thread():
            return self._main_thread_executor(event.send)
        return event.send()
