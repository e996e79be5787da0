"""One-shot delayed messages, polled from the UI loop."""
from __future__ import annotations

import sched
import time
from typing import Callable

from .messages import Msg


class DeferredMessages:
    """Messages to deliver after a delay.

    Backed by `sched.scheduler` on a monotonic clock. Nothing sleeps here:
    the UI loop calls `pop_due()` each iteration and dispatches whatever is
    ready.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._sched = sched.scheduler(clock, lambda _seconds: None)
        self._due: list[Msg] = []

    def schedule(self, delay: float, msg: Msg) -> None:
        self._sched.enter(delay, 0, self._due.append, (msg,))

    def pop_due(self) -> list[Msg]:
        """Return (and forget) every message whose delay has elapsed."""
        self._sched.run(blocking=False)
        due = list(self._due)
        self._due.clear()
        return due

    def seconds_until_next(self) -> float | None:
        queue = self._sched.queue
        if not queue:
            return None
        return max(0.0, queue[0].time - self._clock())

    def __len__(self) -> int:
        return len(self._sched.queue)
