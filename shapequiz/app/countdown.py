from __future__ import annotations

"""Cancellable one-tick-per-second countdown drivers.

A driver only delivers ticks; the session owns the remaining time and
decides when the question expires.
"""

import threading
from typing import Callable, Optional, Protocol


class Countdown(Protocol):
    def start(self, on_tick: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class ThreadedCountdown:
    """Re-arms a daemon threading.Timer every `interval_s` seconds.

    Each start() bumps a generation counter, so a timer thread that fires
    after cancel() or a newer start() delivers nothing.
    """

    def __init__(self, interval_s: float = 1.0) -> None:
        self.interval_s = interval_s
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._generation = 0
        self._on_tick: Optional[Callable[[], None]] = None

    @property
    def active(self) -> bool:
        return self._on_tick is not None

    def start(self, on_tick: Callable[[], None]) -> None:
        with self._lock:
            self._cancel_locked()
            self._on_tick = on_tick
            self._arm(self._generation)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        self._generation += 1
        self._on_tick = None
        if self._timer:
            self._timer.cancel()
            self._timer = None

    def _arm(self, generation: int) -> None:
        self._timer = threading.Timer(self.interval_s, self._fire, args=(generation,))
        self._timer.daemon = True
        self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._on_tick is None:
                return
            callback = self._on_tick
            self._arm(generation)
        # Outside the lock: the callback may cancel this countdown
        callback()


class ManualCountdown:
    """Countdown advanced explicitly with tick(); used by tests and simulations."""

    def __init__(self) -> None:
        self._on_tick: Optional[Callable[[], None]] = None
        self.starts = 0
        self.cancels = 0

    @property
    def active(self) -> bool:
        return self._on_tick is not None

    def start(self, on_tick: Callable[[], None]) -> None:
        self._on_tick = on_tick
        self.starts += 1

    def cancel(self) -> None:
        if self._on_tick is not None:
            self.cancels += 1
        self._on_tick = None

    def tick(self, n: int = 1) -> None:
        for _ in range(n):
            if self._on_tick is None:
                return
            self._on_tick()
