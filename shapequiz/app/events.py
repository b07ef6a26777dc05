from __future__ import annotations

"""Tiny pub/sub event bus for renderer, audio and speech notifications.

Handlers are fire-and-forget: a failing handler is reported and skipped so
presentation problems never reach the engine.
"""

import sys
from typing import Any, Callable, Dict, List

SESSION_START = "session_start"
QUESTION = "question"
TICK = "tick"
TIMER_WARNING = "timer_warning"
CORRECT = "correct"
INCORRECT = "incorrect"
TIMEOUT = "timeout"
STREAK = "streak"
SESSION_END = "session_end"

ALL_EVENTS = (
    SESSION_START,
    QUESTION,
    TICK,
    TIMER_WARNING,
    CORRECT,
    INCORRECT,
    TIMEOUT,
    STREAK,
    SESSION_END,
)


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for h in list(self._subs.get(event, [])):
            try:
                h(payload)
            except Exception as e:
                print(f"[WARN] {event} handler failed: {e}", file=sys.stderr)
