from __future__ import annotations

"""Explain Mode: one-line traces of quiz session milestones.

With --explain the session prints session_started, question_created
(index, difficulty band, type, expected answer, repeat flag), graded or
timeout (answer, points, streak) and session_ended.
"""

import json
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    try:
        data = (payload or {})
        # keep it short; one line JSON
        print(f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',',':'), default=str)}")
    except (TypeError, ValueError):
        print(f"[EXPLAIN] {event}")
