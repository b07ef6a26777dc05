from __future__ import annotations

"""Points for a single response and the running score board."""

import math
from dataclasses import dataclass
from typing import Optional

from ..config.config import ScoringSettings


@dataclass(frozen=True)
class ScoreResult:
    points: int
    streak: int
    time_bonus: int = 0
    streak_bonus: int = 0


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def score_answer(
    correct: bool,
    remaining_seconds: float,
    timer_duration: float,
    streak: int,
    settings: Optional[ScoringSettings] = None,
) -> ScoreResult:
    """Score one response.

    A correct answer earns the base points, a time bonus proportional to the
    share of the countdown left, and a streak bonus that grows by
    `points_streak` for every consecutive correct answer after the first.
    A wrong answer or timeout earns nothing and resets the streak.

    Args:
        correct: Whether the response was correct.
        remaining_seconds: Countdown value when the answer arrived.
        timer_duration: Full countdown length.
        streak: Consecutive correct answers before this one.
        settings: Point constants; defaults to 10/30/5.

    Returns:
        ScoreResult with points awarded and the new streak.
    """
    s = settings or ScoringSettings()
    if not correct:
        return ScoreResult(points=0, streak=0)
    remaining = min(max(remaining_seconds, 0), timer_duration)
    time_bonus = _round_half_up(remaining / timer_duration * s.points_time_bonus) if timer_duration > 0 else 0
    new_streak = streak + 1
    streak_bonus = s.points_streak * (new_streak - 1) if new_streak >= 2 else 0
    return ScoreResult(
        points=s.points_correct + time_bonus + streak_bonus,
        streak=new_streak,
        time_bonus=time_bonus,
        streak_bonus=streak_bonus,
    )


def accuracy_percent(correct: int, total: int) -> int:
    if total <= 0:
        return 0
    return _round_half_up(correct / total * 100)
