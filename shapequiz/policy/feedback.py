from __future__ import annotations

"""Feedback lines shown or spoken after each answer and at the end."""

import random
from dataclasses import dataclass
from typing import Literal, Protocol

PRAISE = ("Great job! 🎉", "Excellent! ⭐", "Perfect! 🌟", "Amazing! 🏆", "Wonderful! 🎊")
INCORRECT = "Not quite! Try again next time! 💪"
TIMEOUT = "⏰ Time's up!"
INTRO = "Let's learn shapes and sizes!"

# (minimum accuracy, message), checked top to bottom
MOTIVATION = (
    (90, "🌟 Outstanding! You're a shapes master!"),
    (75, "🎉 Excellent work! Keep learning!"),
    (60, "👍 Good job! Practice makes perfect!"),
    (40, "💪 Nice try! You're getting better!"),
)
MOTIVATION_FALLBACK = "🌈 Keep practicing! You'll improve!"


@dataclass(frozen=True)
class Decision:
    action: Literal["next", "reveal"]
    feedback: str


class FeedbackPolicy(Protocol):
    def decide(self, is_correct: bool, timed_out: bool) -> Decision: ...


class RevealAndContinue:
    """Correct -> praise, next; wrong or timeout -> reveal answer, next."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def decide(self, is_correct: bool, timed_out: bool) -> Decision:
        if timed_out:
            return Decision(action="reveal", feedback=TIMEOUT)
        if is_correct:
            return Decision(action="next", feedback=self.rng.choice(PRAISE))
        return Decision(action="reveal", feedback=INCORRECT)


def motivation_message(accuracy: int) -> str:
    for threshold, message in MOTIVATION:
        if accuracy >= threshold:
            return message
    return MOTIVATION_FALLBACK


def end_announcement(score: int, accuracy: int) -> str:
    return f"Amazing job! You scored {score} points with {accuracy} percent accuracy!"
