from __future__ import annotations

"""Recency window of generated question signatures."""

from collections import deque
from typing import Callable, Deque, Hashable, Tuple

from ..questions.base_question import Question


class RecentCombinations:
    """Remembers the signatures of the last `window` questions.

    A window of 0 disables tracking.
    """

    def __init__(self, window: int = 8) -> None:
        self.window = window
        self._recent: Deque[Hashable] = deque(maxlen=window if window > 0 else None)

    def __contains__(self, signature: Hashable) -> bool:
        return self.window > 0 and signature in self._recent

    def __len__(self) -> int:
        return len(self._recent)

    def remember(self, signature: Hashable) -> None:
        if self.window > 0:
            self._recent.append(signature)

    def clear(self) -> None:
        self._recent.clear()

    def draw(self, make: Callable[[], Question], max_attempts: int = 20) -> Tuple[Question, bool]:
        """Generate until the signature is outside the window.

        After `max_attempts` draws the last candidate is accepted even if
        it repeats.

        Returns:
            The chosen question and whether it repeats a recent one.
        """
        question = make()
        attempts = 1
        while question.signature() in self and attempts < max_attempts:
            question = make()
            attempts += 1
        repeated = question.signature() in self
        self.remember(question.signature())
        return question, repeated
