from __future__ import annotations

"""Logical challenge: count figures matching both a size and a color.

Each distractor misses the target in exactly one attribute, so the player
has to check size and color together rather than rule figures out on a
single glance.
"""

from typing import List

from ..catalog.attributes import AttributeKind
from ..util.randomness import coin_flip, shuffled
from .base_question import BaseQuestionGenerator, Question, QuestionType, ShapeInstance


class LogicalChallengeGenerator(BaseQuestionGenerator):
    question_type = QuestionType.LOGICAL_CHALLENGE
    count_range = (1, 3)
    distractor_range = (4, 6)
    answer_range = (0, 5)

    def generate(self) -> Question:
        target_size = self.catalog.random_id(AttributeKind.SIZE, self.rng)
        target_color = self.catalog.random_id(AttributeKind.COLOR, self.rng)
        target_count = self.rng.randint(*self.count_range)

        figures: List[ShapeInstance] = [
            self._random_figure(size=target_size, color=target_color) for _ in range(target_count)
        ]
        for _ in range(self.rng.randint(*self.distractor_range)):
            if coin_flip(self.rng):
                size = self.catalog.random_id(AttributeKind.SIZE, self.rng, excluding={target_size})
                figures.append(self._random_figure(size=size, color=target_color))
            else:
                color = self.catalog.random_id(AttributeKind.COLOR, self.rng, excluding={target_color})
                figures.append(self._random_figure(size=target_size, color=color))

        size_word = self.catalog.display_name(AttributeKind.SIZE, target_size).lower()
        return Question(
            type=self.question_type,
            prompt=f"How many {size_word} {target_color} shapes can you see?",
            display_set=tuple(shuffled(figures, self.rng)),
            options=self._number_options(target_count, *self.answer_range),
            correct_answer=str(target_count),
            highlight_index=None,
            hint=f"Look for {size_word} + {target_color}: {target_count}!",
        )
