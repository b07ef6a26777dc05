from __future__ import annotations

"""Counting question: how many figures share the target color."""

from typing import List

from ..catalog.attributes import AttributeKind
from ..util.randomness import shuffled
from .base_question import BaseQuestionGenerator, Question, QuestionType, ShapeInstance


class CountingColorGenerator(BaseQuestionGenerator):
    question_type = QuestionType.COUNTING_COLOR
    count_range = (2, 5)
    distractor_range = (3, 6)
    answer_range = (1, 6)

    def generate(self) -> Question:
        target_color = self.catalog.random_id(AttributeKind.COLOR, self.rng)
        target_count = self.rng.randint(*self.count_range)

        figures: List[ShapeInstance] = [self._random_figure(color=target_color) for _ in range(target_count)]
        for _ in range(self.rng.randint(*self.distractor_range)):
            color = self.catalog.random_id(AttributeKind.COLOR, self.rng, excluding={target_color})
            figures.append(self._random_figure(color=color))

        return Question(
            type=self.question_type,
            prompt=f"How many {target_color} shapes are there?",
            display_set=tuple(shuffled(figures, self.rng)),
            options=self._number_options(target_count, *self.answer_range),
            correct_answer=str(target_count),
            highlight_index=None,
            hint=f"Count all the {target_color} ones: {target_count}!",
        )
