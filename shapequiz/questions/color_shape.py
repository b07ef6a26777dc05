from __future__ import annotations

"""Color + shape question: read the scene and name the color of a shape."""

from typing import List

from ..catalog.attributes import AttributeKind
from ..util.randomness import shuffled
from .base_question import BaseQuestionGenerator, Question, QuestionType, ShapeInstance


class ColorShapeGenerator(BaseQuestionGenerator):
    """Scene of 3-5 figures containing one target (shape, color) pair.

    Every other figure differs from the target in shape, color, or both.
    """

    question_type = QuestionType.COLOR_SHAPE
    min_figures = 3
    max_figures = 5

    def generate(self) -> Question:
        target_shape = self.catalog.random_id(AttributeKind.SHAPE, self.rng)
        target_color = self.catalog.random_id(AttributeKind.COLOR, self.rng)
        n_figures = self.rng.randint(self.min_figures, self.max_figures)

        figures: List[ShapeInstance] = [self._random_figure(shape=target_shape, color=target_color)]
        for _ in range(n_figures - 1):
            while True:
                shape = self.catalog.random_id(AttributeKind.SHAPE, self.rng)
                color = self.catalog.random_id(AttributeKind.COLOR, self.rng)
                if (shape, color) != (target_shape, target_color):
                    break
            figures.append(self._random_figure(shape=shape, color=color))

        correct = self.catalog.display_name(AttributeKind.COLOR, target_color)
        others = [c for c in self.catalog.selectable_ids(AttributeKind.COLOR) if c != target_color]
        options = self._assemble_options(correct, self._display_names(AttributeKind.COLOR, others))
        return Question(
            type=self.question_type,
            prompt=f"What color is the {target_shape}?",
            display_set=tuple(shuffled(figures, self.rng)),
            options=options,
            correct_answer=correct,
            highlight_index=None,
            hint=f"{correct} + {target_shape} = {target_color} {target_shape}!",
        )
