from __future__ import annotations

"""Single-figure questions: name the shape, or name the size."""

from ..catalog.attributes import AttributeKind
from .base_question import BaseQuestionGenerator, Question, QuestionType


class ShapeIdentificationGenerator(BaseQuestionGenerator):
    """One random figure; the player names its shape."""

    question_type = QuestionType.SHAPE_IDENTIFICATION

    def generate(self) -> Question:
        figure = self._random_figure()
        correct = self.catalog.display_name(AttributeKind.SHAPE, figure.shape)
        others = [s for s in self.catalog.all_ids(AttributeKind.SHAPE) if s != figure.shape]
        options = self._assemble_options(correct, self._display_names(AttributeKind.SHAPE, others))
        return Question(
            type=self.question_type,
            prompt="What shape is this?",
            display_set=(figure,),
            options=options,
            correct_answer=correct,
            highlight_index=0,
            hint=f"This is a {figure.shape}!",
        )


class SizeRecognitionGenerator(BaseQuestionGenerator):
    """One random figure; the player names its size."""

    question_type = QuestionType.SIZE_RECOGNITION

    def generate(self) -> Question:
        figure = self._random_figure()
        correct = self.catalog.display_name(AttributeKind.SIZE, figure.size)
        others = [s for s in self.catalog.all_ids(AttributeKind.SIZE) if s != figure.size]
        options = self._assemble_options(correct, self._display_names(AttributeKind.SIZE, others))
        return Question(
            type=self.question_type,
            prompt="What size is this shape?",
            display_set=(figure,),
            options=options,
            correct_answer=correct,
            highlight_index=0,
            hint=f"{correct}: not too big, not too small!",
        )
