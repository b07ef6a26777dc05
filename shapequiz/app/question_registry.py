from __future__ import annotations

"""Question type registry and metadata.

Lists question types, exposes metadata for front-ends, and constructs
generator instances via a simple factory.
"""

import random
from dataclasses import dataclass
from typing import Dict, List

from ..catalog.attributes import AttributeCatalog
from ..questions.base_question import BaseQuestionGenerator, QuestionType
from ..questions.color_shape import ColorShapeGenerator
from ..questions.counting import CountingColorGenerator
from ..questions.identification import ShapeIdentificationGenerator, SizeRecognitionGenerator
from ..questions.logical import LogicalChallengeGenerator


@dataclass(frozen=True)
class QuestionTypeMeta:
    id: str
    name: str
    description: str
    skills: tuple


_GENERATORS = {
    QuestionType.SHAPE_IDENTIFICATION: ShapeIdentificationGenerator,
    QuestionType.SIZE_RECOGNITION: SizeRecognitionGenerator,
    QuestionType.COLOR_SHAPE: ColorShapeGenerator,
    QuestionType.COUNTING_COLOR: CountingColorGenerator,
    QuestionType.LOGICAL_CHALLENGE: LogicalChallengeGenerator,
}


def list_question_types() -> List[QuestionTypeMeta]:
    return [
        QuestionTypeMeta(
            id=QuestionType.SHAPE_IDENTIFICATION.value,
            name="Shape Identification",
            description="Name the shape of a single highlighted figure.",
            skills=("shape",),
        ),
        QuestionTypeMeta(
            id=QuestionType.SIZE_RECOGNITION.value,
            name="Size Recognition",
            description="Name the size of a single highlighted figure.",
            skills=("size",),
        ),
        QuestionTypeMeta(
            id=QuestionType.COLOR_SHAPE.value,
            name="Color + Shape",
            description="Find the named shape in a scene and say its color.",
            skills=("shape", "color"),
        ),
        QuestionTypeMeta(
            id=QuestionType.COUNTING_COLOR.value,
            name="Counting by Color",
            description="Count the figures of one color in a scene.",
            skills=("color", "counting"),
        ),
        QuestionTypeMeta(
            id=QuestionType.LOGICAL_CHALLENGE.value,
            name="Logical Challenge",
            description="Count the figures matching both a size and a color.",
            skills=("size", "color", "counting"),
        ),
    ]


def get_question_type(type_id: str) -> QuestionTypeMeta:
    for m in list_question_types():
        if m.id == type_id:
            return m
    raise KeyError(f"Unknown question type: {type_id}")


def make_generator(
    question_type: QuestionType | str,
    *,
    catalog: AttributeCatalog,
    rng: random.Random,
    n_options: int = 4,
) -> BaseQuestionGenerator:
    """Factory that builds the concrete generator for a question type."""
    try:
        qtype = QuestionType(question_type)
    except ValueError:
        raise KeyError(f"Unsupported question type for factory: {question_type}") from None
    return _GENERATORS[qtype](catalog, rng, n_options)


def make_all_generators(
    *, catalog: AttributeCatalog, rng: random.Random, n_options: int = 4
) -> Dict[QuestionType, BaseQuestionGenerator]:
    return {t: make_generator(t, catalog=catalog, rng=rng, n_options=n_options) for t in _GENERATORS}
