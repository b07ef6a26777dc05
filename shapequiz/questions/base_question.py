from __future__ import annotations

"""Question model and the base generator shared by all question types."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from ..catalog.attributes import AttributeCatalog, AttributeKind
from ..util.randomness import sample_distinct, shuffled


class QuestionType(str, Enum):
    SHAPE_IDENTIFICATION = "shape_identification"
    SIZE_RECOGNITION = "size_recognition"
    COLOR_SHAPE = "color_shape"
    COUNTING_COLOR = "counting_color"
    LOGICAL_CHALLENGE = "logical_challenge"


class GenerationError(ValueError):
    """Raised when a distractor pool cannot fill the option set."""


@dataclass(frozen=True)
class ShapeInstance:
    """A single displayed figure; identity is its attribute triple."""

    shape: str
    color: str
    size: str

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.shape, self.color, self.size)


@dataclass(frozen=True)
class Question:
    """One materialized question, ready for a renderer.

    `display_set` is in display order. `highlight_index` points at the
    figure to emphasize, or is None when the whole scene must be read.
    """

    type: QuestionType
    prompt: str
    display_set: Tuple[ShapeInstance, ...]
    options: Tuple[str, ...]
    correct_answer: str
    highlight_index: Optional[int]
    hint: str

    def signature(self) -> Tuple[str, Tuple[Tuple[str, str, str], ...]]:
        """Order-independent identity used to detect repeated questions."""
        return (self.type.value, tuple(sorted(f.as_tuple() for f in self.display_set)))

    def count_matching(self, *, color: Optional[str] = None, size: Optional[str] = None, shape: Optional[str] = None) -> int:
        n = 0
        for f in self.display_set:
            if color is not None and f.color != color:
                continue
            if size is not None and f.size != size:
                continue
            if shape is not None and f.shape != shape:
                continue
            n += 1
        return n


class BaseQuestionGenerator:
    """Abstract base for question generators."""

    question_type: QuestionType

    def __init__(self, catalog: AttributeCatalog, rng: random.Random, n_options: int = 4) -> None:
        self.catalog = catalog
        self.rng = rng
        self.n_options = n_options

    def generate(self) -> Question:
        raise NotImplementedError

    def grade(self, answer: str, ground_truth: str) -> bool:
        return answer == ground_truth

    # Helpers shared by the concrete generators

    def _random_figure(self, **fixed: str) -> ShapeInstance:
        return ShapeInstance(
            shape=fixed.get("shape") or self.catalog.random_id(AttributeKind.SHAPE, self.rng),
            color=fixed.get("color") or self.catalog.random_id(AttributeKind.COLOR, self.rng),
            size=fixed.get("size") or self.catalog.random_id(AttributeKind.SIZE, self.rng),
        )

    def _display_names(self, kind: AttributeKind, ids: Iterable[str]) -> List[str]:
        return [self.catalog.display_name(kind, i) for i in ids]

    def _assemble_options(self, correct: str, pool: Sequence[str]) -> Tuple[str, ...]:
        """Correct answer plus distinct distractors from pool, shuffled."""
        candidates = [p for p in dict.fromkeys(pool) if p != correct]
        need = self.n_options - 1
        if len(candidates) < need:
            raise GenerationError(
                f"{self.question_type.value}: need {need} distractors for '{correct}', pool has {len(candidates)}"
            )
        distractors = sample_distinct(candidates, need, self.rng)
        return tuple(shuffled([correct, *distractors], self.rng))

    def _number_options(self, correct: int, low: int, high: int) -> Tuple[str, ...]:
        return self._assemble_options(str(correct), [str(n) for n in range(low, high + 1)])
