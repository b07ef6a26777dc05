from __future__ import annotations

"""Fixed three-band difficulty ramp.

The session is cut into contiguous bands by question index; each band has
its own pool of eligible question types. There is no feedback from the
player's accuracy.
"""

import random
from enum import Enum
from typing import Dict, Optional, Tuple

from ..config.config import DifficultySettings
from ..questions.base_question import QuestionType


class Band(int, Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


BAND_TYPES: Dict[Band, Tuple[QuestionType, ...]] = {
    Band.EASY: (QuestionType.SHAPE_IDENTIFICATION, QuestionType.SIZE_RECOGNITION),
    Band.MEDIUM: (QuestionType.COLOR_SHAPE, QuestionType.COUNTING_COLOR),
    Band.HARD: (QuestionType.COLOR_SHAPE, QuestionType.COUNTING_COLOR, QuestionType.LOGICAL_CHALLENGE),
}


def band_limits(total: int, settings: Optional[DifficultySettings] = None) -> Tuple[int, int]:
    """Return the last question index of the easy and medium bands.

    For 20 questions with the default fractions this is (7, 14).
    """
    s = settings or DifficultySettings()
    easy_end = int(round(total * s.easy_fraction))
    medium_end = int(round(total * (s.easy_fraction + s.medium_fraction)))
    return easy_end, max(easy_end, medium_end)


def difficulty_band(index: int, total: int, settings: Optional[DifficultySettings] = None) -> Band:
    if index < 1 or index > total:
        raise ValueError(f"question index {index} outside 1..{total}")
    easy_end, medium_end = band_limits(total, settings)
    if index <= easy_end:
        return Band.EASY
    if index <= medium_end:
        return Band.MEDIUM
    return Band.HARD


def select_question_type(
    index: int,
    total: int,
    rng: random.Random,
    settings: Optional[DifficultySettings] = None,
) -> QuestionType:
    """Pick a question type uniformly from the band that index falls in."""
    return rng.choice(BAND_TYPES[difficulty_band(index, total, settings)])
