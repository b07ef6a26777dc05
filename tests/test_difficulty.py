import random
import unittest

from shapequiz.config.config import DifficultySettings
from shapequiz.policy.difficulty import BAND_TYPES, Band, band_limits, difficulty_band, select_question_type
from shapequiz.questions.base_question import QuestionType

EASY = {QuestionType.SHAPE_IDENTIFICATION, QuestionType.SIZE_RECOGNITION}
MEDIUM = {QuestionType.COLOR_SHAPE, QuestionType.COUNTING_COLOR}
HARD = {QuestionType.COLOR_SHAPE, QuestionType.COUNTING_COLOR, QuestionType.LOGICAL_CHALLENGE}


class DifficultyBandTests(unittest.TestCase):
    def test_reference_limits(self) -> None:
        self.assertEqual(band_limits(20), (7, 14))

    def test_bands_for_twenty_questions(self) -> None:
        self.assertEqual([difficulty_band(i, 20) for i in (1, 7, 8, 14, 15, 20)],
                         [Band.EASY, Band.EASY, Band.MEDIUM, Band.MEDIUM, Band.HARD, Band.HARD])

    def test_selected_types_stay_in_band(self) -> None:
        rng = random.Random(11)
        for _ in range(50):
            for i in range(1, 8):
                self.assertIn(select_question_type(i, 20, rng), EASY)
            for i in range(8, 15):
                self.assertIn(select_question_type(i, 20, rng), MEDIUM)
            for i in range(15, 21):
                self.assertIn(select_question_type(i, 20, rng), HARD)

    def test_hard_band_reaches_every_hard_type(self) -> None:
        rng = random.Random(5)
        seen = {select_question_type(20, 20, rng) for _ in range(300)}
        self.assertEqual(seen, set(BAND_TYPES[Band.HARD]))

    def test_index_out_of_range(self) -> None:
        with self.assertRaises(ValueError):
            difficulty_band(0, 20)
        with self.assertRaises(ValueError):
            difficulty_band(21, 20)

    def test_custom_fractions(self) -> None:
        s = DifficultySettings(easy_fraction=0.5, medium_fraction=0.5)
        self.assertEqual(band_limits(10, s), (5, 10))
        self.assertEqual(difficulty_band(10, 10, s), Band.MEDIUM)


if __name__ == "__main__":
    unittest.main()
