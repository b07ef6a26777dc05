import unittest

from shapequiz.config.config import ScoringSettings
from shapequiz.stats.scoring import accuracy_percent, score_answer


class ScoreAnswerTests(unittest.TestCase):
    def test_fast_first_answer(self) -> None:
        r = score_answer(True, 15, 15, 0)
        self.assertEqual((r.points, r.streak), (40, 1))
        self.assertEqual((r.time_bonus, r.streak_bonus), (30, 0))

    def test_slow_second_answer_gets_streak_bonus(self) -> None:
        r = score_answer(True, 0, 15, 1)
        self.assertEqual((r.points, r.streak), (15, 2))

    def test_streak_bonus_grows_uncapped(self) -> None:
        self.assertEqual(score_answer(True, 0, 15, 9).streak_bonus, 45)
        self.assertEqual(score_answer(True, 0, 15, 2).points, 20)

    def test_wrong_answer_resets(self) -> None:
        for streak in (0, 1, 7):
            r = score_answer(False, 15, 15, streak)
            self.assertEqual((r.points, r.streak), (0, 0))

    def test_time_bonus_rounds_half_up(self) -> None:
        self.assertEqual(score_answer(True, 7, 15, 0).time_bonus, 14)
        self.assertEqual(score_answer(True, 3, 4, 0).time_bonus, 23)

    def test_custom_constants(self) -> None:
        s = ScoringSettings(points_correct=1, points_time_bonus=10, points_streak=2)
        self.assertEqual(score_answer(True, 5, 10, 1, s).points, 1 + 5 + 2)


class AccuracyTests(unittest.TestCase):
    def test_accuracy(self) -> None:
        self.assertEqual(accuracy_percent(20, 20), 100)
        self.assertEqual(accuracy_percent(17, 20), 85)
        self.assertEqual(accuracy_percent(1, 3), 33)
        self.assertEqual(accuracy_percent(0, 0), 0)


if __name__ == "__main__":
    unittest.main()
