import random
import unittest

from shapequiz.app.question_registry import make_generator
from shapequiz.app.render import describe_figure, render_question, resolve_choice
from shapequiz.catalog.attributes import AttributeCatalog
from shapequiz.questions.base_question import QuestionType, ShapeInstance


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = AttributeCatalog()

    def test_describe_figure(self) -> None:
        self.assertEqual(describe_figure(ShapeInstance("star", "pink", "big"), self.catalog), "big pink star")

    def test_render_marks_highlight(self) -> None:
        gen = make_generator(QuestionType.SHAPE_IDENTIFICATION, catalog=self.catalog, rng=random.Random(2))
        q = gen.generate()
        text = render_question(q, self.catalog, 1, 20)
        self.assertTrue(text.startswith("Q1/20: What shape is this?"))
        self.assertIn("  * ", text)
        for option in q.options:
            self.assertIn(option, text)

    def test_resolve_choice(self) -> None:
        options = ("Circle", "Square", "Star", "Oval")
        self.assertEqual(resolve_choice("b", options), "Square")
        self.assertEqual(resolve_choice(" circle ", options), "Circle")
        self.assertEqual(resolve_choice("hexagon", options), "hexagon")
        numbers = ("3", "1", "5", "2")
        self.assertEqual(resolve_choice("5", numbers), "5")
        self.assertEqual(resolve_choice("a", numbers), "3")
        self.assertEqual(resolve_choice("e", numbers), "e")


if __name__ == "__main__":
    unittest.main()
