import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from shapequiz.app import explain
from shapequiz.app.cli import main


def _run(argv):
    out = io.StringIO()
    with redirect_stdout(out), redirect_stderr(io.StringIO()):
        code = main(argv)
    return code, out.getvalue()


class CliTests(unittest.TestCase):
    def tearDown(self) -> None:
        explain.enable(False)

    def test_list_types(self) -> None:
        code, out = _run(["list-types"])
        self.assertEqual(code, 0)
        self.assertIn("logical_challenge", out)
        self.assertIn("shape_identification", out)

    def test_show_config(self) -> None:
        code, out = _run(["show-config"])
        self.assertEqual(code, 0)
        self.assertIn("total_questions: 20", out)

    def test_sample(self) -> None:
        code, out = _run(["sample", "--type", "counting_color", "--count", "2", "--seed", "1"])
        self.assertEqual(code, 0)
        self.assertIn("Q2/2: How many", out)
        self.assertIn("Answer:", out)

    def test_sample_unknown_type(self) -> None:
        code, _ = _run(["sample", "--type", "riddle"])
        self.assertEqual(code, 2)

    def test_simulate(self) -> None:
        code, out = _run(["simulate", "--seed", "3", "--accuracy", "1.0"])
        self.assertEqual(code, 0)
        self.assertIn("Session Summary:", out)
        self.assertIn("Q20:", out)
        self.assertIn("Incorrect:", out)

    def test_simulate_with_explain(self) -> None:
        code, out = _run(["simulate", "--seed", "3", "--quiet", "--explain"])
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] session_started", out)
        self.assertIn("[EXPLAIN] question_created", out)
        self.assertIn("[EXPLAIN] session_ended", out)


if __name__ == "__main__":
    unittest.main()
