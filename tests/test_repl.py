import io
import tempfile
import unittest
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.config import REPL_CONFIG, validate_config
from repl import LineEvaluator, Session, run_batch, evaluate


class TestLineEvaluator(unittest.TestCase):
    def setUp(self):
        self.evaluator = LineEvaluator()

    def check(self, line, expected):
        result = self.evaluator.evaluate_line(line)
        self.assertTrue(result.ok, msg=repr(result))
        self.assertEqual(result.format(), expected)

    def check_error(self, line, kind):
        result = self.evaluator.evaluate_line(line)
        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, kind)
        self.assertTrue(result.format().startswith(f"error: {kind}: "))

    def test_examples(self):
        self.check("2+3*4", "14")
        self.check("(2+3)*4", "20")
        self.check("2^3^2", "64")
        self.check("5^0", "1")
        self.check("3/2", "1")
        self.check("3.0/2", "1.5")
        self.check("4.0/2", "2.0")
        self.check("1.0/0", "inf")
        self.check("10000000000000000.0 * 1", "10000000000000000.0")
        self.check("0.00001 * 1.0", "0.00001")
        self.check("0.0 / 0", "nan")
        self.check("10 - 4 - 3", "3")
        self.check("2 * (3 + 4) ^ 2", "98")

    def test_whitespace_insensitive(self):
        self.assertEqual(evaluate("1 + 2").format(), evaluate("1+2").format())

    def test_empty_line(self):
        result = self.evaluator.evaluate_line("")
        self.assertTrue(result.is_empty)
        self.assertEqual(result.format(), REPL_CONFIG["empty_sentinel"])
        self.assertTrue(evaluate("   ").is_empty)

    def test_errors(self):
        self.check_error("(1+2", "UnmatchedLeftParen")
        self.check_error("1+2)", "UnmatchedRightParen")
        self.check_error("1 2", "InvalidExpression")
        self.check_error("1 +", "InsufficientOperands")
        self.check_error("5^-1", "InsufficientOperands")
        self.check_error("2 $ 3", "UnexpectedCharacter")
        self.check_error("4/(2-2)", "DivideByZero")
        self.check_error("99999999999", "UnexpectedCharacter")

    def test_record(self):
        self.assertEqual(evaluate("1+1").to_record(), {"expression": "1+1", "result": "2", "error": None})
        self.assertEqual(evaluate("1 2").to_record()["error"], "InvalidExpression")


class TestSession(unittest.TestCase):
    def run_session(self, text, **kwargs):
        stdout = io.StringIO()
        session = Session(stdin=io.StringIO(text), stdout=stdout, prompt="", **kwargs)
        errors = session.run()
        return stdout.getvalue().splitlines(), errors

    def test_recovers_after_error(self):
        lines, errors = self.run_session("1+2\n(1\n\n3.0/2\nexit\n4*4\n")
        self.assertEqual(lines[0], "3")
        self.assertTrue(lines[1].startswith("error: UnmatchedLeftParen"))
        self.assertEqual(lines[2:], ["0 (empty)", "1.5"])
        self.assertEqual(errors, 1)

    def test_stops_at_end_of_input(self):
        lines, errors = self.run_session("2*3")
        self.assertEqual(lines, ["6"])
        self.assertEqual(errors, 0)

    def test_show_rpn(self):
        lines, _ = self.run_session("2+3*4\nexit\n", show_rpn=True)
        self.assertEqual(lines, ["2 3 4 * +", "14"])

    def test_trailing_whitespace_is_trimmed(self):
        lines, _ = self.run_session("exit  \n1+1\n")
        self.assertEqual(lines, [])


class TestBatch(unittest.TestCase):
    def test_run_batch_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "input.txt"
            target = Path(tmp) / "out.csv"
            source.write_text("1+2\n1 2\n\n2^10\nexit\n5*5\n", encoding="utf-8")

            results = run_batch(str(source), str(target))
            self.assertEqual(len(results), 4)
            self.assertEqual(list(results.columns), ["expression", "result", "error"])

            saved = pd.read_csv(target, dtype=str, keep_default_na=False)
            self.assertEqual(saved["result"].tolist(), ["3", "", "0 (empty)", "1024"])
            self.assertEqual(saved["error"].tolist(), ["", "InvalidExpression", "", ""])


class TestConfig(unittest.TestCase):
    def test_validate_config(self):
        self.assertTrue(validate_config())


if __name__ == "__main__":
    unittest.main()
