import io
import unittest
import sys
import tempfile
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from main import build_parser, main


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        args = build_parser().parse_args(argv)
        buf = io.StringIO()
        with redirect_stdout(buf), redirect_stderr(buf):
            code = main(args)
        return code, buf.getvalue().splitlines()

    def test_single_expression(self):
        code, lines = self.run_main(["-e", "(2+3)*4"])
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["20"])

    def test_single_expression_error(self):
        code, lines = self.run_main(["-e", "1+2)"])
        self.assertEqual(code, 1)
        self.assertTrue(lines[0].startswith("error: UnmatchedRightParen"))

    def test_show_rpn(self):
        code, lines = self.run_main(["-e", "2^3^2", "--show-rpn"])
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["2 3 ^ 2 ^", "64"])

    def test_batch_with_undecodable_input(self):
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "latin1.txt"
            source.write_bytes(b"1+2\n\xff\xfe 3\n")
            code, lines = self.run_main(["--input", str(source), "--output", str(Path(tmp) / "out.csv")])
        self.assertEqual(code, 1)
        diagnostics = [line for line in lines if line.startswith("error: cannot process")]
        self.assertEqual(len(diagnostics), 1)
        self.assertIn("codec", diagnostics[0])


if __name__ == "__main__":
    unittest.main()
