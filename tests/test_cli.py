"""
Tests for the command-line harness.

Author: xwest
"""

import io
import unittest
import sys
import os
import tempfile
from contextlib import redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.cli import DEMO_EXPRESSIONS, RunConfiguration, build_config, main, run


class TestBuildConfig(unittest.TestCase):

    def test_defaults(self):
        config = build_config(["pratt"])
        self.assertEqual(config.methods, ["pratt"])
        self.assertEqual(config.expressions, DEMO_EXPRESSIONS)
        self.assertFalse(config.compare)
        self.assertFalse(config.show_tokens)
        self.assertFalse(config.show_warnings)

    def test_all_methods(self):
        config = build_config(["all", "--compare"])
        self.assertEqual(config.methods,
                         ["naive", "tree-rewriting", "tree-rewriting-complete", "pratt"])
        self.assertTrue(config.compare)

    def test_expressions_replace_demo_corpus(self):
        config = build_config(["naive", "-e", "a + b", "--expression", "c * d"])
        self.assertEqual(config.expressions, ["a + b", "c * d"])
        self.assertEqual(config.filename, "<argv>")

    def test_expressions_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "exprs.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("a + b\n\n  c < d  \n")
            config = build_config(["pratt", "--file", path])
        self.assertEqual(config.expressions, ["a + b", "c < d"])
        self.assertEqual(config.filename, path)

    def test_unknown_method_exits(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_config(["shunting-yard"])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_method_exits(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_config([])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_file_exits(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_config(["pratt", "--file", "/nonexistent/exprs.txt"])
        self.assertEqual(ctx.exception.code, 2)

    def test_undecodable_file_exits(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "exprs.txt")
            with open(path, "wb") as f:
                f.write(b"a+b\n\xff\xfe\n")
            stderr = io.StringIO()
            with redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as ctx:
                    build_config(["pratt", "--file", path])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("cannot read", stderr.getvalue())


class TestRun(unittest.TestCase):

    def _run(self, config: RunConfiguration):
        out, err = io.StringIO(), io.StringIO()
        status = run(config, out=out, err=err)
        return status, out.getvalue(), err.getvalue()

    def test_demo_output_format(self):
        status, out, _ = self._run(RunConfiguration(methods=["pratt"]))
        lines = out.splitlines()

        self.assertEqual(status, 0)
        self.assertEqual(lines[0], "--- Method: pratt")
        self.assertEqual(lines[1], "=== Test #01: a + b + c + d")
        self.assertEqual(lines[2], "( + ( + ( + a b ) c ) d )")
        self.assertEqual(lines[3], "")
        self.assertIn("=== Test #08: a * b * c * d", lines)
        self.assertIn("( * ( * ( * a b ) c ) d )", lines)

    def test_compare_flags_divergence(self):
        config = RunConfiguration(methods=["naive"], expressions=["a * b + c"], compare=True)
        status, out, _ = self._run(config)

        self.assertEqual(status, 1)
        self.assertIn("( * a ( + b c ) )", out)
        self.assertIn("    differs from pratt: ( + ( * a b ) c )", out)
        self.assertIn("1 of 1 trees differ from pratt", out)

    def test_compare_complete_rewriting_agrees(self):
        config = RunConfiguration(methods=["tree-rewriting-complete", "pratt"], compare=True)
        status, out, _ = self._run(config)

        self.assertEqual(status, 0)
        self.assertNotIn("differs", out)
        self.assertIn("0 of 8 trees differ from pratt", out)

    def test_show_tokens(self):
        config = RunConfiguration(expressions=["a < b"], show_tokens=True)
        _, out, _ = self._run(config)
        self.assertIn("    tokens: VARIABLE('a') LESS_THAN VARIABLE('b')", out)

    def test_show_warnings(self):
        config = RunConfiguration(methods=["naive"], expressions=["a + 2"],
                                  filename="<argv>", show_warnings=True)
        _, out, err = self._run(config)

        self.assertIn("( + a  )", out)
        self.assertIn("WARNING[L001]: Skipped character: '2'", err)
        self.assertIn("  --> <argv>:1:5", err)
        self.assertIn("WARNING[P001]: Missing right operand for '+'", err)

    def test_warnings_off_by_default(self):
        _, _, err = self._run(RunConfiguration(expressions=["a + 2"]))
        self.assertEqual(err, "")

    def test_main_exit_status(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["naive", "-e", "a", "--compare"])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
