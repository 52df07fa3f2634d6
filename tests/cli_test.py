#! cd .. && python3 -m tests.cli_test

import io
import os
import json
import shutil
import tempfile
import unittest
import contextlib

from jsstyle.__main__ import main as jsstyle_main

class CliTestCase(unittest.TestCase):

    def setUp(self):
        self.root = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.root)

    def _write(self, name, text):
        path = os.path.join(self.root, name)
        with open(path, "w") as wf:
            wf.write(text)
        return path

    def _read(self, path):
        with open(path, "r") as rf:
            return rf.read()

    def _run(self, *argv):
        """ run the command line and return (exit status, stdout) """
        stdout = io.StringIO()
        status = 0
        with contextlib.redirect_stdout(stdout):
            try:
                jsstyle_main(list(argv))
            except SystemExit as e:
                status = e.code
        return status, stdout.getvalue()

    def test_001_format_stdout(self):
        path = self._write("a.js", "a=b")
        status, out = self._run("format", path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "a = b")

    def test_002_format_file(self):
        path = self._write("a.js", "a=b")
        path_out = os.path.join(self.root, "b.js")
        status, out = self._run("fmt", path, path_out)
        self.assertEqual(status, 0)
        self.assertEqual(out, "")
        self.assertEqual(self._read(path_out), "a = b")

    def test_003_settings(self):
        path = self._write("a.js", "function f(){\n}")
        status, out = self._run("format", "--set", "whiteSpace.after.FunctionName=1", path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "function f () {\n}")

    def test_004_style_file(self):
        path = self._write("a.js", "a=b")
        style = self._write("style.json", json.dumps(
            {"whiteSpace": {"after": {"AssignmentOperator": 0}}}))
        status, out = self._run("format", "--style", style, path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "a= b")

        # settings are applied on top of the style file
        status, out = self._run("format", "--style", style,
            "--set", "whiteSpace.before.AssignmentOperator=0", path)
        self.assertEqual(out, "a=b")

    def test_005_preset(self):
        path = self._write("a.js", "if(a){b()}")
        status, out = self._run("format", "--preset", "allman", path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "if (a)\n{\n  b()\n}")

    def test_006_check(self):
        path = self._write("a.js", "a=b")
        status, out = self._run("format", "--check", path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")

        path = self._write("b.js", "a = b")
        status, out = self._run("format", "--check", path)
        self.assertEqual(status, 0)

    def test_007_parse_error(self):
        path = self._write("a.js", "x = )")
        status, out = self._run("format", path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")

    def test_008_invalid_setting(self):
        path = self._write("a.js", "a=b")
        status, _ = self._run("format", "--set", "whiteSpace", path)
        self.assertEqual(status, 1)

        status, _ = self._run("format", "--set", "whiteSpace.before.AssignmentOperator=-5", path)
        self.assertEqual(status, 1)

    def test_009_missing_file(self):
        status, _ = self._run("format", os.path.join(self.root, "missing.js"))
        self.assertEqual(status, 1)

    def test_010_tokens(self):
        path = self._write("a.js", "a = 1")
        status, out = self._run("tokens", path)
        self.assertEqual(status, 0)
        self.assertEqual(len(out.strip().split("\n")), 5)

    def test_011_ast(self):
        path = self._write("a.js", "a;")
        status, out = self._run("ast", path)
        self.assertEqual(status, 0)
        self.assertEqual(out,
            "Program\n"
            "  ExpressionStatement\n"
            "    Identifier name='a'\n")

def main():
    unittest.main()

if __name__ == '__main__':
    main()
