#! cd .. && python3 -m tests.appliers_test

import unittest

from jsstyle.lexer import Lexer
from jsstyle.stream import TokenStream
from jsstyle.style import Style, StyleError
from jsstyle.whitespace import WhiteSpace
from jsstyle.linebreak import LineBreak
from jsstyle.indent import Indent
from tests.util import rule

def lex(text):
    tokens = Lexer().lex(text)
    return tokens, TokenStream(tokens)

class WhiteSpaceTestCase(unittest.TestCase):

    def _ws(self, opts=None):
        return WhiteSpace(Style(opts))

    def test_001_insert(self):
        tokens, stream = lex("a+b")
        self._ws().before_if_needed(tokens[1], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a +b")

    def test_002_remove(self):
        tokens, stream = lex("a   + b")
        self._ws(rule("whiteSpace", "before", "BinaryExpressionOperator", 0)) \
            .before_if_needed(tokens[2], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a+ b")

    def test_003_normalize(self):
        tokens, stream = lex("a   +b")
        self._ws().before_if_needed(tokens[2], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a +b")

    def test_004_amount(self):
        tokens, stream = lex("a+b")
        self._ws(rule("whiteSpace", "after", "BinaryExpressionOperator", 3)) \
            .after_if_needed(tokens[1], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a+   b")

    def test_005_preserve(self):
        tokens, stream = lex("a   +b")
        self._ws(rule("whiteSpace", "before", "BinaryExpressionOperator", -1)) \
            .before_if_needed(tokens[2], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a   +b")

    def test_006_indentation_untouched(self):
        tokens, stream = lex("a\n    +b")
        self._ws(rule("whiteSpace", "before", "BinaryExpressionOperator", 0)) \
            .before_if_needed(tokens[3], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a\n    +b")

    def test_007_trailing_untouched(self):
        tokens, stream = lex("a   \nb")
        self._ws().after_if_needed(tokens[0], 'FunctionName')
        self.assertEqual(stream.toString(), "a   \nb")

    def test_008_keep_separator(self):
        tokens, stream = lex("var  x")
        self._ws().after_if_needed(tokens[0], 'FunctionName')
        self.assertEqual(stream.toString(), "var x")

    def test_009_keep_separator_operators(self):
        tokens, stream = lex("a - -b")
        self._ws(rule("whiteSpace", "after", "BinaryExpressionOperator", 0)) \
            .after_if_needed(tokens[2], 'BinaryExpressionOperator')
        self.assertEqual(stream.toString(), "a - -b")

    def test_010_force(self):
        tokens, stream = lex("}else{")
        ws = self._ws()
        ws.before(tokens[1])
        ws.after(tokens[1])
        self.assertEqual(stream.toString(), "} else {")

    def test_011_force_at_boundary(self):
        tokens, stream = lex("else\nx")
        ws = self._ws()
        ws.before(tokens[0])
        ws.after(tokens[0])
        self.assertEqual(stream.toString(), "else\nx")

    def test_012_needs_after_token(self):
        ws = self._ws()

        tokens, stream = lex("var\nx")
        self.assertTrue(ws.needs_after_token(tokens[0]))

        tokens, stream = lex("a\n+")
        self.assertFalse(ws.needs_after_token(tokens[0]))

    def test_013_remove_trailing(self):
        tokens, stream = lex("a  \nb \n  c  ")
        self._ws().remove_trailing(stream.first)
        self.assertEqual(stream.toString(), "a\nb\n  c")

    def test_014_unknown_rule(self):
        tokens, stream = lex("a")
        with self.assertRaises(StyleError):
            self._ws().before_if_needed(tokens[0], 'Unknown')

class LineBreakTestCase(unittest.TestCase):

    def _br(self, opts=None):
        return LineBreak(Style(opts))

    def test_001_insert(self):
        tokens, stream = lex("a;b")
        self._br().before_if_needed(tokens[2], 'Property')
        self.assertEqual(stream.toString(), "a;\nb")

    def test_002_replace_whitespace(self):
        tokens, stream = lex("a;   b")
        self._br().before_if_needed(tokens[3], 'Property')
        self.assertEqual(stream.toString(), "a;\nb")

    def test_003_satisfied(self):
        tokens, stream = lex("a;\n  b")
        self._br().before_if_needed(tokens[4], 'Property')
        self.assertEqual(stream.toString(), "a;\n  b")

    def test_004_join(self):
        tokens, stream = lex("x\n{")
        self._br().before_if_needed(tokens[2], 'IfStatementOpeningBrace')
        self.assertEqual(stream.toString(), "x{")

    def test_005_join_keeps_separator(self):
        tokens, stream = lex("a\nb")
        self._br().before_if_needed(tokens[2], 'IfStatementOpeningBrace')
        self.assertEqual(stream.toString(), "a b")

    def test_006_line_comment(self):
        tokens, stream = lex("// c\nb")
        self._br().before_if_needed(tokens[2], 'IfStatementOpeningBrace')
        self.assertEqual(stream.toString(), "// c\nb")

    def test_007_line_comment_extra_breaks(self):
        tokens, stream = lex("// c\n\n\nb")
        self._br().before_if_needed(tokens[-1], 'Property')
        self.assertEqual(stream.toString(), "// c\nb")

    def test_008_amount(self):
        tokens, stream = lex("a;b")
        self._br(rule("lineBreak", "before", "Property", 2)) \
            .before_if_needed(tokens[2], 'Property')
        self.assertEqual(stream.toString(), "a;\n\nb")

    def test_009_after(self):
        tokens, stream = lex("{a")
        self._br().after_if_needed(tokens[0], 'ObjectExpressionOpeningBrace')
        self.assertEqual(stream.toString(), "{\na")

    def test_010_boundary(self):
        tokens, stream = lex("  a")
        br = self._br()
        br.before(tokens[1])
        br.after(tokens[1])
        self.assertEqual(stream.toString(), "  a")

    def test_011_preserve(self):
        tokens, stream = lex("{a")
        self._br().before_if_needed(tokens[0], 'ObjectExpressionOpeningBrace')
        self._br().after_if_needed(tokens[0], 'ObjectExpressionClosingBrace')
        self.assertEqual(stream.toString(), "{a")

    def test_012_needs(self):
        br = self._br()
        self.assertTrue(br.needs_before('FunctionDeclarationClosingBrace'))
        self.assertFalse(br.needs_before('IfStatementOpeningBrace'))
        self.assertFalse(br.needs_before('ObjectExpressionOpeningBrace'))
        self.assertTrue(br.needs_after('Property'))

    def test_013_line_break_value(self):
        tokens, stream = lex("a;b")
        self._br({"lineBreak": {"value": "\r\n"}}).before_if_needed(tokens[2], 'Property')
        self.assertEqual(stream.toString(), "a;\r\nb")

class IndentTestCase(unittest.TestCase):

    def _indent(self, opts=None):
        return Indent(Style(opts))

    def test_001_before(self):
        tokens, stream = lex("a\nb")
        self._indent().before(tokens[2], 2)
        self.assertEqual(stream.toString(), "a\n    b")

    def test_002_dedent(self):
        tokens, stream = lex("a\n    b")
        self._indent().before(tokens[3], 0)
        self.assertEqual(stream.toString(), "a\nb")

    def test_003_not_line_start(self):
        tokens, stream = lex("a b")
        indent = self._indent()
        indent.if_needed(tokens[2], 1)
        indent.before(tokens[2], 1)
        self.assertEqual(stream.toString(), "a b")

    def test_004_if_needed(self):
        tokens, stream = lex("a\n   b")
        self._indent().if_needed(tokens[3], 1)
        self.assertEqual(stream.toString(), "a\n  b")

    def test_005_value(self):
        tokens, stream = lex("b")
        self._indent({"indent": {"value": "\t"}}).before(tokens[0], 2)
        self.assertEqual(stream.toString(), "\t\tb")

def main():
    unittest.main()

if __name__ == '__main__':
    main()
