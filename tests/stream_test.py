#! cd .. && python3 -m tests.stream_test

import unittest

from jsstyle.token import Token
from jsstyle.lexer import Lexer
from jsstyle.stream import TokenStream, NotFound, isalphanum, \
    needs_separator, starts_line, terminates_comment, find_next, find_prev, \
    find_next_non_empty, find_prev_non_empty, find_next_significant, \
    create, insert_before, insert_after, remove, remove_in_between, \
    remove_ws_br_in_between, remove_adjacent_before, remove_adjacent_after, keep_apart

def lex(text):
    tokens = Lexer().lex(text)
    return tokens, TokenStream(tokens)

class StreamUtilTestCase(unittest.TestCase):

    def test_001_isalphanum(self):

        self.assertTrue(isalphanum("abc", "123"))
        self.assertTrue(isalphanum("☺", "☺"))
        self.assertTrue(isalphanum("var", "_name"))
        self.assertFalse(isalphanum("a", "("))
        self.assertFalse(isalphanum("", "a"))

    def test_002_needs_separator(self):

        tokens, _ = lex("a - -b")
        self.assertTrue(needs_separator(tokens[2], tokens[4]))

        tokens, _ = lex("a + -b")
        self.assertFalse(needs_separator(tokens[2], tokens[4]))

        tokens, _ = lex("in x")
        self.assertTrue(needs_separator(tokens[0], tokens[2]))

        tokens, _ = lex("1 .x")
        self.assertTrue(needs_separator(tokens[0], tokens[2]))

        self.assertFalse(needs_separator(None, tokens[0]))

    def test_003_starts_line(self):

        tokens, _ = lex("a\n  b c")

        self.assertTrue(starts_line(tokens[0]))
        self.assertTrue(starts_line(tokens[3]))
        self.assertFalse(starts_line(tokens[5]))

    def test_004_terminates_comment(self):

        tokens, _ = lex("a // c\nb\n")

        self.assertTrue(terminates_comment(tokens[3]))
        self.assertFalse(terminates_comment(tokens[5]))

class StreamSearchTestCase(unittest.TestCase):

    def test_001_find_next(self):

        tokens, _ = lex("f(a, ',', b)")

        comma = find_next(tokens[0], ',')
        self.assertIs(comma, tokens[3])

        # the search includes the starting token
        self.assertIs(find_next(comma, ','), comma)

    def test_002_find_next_skips_comments(self):

        tokens, _ = lex("a /* ) */ )")

        paren = find_next(tokens[0], ')')
        self.assertIs(paren, tokens[-1])

    def test_003_find_prev(self):

        tokens, _ = lex("if (a) b")

        paren = find_prev(tokens[-1], ')')
        self.assertEqual(paren.value, ')')
        self.assertIs(paren, tokens[4])

    def test_004_not_found(self):

        tokens, _ = lex("a b")

        with self.assertRaises(NotFound):
            find_next(tokens[0], ';')

        with self.assertRaises(NotFound):
            find_prev(tokens[-1], '(')

    def test_005_non_empty(self):

        tokens, _ = lex("a \n // c\n b")

        self.assertIs(find_next_non_empty(tokens[0]), tokens[4])
        self.assertIs(find_prev_non_empty(tokens[-1]), tokens[4])
        self.assertIsNone(find_prev_non_empty(tokens[0]))
        self.assertIsNone(find_next_non_empty(tokens[-1]))

    def test_006_next_significant(self):

        tokens, _ = lex("a /* c */ , b")

        self.assertIs(find_next_significant(tokens[0]), tokens[4])
        self.assertIsNone(find_next_significant(tokens[-1]))

class StreamMutationTestCase(unittest.TestCase):

    def test_001_insert(self):

        tokens, stream = lex("ab")

        insert_before(tokens[0], create(Token.T_WHITESPACE, " "))
        insert_after(tokens[0], create(Token.T_LINEBREAK, "\n"))

        self.assertEqual(stream.toString(), " ab\n")

    def test_002_remove_merges_whitespace(self):

        tokens, stream = lex("a b c")

        remove(tokens[2])

        self.assertEqual(stream.toString(), "a  c")
        self.assertEqual(tokens[1].value, "  ")
        self.assertIsNone(tokens[3].prev)
        self.assertIsNone(tokens[3].next)

    def test_003_remove_head(self):

        tokens, stream = lex("  a")

        remove(tokens[0])

        self.assertIs(stream.first, tokens[1])
        self.assertEqual(stream.toString(), "a")

    def test_004_remove_in_between(self):

        tokens, stream = lex("a\n+\nb")

        remove_in_between(tokens[0], tokens[-1], Token.T_LINEBREAK)

        self.assertEqual(stream.toString(), "a+b")

    def test_005_remove_ws_br_in_between(self):

        tokens, stream = lex("a \n \n b")

        remove_ws_br_in_between(tokens[0], tokens[-1])

        self.assertEqual(stream.toString(), "ab")

    def test_006_comment_line_break_kept(self):

        tokens, stream = lex("a // c\nb")

        remove_ws_br_in_between(tokens[0], tokens[-1])

        self.assertEqual(stream.toString(), "a// c\nb")

    def test_007_remove_adjacent(self):

        tokens, stream = lex("a\nb c")

        remove_adjacent_before(tokens[2], Token.T_LINEBREAK)
        remove_adjacent_after(tokens[2], Token.T_WHITESPACE)

        self.assertEqual(stream.toString(), "abc")

    def test_008_remove_adjacent_other_type(self):

        tokens, stream = lex("a b")

        remove_adjacent_before(tokens[2], Token.T_LINEBREAK)

        self.assertEqual(stream.toString(), "a b")

    def test_009_iterate_while_removing(self):

        tokens, stream = lex("a b c")

        for token in stream:
            if token.type == Token.T_IDENTIFIER and token.value == "b":
                remove(token)

        self.assertEqual(stream.toString(), "a  c")

    def test_010_remove_keeps_tokens_apart(self):

        tokens, stream = lex("x\nin y")
        remove_in_between(tokens[0], tokens[2], Token.T_LINEBREAK)
        self.assertEqual(stream.toString(), "x in y")

        tokens, stream = lex("a\n/* c */ + b")
        remove_in_between(tokens[0], tokens[2], Token.T_LINEBREAK)
        self.assertEqual(stream.toString(), "a /* c */ + b")

    def test_011_keep_apart(self):

        tokens, stream = lex("a+b")
        self.assertIs(keep_apart(tokens[0], tokens[1]), tokens[1])
        self.assertEqual(stream.toString(), "a+b")

        tokens, stream = lex("a/**/")
        keep_apart(tokens[0], tokens[1])
        self.assertEqual(stream.toString(), "a /**/")

def main():
    unittest.main()

if __name__ == '__main__':
    main()
