#! cd .. && python3 -m jsstyle.lexer

import sys
import logging

from .token import Token, TokenError

log = logging.getLogger("jsstyle.lexer")

class LexError(TokenError):
    pass

# characters which form a white space run
chset_space = " \t\v\f\u00a0\ufeff"
# line terminators, '\r\n' is collected as a single line break
chset_linebreak = "\r\n"
# punctuators that never combine with other characters
chset_special1 = "{}()[];,~?:"
# punctuators that may combine with other punctuators
chset_special2 = "+-*%&|^!=<>"
chset_number_base = "0123456789"
chset_hex = "0123456789abcdefABCDEF"

# keywords whose parenthesized header is followed by a statement
header_keywords = ('if', 'while', 'for', 'with')

reserved_words = {
    'break', 'case', 'catch', 'continue', 'debugger', 'default', 'delete',
    'do', 'else', 'finally', 'for', 'function', 'if', 'in', 'instanceof',
    'new', 'return', 'switch', 'this', 'throw', 'try', 'typeof', 'var',
    'void', 'while', 'with',
    # literals
    'null', 'true', 'false',
    # future reserved words
    'class', 'const', 'enum', 'export', 'extends', 'import', 'super',
}

# the complete set of punctuators composed of characters in chset_special2
# longer punctuators are built one character at a time, so every prefix
# of a punctuator must also be in this set.
punctuators = {
    "+", "-", "*", "%", "&", "|", "^", "!", "=", "<", ">",
    "++", "--", "+=", "-=", "*=", "%=", "&=", "|=", "^=",
    "&&", "||",
    "==", "!=", "===", "!==", "<=", ">=",
    "<<", ">>", ">>>", "<<=", ">>=", ">>>=",
}

def isidentifier(c):
    return c.isalnum() or c in '_$' or ord(c) > 127

def char_reader(f):
    # convert a file like object into a character generator
    buf = f.read(1024)
    while buf:
        for c in buf:
            yield c
        buf = f.read(1024)

class LexerBase(object):
    """
    base class for a generic look-ahead-by-N lexer

    characters are read one at a time, either from a string or from a
    file-like object. Characters which have been peeked remember their
    position, so that the line and column of a token always refer to its
    first character.
    """

    def __init__(self):
        super(LexerBase, self).__init__()

    def _init(self, seq, default_type):

        # position of the next character to be read from the input
        self._read_line = 1
        self._read_index = 0
        # position of the most recently consumed character
        self._line = 1
        self._index = -1

        self._default_type = default_type
        # the type of the current token
        self._type = default_type
        # the value of the current token
        self._tok = []
        # the line where the current token began
        self._initial_line = -1
        # the column of the current line where the token began
        self._initial_index = -1
        # list of (char, line, index) read from the input, but not consumed
        self._peek_char = []

        if hasattr(seq, 'read'):
            self.g = char_reader(seq)
            self.g_iter = True
        else:
            self.g = seq
            self.g_iter = False
            self.g_idx = 0
            self.g_len = len(seq)

        self.tokens = []

    def _getch_impl(self):
        """ read one character from the input stream"""
        if self.g_iter:
            c = next(self.g)
        else:
            if self.g_idx >= self.g_len:
                raise StopIteration()
            c = self.g[self.g_idx]
            self.g_idx += 1

        item = (c, self._read_line, self._read_index)

        if c == '\n':
            self._read_line += 1
            self._read_index = 0
        else:
            self._read_index += 1
        return item

    def _getch(self):
        """ return the next character """
        if self._peek_char:
            c, self._line, self._index = self._peek_char.pop(0)
        else:
            c, self._line, self._index = self._getch_impl()
        return c

    def _getstr(self, n):
        """ return the next N characters """

        s = ''
        try:
            for i in range(n):
                s += self._getch()
        except StopIteration:
            return None
        return s

    def _peekch(self):
        """ return the next character, do not advance the iterator """

        if not self._peek_char:
            self._peek_char.append(self._getch_impl())
        return self._peek_char[0][0]

    def _peek(self):
        """ return the next character or None at the end of the input """
        try:
            return self._peekch()
        except StopIteration:
            return None

    def _putch(self, c):
        """ append a character to the current token """

        if self._initial_line < 0:
            self._initial_line = self._line
            self._initial_index = self._index

        self._tok.append(c)

    def _gettok(self):
        return ''.join(self._tok)

    def _restok(self):
        self._tok = []

    def _push(self):
        """ push a new token and link it to the end of the stream """

        token = Token(
            self._type,
            self._initial_line,
            self._initial_index,
            self._gettok()
        )
        if self.tokens:
            prev = self.tokens[-1]
            prev.next = token
            token.prev = prev
        self.tokens.append(token)
        self._type = self._default_type
        self._initial_line = -1
        self._initial_index = -1
        self._restok()

    def _error(self, message):

        line = self._initial_line if self._initial_line >= 0 else self._line
        index = self._initial_index if self._initial_line >= 0 else self._index
        token = Token(self._type, line, index, self._gettok())
        return LexError(token, message)

class Lexer(LexerBase):
    """
    read tokens from a file or string

    unlike a lexer for a compiler, nothing is discarded: white space runs,
    line breaks and comments are all emitted as tokens.
    """

    def __init__(self):
        super(Lexer, self).__init__()

    def lex(self, seq):

        self._init(seq, Token.T_IDENTIFIER)

        # one entry per open parenthesis, true when it opens a statement header
        self._parens = []
        # closing parentheses of statement headers
        self._header_ends = set()

        self._lex()

        log.debug("lexed %d tokens", len(self.tokens))

        return self.tokens

    def _lex(self):

        while True:

            try:
                c = self._getch()
            except StopIteration:
                break

            if c in chset_linebreak:
                self._lex_linebreak(c)

            elif c in chset_space:
                self._lex_whitespace(c)

            elif c == '/':
                self._lex_slash()

            elif c == '\'' or c == '\"':
                self._lex_string(c)

            elif c in chset_number_base:
                self._lex_number(c)

            elif c == '.':
                nc = self._peek()
                if nc and nc in chset_number_base:
                    self._lex_number(c)
                else:
                    self._type = Token.T_PUNCTUATOR
                    self._putch(c)
                    self._push()

            elif c in chset_special1:
                self._lex_special1(c)

            elif c in chset_special2:
                self._lex_special2(c)

            elif isidentifier(c):
                self._lex_identifier(c)

            else:
                self._putch(c)
                raise self._error("unexpected character")

    def _lex_special1(self, c):

        if c == '(':
            prev = self._prev()
            self._parens.append(prev is not None and
                prev.type == Token.T_KEYWORD and prev.value in header_keywords)

        self._type = Token.T_PUNCTUATOR
        self._putch(c)
        self._push()

        if c == ')' and self._parens and self._parens.pop():
            self._header_ends.add(id(self.tokens[-1]))

    def _lex_linebreak(self, c):

        self._type = Token.T_LINEBREAK
        self._putch(c)
        if c == '\r' and self._peek() == '\n':
            self._putch(self._getch())
        self._push()

    def _lex_whitespace(self, c):

        self._type = Token.T_WHITESPACE
        self._putch(c)
        while True:
            nc = self._peek()
            if nc is None or nc not in chset_space:
                break
            self._putch(self._getch())
        self._push()

    def _lex_identifier(self, c):

        self._putch(c)
        while True:
            nc = self._peek()
            if nc is None or not isidentifier(nc):
                break
            self._putch(self._getch())

        if self._gettok() in reserved_words:
            self._type = Token.T_KEYWORD
        else:
            self._type = Token.T_IDENTIFIER
        self._push()

    def _lex_special2(self, c):
        """
        lex sequences of special characters
        break these characters apart using prefix matching

        e.g. '=-' becomes '=' and '-'
        e.g. '+++' becomes '++' and '+'
        """

        self._type = Token.T_PUNCTUATOR
        self._putch(c)

        while True:
            nc = self._peek()
            if nc is None or self._gettok() + nc not in punctuators:
                break
            self._putch(self._getch())

        self._push()

    def _lex_string(self, string_terminal):
        """ read a string from the stream, terminated by the given character

        strings are read with no processing, the token value is the
        string exactly as it appears in the source.
        """

        self._type = Token.T_STRING
        self._putch(string_terminal)

        while True:
            try:
                c = self._getch()
            except StopIteration:
                c = None

            if c is None:
                raise self._error("unterminated string")

            elif c == "\\":
                # pass the escaped character through unmodified. an
                # escaped line break is a line continuation
                self._putch(c)
                try:
                    c = self._getch()
                except StopIteration:
                    raise self._error("expected character")
                self._putch(c)
                if c == '\r' and self._peek() == '\n':
                    self._putch(self._getch())

            elif c in chset_linebreak:
                raise self._error("unterminated string")

            elif c == string_terminal:
                self._putch(string_terminal)
                self._push()
                break
            else:
                self._putch(c)

    def _lex_number(self, c):
        """ read a number from the stream """

        self._type = Token.T_NUMERIC
        self._putch(c)

        nc = self._peek()
        if c == '0' and nc and nc in 'xX':
            self._putch(self._getch())
            self._consume(chset_hex)
        else:
            self._consume(chset_number_base)
            if c != '.' and self._peek() == '.':
                self._putch(self._getch())
                self._consume(chset_number_base)
            nc = self._peek()
            if nc and nc in 'eE':
                self._putch(self._getch())
                nc = self._peek()
                if nc and nc in '+-':
                    self._putch(self._getch())
                self._consume(chset_number_base)

        self._push()

    def _consume(self, chset):
        while True:
            nc = self._peek()
            if nc is None or nc not in chset:
                break
            self._putch(self._getch())

    def _lex_slash(self):
        """

        the character '/' is overloaded to mean 1 of 5 things

            - //      : single line comment
            - /* */   : multi line comment
            - a / b   : division
            - a /= b  : division assignment
            - /^$/    : regular expression
        """

        self._putch('/')
        nc = self._peek()

        if nc == '/':
            self._lex_single_comment()
        elif nc == '*':
            self._lex_multi_comment()
        elif self._starts_regex(self._prev()):
            self._lex_regex()
        else:
            self._type = Token.T_PUNCTUATOR
            if nc == '=':
                self._putch(self._getch())
            self._push()

    def _lex_single_comment(self):
        """ read a comment up to, but not including, the line break """

        self._type = Token.T_LINE_COMMENT
        while True:
            nc = self._peek()
            if nc is None or nc in chset_linebreak:
                break
            self._putch(self._getch())
        self._push()

    def _lex_multi_comment(self):

        self._type = Token.T_BLOCK_COMMENT
        self._putch(self._getch())  # consume the '*'

        while True:
            try:
                c = self._getch()
            except StopIteration:
                raise self._error("unterminated comment")

            self._putch(c)
            if c == '*' and self._peek() == '/':
                self._putch(self._getch())
                break

        self._push()

    def _lex_regex(self):

        self._type = Token.T_REGEX
        in_class = False

        while True:
            try:
                c = self._getch()
            except StopIteration:
                raise self._error("unterminated regex")

            if c in chset_linebreak:
                raise self._error("unterminated regex")

            self._putch(c)

            if c == '\\':
                try:
                    self._putch(self._getch())
                except StopIteration:
                    raise self._error("unterminated regex")
            elif c == '[':
                in_class = True
            elif c == ']':
                in_class = False
            elif c == '/' and not in_class:
                break

        # flags
        while True:
            nc = self._peek()
            if nc is None or not isidentifier(nc):
                break
            self._putch(self._getch())

        self._push()

    def _starts_regex(self, prev):
        """ true if a '/' following prev begins a regular expression

        the closing parenthesis of an if, while, for or with header is
        followed by a statement, not by an operand
        """
        if id(prev) in self._header_ends:
            return True
        return not Token.basicType(prev)

    def _prev(self):
        """ return the most recent significant token """
        i = len(self.tokens) - 1
        while i >= 0:
            if self.tokens[i].isSignificant():
                return self.tokens[i]
            i -= 1
        return None

def main():  # pragma: no cover

    text = "var f = /\\{ *([\\w_-]+) *\\}/g; // comment\n"

    if len(sys.argv) == 2 and sys.argv[1] == "-":
        text = sys.stdin.read()

    for token in Lexer().lex(text):
        print(token)

if __name__ == '__main__':  # pragma: no cover
    main()
