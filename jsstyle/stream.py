"""
navigation and mutation of the token stream

tokens form an intrusive doubly linked list. Removing or inserting a
token only relinks its neighbors; a token which has been removed keeps
no links. Any token cached by a caller, other than the anchors held by
the AST, must be looked up again after a neighboring token is inserted
or removed: removing a token merges the white space runs on either side
of it, so the surviving run may not be the one that was cached.
"""

from .token import Token, TokenError

class NotFound(TokenError):
    pass

class TokenStream(object):
    """ a view of a linked list of tokens

    only white space and line breaks are ever removed from the stream.
    The head of the list is recovered by walking backwards from the first
    lexed token of any other type, so that tokens may be inserted before,
    or removed from, the start of the source.
    """

    def __init__(self, tokens):
        super(TokenStream, self).__init__()
        self.tokens = list(tokens)

    @property
    def first(self):
        token = None
        for tok in self.tokens:
            if not tok.isEmpty():
                token = tok
                break

        if token is None:
            # a stream of white space and line breaks only loses white space
            for tok in self.tokens:
                if tok.prev is not None or tok.next is not None or \
                   tok.type == Token.T_LINEBREAK:
                    token = tok
                    break

        if token is None:
            return None

        while token.prev is not None:
            token = token.prev
        return token

    def __iter__(self):
        token = self.first
        while token is not None:
            # read next before yielding so the consumer may remove the token
            next_token = token.next
            yield token
            token = next_token

    def toString(self):
        return ''.join(token.value for token in self)

    def __str__(self):
        return self.toString()

def is_ws(token):
    return token is not None and token.type == Token.T_WHITESPACE

def is_br(token):
    return token is not None and token.type == Token.T_LINEBREAK

def is_empty(token):
    return token is not None and token.isEmpty()

def starts_line(token):
    """ true if only white space separates the token from a line break
    or from the start of the stream
    """
    prev = token.prev
    if is_ws(prev):
        prev = prev.prev
    return prev is None or is_br(prev)

def terminates_comment(token):
    """ a line break that ends a line comment can never be removed """
    return is_br(token) and token.prev is not None and \
        token.prev.type == Token.T_LINE_COMMENT

def isalphanum(a, b):
    """ true if the two strings would merge into a single word """
    if a and b:
        x = a[-1]
        y = b[0]
        return (x.isalnum() or x in '_$' or ord(x) > 127) and \
               (y.isalnum() or y in '_$' or ord(y) > 127)
    return False

def needs_separator(prev, token):
    """ true if removing the space between two tokens would change how
    the text is lexed
    """
    if prev is None or token is None:
        return False
    a = prev.value
    b = token.value
    if isalphanum(a, b):
        return True
    if not a or not b:
        return False
    x = a[-1]
    y = b[0]
    # a + +b, a - --b
    if x in '+-' and y == x:
        return True
    # a / /re/ would start a comment
    if x == '/' and y in '/*':
        return True
    # 1 .toString()
    if prev.type == Token.T_NUMERIC and y == '.':
        return True
    return False

def find_next(token, value):
    """ return the first significant token, starting at token, with the
    given value
    """
    start = token
    while token is not None:
        if token.value == value and token.isSignificant():
            return token
        token = token.next
    raise NotFound(start, "expected %r" % value)

def find_prev(token, value):
    """ return the first significant token, starting at token and
    searching backwards, with the given value
    """
    start = token
    while token is not None:
        if token.value == value and token.isSignificant():
            return token
        token = token.prev
    raise NotFound(start, "expected %r" % value)

def find_next_non_empty(token):
    token = token.next
    while is_empty(token):
        token = token.next
    return token

def find_prev_non_empty(token):
    token = token.prev
    while is_empty(token):
        token = token.prev
    return token

def find_next_significant(token):
    """ return the nearest token after token which is not white space,
    a line break or a comment
    """
    token = token.next
    while token is not None and not token.isSignificant():
        token = token.next
    return token

def create(type, value):
    return Token(type, 0, 0, value)

def insert_before(target, token):
    token.prev = target.prev
    token.next = target
    if target.prev is not None:
        target.prev.next = token
    target.prev = token
    return token

def insert_after(target, token):
    token.prev = target
    token.next = target.next
    if target.next is not None:
        target.next.prev = token
    target.next = token
    return token

def remove(token):
    """ unlink a token from the stream

    when the token was separating two white space runs the runs are
    merged into one, keeping the first.
    """
    prev = token.prev
    next = token.next
    if prev is not None:
        prev.next = next
    if next is not None:
        next.prev = prev
    token.prev = None
    token.next = None

    if is_ws(prev) and is_ws(next):
        prev.value += next.value
        remove(next)

def keep_apart(prev, next):
    """ insert a space between two tokens which were joined by a removal
    when the joined text would lex differently, or would run into a comment

    returns the token following prev
    """
    if prev is None or next is None or is_empty(prev) or is_empty(next):
        return next
    if prev.isComment() or next.isComment() or needs_separator(prev, next):
        insert_after(prev, create(Token.T_WHITESPACE, " "))
    return next

def remove_in_between(start, end, type):
    """ remove every token of the given type strictly between two tokens """
    token = start.next
    while token is not None and token is not end:
        if token.type == type and not terminates_comment(token):
            # prev survives the removal, even when runs are merged into it
            prev = token.prev
            remove(token)
            token = keep_apart(prev, prev.next)
        else:
            token = token.next

def remove_ws_br_in_between(start, end):
    """ remove white space and line breaks strictly between two tokens """
    token = start.next
    while token is not None and token is not end:
        if token.isEmpty() and not terminates_comment(token):
            prev = token.prev
            remove(token)
            token = prev.next
        else:
            token = token.next

def remove_adjacent_before(token, type):
    prev = token.prev
    if prev is not None and prev.type == type and not terminates_comment(prev):
        remove(prev)

def remove_adjacent_after(token, type):
    next = token.next
    if next is not None and next.type == type and not terminates_comment(next):
        remove(next)
