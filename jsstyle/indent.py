
from .token import Token
from .stream import is_ws, starts_line, create, insert_before, remove

class Indent(object):
    """ manage the white space run at the start of a line """

    def __init__(self, style):
        super(Indent, self).__init__()
        self.style = style

    def value(self, level):
        return self.style.indent_value * max(level, 0)

    def current(self, token):
        """ return the indentation of a token which starts a line """
        prev = token.prev
        return prev.value if is_ws(prev) else ""

    def if_needed(self, token, level):
        if starts_line(token) and self.current(token) != self.value(level):
            self.replace(token, self.value(level))

    def before(self, token, level):
        if starts_line(token):
            self.replace(token, self.value(level))

    def replace(self, token, value):
        """ set the indentation of a token which starts a line """
        prev = token.prev
        if is_ws(prev):
            if value:
                prev.value = value
            else:
                remove(prev)
        elif value:
            insert_before(token, create(Token.T_WHITESPACE, value))
