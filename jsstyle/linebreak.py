
from .token import Token
from .stream import is_br, is_empty, needs_separator, create, \
    insert_before, remove_ws_br_in_between

class LineBreak(object):
    """ reconcile the number of line breaks adjacent to a token

    the region considered is the run of white space and line breaks
    between the token and the nearest non-empty token. A line comment
    always keeps the line break which terminates it.
    """

    def __init__(self, style):
        super(LineBreak, self).__init__()
        self.style = style

    def _amount(self, side, rule):
        return self.style.get("lineBreak", side, rule)

    def needs_before(self, rule):
        return self._amount("before", rule) > 0

    def needs_after(self, rule):
        return self._amount("after", rule) > 0

    def before_if_needed(self, token, rule):
        amount = self._amount("before", rule)
        if amount >= 0:
            self._set_before(token, amount)

    def after_if_needed(self, token, rule):
        amount = self._amount("after", rule)
        if amount >= 0:
            self._set_after(token, amount)

    def around_if_needed(self, token, rule):
        self.before_if_needed(token, rule)
        self.after_if_needed(token, rule)

    def before(self, token, amount=1):
        self._set_before(token, max(amount, 1))

    def after(self, token, amount=1):
        self._set_after(token, max(amount, 1))

    def _set_before(self, token, amount):
        count = 0
        prev = token.prev
        while is_empty(prev):
            if is_br(prev):
                count += 1
            prev = prev.prev

        if prev is None:
            return

        if prev.type == Token.T_LINE_COMMENT:
            amount = max(amount, 1)

        if count != amount:
            self._replace(prev, token, amount)

    def _set_after(self, token, amount):
        count = 0
        next = token.next
        while is_empty(next):
            if is_br(next):
                count += 1
            next = next.next

        if next is None:
            return

        if token.type == Token.T_LINE_COMMENT:
            amount = max(amount, 1)

        if count != amount:
            self._replace(token, next, amount)

    def _replace(self, start, end, amount):
        """ replace everything between two non-empty tokens with the
        given number of line breaks
        """
        remove_ws_br_in_between(start, end)

        # the break terminating a line comment survives the removal
        count = 1 if is_br(start.next) else 0

        if amount == 0 and count == 0:
            if needs_separator(start, end):
                insert_before(end, create(Token.T_WHITESPACE, self.style.whitespace_value))
            return

        for i in range(amount - count):
            insert_before(end, create(Token.T_LINEBREAK, self.style.linebreak_value))
