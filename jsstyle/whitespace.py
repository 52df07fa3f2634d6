
import logging

from .token import Token
from .stream import is_ws, is_br, starts_line, find_next_non_empty, \
    needs_separator, create, insert_before, insert_after, remove

log = logging.getLogger("jsstyle.whitespace")

class WhiteSpace(object):
    """ reconcile the white space run adjacent to a token with the style

    only spaces between two tokens on the same line are managed here,
    the run at the start of a line belongs to Indent and the run at the
    end of a line is removed by remove_trailing.
    """

    def __init__(self, style):
        super(WhiteSpace, self).__init__()
        self.style = style

    def _amount(self, side, rule):
        return self.style.get("whiteSpace", side, rule)

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

    def needs_after_token(self, token):
        """ true if the next token would merge with the given token """
        return needs_separator(token, find_next_non_empty(token))

    def _set_before(self, token, amount):

        prev = token.prev
        if prev is None or is_br(prev):
            return

        if is_ws(prev):
            if starts_line(token):
                return
            self._set_run(prev, prev.prev, token, amount)
        elif amount > 0:
            insert_before(token, create(Token.T_WHITESPACE, self._value(amount)))

    def _set_after(self, token, amount):

        next = token.next
        if next is None or is_br(next):
            return

        if is_ws(next):
            if next.next is None or is_br(next.next):
                return
            self._set_run(next, token, next.next, amount)
        elif amount > 0:
            insert_after(token, create(Token.T_WHITESPACE, self._value(amount)))

    def _set_run(self, run, prev, next, amount):
        if amount == 0:
            if needs_separator(prev, next):
                amount = 1
            else:
                remove(run)
                return
        value = self._value(amount)
        if run.value != value:
            run.value = value

    def _value(self, amount):
        return self.style.whitespace_value * amount

    def remove_trailing(self, token):
        """ remove every white space run which ends a line

        token is the first token of the stream
        """
        count = 0
        while token is not None:
            next = token.next
            if is_ws(token) and (next is None or is_br(next)):
                remove(token)
                count += 1
            token = next
        log.debug("removed %d trailing white space runs", count)
