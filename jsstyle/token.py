
class TokenError(Exception):
    def __init__(self, token, message):
        self.original_message = message
        message = "type: %s line: %d column: %d (%r) %s" % (token.type, token.line, token.index, token.value, message)
        super(TokenError, self).__init__(message)

        self.token = token

class Token(object):
    """ a single lexical unit linked into the token stream

    every character of the source belongs to exactly one token, including
    white space and line breaks, so that joining the values of all tokens
    reproduces the text being formatted.
    """

    # significant tokens
    T_IDENTIFIER = "T_IDENTIFIER"
    T_KEYWORD = "T_KEYWORD"
    T_NUMERIC = "T_NUMERIC"
    T_STRING = "T_STRING"
    T_REGEX = "T_REGEX"
    T_PUNCTUATOR = "T_PUNCTUATOR"

    # tokens that never change the meaning of the program
    T_WHITESPACE = "T_WHITESPACE"
    T_LINEBREAK = "T_LINEBREAK"
    T_LINE_COMMENT = "T_LINE_COMMENT"
    T_BLOCK_COMMENT = "T_BLOCK_COMMENT"

    def __init__(self, type, line=0, index=0, value=""):
        super(Token, self).__init__()
        self.type = type
        self.line = line
        self.index = index
        self.value = value
        self.prev = None
        self.next = None

    def __str__(self):

        return self.toString()

    def __repr__(self):
        return "Token(Token.%s, %r, %r, %r)" % (
            self.type, self.line, self.index, self.value)

    def toString(self):
        return "%s<%s,%s,%r>" % (self.type, self.line, self.index, self.value)

    def isEmpty(self):
        """ true for white space and line breaks """
        return self.type == Token.T_WHITESPACE or self.type == Token.T_LINEBREAK

    def isComment(self):
        return self.type == Token.T_LINE_COMMENT or self.type == Token.T_BLOCK_COMMENT

    def isSignificant(self):
        return not (self.isEmpty() or self.isComment())

    @staticmethod
    def basicType(token):
        """ true if a '/' following the token is a division operator """
        if token is None:
            return False
        if token.type in (Token.T_IDENTIFIER, Token.T_NUMERIC, Token.T_STRING, Token.T_REGEX):
            return True
        if token.type == Token.T_PUNCTUATOR:
            return token.value in (')', ']', '}')
        if token.type == Token.T_KEYWORD:
            return token.value in ('this', 'null', 'true', 'false')
        return False
