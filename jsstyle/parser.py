#! cd .. && python3 -m jsstyle.parser

"""
recursive descent parser for ES5

the parser only reads the significant tokens. White space, line breaks
and comments stay in the token stream untouched, the only thing the
parser records about them is which tokens follow a line break, for
automatic semicolon insertion.

every node is anchored to the first and last token of its source text.
Parentheses around an expression are not part of the expression, but a
compound expression whose first operand is parenthesized starts at that
parenthesis.
"""
import sys
import logging

from .token import Token, TokenError
from .node import Node, Syntax

log = logging.getLogger("jsstyle.parser")

class ParseError(TokenError):
    pass

assignment_operators = {
    "=", "+=", "-=", "*=", "/=", "%=",
    "<<=", ">>=", ">>>=", "&=", "|=", "^=",
}

binary_precedence = {
    "||": 1,
    "&&": 2,
    "|": 3,
    "^": 4,
    "&": 5,
    "==": 6, "!=": 6, "===": 6, "!==": 6,
    "<": 7, ">": 7, "<=": 7, ">=": 7, "instanceof": 7, "in": 7,
    "<<": 8, ">>": 8, ">>>": 8,
    "+": 9, "-": 9,
    "*": 10, "/": 10, "%": 10,
}

unary_operators = {"!", "~", "+", "-", "typeof", "void", "delete"}

class Parser(object):

    def __init__(self):
        super(Parser, self).__init__()
        self.tokens = []
        self.index = 0
        self.newline_before = set()
        self.last = None

    def parse(self, tokens):
        """ parse a linked list of tokens into a Program node

        tokens may be the list returned by the lexer or the first token
        of the stream
        """
        if isinstance(tokens, Token):
            head = tokens
            tokens = []
            while head is not None:
                tokens.append(head)
                head = head.next
        else:
            tokens = list(tokens)

        self.tokens = []
        self.newline_before = set()
        self.index = 0
        self.last = None

        newline = False
        for token in tokens:
            if token.isSignificant():
                if newline:
                    self.newline_before.add(len(self.tokens))
                self.tokens.append(token)
                newline = False
            elif token.type == Token.T_LINEBREAK:
                newline = True
            elif token.type == Token.T_BLOCK_COMMENT and '\n' in token.value:
                newline = True

        body = []
        while self.peek_token() is not None:
            body.append(self.parse_statement())

        log.debug("parsed %d statements from %d tokens", len(body), len(self.tokens))

        first = tokens[0] if tokens else None
        last = tokens[-1] if tokens else None
        return Node(Syntax.PROGRAM, first, last, body=body)

    # -------------------------------------------------------------------
    # token access

    def peek_token(self, offset=0):
        index = self.index + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def match(self, value, offset=0):
        """ true if the next token is the given punctuator or keyword """
        token = self.peek_token(offset)
        return token is not None and token.value == value and \
            token.type in (Token.T_PUNCTUATOR, Token.T_KEYWORD)

    def consume(self, value=None):
        token = self.peek_token()
        if token is None:
            raise self.error("unexpected end of input")
        if value is not None and not self.match(value):
            raise ParseError(token, "expected %r" % value)
        self.index += 1
        self.last = token
        return token

    def error(self, message, token=None):
        if token is None:
            token = self.peek_token()
        if token is None:
            token = self.last or Token("EOF", 0, 0, "")
        return ParseError(token, message)

    def consume_semicolon(self):
        if self.match(";"):
            self.consume()
            return
        # automatic semicolon insertion
        if self.peek_token() is None or self.match("}") or \
           self.index in self.newline_before:
            return
        raise self.error("expected ';'")

    def finish(self, type, start, **fields):
        return Node(type, start, self.last, **fields)

    # -------------------------------------------------------------------
    # statements

    def parse_statement(self):
        token = self.peek_token()

        if token.type == Token.T_PUNCTUATOR:
            if token.value == "{":
                return self.parse_block()
            if token.value == ";":
                self.consume()
                return self.finish(Syntax.EMPTY_STATEMENT, token)

        elif token.type == Token.T_KEYWORD:
            method = getattr(self, "collect_keyword_" + token.value, None)
            if method is not None:
                return method()

        elif token.type == Token.T_IDENTIFIER and self.match(":", 1):
            label = self.parse_identifier()
            self.consume(":")
            body = self.parse_statement()
            return self.finish(Syntax.LABELED_STATEMENT, token, label=label, body=body)

        expression = self.parse_expression()
        self.consume_semicolon()
        return self.finish(Syntax.EXPRESSION_STATEMENT, token, expression=expression)

    def parse_block(self):
        start = self.consume("{")
        body = []
        while not self.match("}"):
            if self.peek_token() is None:
                raise self.error("expected '}'")
            body.append(self.parse_statement())
        self.consume("}")
        return self.finish(Syntax.BLOCK_STATEMENT, start, body=body)

    def parse_declarations(self, no_in=False):
        declarations = []
        while True:
            id = self.parse_identifier()
            init = None
            if self.match("="):
                self.consume()
                init = self.visit_assign(no_in)
            declarations.append(self.finish(Syntax.VARIABLE_DECLARATOR,
                id.startToken, id=id, init=init))
            if not self.match(","):
                break
            self.consume()
        return declarations

    def collect_keyword_var(self):
        start = self.consume("var")
        declarations = self.parse_declarations()
        self.consume_semicolon()
        return self.finish(Syntax.VARIABLE_DECLARATION, start,
            declarations=declarations, kind="var")

    def collect_keyword_function(self):
        start = self.consume("function")
        id = self.parse_identifier()
        params = self.parse_params()
        body = self.parse_block()
        return self.finish(Syntax.FUNCTION_DECLARATION, start,
            id=id, params=params, body=body)

    def collect_keyword_if(self):
        start = self.consume("if")
        self.consume("(")
        test = self.parse_expression()
        self.consume(")")
        consequent = self.parse_statement()
        alternate = None
        if self.match("else"):
            self.consume()
            alternate = self.parse_statement()
        return self.finish(Syntax.IF_STATEMENT, start,
            test=test, consequent=consequent, alternate=alternate)

    def collect_keyword_for(self):
        start = self.consume("for")
        self.consume("(")

        init = None
        if self.match("var"):
            var = self.consume()
            declarations = self.parse_declarations(no_in=True)
            init = self.finish(Syntax.VARIABLE_DECLARATION, var,
                declarations=declarations, kind="var")
            if len(declarations) == 1 and self.match("in"):
                return self._collect_for_in(start, init)
        elif not self.match(";"):
            init = self.parse_expression(no_in=True)
            if self.match("in"):
                if init.type not in (Syntax.IDENTIFIER, Syntax.MEMBER_EXPRESSION):
                    raise self.error("invalid left-hand side in for-in")
                return self._collect_for_in(start, init)

        self.consume(";")
        test = None
        if not self.match(";"):
            test = self.parse_expression()
        self.consume(";")
        update = None
        if not self.match(")"):
            update = self.parse_expression()
        self.consume(")")
        body = self.parse_statement()
        return self.finish(Syntax.FOR_STATEMENT, start,
            init=init, test=test, update=update, body=body)

    def _collect_for_in(self, start, left):
        self.consume("in")
        right = self.parse_expression()
        self.consume(")")
        body = self.parse_statement()
        return self.finish(Syntax.FOR_IN_STATEMENT, start,
            left=left, right=right, body=body)

    def collect_keyword_while(self):
        start = self.consume("while")
        self.consume("(")
        test = self.parse_expression()
        self.consume(")")
        body = self.parse_statement()
        return self.finish(Syntax.WHILE_STATEMENT, start, test=test, body=body)

    def collect_keyword_do(self):
        start = self.consume("do")
        body = self.parse_statement()
        self.consume("while")
        self.consume("(")
        test = self.parse_expression()
        self.consume(")")
        # the semicolon after do-while is always optional
        if self.match(";"):
            self.consume()
        return self.finish(Syntax.DO_WHILE_STATEMENT, start, body=body, test=test)

    def _at_statement_end(self):
        return self.peek_token() is None or self.match(";") or \
            self.match("}") or self.index in self.newline_before

    def collect_keyword_return(self):
        start = self.consume("return")
        argument = None
        if not self._at_statement_end():
            argument = self.parse_expression()
        self.consume_semicolon()
        return self.finish(Syntax.RETURN_STATEMENT, start, argument=argument)

    def collect_keyword_throw(self):
        start = self.consume("throw")
        if self._at_statement_end():
            raise self.error("expected expression after throw")
        argument = self.parse_expression()
        self.consume_semicolon()
        return self.finish(Syntax.THROW_STATEMENT, start, argument=argument)

    def _collect_jump(self, keyword, type):
        start = self.consume(keyword)
        label = None
        token = self.peek_token()
        if token is not None and token.type == Token.T_IDENTIFIER and \
           self.index not in self.newline_before:
            label = self.parse_identifier()
        self.consume_semicolon()
        return self.finish(type, start, label=label)

    def collect_keyword_break(self):
        return self._collect_jump("break", Syntax.BREAK_STATEMENT)

    def collect_keyword_continue(self):
        return self._collect_jump("continue", Syntax.CONTINUE_STATEMENT)

    def collect_keyword_try(self):
        start = self.consume("try")
        block = self.parse_block()
        handler = None
        finalizer = None
        if self.match("catch"):
            catch = self.consume()
            self.consume("(")
            param = self.parse_identifier()
            self.consume(")")
            body = self.parse_block()
            handler = self.finish(Syntax.CATCH_CLAUSE, catch, param=param, body=body)
        if self.match("finally"):
            self.consume()
            finalizer = self.parse_block()
        if handler is None and finalizer is None:
            raise self.error("expected catch or finally")
        return self.finish(Syntax.TRY_STATEMENT, start,
            block=block, handler=handler, finalizer=finalizer)

    def collect_keyword_switch(self):
        start = self.consume("switch")
        self.consume("(")
        discriminant = self.parse_expression()
        self.consume(")")
        self.consume("{")
        cases = []
        while not self.match("}"):
            case = self.peek_token()
            if self.match("case"):
                self.consume()
                test = self.parse_expression()
            elif self.match("default"):
                self.consume()
                test = None
            else:
                raise self.error("expected case or default")
            self.consume(":")
            consequent = []
            while not (self.match("case") or self.match("default") or self.match("}")):
                if self.peek_token() is None:
                    raise self.error("expected '}'")
                consequent.append(self.parse_statement())
            cases.append(self.finish(Syntax.SWITCH_CASE, case,
                test=test, consequent=consequent))
        self.consume("}")
        return self.finish(Syntax.SWITCH_STATEMENT, start,
            discriminant=discriminant, cases=cases)

    # -------------------------------------------------------------------
    # expressions, lowest precedence first

    def parse_expression(self, no_in=False):
        start = self.peek_token()
        expr = self.visit_assign(no_in)
        if self.match(","):
            expressions = [expr]
            while self.match(","):
                self.consume()
                expressions.append(self.visit_assign(no_in))
            expr = self.finish(Syntax.SEQUENCE_EXPRESSION, start, expressions=expressions)
        return expr

    def visit_assign(self, no_in=False):
        start = self.peek_token()
        left = self.visit_ternary(no_in)
        token = self.peek_token()
        if token is not None and token.type == Token.T_PUNCTUATOR and \
           token.value in assignment_operators:
            if left.type not in (Syntax.IDENTIFIER, Syntax.MEMBER_EXPRESSION):
                raise ParseError(token, "invalid assignment target")
            self.consume()
            right = self.visit_assign(no_in)
            return self.finish(Syntax.ASSIGNMENT_EXPRESSION, start,
                operator=token.value, left=left, right=right)
        return left

    def visit_ternary(self, no_in=False):
        start = self.peek_token()
        test = self.visit_binary(0, no_in)
        if self.match("?"):
            self.consume()
            consequent = self.visit_assign()
            self.consume(":")
            alternate = self.visit_assign(no_in)
            return self.finish(Syntax.CONDITIONAL_EXPRESSION, start,
                test=test, consequent=consequent, alternate=alternate)
        return test

    def _precedence(self, token, no_in):
        if token is None or token.type not in (Token.T_PUNCTUATOR, Token.T_KEYWORD):
            return None
        if no_in and token.value == "in":
            return None
        return binary_precedence.get(token.value)

    def visit_binary(self, min_precedence, no_in=False):
        start = self.peek_token()
        left = self.visit_unary()
        while True:
            token = self.peek_token()
            precedence = self._precedence(token, no_in)
            if precedence is None or precedence <= min_precedence:
                break
            self.consume()
            right = self.visit_binary(precedence, no_in)
            if token.value in ("||", "&&"):
                type = Syntax.LOGICAL_EXPRESSION
            else:
                type = Syntax.BINARY_EXPRESSION
            left = self.finish(type, start, operator=token.value, left=left, right=right)
        return left

    def visit_unary(self):
        start = self.peek_token()
        if start is None:
            raise self.error("unexpected end of input")

        if self.match("++") or self.match("--"):
            self.consume()
            argument = self.visit_unary()
            return self.finish(Syntax.UPDATE_EXPRESSION, start,
                operator=start.value, argument=argument, prefix=True)

        if start.type in (Token.T_PUNCTUATOR, Token.T_KEYWORD) and \
           start.value in unary_operators:
            self.consume()
            argument = self.visit_unary()
            return self.finish(Syntax.UNARY_EXPRESSION, start,
                operator=start.value, argument=argument, prefix=True)

        return self.visit_unary_postfix()

    def visit_unary_postfix(self):
        start = self.peek_token()
        expr = self.visit_attr()
        if (self.match("++") or self.match("--")) and \
           self.index not in self.newline_before:
            token = self.consume()
            return self.finish(Syntax.UPDATE_EXPRESSION, start,
                operator=token.value, argument=expr, prefix=False)
        return expr

    def visit_attr(self, allow_call=True):
        """ member access and calls """
        start = self.peek_token()
        if self.match("new"):
            expr = self.visit_new()
        else:
            expr = self.parse_primary()

        while True:
            if self.match("."):
                self.consume()
                property = self.parse_identifier_name()
                expr = self.finish(Syntax.MEMBER_EXPRESSION, start,
                    object=expr, property=property, computed=False)
            elif self.match("["):
                self.consume()
                property = self.parse_expression()
                self.consume("]")
                expr = self.finish(Syntax.MEMBER_EXPRESSION, start,
                    object=expr, property=property, computed=True)
            elif allow_call and self.match("("):
                arguments = self.parse_arguments()
                expr = self.finish(Syntax.CALL_EXPRESSION, start,
                    callee=expr, arguments=arguments)
            else:
                break
        return expr

    def visit_new(self):
        start = self.consume("new")
        callee = self.visit_attr(allow_call=False)
        arguments = []
        if self.match("("):
            arguments = self.parse_arguments()
        return self.finish(Syntax.NEW_EXPRESSION, start,
            callee=callee, arguments=arguments)

    def parse_primary(self):
        token = self.peek_token()
        if token is None:
            raise self.error("unexpected end of input")

        if token.type == Token.T_PUNCTUATOR:
            if token.value == "(":
                self.consume()
                expr = self.parse_expression()
                self.consume(")")
                return expr
            if token.value == "[":
                return self.parse_array()
            if token.value == "{":
                return self.parse_object()

        elif token.type == Token.T_KEYWORD:
            if token.value == "function":
                return self.parse_function_expression()
            if token.value == "this":
                self.consume()
                return self.finish(Syntax.THIS_EXPRESSION, token)
            if token.value in ("null", "true", "false"):
                self.consume()
                return self.finish(Syntax.LITERAL, token, value=token.value)

        elif token.type == Token.T_IDENTIFIER:
            return self.parse_identifier()

        elif token.type in (Token.T_NUMERIC, Token.T_STRING, Token.T_REGEX):
            self.consume()
            return self.finish(Syntax.LITERAL, token, value=token.value)

        raise ParseError(token, "unexpected token")

    def parse_identifier(self):
        token = self.peek_token()
        if token is None or token.type != Token.T_IDENTIFIER:
            raise self.error("expected identifier")
        self.consume()
        return self.finish(Syntax.IDENTIFIER, token, name=token.value)

    def parse_identifier_name(self):
        """ property names may be reserved words """
        token = self.peek_token()
        if token is None or token.type not in (Token.T_IDENTIFIER, Token.T_KEYWORD):
            raise self.error("expected property name")
        self.consume()
        return self.finish(Syntax.IDENTIFIER, token, name=token.value)

    def parse_params(self):
        self.consume("(")
        params = []
        while not self.match(")"):
            params.append(self.parse_identifier())
            if not self.match(")"):
                self.consume(",")
        self.consume(")")
        return params

    def parse_arguments(self):
        self.consume("(")
        arguments = []
        while not self.match(")"):
            arguments.append(self.visit_assign())
            if not self.match(")"):
                self.consume(",")
        self.consume(")")
        return arguments

    def parse_function_expression(self):
        start = self.consume("function")
        id = None
        token = self.peek_token()
        if token is not None and token.type == Token.T_IDENTIFIER:
            id = self.parse_identifier()
        params = self.parse_params()
        body = self.parse_block()
        return self.finish(Syntax.FUNCTION_EXPRESSION, start,
            id=id, params=params, body=body)

    def parse_array(self):
        start = self.consume("[")
        elements = []
        while not self.match("]"):
            if self.match(","):
                self.consume()
                elements.append(None)
                continue
            elements.append(self.visit_assign())
            if not self.match("]"):
                self.consume(",")
        self.consume("]")
        return self.finish(Syntax.ARRAY_EXPRESSION, start, elements=elements)

    def parse_property_key(self):
        token = self.peek_token()
        if token is not None and token.type in (Token.T_STRING, Token.T_NUMERIC):
            self.consume()
            return self.finish(Syntax.LITERAL, token, value=token.value)
        return self.parse_identifier_name()

    def parse_object(self):
        start = self.consume("{")
        properties = []
        while not self.match("}"):
            token = self.peek_token()
            key = self.parse_property_key()
            if key.type == Syntax.IDENTIFIER and key.name in ("get", "set") and \
               not self.match(":"):
                # accessor property, the value starts at the parameter list
                kind = key.name
                key = self.parse_property_key()
                value_start = self.peek_token()
                params = self.parse_params()
                body = self.parse_block()
                value = self.finish(Syntax.FUNCTION_EXPRESSION, value_start,
                    id=None, params=params, body=body)
            else:
                kind = "init"
                self.consume(":")
                value = self.visit_assign()
            properties.append(self.finish(Syntax.PROPERTY, token,
                key=key, value=value, kind=kind))
            if not self.match("}"):
                self.consume(",")
        self.consume("}")
        return self.finish(Syntax.OBJECT_EXPRESSION, start, properties=properties)

def main():  # pragma: no cover

    from .lexer import Lexer

    text = "if (a) { b(1, 2) } else c = {d: [e, f]};"

    if len(sys.argv) == 2 and sys.argv[1] == "-":
        text = sys.stdin.read()

    ast = Parser().parse(Lexer().lex(text))
    print(ast.toString())

if __name__ == '__main__':  # pragma: no cover
    main()
