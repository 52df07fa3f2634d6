"""
node formatters

each formatter receives a node and the formatting context, and adjusts
the white space and line breaks within, or directly around, the source
text of that node. A formatter only adds or removes white space and line
break tokens.

formatters do not depend on the order in which nodes are visited. Token
positions are looked up from the node anchors every time, because any
formatter may have changed the stream around them.
"""
from .token import Token
from .node import Syntax
from .whitespace import WhiteSpace
from .linebreak import LineBreak
from .indent import Indent
from .stream import find_next, find_prev, find_next_non_empty, \
    find_prev_non_empty, find_next_significant, remove_in_between, \
    remove_ws_br_in_between, remove_adjacent_before, remove_adjacent_after

class FormatContext(object):
    """ the style appliers and the parent of every node """

    def __init__(self, style, parents=None):
        super(FormatContext, self).__init__()
        self.style = style
        self.ws = WhiteSpace(style)
        self.br = LineBreak(style)
        self.indent = Indent(style)
        self.parents = parents if parents is not None else {}

    def parent(self, node):
        return self.parents.get(id(node))

def _is_punctuator(token, value):
    return token is not None and token.type == Token.T_PUNCTUATOR and \
        token.value == value

def _commas(nodes):
    """ yield the comma separating each node from the one before it

    the comma is found from the start of the following node, so that
    parentheses around the previous node are skipped
    """
    for node in nodes[1:]:
        yield find_prev(node.startToken.prev, ',')

def format_function_declaration(node, ctx):
    ws = ctx.ws
    br = ctx.br

    ws.after_if_needed(node.id.startToken, 'FunctionName')

    if node.params:
        ws.before_if_needed(node.params[0].startToken, 'ParameterList')
        for comma in _commas(node.params):
            ws.around_if_needed(comma, 'ParameterComma')
        ws.after_if_needed(node.params[-1].endToken, 'ParameterList')

    ws.around_if_needed(node.body.startToken, 'FunctionDeclarationOpeningBrace')
    ws.around_if_needed(node.body.endToken, 'FunctionDeclarationClosingBrace')

    br.around_if_needed(node.body.startToken, 'FunctionDeclarationOpeningBrace')
    br.around_if_needed(node.body.endToken, 'FunctionDeclarationClosingBrace')

    ctx.indent.if_needed(node.body.startToken, node.indentLevel)
    ctx.indent.if_needed(node.body.endToken, node.indentLevel)

def format_binary_expression(node, ctx):
    remove_in_between(node.startToken, node.endToken, Token.T_LINEBREAK)
    operator = find_next(node.left.endToken.next, node.operator)
    ctx.ws.around_if_needed(operator, 'BinaryExpressionOperator')

def format_call_expression(node, ctx):
    ws = ctx.ws
    args = node.arguments
    if not args:
        return

    # the list boundaries are the call parentheses, which may enclose
    # parentheses of the first or last argument
    opening = find_next(node.callee.endToken.next, '(')
    closing = node.endToken

    ws.before_if_needed(find_next_non_empty(opening), 'ArgumentList')
    for comma in _commas(args):
        ws.around_if_needed(comma, 'ArgumentComma')
    ws.after_if_needed(find_prev_non_empty(closing), 'ArgumentList')

def format_object_expression(node, ctx):
    ws = ctx.ws
    br = ctx.br

    if not node.properties:
        return

    br.around_if_needed(node.startToken, 'ObjectExpressionOpeningBrace')

    for prop in node.properties:
        br.before_if_needed(prop.startToken, 'Property')
        ws.after_if_needed(prop.key.endToken, 'PropertyName')

        if prop.kind == "init":
            colon = find_next(prop.key.endToken.next, ':')
            ws.before_if_needed(find_next_non_empty(colon), 'PropertyValue')
        else:
            ws.before_if_needed(prop.value.startToken, 'PropertyValue')

        # the comma, or the closing brace, stays on the line of the property
        terminator = find_next_significant(prop.endToken)
        remove_in_between(prop.endToken, terminator, Token.T_LINEBREAK)

        if _is_punctuator(terminator, ','):
            br.after_if_needed(terminator, 'Property')

    br.around_if_needed(node.endToken, 'ObjectExpressionClosingBrace')
    ctx.indent.before(node.endToken, node.closingIndentLevel)

def format_variable_declaration(node, ctx):
    ws = ctx.ws
    br = ctx.br

    parent = ctx.parent(node)
    in_header = parent is not None and (
        (parent.type == Syntax.FOR_STATEMENT and parent.init is node) or
        (parent.type == Syntax.FOR_IN_STATEMENT and parent.left is node))

    if in_header:
        remove_in_between(node.startToken, node.endToken, Token.T_LINEBREAK)

    for index, declarator in enumerate(node.declarations):
        id_start = declarator.id.startToken

        if index == 0:
            remove_adjacent_before(id_start, Token.T_LINEBREAK)
        elif in_header:
            ws.before_if_needed(id_start, 'VariableName')
        else:
            br.before_if_needed(id_start, 'VariableName')
            ctx.indent.before(id_start, node.indentLevel + 1)

        if declarator.init is not None:
            # the value starts after the '=', at a parenthesis when the
            # initializer is wrapped in one
            assign = find_next(declarator.id.endToken.next, '=')
            ws.after_if_needed(declarator.id.endToken, 'VariableName')
            remove_adjacent_after(assign, Token.T_LINEBREAK)
            value_start = find_next_non_empty(assign)
            br.before_if_needed(value_start, 'VariableValue')
            ws.before(value_start)

    if ws.needs_after_token(node.startToken):
        ws.after(node.startToken)

def format_assignment_expression(node, ctx):
    operator = find_next(node.left.endToken.next, node.operator)
    remove_in_between(node.left.endToken, node.right.startToken, Token.T_LINEBREAK)
    ctx.ws.after_if_needed(find_prev_non_empty(operator), 'AssignmentOperator')
    ctx.ws.before_if_needed(find_next_non_empty(operator), 'AssignmentOperator')

def format_logical_expression(node, ctx):
    operator = find_next(node.left.endToken.next, node.operator)
    ctx.ws.around_if_needed(operator, 'LogicalExpressionOperator')

def format_sequence_expression(node, ctx):
    for comma in _commas(node.expressions):
        ctx.ws.around_if_needed(comma, 'CommaOperator')

def _format_loop_body(node, ctx, prefix, conditional_end, conditional_rule):
    """ brace placement shared by while and for statements """
    ws = ctx.ws
    br = ctx.br
    body = node.body

    if body.type == Syntax.BLOCK_STATEMENT:
        opening_rule = prefix + 'OpeningBrace'
        closing_rule = prefix + 'ClosingBrace'

        if not br.needs_before(opening_rule):
            remove_adjacent_before(body.startToken, Token.T_LINEBREAK)
        if prefix == 'ForStatement':
            remove_adjacent_after(body.startToken, Token.T_WHITESPACE)

        br.around_if_needed(body.startToken, opening_rule)
        ws.around_if_needed(body.startToken, opening_rule)
        br.around_if_needed(body.endToken, closing_rule)
        ws.around_if_needed(body.endToken, closing_rule)
        ctx.indent.before(body.endToken, node.indentLevel)

        ws.after_if_needed(conditional_end, conditional_rule)

    elif not _is_punctuator(find_next_non_empty(conditional_end), ';'):
        ws.after_if_needed(conditional_end, conditional_rule)

def format_while_statement(node, ctx):
    conditional_start = find_next(node.startToken.next, '(')
    conditional_end = find_prev(node.body.startToken.prev, ')')

    remove_in_between(node.startToken, conditional_end, Token.T_LINEBREAK)
    ctx.ws.before_if_needed(conditional_start, 'WhileStatementConditional')

    _format_loop_body(node, ctx, 'WhileStatement',
        conditional_end, 'WhileStatementConditional')

def format_for_statement(node, ctx):
    ws = ctx.ws

    expression_start = find_next(node.startToken.next, '(')
    expression_end = find_prev(node.body.startToken.prev, ')')

    remove_in_between(node.startToken, expression_end, Token.T_LINEBREAK)
    ws.before_if_needed(expression_start, 'ForStatementExpression')

    semicolon_1 = None
    semicolon_2 = None
    if node.test is not None:
        semicolon_1 = find_prev(node.test.startToken.prev, ';')
        semicolon_2 = find_next(node.test.endToken.next, ';')
    else:
        if node.init is not None:
            semicolon_1 = find_next(node.init.endToken.next, ';')
        if node.update is not None:
            semicolon_2 = find_prev(node.update.startToken.prev, ';')

    # with an empty test the space between the semicolons is decided by
    # the first one
    if semicolon_2 is not None:
        ws.around_if_needed(semicolon_2, 'ForStatementSemicolon')
    if semicolon_1 is not None:
        ws.around_if_needed(semicolon_1, 'ForStatementSemicolon')

    _format_loop_body(node, ctx, 'ForStatement',
        expression_end, 'ForStatementExpression')

def format_if_statement(node, ctx):
    ws = ctx.ws
    br = ctx.br
    indent = ctx.indent

    consequent = node.consequent
    start_body = consequent.startToken
    end_body = consequent.endToken

    conditional_start = find_next(node.startToken.next, '(')
    conditional_end = find_prev(start_body.prev, ')')

    remove_ws_br_in_between(node.startToken, conditional_start)
    remove_ws_br_in_between(conditional_end, start_body)

    ws.before_if_needed(conditional_start, 'IfStatementConditional')
    ws.after_if_needed(conditional_end, 'IfStatementConditional')

    alternate = node.alternate
    if alternate is not None:
        else_keyword = find_prev(alternate.startToken.prev, 'else')

        remove_start = find_prev_non_empty(else_keyword)
        if not _is_punctuator(remove_start, '}'):
            remove_start = else_keyword
        remove_ws_br_in_between(remove_start, alternate.startToken)

        if alternate.type == Syntax.IF_STATEMENT:
            ws.before(alternate.startToken)

            body = alternate.consequent
            if body.type == Syntax.BLOCK_STATEMENT:
                br.before_if_needed(body.startToken, 'ElseIfStatementOpeningBrace')
                indent.if_needed(body.startToken, node.indentLevel)
                br.before_if_needed(body.endToken, 'ElseIfStatementClosingBrace')
                indent.if_needed(body.endToken, node.indentLevel)

            br.before_if_needed(else_keyword, 'ElseIfStatement')
            br.after_if_needed(body.endToken, 'ElseIfStatement')

        elif alternate.type == Syntax.BLOCK_STATEMENT:
            ws.before(else_keyword)

            br.around_if_needed(alternate.startToken, 'ElseStatementOpeningBrace')
            ws.around_if_needed(alternate.startToken, 'ElseStatementOpeningBrace')

            if br.needs_before('ElseStatementClosingBrace'):
                last = find_prev_non_empty(alternate.endToken)
                remove_in_between(last, alternate.endToken, Token.T_WHITESPACE)
                br.around_if_needed(alternate.endToken, 'ElseStatementClosingBrace')
                indent.if_needed(alternate.endToken, node.indentLevel)
            else:
                ws.around_if_needed(alternate.endToken, 'ElseStatementClosingBrace')

            br.before_if_needed(else_keyword, 'ElseStatement')
            br.after_if_needed(alternate.endToken, 'ElseStatement')

            indent.if_needed(else_keyword, node.indentLevel)
            indent.if_needed(alternate.startToken, node.indentLevel)

        else:
            ws.after(else_keyword)

    if consequent.type == Syntax.BLOCK_STATEMENT:
        remove_ws_br_in_between(find_prev_non_empty(end_body), end_body)

        br.around_if_needed(start_body, 'IfStatementOpeningBrace')
        ws.around_if_needed(start_body, 'IfStatementOpeningBrace')

        if alternate is None:
            br.around_if_needed(end_body, 'IfStatementClosingBrace')
        else:
            br.before_if_needed(end_body, 'IfStatementClosingBrace')

        indent.if_needed(start_body, node.indentLevel)
        indent.if_needed(end_body, node.indentLevel)

        ws.around_if_needed(end_body, 'IfStatementClosingBrace')

# every node kind, mapped to its formatter. None leaves the node as it is.
HOOKS = {
    Syntax.PROGRAM: None,
    Syntax.VARIABLE_DECLARATION: format_variable_declaration,
    Syntax.VARIABLE_DECLARATOR: None,
    Syntax.FUNCTION_DECLARATION: format_function_declaration,
    Syntax.BLOCK_STATEMENT: None,
    Syntax.EXPRESSION_STATEMENT: None,
    Syntax.EMPTY_STATEMENT: None,
    Syntax.IF_STATEMENT: format_if_statement,
    Syntax.FOR_STATEMENT: format_for_statement,
    Syntax.FOR_IN_STATEMENT: None,
    Syntax.WHILE_STATEMENT: format_while_statement,
    Syntax.DO_WHILE_STATEMENT: None,
    Syntax.RETURN_STATEMENT: None,
    Syntax.BREAK_STATEMENT: None,
    Syntax.CONTINUE_STATEMENT: None,
    Syntax.THROW_STATEMENT: None,
    Syntax.TRY_STATEMENT: None,
    Syntax.CATCH_CLAUSE: None,
    Syntax.SWITCH_STATEMENT: None,
    Syntax.SWITCH_CASE: None,
    Syntax.LABELED_STATEMENT: None,
    Syntax.FUNCTION_EXPRESSION: None,
    Syntax.IDENTIFIER: None,
    Syntax.LITERAL: None,
    Syntax.THIS_EXPRESSION: None,
    Syntax.ARRAY_EXPRESSION: None,
    Syntax.OBJECT_EXPRESSION: format_object_expression,
    Syntax.PROPERTY: None,
    Syntax.SEQUENCE_EXPRESSION: format_sequence_expression,
    Syntax.UNARY_EXPRESSION: None,
    Syntax.BINARY_EXPRESSION: format_binary_expression,
    Syntax.ASSIGNMENT_EXPRESSION: format_assignment_expression,
    Syntax.UPDATE_EXPRESSION: None,
    Syntax.LOGICAL_EXPRESSION: format_logical_expression,
    Syntax.CONDITIONAL_EXPRESSION: None,
    Syntax.NEW_EXPRESSION: None,
    Syntax.CALL_EXPRESSION: format_call_expression,
    Syntax.MEMBER_EXPRESSION: None,
}

def get_hook(kind):
    """ return the formatter for a node kind, or None if the kind is not
    formatted

    raises KeyError for a kind which does not exist
    """
    try:
        return HOOKS[kind]
    except KeyError:
        raise KeyError("unknown node type: %r" % kind)
