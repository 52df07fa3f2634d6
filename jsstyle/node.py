
class Syntax(object):
    """ the closed set of node kinds """

    PROGRAM = "Program"

    # statements
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    BLOCK_STATEMENT = "BlockStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    IF_STATEMENT = "IfStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    WHILE_STATEMENT = "WhileStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    RETURN_STATEMENT = "ReturnStatement"
    BREAK_STATEMENT = "BreakStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    CATCH_CLAUSE = "CatchClause"
    SWITCH_STATEMENT = "SwitchStatement"
    SWITCH_CASE = "SwitchCase"
    LABELED_STATEMENT = "LabeledStatement"

    # expressions
    FUNCTION_EXPRESSION = "FunctionExpression"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    THIS_EXPRESSION = "ThisExpression"
    ARRAY_EXPRESSION = "ArrayExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    PROPERTY = "Property"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    LOGICAL_EXPRESSION = "LogicalExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    NEW_EXPRESSION = "NewExpression"
    CALL_EXPRESSION = "CallExpression"
    MEMBER_EXPRESSION = "MemberExpression"

Syntax.ALL = frozenset(v for k, v in vars(Syntax).items() if k.isupper())

# child fields of each kind, in source order
VISITOR_KEYS = {
    Syntax.PROGRAM: ("body",),
    Syntax.VARIABLE_DECLARATION: ("declarations",),
    Syntax.VARIABLE_DECLARATOR: ("id", "init"),
    Syntax.FUNCTION_DECLARATION: ("id", "params", "body"),
    Syntax.BLOCK_STATEMENT: ("body",),
    Syntax.EXPRESSION_STATEMENT: ("expression",),
    Syntax.EMPTY_STATEMENT: (),
    Syntax.IF_STATEMENT: ("test", "consequent", "alternate"),
    Syntax.FOR_STATEMENT: ("init", "test", "update", "body"),
    Syntax.FOR_IN_STATEMENT: ("left", "right", "body"),
    Syntax.WHILE_STATEMENT: ("test", "body"),
    Syntax.DO_WHILE_STATEMENT: ("body", "test"),
    Syntax.RETURN_STATEMENT: ("argument",),
    Syntax.BREAK_STATEMENT: ("label",),
    Syntax.CONTINUE_STATEMENT: ("label",),
    Syntax.THROW_STATEMENT: ("argument",),
    Syntax.TRY_STATEMENT: ("block", "handler", "finalizer"),
    Syntax.CATCH_CLAUSE: ("param", "body"),
    Syntax.SWITCH_STATEMENT: ("discriminant", "cases"),
    Syntax.SWITCH_CASE: ("test", "consequent"),
    Syntax.LABELED_STATEMENT: ("label", "body"),
    Syntax.FUNCTION_EXPRESSION: ("id", "params", "body"),
    Syntax.IDENTIFIER: (),
    Syntax.LITERAL: (),
    Syntax.THIS_EXPRESSION: (),
    Syntax.ARRAY_EXPRESSION: ("elements",),
    Syntax.OBJECT_EXPRESSION: ("properties",),
    Syntax.PROPERTY: ("key", "value"),
    Syntax.SEQUENCE_EXPRESSION: ("expressions",),
    Syntax.UNARY_EXPRESSION: ("argument",),
    Syntax.BINARY_EXPRESSION: ("left", "right"),
    Syntax.ASSIGNMENT_EXPRESSION: ("left", "right"),
    Syntax.UPDATE_EXPRESSION: ("argument",),
    Syntax.LOGICAL_EXPRESSION: ("left", "right"),
    Syntax.CONDITIONAL_EXPRESSION: ("test", "consequent", "alternate"),
    Syntax.NEW_EXPRESSION: ("callee", "arguments"),
    Syntax.CALL_EXPRESSION: ("callee", "arguments"),
    Syntax.MEMBER_EXPRESSION: ("object", "property"),
}

class Node(object):
    """ a syntax tree node

    startToken and endToken are the first and last tokens of the source
    text covered by the node. The tokens are owned by the token stream.
    """

    def __init__(self, type, startToken=None, endToken=None, **fields):
        super(Node, self).__init__()
        if type not in Syntax.ALL:
            raise ValueError("unknown node type: %r" % type)

        self.type = type
        self.startToken = startToken
        self.endToken = endToken

        # set by the formatter before any hook runs
        self.indentLevel = 0
        self.closingIndentLevel = 0

        for key in VISITOR_KEYS[type]:
            setattr(self, key, None)
        for key, value in fields.items():
            setattr(self, key, value)

    def __repr__(self):
        return "Node(%s, %r, %r)" % (self.type,
            self.startToken.value if self.startToken else None,
            self.endToken.value if self.endToken else None)

    def children(self):
        for key in VISITOR_KEYS[self.type]:
            value = getattr(self, key)
            if isinstance(value, list):
                for child in value:
                    # array holes are None
                    if child is not None:
                        yield child
            elif value is not None:
                yield value

    def toString(self, depth=0, pad="  "):

        extra = []
        for key in ("operator", "name", "value", "kind"):
            value = getattr(self, key, None)
            if isinstance(value, str):
                extra.append("%s=%r" % (key, value))

        s = " ".join([pad * depth + self.type] + extra) + "\n"
        for child in self.children():
            s += child.toString(depth + 1, pad)
        return s
