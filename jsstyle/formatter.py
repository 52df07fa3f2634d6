#! cd .. && python3 -m jsstyle.formatter
"""
layout of an ES5 program

formatting runs as a sequence of passes over the syntax tree, all of
them mutating the same token stream:

    1. compute the indentation level of every node
    2. run the formatter of every node, parents before children
    3. indent every line to the level of the node that starts it
    4. remove trailing white space

the text is then the concatenation of the token values.
"""
import sys
import logging

from .lexer import Lexer
from .parser import Parser
from .node import Syntax, VISITOR_KEYS
from .style import Style
from .stream import TokenStream, is_empty, starts_line
from .traverse import TraversalBase
from .hooks import FormatContext, get_hook

log = logging.getLogger("jsstyle.formatter")

# statements which indent a body that is not a block
nested_body = {
    Syntax.IF_STATEMENT: ("consequent", "alternate"),
    Syntax.FOR_STATEMENT: ("body",),
    Syntax.FOR_IN_STATEMENT: ("body",),
    Syntax.WHILE_STATEMENT: ("body",),
    Syntax.DO_WHILE_STATEMENT: ("body",),
}

# fields holding a list of children one level deeper than the container
nested_list = {
    Syntax.BLOCK_STATEMENT: "body",
    Syntax.OBJECT_EXPRESSION: "properties",
    Syntax.ARRAY_EXPRESSION: "elements",
    Syntax.SWITCH_STATEMENT: "cases",
    Syntax.SWITCH_CASE: "consequent",
}

# containers whose closing brace or bracket lines up with the container
closing_tokens = (
    Syntax.BLOCK_STATEMENT,
    Syntax.ARRAY_EXPRESSION,
    Syntax.SWITCH_STATEMENT,
)

def child_offset(node, key, child):
    """ return the indentation of a child relative to its parent """

    if nested_list.get(node.type) == key:
        return 1

    if node.type == Syntax.VARIABLE_DECLARATION:
        return 1 if len(node.declarations) > 1 else 0

    # an argument continues the line of the call, unless it was written
    # on a line of its own
    if key == "arguments":
        return 1 if starts_line(child.startToken) else 0

    if key in nested_body.get(node.type, ()):
        if child.type == Syntax.BLOCK_STATEMENT:
            return 0
        # else if
        if key == "alternate" and child.type == Syntax.IF_STATEMENT:
            return 0
        return 1

    return 0

class TransformIndentLevel(TraversalBase):
    """ set the indentLevel of every node and record the parent of
    every node
    """

    def __init__(self):
        super(TransformIndentLevel, self).__init__()
        self.parents = {}

    def visit(self, node, parent):
        self.parents[id(node)] = parent

        if parent is None:
            node.indentLevel = 0

        if node.type == Syntax.OBJECT_EXPRESSION:
            node.closingIndentLevel = node.indentLevel

        for key in VISITOR_KEYS[node.type]:
            value = getattr(node, key)
            children = value if isinstance(value, list) else [value]
            for child in children:
                if child is not None:
                    child.indentLevel = node.indentLevel + child_offset(node, key, child)

class TransformHooks(TraversalBase):
    """ run the formatter of every node """

    def __init__(self, ctx):
        super(TransformHooks, self).__init__()
        self.ctx = ctx
        self.count = 0

    def visit(self, node, parent):
        hook = get_hook(node.type)
        if hook is not None:
            hook(node, self.ctx)
            self.count += 1

class TransformIndent(TraversalBase):
    """ indent every line which begins with the first token of a node """

    def __init__(self, ctx):
        super(TransformIndent, self).__init__()
        self.ctx = ctx

    def visit(self, node, parent):
        if node.type == Syntax.PROGRAM:
            return

        indent = self.ctx.indent
        indent.if_needed(node.startToken, node.indentLevel)

        if node.type in closing_tokens:
            indent.if_needed(node.endToken, node.indentLevel)
        elif node.type == Syntax.OBJECT_EXPRESSION:
            indent.if_needed(node.endToken, node.closingIndentLevel)

def indent_comments(ctx, stream):
    """ indent a comment which starts a line like the code that follows it

    a comment before a closing brace is indented one level deeper than
    the brace
    """
    indent = ctx.indent
    for token in stream:
        if not token.isComment() or not starts_line(token):
            continue

        target = token.next
        while target is not None and (is_empty(target) or target.isComment()):
            target = target.next

        if target is None:
            value = ""
        elif not starts_line(target):
            continue
        else:
            value = indent.current(target)
            if target.value in ("}", "]"):
                value += indent.value(1)

        if indent.current(token) != value:
            indent.replace(token, value)

class Formatter(object):
    def __init__(self, opts=None, preset="default"):
        super(Formatter, self).__init__()

        if not opts:
            opts = {}

        self.style = Style(opts, preset)

    def format(self, text):
        """ return the formatted version of the given source text """
        tokens = Lexer().lex(text)
        ast = Parser().parse(tokens)
        return self.format_ast(ast, tokens)

    def format_ast(self, ast, tokens):
        """ format the token stream of a parsed program

        tokens is the list of tokens the program was parsed from, the
        tokens are modified in place.
        """
        stream = TokenStream(tokens)

        levels = TransformIndentLevel()
        levels.traverse(ast)

        ctx = FormatContext(self.style, levels.parents)

        hooks = TransformHooks(ctx)
        hooks.traverse(ast)
        log.debug("ran %d formatters over %d nodes", hooks.count, len(levels.parents))

        TransformIndent(ctx).traverse(ast)
        indent_comments(ctx, stream)
        log.debug("indented lines")

        if self.style.remove_trailing:
            ctx.ws.remove_trailing(stream.first)

        return stream.toString()

def main():  # pragma: no cover

    text = """
    function foo(a,b){return a+b}
    var x=foo(1,2),y={a:1,b:[1,2]};
    if(x){y()}else if(z)w();else{v()}
    """

    if len(sys.argv) == 2 and sys.argv[1] == "-":
        text = sys.stdin.read()

    print(Formatter().format(text))

if __name__ == '__main__':  # pragma: no cover
    main()
