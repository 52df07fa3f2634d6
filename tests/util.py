#! cd .. && python -m tests.util
from jsstyle.lexer import Lexer
from jsstyle.parser import Parser
from jsstyle.stream import TokenStream
from jsstyle.style import Style
from jsstyle.formatter import TransformIndentLevel
from jsstyle.hooks import FormatContext, get_hook

def tokcmp(a, b):
    if a is None:
        return False
    if b is None:
        return False
    return a.type == b.type and a.value == b.value

def lexcmp(expected, actual, debug=False):
    """ return the number of tokens which differ

    prints a side by side listing when there are differences
    """
    error_count = abs(len(expected) - len(actual))
    pairs = []
    for i in range(max(len(expected), len(actual))):
        a = actual[i] if i < len(actual) else None
        b = expected[i] if i < len(expected) else None
        pairs.append((a, b))
        if a is not None and b is not None and not tokcmp(a, b):
            error_count += 1

    if error_count > 0 or debug:
        print("\n%-50s | %-.50s" % ("    HYP", "    REF"))
        for a, b in pairs:
            c = ' ' if tokcmp(a, b) else '|'
            print("%-50r %s %-.50r" % (a, c, b))
    return error_count

def significant(text):
    """ the values of the tokens which carry meaning """
    return [t.value for t in Lexer().lex(text) if t.isSignificant()]

def find_nodes(node, type):
    """ return every node of the given type, parents first """
    found = []
    nodes = [node]
    while nodes:
        node = nodes.pop()
        if node.type == type:
            found.append(node)
        nodes.extend(reversed(list(node.children())))
    return found

def apply_hook(text, type, opts=None, preset="default"):
    """ run the formatter of every node of one type and return the text """
    tokens = Lexer().lex(text)
    ast = Parser().parse(tokens)

    levels = TransformIndentLevel()
    levels.traverse(ast)
    ctx = FormatContext(Style(opts, preset), levels.parents)

    hook = get_hook(type)
    for node in find_nodes(ast, type):
        hook(node, ctx)

    return TokenStream(tokens).toString()

def rule(section, side, name, value):
    """ style options which change a single rule """
    return {section: {side: {name: value}}}
