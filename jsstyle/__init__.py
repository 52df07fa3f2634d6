
from .token import Token
from .lexer import Lexer
from .parser import Parser
from .node import Node
from .formatter import Formatter
from . import cli

def parse(text: str) -> Node:
    """ Parse javascript source into an AST

    :param text: the javascript source to parse
    """
    lexer = Lexer()
    parser = Parser()

    tokens = lexer.lex(text)
    ast = parser.parse(tokens)

    return ast

def format(text: str, opts=None, preset="default") -> str:
    """ Normalize the white space, line breaks and indentation of
    javascript source

    :param text: the javascript source to format
    :param opts: style options, applied on top of the preset
    :param preset: name of the base style
    """

    formatter = Formatter(opts, preset)

    return formatter.format(text)
