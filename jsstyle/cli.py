import os
import sys
import logging
import time

from .token import TokenError
from .lexer import Lexer
from .parser import Parser
from .formatter import Formatter
from .style import PRESETS, StyleError, load_style, parse_overrides, merge

log = logging.getLogger("jsstyle.cli")

class Clock(object):
    def __init__(self, text):
        super(Clock, self).__init__()
        self.text = text

    def __enter__(self):
        self.ts = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.te = time.perf_counter()
        log.debug("%s: %.6f", self.text, self.te - self.ts)

        return False

def read_source(path):
    if path == "-":
        return sys.stdin.read()
    with open(os.path.abspath(path), "r") as rf:
        return rf.read()

class CLI(object):
    def __init__(self):
        super(CLI, self).__init__()

    def register(self, parser):
        pass

    def execute(self, args):
        pass

class FormatCLI(CLI):
    """ reformat a js file

    the style is built from a preset, then a json style file, then
    individual key=value settings, each overriding the previous.
    """
    def register(self, parser):
        subparser = parser.add_parser('format',
            aliases=['fmt'],
            description=self.__doc__,
            help=self.__doc__.strip().split("\n")[0])
        subparser.set_defaults(func=self.execute, cli=self)

        subparser.add_argument('--preset', default="default",
            choices=sorted(PRESETS))
        subparser.add_argument('--style', default=None,
            help="path to a json style file")
        subparser.add_argument('--set', type=str, action='append', default=[],
            dest='settings',
            help="key=value style settings, can be provided multiple times")
        subparser.add_argument('--check', action='store_true',
            help="exit with status 1 if the file is not formatted")
        subparser.add_argument('in_js')
        subparser.add_argument('out_js', nargs='?', default="-")

    def execute(self, args):

        try:
            opts = {}
            if args.style:
                opts = load_style(args.style)
            opts = merge(opts, parse_overrides(args.settings))

            text = read_source(args.in_js)

            with Clock("format"):
                out_text = Formatter(opts, args.preset).format(text)

        except (TokenError, StyleError) as e:
            log.error("%s: %s", args.in_js, e)
            return 1
        except (OSError, ValueError) as e:
            log.error("%s", e)
            return 1

        if args.check:
            if out_text != text:
                log.info("%s: would reformat", args.in_js)
                return 1
            return 0

        if args.out_js == "-":
            sys.stdout.write(out_text)
        else:
            path_out = os.path.abspath(args.out_js)
            with open(path_out, "w") as wf:
                wf.write(out_text)

        return 0

class TokensCLI(CLI):
    """ print the token stream for a js file
    """

    def register(self, parser):
        subparser = parser.add_parser('tokens',
            description=self.__doc__,
            help=self.__doc__.strip().split("\n")[0])
        subparser.set_defaults(func=self.execute, cli=self)

        subparser.add_argument('in_js')

    def execute(self, args):

        try:
            text = read_source(args.in_js)
            with Clock("lex"):
                tokens = Lexer().lex(text)
        except TokenError as e:
            log.error("%s: %s", args.in_js, e)
            return 1
        except OSError as e:
            log.error("%s", e)
            return 1

        for token in tokens:
            print(token.toString())

        return 0

class AstCLI(CLI):
    """ print the syntax tree for a js file
    """

    def register(self, parser):
        subparser = parser.add_parser('ast',
            description=self.__doc__,
            help=self.__doc__.strip().split("\n")[0])
        subparser.set_defaults(func=self.execute, cli=self)

        subparser.add_argument('in_js')

    def execute(self, args):

        try:
            text = read_source(args.in_js)
            with Clock("lex"):
                tokens = Lexer().lex(text)
            with Clock("parse"):
                ast = Parser().parse(tokens)
        except TokenError as e:
            log.error("%s: %s", args.in_js, e)
            return 1
        except OSError as e:
            log.error("%s", e)
            return 1

        sys.stdout.write(ast.toString())

        return 0

def register_parsers(parser):

    FormatCLI().register(parser)
    TokensCLI().register(parser)
    AstCLI().register(parser)
