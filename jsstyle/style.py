"""
style options

a style is a nested dictionary. The `whiteSpace` and `lineBreak` sections
each hold a `before` and an `after` table mapping a rule name to an
integer policy:

    -1 : preserve whatever the source contains
     0 : remove
     n : exactly n spaces, or n line breaks

the `indent` section holds the string used for one level of indentation.
"""
import copy
import json
import logging

log = logging.getLogger("jsstyle.style")

class StyleError(Exception):
    pass

DEFAULT = {
    "indent": {
        "value": "  ",
    },
    "lineBreak": {
        "value": "\n",
        "before": {
            "FunctionDeclarationOpeningBrace": 0,
            "FunctionDeclarationClosingBrace": 1,
            "ObjectExpressionOpeningBrace": -1,
            "ObjectExpressionClosingBrace": 1,
            "Property": 1,
            "VariableName": 1,
            "VariableValue": 0,
            "WhileStatementOpeningBrace": 0,
            "WhileStatementClosingBrace": 1,
            "ForStatementOpeningBrace": 0,
            "ForStatementClosingBrace": 1,
            "IfStatementOpeningBrace": 0,
            "IfStatementClosingBrace": 1,
            "ElseIfStatementOpeningBrace": 0,
            "ElseIfStatementClosingBrace": 1,
            "ElseIfStatement": 0,
            "ElseStatementOpeningBrace": 0,
            "ElseStatementClosingBrace": 1,
            "ElseStatement": 0,
        },
        "after": {
            "FunctionDeclarationOpeningBrace": 1,
            "FunctionDeclarationClosingBrace": -1,
            "ObjectExpressionOpeningBrace": 1,
            "ObjectExpressionClosingBrace": -1,
            "Property": 1,
            "WhileStatementOpeningBrace": 1,
            "WhileStatementClosingBrace": -1,
            "ForStatementOpeningBrace": 1,
            "ForStatementClosingBrace": -1,
            "IfStatementOpeningBrace": 1,
            "IfStatementClosingBrace": -1,
            "ElseIfStatement": -1,
            "ElseStatementOpeningBrace": 1,
            "ElseStatementClosingBrace": -1,
            "ElseStatement": -1,
        },
    },
    "whiteSpace": {
        "value": " ",
        "removeTrailing": True,
        "before": {
            "ParameterList": 0,
            "ParameterComma": 0,
            "FunctionDeclarationOpeningBrace": 1,
            "FunctionDeclarationClosingBrace": 1,
            "BinaryExpressionOperator": 1,
            "ArgumentList": 0,
            "ArgumentComma": 0,
            "PropertyValue": 1,
            "VariableName": 1,
            "AssignmentOperator": 1,
            "LogicalExpressionOperator": 1,
            "CommaOperator": 0,
            "WhileStatementConditional": 1,
            "WhileStatementOpeningBrace": 1,
            "WhileStatementClosingBrace": 1,
            "ForStatementExpression": 1,
            "ForStatementSemicolon": 0,
            "ForStatementOpeningBrace": 1,
            "ForStatementClosingBrace": 1,
            "IfStatementConditional": 1,
            "IfStatementOpeningBrace": 1,
            "IfStatementClosingBrace": 1,
            "ElseStatementOpeningBrace": 1,
            "ElseStatementClosingBrace": 1,
        },
        "after": {
            "FunctionName": 0,
            "ParameterList": 0,
            "ParameterComma": 1,
            "FunctionDeclarationOpeningBrace": 1,
            "FunctionDeclarationClosingBrace": -1,
            "BinaryExpressionOperator": 1,
            "ArgumentList": 0,
            "ArgumentComma": 1,
            "PropertyName": 0,
            "VariableName": 1,
            "AssignmentOperator": 1,
            "LogicalExpressionOperator": 1,
            "CommaOperator": 1,
            "WhileStatementConditional": 1,
            "WhileStatementOpeningBrace": 1,
            "WhileStatementClosingBrace": -1,
            "ForStatementExpression": 1,
            "ForStatementSemicolon": 1,
            "ForStatementOpeningBrace": 1,
            "ForStatementClosingBrace": -1,
            "IfStatementConditional": 1,
            "IfStatementOpeningBrace": 1,
            "IfStatementClosingBrace": 1,
            "ElseStatementOpeningBrace": 1,
            "ElseStatementClosingBrace": -1,
        },
    },
}

# opening braces on a line of their own
ALLMAN = {
    "lineBreak": {
        "before": {
            "FunctionDeclarationOpeningBrace": 1,
            "WhileStatementOpeningBrace": 1,
            "ForStatementOpeningBrace": 1,
            "IfStatementOpeningBrace": 1,
            "ElseIfStatementOpeningBrace": 1,
            "ElseIfStatement": 1,
            "ElseStatementOpeningBrace": 1,
            "ElseStatement": 1,
        },
    },
}

def merge(base, override):
    """ return a copy of base with the values of override applied on top

    nested dictionaries are merged, any other value is replaced
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result

PRESETS = {
    "default": DEFAULT,
    "allman": merge(DEFAULT, ALLMAN),
}

def load_style(path):
    """ read style options from a json file """
    with open(path, "r") as rf:
        opts = json.load(rf)
    if not isinstance(opts, dict):
        raise StyleError("%s: expected a json object" % path)
    return opts

def parse_overrides(params):
    """ convert a list of dotted key=value strings into style options

        whiteSpace.after.FunctionName=1
        indent.value="    "

    values are parsed as json, a value which is not valid json is used
    as a plain string.
    """
    opts = {}
    for s in params:
        if '=' not in s:
            raise StyleError("expected key=value: %r" % s)
        ks, v = s.split('=', 1)
        try:
            v = json.loads(v)
        except ValueError:
            pass
        parts = ks.split('.')
        obj = opts
        k = parts.pop()
        for part in parts:
            if part not in obj:
                obj[part] = {}
            obj = obj[part]
            if not isinstance(obj, dict):
                raise StyleError("%s is not a section" % ks)
        obj[k] = v
    return opts

class Style(object):
    """ resolved style options for one formatting pass """

    def __init__(self, opts=None, preset="default"):
        super(Style, self).__init__()

        if preset not in PRESETS:
            raise StyleError("unknown preset: %s" % preset)

        if not opts:
            opts = {}

        self.opts = merge(PRESETS[preset], opts)

        log.debug("using preset %s with %d option groups", preset, len(opts))

    def get(self, section, side, rule):
        """ return the policy of a white space or line break rule """
        try:
            value = self.opts[section][side][rule]
        except KeyError:
            raise StyleError("undefined rule: %s.%s.%s" % (section, side, rule))

        if isinstance(value, bool) or not isinstance(value, int) or value < -1:
            raise StyleError("invalid value for %s.%s.%s: %r" % (section, side, rule, value))

        return value

    def _value(self, section):
        try:
            value = self.opts[section]["value"]
        except KeyError:
            raise StyleError("undefined option: %s.value" % section)
        if not isinstance(value, str):
            raise StyleError("invalid value for %s.value: %r" % (section, value))
        return value

    @property
    def indent_value(self):
        return self._value("indent")

    @property
    def linebreak_value(self):
        return self._value("lineBreak")

    @property
    def whitespace_value(self):
        return self._value("whiteSpace")

    @property
    def remove_trailing(self):
        return bool(self.opts.get("whiteSpace", {}).get("removeTrailing", False))
