"""TinyParsec - composable parser combinators for strings.

A parser is a plain function from an input string to a ParseResult: a
Success or Failure outcome paired with the unconsumed remainder. Small
parsers combine into larger ones through pure higher-order functions;
failures are values, never exceptions.

Public API:
    Primitives - satisfy, char, letter, literal, empty
    Combinators - map_, or_, any_of, and_, all_of/sequence, exactly,
                  many/some, optional
    Derived - preceded_by, succeeded_by, enclosed_by/delimited_by,
              surrounded_by, joined_by, spaced
    Numbers - digit, digits, natural, integer, number
    Results - ParseResult, Success, Failure, succeed, fail
    Runner - ParseRunner, parse (raise on failure or leftover input)

Exceptions:
    TinyParsecError - Base exception class
    ParseFailedError - Parser returned a failure
    IncompleteParseError - Parser left input unconsumed

Submodules:
    tinyparsec.parser - Parser constructors and combinators
    tinyparsec.result - Outcome and result types
    tinyparsec.diagnostics - Failure codes, diagnostics and exceptions
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    IncompleteParseError,
    ParseFailedError,
    TinyParsecError,
)
from .parser import (
    ParseRunner,
    all_of,
    and_,
    any_of,
    char,
    delimited_by,
    digit,
    digits,
    empty,
    enclosed_by,
    exactly,
    integer,
    joined_by,
    letter,
    literal,
    many,
    map_,
    natural,
    number,
    optional,
    or_,
    parse,
    positive_digit,
    preceded_by,
    satisfy,
    sequence,
    some,
    spaced,
    spaces,
    succeeded_by,
    surrounded_by,
    zero,
)
from .result import Failure, Outcome, ParseResult, Parser, Success, fail, succeed

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("tinyparsec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Failure",
    "IncompleteParseError",
    "Outcome",
    "ParseFailedError",
    "ParseResult",
    "ParseRunner",
    "Parser",
    "Success",
    "TinyParsecError",
    "__version__",
    "all_of",
    "and_",
    "any_of",
    "char",
    "delimited_by",
    "digit",
    "digits",
    "empty",
    "enclosed_by",
    "exactly",
    "fail",
    "integer",
    "joined_by",
    "letter",
    "literal",
    "many",
    "map_",
    "natural",
    "number",
    "optional",
    "or_",
    "parse",
    "positive_digit",
    "preceded_by",
    "satisfy",
    "sequence",
    "some",
    "spaced",
    "spaces",
    "succeed",
    "succeeded_by",
    "surrounded_by",
    "zero",
]
