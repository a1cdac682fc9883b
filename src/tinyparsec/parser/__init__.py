"""Parser combinator module.

Module Organization:
- primitives.py: Leaf parsers (satisfy, char, letter, literal, empty)
- combinators.py: Core combinators (map_, or_, any_of, and_, all_of, exactly, many, optional)
- derived.py: Delimiter and separator combinators (preceded_by family, joined_by)
- whitespace.py: Space padding (spaces, spaced)
- numbers.py: Numeric literal parsers (digit, natural, integer, number)
- core.py: ParseRunner and parse() whole-input entry point
"""

from tinyparsec.parser.combinators import (
    all_of,
    and_,
    any_of,
    exactly,
    many,
    map_,
    optional,
    or_,
    sequence,
    some,
)
from tinyparsec.parser.core import ParseRunner, parse
from tinyparsec.parser.derived import (
    delimited_by,
    enclosed_by,
    joined_by,
    preceded_by,
    succeeded_by,
    surrounded_by,
)
from tinyparsec.parser.numbers import (
    digit,
    digits,
    integer,
    natural,
    number,
    positive_digit,
    zero,
)
from tinyparsec.parser.primitives import char, empty, letter, literal, satisfy
from tinyparsec.parser.whitespace import spaced, spaces

__all__ = [
    "ParseRunner",
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
    "succeeded_by",
    "surrounded_by",
    "zero",
]
