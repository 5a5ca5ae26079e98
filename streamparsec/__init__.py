# Core
from .Parsec import (
    Stream, create_stream,
    ParseError, UnexpectedToken, UnexpectedEndOfInput, ExpectedEndOfInput, format_error,
    Result, Success, Failure, Empty, success, failure, empty,
    is_success, is_failure, is_empty,
    Parser,
)
from .Prim import parse, run_parser, trace

# Primitives
from .Char import Char, Literal, char, literal

# Combinators
from .Combinators import (
    Sequence, Choice, Maybe, Repeat, Repeat1, Map, Label,
    sequence, choice, optional, repeat, repeat1,
)
