from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class Stream:
    """Immutable cursor over the input text.

    Consuming input never mutates a stream; it returns a new one. Holding on to
    an older stream is how callers backtrack.
    """
    source: str
    position: int = 0
    line: int = 1
    column: int = 1
    name: str = ""

    @property
    def remaining(self) -> str:
        return self.source[self.position:]

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end of input."""
        if self.at_end:
            return None
        return self.source[self.position]

    def starts_with(self, text: str) -> bool:
        return self.source.startswith(text, self.position)

    def consume_char(self, c: str) -> 'Stream':
        """Advance past one character. The caller guarantees it matches peek()."""
        if c == '\n':
            return replace(self, position=self.position + 1, line=self.line + 1, column=1)
        return replace(self, position=self.position + 1, column=self.column + 1)

    def consume_literal(self, text: str) -> 'Stream':
        """Advance past a whole string in one step.

        Equivalent to calling consume_char for every character of `text`:
        the line grows by the number of newlines, and the column is counted
        from 1 after the last newline (or from the current column if there is
        none).
        """
        newlines = text.count('\n')
        if newlines == 0:
            column = self.column + len(text)
        else:
            column = len(text) - text.rfind('\n')
        return replace(
            self,
            position=self.position + len(text),
            line=self.line + newlines,
            column=column,
        )

    @property
    def location(self) -> str:
        if self.name:
            return f"{self.name} line {self.line}, column {self.column}"
        return f"line {self.line}, column {self.column}"

    def __str__(self) -> str:
        return self.location


def create_stream(text: str, name: str = "") -> Stream:
    """Create the stream a parse starts from."""
    return Stream(text, 0, 1, 1, name)


# --- Errors ---

class ParseError:
    """Base class of the error taxonomy. Errors are plain data."""


@dataclass(frozen=True)
class UnexpectedToken(ParseError):
    found: str
    expected: str

    def __str__(self) -> str:
        return f"unexpected {self.found!r}, expecting {self.expected!r}"


@dataclass(frozen=True)
class UnexpectedEndOfInput(ParseError):
    expected: str

    def __str__(self) -> str:
        return f"unexpected end of input, expecting {self.expected!r}"


@dataclass(frozen=True)
class ExpectedEndOfInput(ParseError):
    found: str

    def __str__(self) -> str:
        return f"expecting end of input, found {self.found!r}"


def format_error(error: ParseError, stream: Optional[Stream] = None) -> str:
    """Render an error as a single human readable message.

    When `stream` is given the message is prefixed with its location.
    """
    if isinstance(error, (UnexpectedToken, UnexpectedEndOfInput, ExpectedEndOfInput)):
        message = str(error)
    else:
        raise TypeError(f"not a parse error: {error!r}")
    if stream is None:
        return f"Parse error: {message}"
    return f"Parse error at {stream.location}: {message}"


# --- Results ---

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    stream: Stream


@dataclass(frozen=True)
class Failure:
    error: ParseError


@dataclass(frozen=True)
class Empty:
    """The parser ran, consumed nothing and found nothing. Not an error."""


Result = Union[Success[T], Failure, Empty]
# run() pairs a Result with the stream to continue from; for a Failure that is
# always the stream the attempt started from.
Reply = Tuple[Result[T], Stream]


def success(value: T, stream: Stream) -> Success[T]:
    return Success(value, stream)


def failure(error: ParseError) -> Failure:
    return Failure(error)


def empty() -> Empty:
    return Empty()


def is_success(result: Result[Any]) -> bool:
    return isinstance(result, Success)


def is_failure(result: Result[Any]) -> bool:
    return isinstance(result, Failure)


def is_empty(result: Result[Any]) -> bool:
    return isinstance(result, Empty)


# --- Parser capability ---

class Parser(Generic[T]):
    """Anything with a `name` and a `run(stream)` returning (Result, Stream).

    Parsers hold no state between calls, so one instance can be reused and
    shared freely between grammars.
    """

    @property
    def name(self) -> str:
        raise NotImplementedError

    def run(self, stream: Stream) -> Reply[T]:
        raise NotImplementedError

    def __call__(self, stream: Stream) -> Reply[T]:
        return self.run(stream)

    def __repr__(self) -> str:
        return self.name

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        from .Combinators import Sequence
        return Sequence(self, other)

    # Alternative (|)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        from .Combinators import Choice
        return Choice(self, other)

    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        from .Combinators import Map
        return Map(self, fn)

    # Label (<?>)
    def label(self, text: str) -> 'Parser[T]':
        from .Combinators import Label
        return Label(self, text)


def ensure_parser(obj: Any) -> Parser[Any]:
    if not isinstance(obj, Parser):
        raise TypeError(f"expected a Parser, got {type(obj).__name__}")
    return obj
