from .Parsec import (
    Parser, Reply, Stream,
    UnexpectedEndOfInput, UnexpectedToken,
    failure, success,
)


class Char(Parser[str]):
    """Matches exactly one character."""

    def __init__(self, expected: str):
        if not isinstance(expected, str) or len(expected) != 1:
            raise ValueError(f"char() expects a single character, got {expected!r}")
        self.expected = expected

    @property
    def name(self) -> str:
        return f"char({self.expected!r})"

    def run(self, stream: Stream) -> Reply[str]:
        found = stream.peek()
        if found is None:
            return failure(UnexpectedEndOfInput(self.expected)), stream
        if found != self.expected:
            return failure(UnexpectedToken(found, self.expected)), stream
        new_stream = stream.consume_char(found)
        return success(found, new_stream), new_stream


class Literal(Parser[str]):
    """Matches a fixed string, consuming it only on a full match."""

    def __init__(self, expected: str):
        if not isinstance(expected, str):
            raise ValueError(f"literal() expects a string, got {expected!r}")
        self.expected = expected

    @property
    def name(self) -> str:
        return f"literal({self.expected!r})"

    def run(self, stream: Stream) -> Reply[str]:
        if stream.starts_with(self.expected):
            new_stream = stream.consume_literal(self.expected)
            return success(self.expected, new_stream), new_stream

        found = stream.source[stream.position:stream.position + len(self.expected)]

        # Input ran out while it still agreed with the literal
        if len(found) < len(self.expected) and self.expected.startswith(found):
            return failure(UnexpectedEndOfInput(self.expected)), stream

        return failure(UnexpectedToken(found, self.expected)), stream


def char(c: str) -> Char:
    """Parses a single character c and returns it."""
    return Char(c)


def literal(s: str) -> Literal:
    """Parses the exact string s and returns it."""
    return Literal(s)

