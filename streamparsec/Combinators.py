from typing import Any, Callable, List, Optional, Tuple

from .Parsec import (
    Empty, Failure, Parser, Reply, Stream, Success, T, U,
    UnexpectedEndOfInput, UnexpectedToken,
    empty, ensure_parser, failure, success,
)


class Sequence(Parser[Tuple[T, U]]):
    """Runs `first` then `second`, succeeding with both values as a pair.

    If either child fails the whole sequence fails with that child's error and
    hands back the stream it was given, so nothing `first` consumed leaks out
    to the caller. An `Empty` child counts as a match of nothing and
    contributes None.
    """

    def __init__(self, first: Parser[T], second: Parser[U]):
        self.first = ensure_parser(first)
        self.second = ensure_parser(second)

    @property
    def name(self) -> str:
        return f"sequence({self.first.name}, {self.second.name})"

    def run(self, stream: Stream) -> Reply[Tuple[T, U]]:
        result1, stream1 = self.first.run(stream)
        if isinstance(result1, Failure):
            return result1, stream

        result2, stream2 = self.second.run(stream1)
        if isinstance(result2, Failure):
            return result2, stream

        return success((_value_of(result1), _value_of(result2)), stream2), stream2


class Choice(Parser[T]):
    """Ordered alternation: `first`, and if that fails, `second` from the same spot."""

    def __init__(self, first: Parser[T], second: Parser[T]):
        self.first = ensure_parser(first)
        self.second = ensure_parser(second)

    @property
    def name(self) -> str:
        return f"choice({self.first.name}, {self.second.name})"

    @property
    def expected(self) -> str:
        return f"choice of {self.first.name} or {self.second.name}"

    def run(self, stream: Stream) -> Reply[T]:
        result1, stream1 = self.first.run(stream)
        if not isinstance(result1, Failure):
            return result1, stream1

        # A failed child always returns the stream it was given, but retry
        # from our own copy regardless.
        result2, stream2 = self.second.run(stream)
        if not isinstance(result2, Failure):
            return result2, stream2

        found = stream.peek()
        if found is None:
            return failure(UnexpectedEndOfInput(self.expected)), stream
        return failure(UnexpectedToken(found, self.expected)), stream


class Maybe(Parser[T]):
    """Zero or one occurrence. A failed attempt becomes `Empty` at the original stream."""

    def __init__(self, parser: Parser[T]):
        self.parser = ensure_parser(parser)

    @property
    def name(self) -> str:
        return f"optional({self.parser.name})"

    def run(self, stream: Stream) -> Reply[T]:
        result, new_stream = self.parser.run(stream)
        if isinstance(result, Failure):
            return empty(), stream
        return result, new_stream


class Repeat(Parser[List[T]]):
    """Zero or more occurrences, collected into a list.

    Stops at the first failure (or `Empty`) and succeeds with the stream from
    before that attempt. A match that consumes nothing is kept and ends the
    loop, since repeating it could never make progress.
    """

    def __init__(self, parser: Parser[T]):
        self.parser = ensure_parser(parser)

    @property
    def name(self) -> str:
        return f"repeat({self.parser.name})"

    def run(self, stream: Stream) -> Reply[List[T]]:
        result, next_stream = self.parser.run(stream)
        return self._accumulate(stream, result, next_stream)

    def _accumulate(self, stream: Stream, result: Any, next_stream: Stream) -> Reply[List[T]]:
        # `result` is the outcome of the first attempt, already run from `stream`
        values: List[T] = []
        current = stream
        while isinstance(result, Success):
            values.append(result.value)
            if next_stream.position <= current.position:
                break
            current = next_stream
            result, next_stream = self.parser.run(current)
        return success(values, current), current


class Repeat1(Repeat[T]):
    """One or more occurrences: `sequence(p, repeat(p))` collected into one flat list.

    Fails with the parser's own error if the first attempt fails. An `Empty`
    first attempt is not a failure and, as with `Repeat`, adds no value.
    """

    @property
    def name(self) -> str:
        return f"repeat1({self.parser.name})"

    def run(self, stream: Stream) -> Reply[List[T]]:
        result, next_stream = self.parser.run(stream)
        if isinstance(result, Failure):
            return result, stream
        return self._accumulate(stream, result, next_stream)


class Map(Parser[U]):
    """Applies `fn` to the value of a successful parse."""

    def __init__(self, parser: Parser[T], fn: Callable[[T], U], name: Optional[str] = None):
        self.parser = ensure_parser(parser)
        self.fn = fn
        self._name = name

    @property
    def name(self) -> str:
        if self._name is not None:
            return self._name
        return f"map({self.parser.name})"

    def run(self, stream: Stream) -> Reply[U]:
        result, new_stream = self.parser.run(stream)
        if isinstance(result, Success):
            return success(self.fn(result.value), result.stream), new_stream
        return result, new_stream


class Label(Parser[T]):
    """Gives a parser a friendlier name, also used as `expected` in its errors."""

    def __init__(self, parser: Parser[T], text: str):
        self.parser = ensure_parser(parser)
        self.text = text

    @property
    def name(self) -> str:
        return self.text

    def run(self, stream: Stream) -> Reply[T]:
        result, new_stream = self.parser.run(stream)
        if isinstance(result, Failure):
            error = result.error
            if isinstance(error, UnexpectedToken):
                return failure(UnexpectedToken(error.found, self.text)), stream
            if isinstance(error, UnexpectedEndOfInput):
                return failure(UnexpectedEndOfInput(self.text)), stream
        return result, new_stream


def _value_of(result: Any) -> Any:
    # Empty stands for "matched nothing"
    if isinstance(result, Empty):
        return None
    return result.value


def sequence(first: Parser[T], second: Parser[U]) -> Parser[Tuple[T, U]]:
    """Parses `first` followed by `second`, returning both values as a tuple."""
    return Sequence(first, second)


def choice(first: Parser[T], second: Parser[T], *rest: Parser[T]) -> Parser[T]:
    """
    Tries the parsers in order until one succeeds.
    More than two alternatives nest to the left: choice(a, b, c) is choice(choice(a, b), c).
    """
    result = Choice(first, second)
    for p in rest:
        result = Choice(result, p)
    return result


def optional(p: Parser[T]) -> Parser[T]:
    """Tries p; on failure returns `Empty` without consuming input."""
    return Maybe(p)


def repeat(p: Parser[T]) -> Parser[List[T]]:
    """Parses zero or more occurrences of p."""
    return Repeat(p)


def repeat1(p: Parser[T]) -> Parser[List[T]]:
    """Parses one or more occurrences of p, failing with p's error if there are none."""
    return Repeat1(p)
