import logging
from typing import Optional, Tuple

from .Parsec import (
    ExpectedEndOfInput, Failure, ParseError, Parser, Reply, Stream, Success, T,
    create_stream, ensure_parser,
)

logger = logging.getLogger(__name__)


def parse(parser: Parser[T], text: str, name: str = "") -> Reply[T]:
    """Run `parser` once over `text`, returning the result and the final stream."""
    return ensure_parser(parser).run(create_stream(text, name))


def run_parser(parser: Parser[T],
               text: str,
               name: str = "",
               consume_all: bool = False) -> Tuple[Optional[T], Optional[ParseError]]:
    """Parse `text` and return (value, error).

    With `consume_all`, a successful parse that leaves input behind is
    reported as ExpectedEndOfInput. An `Empty` outcome returns (None, None).
    """
    result, stream = parse(parser, text, name)
    if isinstance(result, Failure):
        logger.debug("%s failed at %s: %s", parser.name, stream.location, result.error)
        return None, result.error
    if consume_all and not stream.at_end:
        logger.debug("%s stopped at %s before end of input", parser.name, stream.location)
        return None, ExpectedEndOfInput(stream.remaining)
    if isinstance(result, Success):
        return result.value, None
    return None, None


class Trace(Parser[T]):
    """Transparent wrapper that logs each attempt of a parser at DEBUG level."""

    def __init__(self, parser: Parser[T], label: Optional[str] = None):
        self.parser = ensure_parser(parser)
        self.label = label if label is not None else self.parser.name

    @property
    def name(self) -> str:
        return self.parser.name

    def run(self, stream: Stream) -> Reply[T]:
        remaining = stream.remaining
        logger.debug("%s: \"%s%s\" at %s", self.label, remaining[:30],
                     '...' if len(remaining) > 30 else '', stream.location)
        result, new_stream = self.parser.run(stream)
        if isinstance(result, Success):
            logger.debug("%s succeeded with %r, now at %s", self.label, result.value, new_stream.location)
        elif isinstance(result, Failure):
            logger.debug("%s backtracked: %s", self.label, result.error)
        else:
            logger.debug("%s matched nothing", self.label)
        return result, new_stream


def trace(parser: Parser[T], label: Optional[str] = None) -> Parser[T]:
    """Log entry and outcome of `parser` without changing its behaviour."""
    return Trace(parser, label)
