import logging

from streamparsec.Char import char, literal
from streamparsec.Combinators import optional, repeat, sequence
from streamparsec.Parsec import (
    ExpectedEndOfInput, Failure, Success, UnexpectedToken,
)
from streamparsec.Prim import parse, run_parser, trace


def test_parse_returns_result_and_stream():
    result, stream = parse(literal("ab"), "abc", name="demo")
    assert result == Success("ab", stream)
    assert stream.name == "demo"
    assert stream.remaining == "c"


def test_parse_failure_keeps_start_stream():
    result, stream = parse(sequence(char("a"), char("b")), "ax")
    assert result == Failure(UnexpectedToken("x", "b"))
    assert stream.position == 0


def test_run_parser_success():
    assert run_parser(repeat(char("a")), "aab") == (["a", "a"], None)


def test_run_parser_failure():
    assert run_parser(char("a"), "b") == (None, UnexpectedToken("b", "a"))


def test_run_parser_empty_outcome():
    assert run_parser(optional(char("a")), "b") == (None, None)


def test_run_parser_consume_all():
    value, err = run_parser(repeat(char("a")), "aab", consume_all=True)
    assert value is None
    assert err == ExpectedEndOfInput("b")

    assert run_parser(repeat(char("a")), "aa", consume_all=True) == (["a", "a"], None)


def test_run_parser_consume_all_on_empty_outcome():
    assert run_parser(optional(char("a")), "b", consume_all=True) == (None, ExpectedEndOfInput("b"))


def test_trace_is_transparent(caplog):
    p = trace(sequence(char("a"), char("b")), "ab-pair")
    with caplog.at_level(logging.DEBUG, logger="streamparsec.Prim"):
        ok = run_parser(p, "ab")
        ko = run_parser(p, "ax")

    assert ok == (("a", "b"), None)
    assert ko == (None, UnexpectedToken("x", "b"))
    assert p.name == "sequence(char('a'), char('b'))"

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith('ab-pair: "ab"') for m in messages)
    assert any("ab-pair succeeded with ('a', 'b')" in m for m in messages)
    assert any("ab-pair backtracked" in m for m in messages)


def test_trace_logs_empty_outcome(caplog):
    with caplog.at_level(logging.DEBUG, logger="streamparsec.Prim"):
        run_parser(trace(optional(char("a"))), "b")
    assert any("optional(char('a')) matched nothing" in r.getMessage() for r in caplog.records)
