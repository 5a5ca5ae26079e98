import pytest

from streamparsec.Parsec import (
    Empty, ExpectedEndOfInput, Failure, Success,
    UnexpectedEndOfInput, UnexpectedToken,
    create_stream, empty, failure, format_error,
    is_empty, is_failure, is_success, success,
)


@pytest.mark.parametrize("error, text", [
    (UnexpectedToken("c", "b"), "unexpected 'c', expecting 'b'"),
    (UnexpectedEndOfInput("a"), "unexpected end of input, expecting 'a'"),
    (ExpectedEndOfInput("rest"), "expecting end of input, found 'rest'"),
])
def test_format_error_renders_every_variant(error, text):
    assert format_error(error) == f"Parse error: {text}"


def test_format_error_with_position():
    stream = create_stream("a\nbc", "demo").consume_literal("a\nb")
    msg = format_error(UnexpectedToken("c", "d"), stream)
    assert msg == "Parse error at demo line 2, column 2: unexpected 'c', expecting 'd'"


def test_format_error_rejects_non_errors():
    with pytest.raises(TypeError):
        format_error("oops")


def test_errors_are_values():
    assert UnexpectedToken("x", "y") == UnexpectedToken("x", "y")
    assert UnexpectedEndOfInput("y") != UnexpectedToken("", "y")


def test_result_constructors():
    s = create_stream("abc")
    ok = success("a", s)
    ko = failure(UnexpectedToken("a", "b"))
    nothing = empty()

    assert isinstance(ok, Success) and ok.value == "a" and ok.stream is s
    assert isinstance(ko, Failure) and ko.error == UnexpectedToken("a", "b")
    assert isinstance(nothing, Empty)

    assert is_success(ok) and not is_failure(ok) and not is_empty(ok)
    assert is_failure(ko) and not is_success(ko)
    assert is_empty(nothing) and not is_success(nothing)
