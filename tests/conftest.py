# tests/conftest.py
import pytest

from streamparsec.Parsec import Failure, Result, Stream, Success, create_stream


def assert_result_eq(res1: Result, res2: Result):
    """
    Deep comparison of two Results.
    """
    assert type(res1) is type(res2), f"Result mismatch: {type(res1).__name__} != {type(res2).__name__}"
    if isinstance(res1, Success):
        assert res1.value == res2.value
        assert res1.stream == res2.stream
    elif isinstance(res1, Failure):
        assert res1.error == res2.error


@pytest.fixture
def stream_of():
    def _make(text: str) -> Stream:
        return create_stream(text, "test")

    return _make


@pytest.fixture
def result_eq():
    return assert_result_eq
