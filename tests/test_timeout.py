"""
Tests for TimeoutBuilder.
"""
import pytest

from request_dsl import ErrorMessage, PreconditionViolation, Timeout, TimeoutBuilder, http_request

URL = "https://api.example.com/users"


def test_defaults_are_unset():
    assert TimeoutBuilder().build() == Timeout(None, None, None)


def test_all_fields():
    def timeout(t):
        t.connect = 3000
        t.read = 5000
        t.write = 7000

    request = http_request(lambda r: r.url(URL).timeout(timeout))

    assert request.timeout == Timeout(connect=3000, read=5000, write=7000)


@pytest.mark.parametrize(
    "field, message",
    [
        ("connect", "Connect timeout must be positive"),
        ("read", "Read timeout must be positive"),
        ("write", "Write timeout must be positive"),
    ],
)
@pytest.mark.parametrize("value", [-1, 0])
def test_non_positive_rejected(field, message, value):
    builder = TimeoutBuilder()
    with pytest.raises(PreconditionViolation) as exc:
        setattr(builder, field, value)
    assert str(exc.value) == message
    assert getattr(builder, field) is None


@pytest.mark.parametrize("value", [1.5, True, "1000"])
def test_non_integer_rejected(value):
    builder = TimeoutBuilder()
    with pytest.raises(PreconditionViolation) as exc:
        builder.connect = value
    assert exc.value.kind == ErrorMessage.NON_INTEGER_TIMEOUT
    assert builder.connect is None


def test_connect_violation_kind():
    def timeout(t):
        t.connect = -1000

    with pytest.raises(PreconditionViolation) as exc:
        http_request(lambda r: r.url(URL).timeout(timeout))
    assert exc.value.kind == ErrorMessage.NON_POSITIVE_CONNECT_TIMEOUT


def test_none_clears_field():
    builder = TimeoutBuilder(Timeout(connect=1, read=2, write=3))
    builder.connect = None
    builder.write = None
    assert builder.build() == Timeout(connect=None, read=2, write=None)


def test_blocks_merge_per_field():
    def first(t):
        t.connect = 1000
        t.read = 2000

    def second(t):
        t.read = 9000

    request = http_request(lambda r: r.url(URL).timeout(first).timeout(second))
    assert request.timeout == Timeout(connect=1000, read=9000, write=None)
