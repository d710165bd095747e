import pytest

from propcalc.constraints import CODE_MAXLEN, ensure, valid_code


def test_ensure_defaults_to_value_error():
    ensure(True)

    with pytest.raises(ValueError, match="Constraint violation: bad setting"):
        ensure(False, msg="bad setting")


def test_ensure_runtime_error_for_route_checks():
    with pytest.raises(RuntimeError, match="Constraint violation: No route serves"):
        ensure([], RuntimeError, "No route serves allow-listed redirect target(s)")


def test_valid_code():
    assert valid_code("6f1d3c2e-0b7a-4c8e-9a57-3f1f2e4d5c6b")
    assert valid_code("abc+def/ghi=")
    assert valid_code("a b&c")
    assert valid_code("x" * CODE_MAXLEN)


def test_invalid_code():
    assert not valid_code("")
    assert not valid_code(None)
    assert not valid_code(123)
    assert not valid_code(["abc"])
    assert not valid_code("x" * (CODE_MAXLEN + 1))
