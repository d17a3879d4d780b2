import pytest

from netprefix.errors import AddrParseError, PrefixLenError


def test_prefix_len_error_message():
    assert str(PrefixLenError()) == "invalid IP prefix length"


def test_addr_parse_error_message():
    assert str(AddrParseError()) == "invalid IP address syntax"


@pytest.mark.parametrize(
    "cls, message",
    [
        (PrefixLenError, "invalid IP prefix length"),
        (AddrParseError, "invalid IP address syntax"),
    ],
)
def test_errors_are_value_errors(cls, message):
    err = cls()
    assert isinstance(err, ValueError)
    assert err.args == (message,)
    assert str(err) == message


def test_equality_by_type():
    assert PrefixLenError() == PrefixLenError()
    assert AddrParseError() == AddrParseError()
    assert PrefixLenError() != AddrParseError()
    assert hash(PrefixLenError()) == hash(PrefixLenError())


def test_custom_message():
    err = PrefixLenError("prefix too long")
    assert str(err) == "prefix too long"
    assert err != PrefixLenError()