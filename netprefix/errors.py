"""Exceptions raised for invalid prefix lengths and malformed network text."""

from __future__ import annotations


class _NetError(ValueError):
    """Base for the package's value errors; instances compare by type and message."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class PrefixLenError(_NetError):
    """Raised when a prefix length is out of range or a netmask is not contiguous.

    Valid prefix lengths are 0 to 32 for IPv4 and 0 to 128 for IPv6.
    """

    default_message = "invalid IP prefix length"


class AddrParseError(_NetError):
    """Raised when text cannot be parsed as an IP network address."""

    default_message = "invalid IP address syntax"