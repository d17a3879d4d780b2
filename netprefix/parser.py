"""Parsing of IPv4 and IPv6 addresses and CIDR network text."""

from __future__ import annotations

from collections.abc import Callable
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, TypeVar

from .errors import AddrParseError

T = TypeVar("T")

_DECIMAL_DIGITS = {c: i for i, c in enumerate("0123456789")}
_HEX_DIGITS = {
    **_DECIMAL_DIGITS,
    **{c: 10 + i for i, c in enumerate("abcdef")},
    **{c: 10 + i for i, c in enumerate("ABCDEF")},
}


class _Parser:
    """A backtracking reader over ASCII address text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_eof(self) -> bool:
        return self._pos == len(self._text)

    def _atomic(self, read: Callable[[], Optional[T]]) -> Optional[T]:
        """Run *read*, rewinding to the current position if it fails."""
        pos = self._pos
        result = read()
        if result is None:
            self._pos = pos
        return result

    def read_char(self, expected: str) -> bool:
        if not self.at_eof() and self._text[self._pos] == expected:
            self._pos += 1
            return True
        return False

    def _peek_digit(self, radix: int) -> Optional[int]:
        if self.at_eof():
            return None
        table = _HEX_DIGITS if radix == 16 else _DECIMAL_DIGITS
        return table.get(self._text[self._pos])

    def read_number(self, radix: int, max_digits: int, upto: int) -> Optional[int]:
        def read() -> Optional[int]:
            value = 0
            digits = 0
            while (digit := self._peek_digit(radix)) is not None:
                self._pos += 1
                value = value * radix + digit
                digits += 1
                if digits > max_digits or value >= upto:
                    return None
            return value if digits else None

        return self._atomic(read)

    def read_ipv4_addr(self) -> Optional[IPv4Address]:
        def read() -> Optional[IPv4Address]:
            octets = []
            for index in range(4):
                if index and not self.read_char("."):
                    return None
                octet = self.read_number(10, 3, 0x100)
                if octet is None:
                    return None
                octets.append(octet)
            return IPv4Address(bytes(octets))

        return self._atomic(read)

    def _read_group_separator(self, first: bool) -> bool:
        return first or self.read_char(":")

    def _read_groups(self, limit: int) -> tuple[list[int], bool]:
        groups: list[int] = []
        while len(groups) < limit:
            first = not groups
            if len(groups) < limit - 1:
                embedded = self._atomic(
                    lambda: self.read_ipv4_addr() if self._read_group_separator(first) else None
                )
                if embedded is not None:
                    packed = embedded.packed
                    groups.append(packed[0] << 8 | packed[1])
                    groups.append(packed[2] << 8 | packed[3])
                    return groups, True
            group = self._atomic(
                lambda: self.read_number(16, 4, 0x10000)
                if self._read_group_separator(first)
                else None
            )
            if group is None:
                return groups, False
            groups.append(group)
        return groups, False

    def read_ipv6_addr(self) -> Optional[IPv6Address]:
        def read() -> Optional[IPv6Address]:
            head, head_has_ipv4 = self._read_groups(8)
            if len(head) == 8:
                return _from_groups(head)
            # An embedded IPv4 part may only follow the "::".
            if head_has_ipv4:
                return None
            if not (self.read_char(":") and self.read_char(":")):
                return None
            tail, _ = self._read_groups(8 - len(head))
            padding = [0] * (8 - len(head) - len(tail))
            return _from_groups(head + padding + tail)

        return self._atomic(read)

    def read_net(
        self,
        read_addr: Callable[[], Optional[T]],
        max_digits: int,
        upto: int,
    ) -> Optional[tuple[T, int]]:
        def read() -> Optional[tuple[T, int]]:
            addr = read_addr()
            if addr is None or not self.read_char("/"):
                return None
            prefix_len = self.read_number(10, max_digits, upto)
            if prefix_len is None:
                return None
            return addr, prefix_len

        return self._atomic(read)


def _from_groups(groups: list[int]) -> IPv6Address:
    value = 0
    for group in groups:
        value = value << 16 | group
    return IPv6Address(value)


def _parse_whole(text: str, read: Callable[[_Parser], Optional[T]]) -> T:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    parser = _Parser(text)
    result = read(parser)
    if result is None or not parser.at_eof():
        raise AddrParseError()
    return result


def parse_ipv4_addr(text: str) -> IPv4Address:
    """Parse dotted-quad IPv4 address text; raise AddrParseError if malformed."""
    return _parse_whole(text, lambda p: p.read_ipv4_addr())


def parse_ipv6_addr(text: str) -> IPv6Address:
    """Parse IPv6 address text; raise AddrParseError if malformed."""
    return _parse_whole(text, lambda p: p.read_ipv6_addr())


def parse_ipv4_net(text: str) -> tuple[IPv4Address, int]:
    """Parse IPv4 CIDR text into an (address, prefix length) pair."""
    return _parse_whole(text, lambda p: p.read_net(p.read_ipv4_addr, 2, 33))


def parse_ipv6_net(text: str) -> tuple[IPv6Address, int]:
    """Parse IPv6 CIDR text into an (address, prefix length) pair."""
    return _parse_whole(text, lambda p: p.read_net(p.read_ipv6_addr, 3, 129))