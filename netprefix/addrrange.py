"""Double-ended iterators over inclusive ranges of IP addresses."""

from __future__ import annotations

import ipaddress
from functools import total_ordering
from ipaddress import IPv4Address, IPv6Address
from typing import ClassVar, Optional, Union

from .ipops import saturating_add, saturating_sub

Address = Union[IPv4Address, IPv6Address]


def _check_index(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer index, got {type(n).__name__}")
    if n < 0:
        raise ValueError("index must not be negative")
    return n


@total_ordering
class IpAddrRange:
    """An iterator over the addresses from start to end inclusive.

    Both ends must belong to the same address family. Once exhausted the
    range stays empty. The query methods (count, last, min, max,
    size_hint) look at what remains without consuming it.
    """

    _family: ClassVar[Optional[type]] = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, start: Address | str, end: Address | str) -> None:
        start = self._coerce(start)
        end = self._coerce(end)
        if type(start) is not type(end):
            raise TypeError("start and end must be of the same address family")
        self.start: Address = start
        self.end: Address = end

    @classmethod
    def _coerce(cls, value: Address | str) -> Address:
        family = cls._family
        if family is None:
            if isinstance(value, (IPv4Address, IPv6Address)):
                return value
            if isinstance(value, str):
                return ipaddress.ip_address(value)
        else:
            if isinstance(value, family):
                return value
            if isinstance(value, str):
                return family(value)
        raise TypeError(f"cannot use {value!r} as a bound of {cls.__name__}")

    def _exhaust(self) -> None:
        family = type(self.start)
        self.start = family(1)
        self.end = family(0)

    def __iter__(self) -> IpAddrRange:
        return self

    def __next__(self) -> Address:
        if self.start < self.end:
            current = self.start
            self.start = saturating_add(current, 1)
            return current
        if self.start == self.end:
            current = self.start
            self._exhaust()
            return current
        raise StopIteration

    def next_back(self) -> Optional[Address]:
        """Take the highest remaining address, or None when empty."""
        if self.start < self.end:
            current = self.end
            self.end = saturating_sub(current, 1)
            return current
        if self.start == self.end:
            current = self.end
            self._exhaust()
            return current
        return None

    def nth(self, n: int) -> Optional[Address]:
        """Skip n addresses from the front and take the next, or None."""
        n = _check_index(n)
        count = self.count()
        if n >= count:
            self._exhaust()
            return None
        if n == count - 1:
            current = self.end
            self._exhaust()
            return current
        current = saturating_add(self.start, n)
        self.start = saturating_add(current, 1)
        return current

    def nth_back(self, n: int) -> Optional[Address]:
        """Skip n addresses from the back and take the next, or None."""
        n = _check_index(n)
        count = self.count()
        if n >= count:
            self._exhaust()
            return None
        if n == count - 1:
            current = self.start
            self._exhaust()
            return current
        current = saturating_sub(self.end, n)
        self.end = saturating_sub(current, 1)
        return current

    def count(self) -> int:
        """Number of addresses remaining."""
        if self.start > self.end:
            return 0
        return int(self.end) - int(self.start) + 1

    def last(self) -> Optional[Address]:
        """The last remaining address, or None when empty."""
        return self.end if self.start <= self.end else None

    def max(self) -> Optional[Address]:
        """The highest remaining address, or None when empty."""
        return self.last()

    def min(self) -> Optional[Address]:
        """The lowest remaining address, or None when empty."""
        return self.start if self.start <= self.end else None

    def size_hint(self) -> tuple[int, int]:
        """Lower and upper bounds on the remaining length, which are exact."""
        count = self.count()
        return count, count

    def _key(self) -> tuple[int, int, int]:
        return self.start.version, int(self.start), int(self.end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpAddrRange):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IpAddrRange):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.start)!r}, {str(self.end)!r})"


class Ipv4AddrRange(IpAddrRange):
    """An iterator over an inclusive range of IPv4 addresses."""

    _family = IPv4Address


class Ipv6AddrRange(IpAddrRange):
    """An iterator over an inclusive range of IPv6 addresses."""

    _family = IPv6Address