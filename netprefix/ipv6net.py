"""IPv6 network prefixes and the iterator that splits a range into them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from ipaddress import IPv4Address, IPv6Address
from typing import Optional

from .addrrange import Ipv6AddrRange
from .errors import PrefixLenError
from .ipops import saturating_add
from .mask import ipv6_mask_to_prefix
from .parser import parse_ipv6_net

_BITS = 128
_ALL_ONES = (1 << _BITS) - 1


def _coerce_addr(value: IPv6Address | str | int) -> IPv6Address:
    if isinstance(value, IPv6Address):
        return value
    if isinstance(value, bool):
        raise TypeError("expected an IPv6 address, got bool")
    if isinstance(value, (str, int)):
        return IPv6Address(value)
    raise TypeError(f"expected an IPv6 address, got {type(value).__name__}")


def _check_prefix_len(prefix_len: object) -> int:
    if isinstance(prefix_len, bool) or not isinstance(prefix_len, int):
        raise TypeError(f"expected an integer prefix length, got {type(prefix_len).__name__}")
    if not 0 <= prefix_len <= _BITS:
        raise PrefixLenError()
    return prefix_len


def _trailing_zeros(value: int) -> int:
    if value == 0:
        return _BITS
    return (value & -value).bit_length() - 1


@dataclass(frozen=True, order=True, repr=False)
class Ipv6Net:
    """An IPv6 network: an address together with a prefix length of 0 to 128.

    The address keeps its host bits; use trunc() or network() to clear them.
    Networks order by address first, then by prefix length.
    """

    addr: IPv6Address
    prefix_len: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "addr", _coerce_addr(self.addr))
        object.__setattr__(self, "prefix_len", _check_prefix_len(self.prefix_len))

    @classmethod
    def parse(cls, text: str) -> Ipv6Net:
        """Parse CIDR text such as "fd00::/32"; raise AddrParseError if malformed."""
        addr, prefix_len = parse_ipv6_net(text)
        return cls(addr, prefix_len)

    @classmethod
    def with_netmask(cls, addr: IPv6Address | str, netmask: IPv6Address | str | int) -> Ipv6Net:
        """Build a network from an address and a contiguous netmask."""
        return cls(addr, ipv6_mask_to_prefix(netmask))

    @classmethod
    def from_addr(cls, addr: IPv6Address | str) -> Ipv6Net:
        """The /128 network holding exactly one address."""
        return cls(addr, _BITS)

    @classmethod
    def default(cls) -> Ipv6Net:
        """The network ::/0."""
        return cls(IPv6Address(0), 0)

    def max_prefix_len(self) -> int:
        """The largest valid prefix length, 128."""
        return _BITS

    def _netmask_int(self) -> int:
        return (_ALL_ONES << (_BITS - self.prefix_len)) & _ALL_ONES

    def _hostmask_int(self) -> int:
        return _ALL_ONES >> self.prefix_len

    def trunc(self) -> Ipv6Net:
        """A copy with the host bits of the address cleared."""
        return Ipv6Net(self.network(), self.prefix_len)

    def netmask(self) -> IPv6Address:
        return IPv6Address(self._netmask_int())

    def hostmask(self) -> IPv6Address:
        return IPv6Address(self._hostmask_int())

    def network(self) -> IPv6Address:
        """The first address of the network."""
        return IPv6Address(int(self.addr) & self._netmask_int())

    def broadcast(self) -> IPv6Address:
        """The last address of the network.

        IPv6 has no broadcast address; the name follows colloquial usage.
        """
        return IPv6Address(int(self.addr) | self._hostmask_int())

    def supernet(self) -> Optional[Ipv6Net]:
        """The network one bit shorter that contains this one, or None for /0."""
        if self.prefix_len == 0:
            return None
        return Ipv6Net(self.addr, self.prefix_len - 1).trunc()

    def is_sibling(self, other: Ipv6Net) -> bool:
        """True if both networks are the two halves of the same supernet."""
        if not isinstance(other, Ipv6Net):
            return False
        parent = self.supernet()
        return (
            parent is not None
            and self.prefix_len == other.prefix_len
            and parent.contains(other)
        )

    def hosts(self) -> Ipv6AddrRange:
        """An iterator over every address in the network."""
        return Ipv6AddrRange(self.network(), self.broadcast())

    def subnets(self, new_prefix_len: int) -> Ipv6Subnets:
        """An iterator over the subnets of this network with the given prefix length."""
        if isinstance(new_prefix_len, bool) or not isinstance(new_prefix_len, int):
            raise TypeError("expected an integer prefix length")
        if self.prefix_len > new_prefix_len or new_prefix_len > _BITS:
            raise PrefixLenError()
        return Ipv6Subnets(self.network(), self.broadcast(), new_prefix_len)

    def contains(self, other: Ipv6Net | IPv6Address) -> bool:
        """True if another network or an address lies wholly within this network."""
        if isinstance(other, Ipv6Net):
            return self.network() <= other.network() and other.broadcast() <= self.broadcast()
        if isinstance(other, IPv6Address):
            return self.network() <= other <= self.broadcast()
        if isinstance(other, IPv4Address):
            return False
        return False

    def __contains__(self, other: object) -> bool:
        return self.contains(other)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"{self.addr}/{self.prefix_len}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def _next_subnet(start: IPv6Address, end: IPv6Address, min_prefix_len: int) -> Ipv6Net:
    span = min(max(int(end) - int(start), 0) + 1, _ALL_ONES)
    if span == _ALL_ONES and min_prefix_len == 0:
        return Ipv6Net(start, 0)
    span_bits = max(span.bit_length() - 1, 0)
    prefix_len = _BITS - min(span_bits, _trailing_zeros(int(start)))
    return Ipv6Net(start, max(prefix_len, min_prefix_len))


@total_ordering
class Ipv6Subnets:
    """An iterator over the networks that exactly cover start to end inclusive.

    Each step yields the largest aligned network that fits, never with a
    prefix length shorter than min_prefix_len.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        start: IPv6Address | str,
        end: IPv6Address | str,
        min_prefix_len: int,
    ) -> None:
        self.start = _coerce_addr(start)
        self.end = _coerce_addr(end)
        self.min_prefix_len = _check_prefix_len(min_prefix_len)

    def __iter__(self) -> Ipv6Subnets:
        return self

    def __next__(self) -> Ipv6Net:
        if self.start < self.end:
            subnet = _next_subnet(self.start, self.end, self.min_prefix_len)
            self.start = saturating_add(subnet.broadcast(), 1)
            # The start saturated at the top of the address space: stop.
            if self.start == subnet.broadcast():
                self.end = IPv6Address(0)
            return subnet
        if self.start == self.end:
            subnet = _next_subnet(self.start, self.end, self.min_prefix_len)
            self.start = saturating_add(subnet.broadcast(), 1)
            self.end = IPv6Address(0)
            return subnet
        raise StopIteration

    def _key(self) -> tuple[IPv6Address, IPv6Address, int]:
        return self.start, self.end, self.min_prefix_len

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ipv6Subnets):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ipv6Subnets):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self.start)!r}, {str(self.end)!r}, "
            f"{self.min_prefix_len})"
        )