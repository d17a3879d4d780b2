"""IP networks of either family and the iterator that splits a range into them."""

from __future__ import annotations

import ipaddress
from functools import total_ordering
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Union

from .addrrange import IpAddrRange
from .errors import AddrParseError
from .ipv4net import Ipv4Net, Ipv4Subnets
from .ipv6net import Ipv6Net, Ipv6Subnets
from .mask import ip_mask_to_prefix

Address = Union[IPv4Address, IPv6Address]
FamilyNet = Union[Ipv4Net, Ipv6Net]


def _coerce_addr(value: Address | str) -> Address:
    if isinstance(value, (IPv4Address, IPv6Address)):
        return value
    if isinstance(value, str):
        return ipaddress.ip_address(value)
    raise TypeError(f"expected an IP address, got {type(value).__name__}")


def _family_net(addr: Address, prefix_len: int) -> FamilyNet:
    if isinstance(addr, IPv4Address):
        return Ipv4Net(addr, prefix_len)
    return Ipv6Net(addr, prefix_len)


@total_ordering
class IpNet:
    """An IPv4 or IPv6 network: an address together with a prefix length.

    Every IPv4 network orders before every IPv6 network; within a family
    networks order by address, then by prefix length.
    """

    __slots__ = ("_net",)

    def __init__(self, addr: Address | str, prefix_len: int) -> None:
        self._net: FamilyNet = _family_net(_coerce_addr(addr), prefix_len)

    @classmethod
    def from_net(cls, net: FamilyNet | IpNet) -> IpNet:
        """Wrap a family-specific network."""
        if isinstance(net, IpNet):
            net = net.net
        if not isinstance(net, (Ipv4Net, Ipv6Net)):
            raise TypeError(f"expected a network, got {type(net).__name__}")
        result = cls.__new__(cls)
        result._net = net
        return result

    @classmethod
    def parse(cls, text: str) -> IpNet:
        """Parse IPv4 or IPv6 CIDR text; raise AddrParseError if malformed."""
        for family in (Ipv4Net, Ipv6Net):
            try:
                return cls.from_net(family.parse(text))
            except AddrParseError:
                continue
        raise AddrParseError()

    @classmethod
    def with_netmask(cls, addr: Address | str, netmask: Address | str) -> IpNet:
        """Build a network from an address and a contiguous netmask."""
        return cls(addr, ip_mask_to_prefix(netmask))

    @classmethod
    def from_addr(cls, addr: Address | str) -> IpNet:
        """The network holding exactly one address."""
        address = _coerce_addr(addr)
        return cls(address, address.max_prefixlen)

    @classmethod
    def default(cls) -> IpNet:
        """The network 0.0.0.0/0."""
        return cls(IPv4Address(0), 0)

    @property
    def net(self) -> FamilyNet:
        """The family-specific network."""
        return self._net

    @property
    def addr(self) -> Address:
        return self._net.addr

    @property
    def prefix_len(self) -> int:
        return self._net.prefix_len

    @property
    def version(self) -> int:
        return self._net.addr.version

    def max_prefix_len(self) -> int:
        """The largest valid prefix length: 32 for IPv4, 128 for IPv6."""
        return self._net.max_prefix_len()

    def trunc(self) -> IpNet:
        """A copy with the host bits of the address cleared."""
        return IpNet.from_net(self._net.trunc())

    def netmask(self) -> Address:
        return self._net.netmask()

    def hostmask(self) -> Address:
        return self._net.hostmask()

    def network(self) -> Address:
        """The first address of the network."""
        return self._net.network()

    def broadcast(self) -> Address:
        """The last address of the network."""
        return self._net.broadcast()

    def supernet(self) -> Optional[IpNet]:
        """The network one bit shorter that contains this one, or None for /0."""
        parent = self._net.supernet()
        return None if parent is None else IpNet.from_net(parent)

    def is_sibling(self, other: IpNet) -> bool:
        """True if both networks are the two halves of the same supernet."""
        if not isinstance(other, IpNet):
            return False
        return self._net.is_sibling(other.net)  # type: ignore[arg-type]

    def hosts(self) -> IpAddrRange:
        """An iterator over the usable host addresses of the network."""
        return self._net.hosts()

    def subnets(self, new_prefix_len: int) -> IpSubnets:
        """An iterator over the subnets of this network with the given prefix length."""
        return IpSubnets._wrap(self._net.subnets(new_prefix_len))

    def contains(self, other: IpNet | FamilyNet | Address) -> bool:
        """True if another network or an address lies wholly within this network.

        Networks and addresses of the other family are never contained.
        """
        if isinstance(other, IpNet):
            other = other.net
        if isinstance(other, (Ipv4Net, Ipv6Net, IPv4Address, IPv6Address)):
            return self._net.contains(other)  # type: ignore[arg-type]
        raise TypeError(f"cannot test containment of {type(other).__name__}")

    def __contains__(self, other: object) -> bool:
        return self.contains(other)  # type: ignore[arg-type]

    def _key(self) -> tuple[int, FamilyNet]:
        return self.version, self._net

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpNet):
            return NotImplemented
        return type(self._net) is type(other._net) and self._net == other._net

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IpNet):
            return NotImplemented
        if self.version != other.version:
            return self.version < other.version
        return self._net < other._net  # type: ignore[operator]

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return str(self._net)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


@total_ordering
class IpSubnets:
    """An iterator over the networks that exactly cover start to end inclusive.

    Each step yields the largest aligned network that fits, never with a
    prefix length shorter than min_prefix_len.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        start: Address | str,
        end: Address | str,
        min_prefix_len: int,
    ) -> None:
        start = _coerce_addr(start)
        end = _coerce_addr(end)
        if type(start) is not type(end):
            raise TypeError("start and end must be of the same address family")
        if isinstance(start, IPv4Address):
            self._inner: Ipv4Subnets | Ipv6Subnets = Ipv4Subnets(start, end, min_prefix_len)
        else:
            self._inner = Ipv6Subnets(start, end, min_prefix_len)

    @classmethod
    def _wrap(cls, inner: Ipv4Subnets | Ipv6Subnets) -> IpSubnets:
        result = cls.__new__(cls)
        result._inner = inner
        return result

    @property
    def inner(self) -> Ipv4Subnets | Ipv6Subnets:
        """The family-specific iterator."""
        return self._inner

    def __iter__(self) -> IpSubnets:
        return self

    def __next__(self) -> IpNet:
        return IpNet.from_net(next(self._inner))

    def _version(self) -> int:
        return 4 if isinstance(self._inner, Ipv4Subnets) else 6

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpSubnets):
            return NotImplemented
        return type(self._inner) is type(other._inner) and self._inner == other._inner

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IpSubnets):
            return NotImplemented
        if self._version() != other._version():
            return self._version() < other._version()
        return self._inner < other._inner  # type: ignore[operator]

    def __repr__(self) -> str:
        inner = self._inner
        return (
            f"{type(self).__name__}({str(inner.start)!r}, {str(inner.end)!r}, "
            f"{inner.min_prefix_len})"
        )