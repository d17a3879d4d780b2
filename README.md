# netprefix

Types and helpers for IPv4 and IPv6 network addresses, commonly called
IP prefixes or CIDR blocks. They build on the standard library's
`ipaddress.IPv4Address` and `ipaddress.IPv6Address`. The package has no
dependencies outside the standard library.

## Installation

    pip install netprefix

## Modules

| Module | Contents |
| --- | --- |
| `netprefix.ipnet` | `IpNet` (either family), `IpSubnets` |
| `netprefix.ipv4net` | `Ipv4Net`, `Ipv4Subnets` |
| `netprefix.ipv6net` | `Ipv6Net`, `Ipv6Subnets` |
| `netprefix.addrrange` | `IpAddrRange`, `Ipv4AddrRange`, `Ipv6AddrRange` |
| `netprefix.ipops` | `saturating_add`, `saturating_sub`, `bitand`, `bitor` |
| `netprefix.mask` | `ip_mask_to_prefix`, `ipv4_mask_to_prefix`, `ipv6_mask_to_prefix` |
| `netprefix.parser` | `parse_ipv4_addr`, `parse_ipv6_addr`, `parse_ipv4_net`, `parse_ipv6_net` |
| `netprefix.errors` | `PrefixLenError`, `AddrParseError` |

The package's `__init__` imports nothing; import from the modules above.

## Networks

`Ipv4Net`, `Ipv6Net` and the family-agnostic `IpNet` hold an address
together with a prefix length. The address is kept as given; `trunc()`
clears the host bits.

```python
from netprefix.ipnet import IpNet

net = IpNet.parse("10.1.1.0/24")
print(net.network())     # 10.1.1.0
print(net.broadcast())   # 10.1.1.255
print(net.netmask())     # 255.255.255.0
print(net.hostmask())    # 0.0.0.255
print(net.supernet())    # 10.1.0.0/23
print(net.prefix_len, net.max_prefix_len())   # 24 32

print(IpNet.parse("192.168.12.34/16").trunc())   # 192.168.0.0/16
```

Other constructors:

- `Ipv4Net(addr, prefix_len)`, `Ipv6Net(addr, prefix_len)` and
  `IpNet(addr, prefix_len)` take an address object or address text.
- `with_netmask(addr, netmask)` builds a network from a contiguous netmask.
- `from_addr(addr)` gives the single-address network (/32 or /128).
- `default()` gives `0.0.0.0/0` (`::/0` for `Ipv6Net`).
- `IpNet.from_net(net)` wraps an `Ipv4Net` or `Ipv6Net`; `IpNet.net`
  returns the wrapped value.

```python
from ipaddress import IPv4Address
from netprefix.ipv4net import Ipv4Net

net = Ipv4Net.with_netmask(IPv4Address("10.1.1.0"), IPv4Address("255.255.255.0"))
print(net)   # 10.1.1.0/24
```

`IpNet.parse` accepts IPv4 or IPv6 CIDR text; `Ipv4Net.parse` and
`Ipv6Net.parse` accept only their own family. The prefix length is
required in the text.

Networks are immutable, hashable and ordered: by address, then by
prefix length. Within `IpNet`, every IPv4 network sorts before every
IPv6 network.

## Errors

A prefix length out of range or a non-contiguous netmask raises
`PrefixLenError`; malformed text raises `AddrParseError`. Both are
subclasses of `ValueError` and live in `netprefix.errors`.

## Containment and siblings

```python
from ipaddress import ip_address
from netprefix.ipnet import IpNet

net = IpNet.parse("192.168.0.0/24")
print(IpNet.parse("192.168.0.0/25") in net)   # True
print(ip_address("192.168.1.0") in net)        # False
print(net.contains(net))                       # True

a = IpNet.parse("10.1.0.0/24")
b = IpNet.parse("10.1.1.0/24")
print(a.is_sibling(b))   # True
```

IPv4 and IPv6 values never contain one another, and are never siblings.

## Hosts and subnets

```python
from netprefix.ipnet import IpNet

for host in IpNet.parse("10.0.0.0/30").hosts():
    print(host)          # 10.0.0.1, 10.0.0.2

print([str(n) for n in IpNet.parse("fd00::/16").subnets(18)])
# ['fd00::/18', 'fd00:4000::/18', 'fd00:8000::/18', 'fd00:c000::/18']
```

For IPv4 prefixes shorter than /31 the network and broadcast addresses
are left out of `hosts()`; IPv6 `hosts()` covers every address.
`subnets(n)` raises `PrefixLenError` if `n` is shorter than the
network's own prefix length or longer than the family allows.

The host ranges are double-ended iterators. Besides ordinary iteration
they offer `next_back()`, `nth(n)` and `nth_back(n)` (which consume),
and `count()`, `min()`, `max()`, `last()` and `size_hint()` (which
look at what remains without walking or consuming it). Once exhausted
a range stays empty.

```python
from netprefix.addrrange import Ipv4AddrRange

r = Ipv4AddrRange("10.0.0.0", "10.0.0.3")
print(r.count())       # 4
print(r.next_back())   # 10.0.0.3
print(list(r))         # the three remaining addresses
```

`Ipv4Subnets`, `Ipv6Subnets` and `IpSubnets` cover an arbitrary
inclusive address range with the largest aligned networks whose prefix
length is at least a given minimum:

```python
from ipaddress import IPv4Address
from netprefix.ipv4net import Ipv4Subnets

print([str(n) for n in Ipv4Subnets(
    IPv4Address("10.0.0.0"), IPv4Address("10.0.0.239"), 26)])
# ['10.0.0.0/26', '10.0.0.64/26', '10.0.0.128/26', '10.0.0.192/27', '10.0.0.224/28']
```

## Address arithmetic and masks

`netprefix.ipops` works on `IPv4Address` and `IPv6Address` values:

- `saturating_add(addr, n)` adds an integer, clamping at the highest address.
- `saturating_sub(addr, n)` subtracts an integer, clamping at zero;
  `saturating_sub(addr, other_addr)` returns the integer distance,
  or 0 if `other_addr` is higher.
- `bitand(addr, other)` and `bitor(addr, other)` combine with an
  address of the same family or an integer.

Mixing families raises `TypeError`; integers outside the family's
range raise `ValueError`.

```python
from ipaddress import IPv4Address
from netprefix.ipops import bitand, saturating_add

print(saturating_add(IPv4Address("255.255.255.254"), 5))          # 255.255.255.255
print(bitand(IPv4Address("192.168.1.1"), IPv4Address("255.255.0.0")))  # 192.168.0.0
```

`netprefix.mask` turns a netmask into a prefix length with
`ip_mask_to_prefix`, `ipv4_mask_to_prefix` and `ipv6_mask_to_prefix`,
raising `PrefixLenError` for a mask whose one bits are not contiguous
from the top.

## What it does not do

This is a library only: it has no command-line tool, and it does not
look up, configure or talk to any network interface.