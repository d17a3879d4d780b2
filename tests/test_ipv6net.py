from ipaddress import IPv4Address, IPv6Address

import pytest

from netprefix.errors import AddrParseError, PrefixLenError
from netprefix.ipv6net import Ipv6Net, Ipv6Subnets

MAX = "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff"


def net(text):
    return Ipv6Net.parse(text)


def test_new_accepts_valid_prefix():
    n = Ipv6Net(IPv6Address("fd::"), 24)
    assert n.prefix_len == 24
    assert n.addr == IPv6Address("fd::")


def test_new_rejects_long_prefix():
    with pytest.raises(PrefixLenError):
        Ipv6Net(IPv6Address("fd::"), 129)


def test_with_netmask():
    n = Ipv6Net.with_netmask(IPv6Address("fd::"), IPv6Address(0xFFFF_FF00 << 96))
    assert n.prefix_len == 24
    with pytest.raises(PrefixLenError):
        Ipv6Net.with_netmask(
            IPv6Address("fd::"),
            IPv6Address(0xFFFF_FF00_0000_0000_0001_0000_0000_0000),
        )


def test_netmask_round_trips_through_with_netmask():
    for prefix in (0, 1, 64, 127, 128):
        n = Ipv6Net("fd00::", prefix)
        assert Ipv6Net.with_netmask(n.addr, n.netmask()) == n


def test_trunc():
    assert net("fd00::1:2:3:4/16").trunc() == net("fd00::/16")


def test_masks():
    n = net("fd00::/24")
    assert n.netmask() == IPv6Address("ffff:ff00::")
    assert n.hostmask() == IPv6Address("::ff:ffff:ffff:ffff:ffff:ffff:ffff")
    assert int(n.netmask()) | int(n.hostmask()) == int(IPv6Address(MAX))


def test_network_and_broadcast():
    n = net("fd00:1234:5678::/24")
    assert n.network() == IPv6Address("fd00:1200::")
    assert n.broadcast() == IPv6Address("fd00:12ff:ffff:ffff:ffff:ffff:ffff:ffff")


def test_extreme_prefixes():
    whole = Ipv6Net.default()
    assert whole.network() == IPv6Address("::")
    assert whole.broadcast() == IPv6Address(MAX)
    single = Ipv6Net.from_addr("fd00::5")
    assert single.network() == single.broadcast() == IPv6Address("fd00::5")


def test_supernet():
    assert net("fd00:ff00::/24").supernet() == net("fd00:fe00::/23")
    assert net("fd00:fe00::/0").supernet() is None


def test_is_sibling():
    n1 = net("fd00::/18")
    n2 = net("fd00:4000::/18")
    n3 = net("fd00:8000::/18")
    assert n1.is_sibling(n2)
    assert not n2.is_sibling(n3)
    assert not net("::/0").is_sibling(net("::/0"))


def test_hosts():
    assert list(net("fd00::/126").hosts()) == [
        IPv6Address("fd00::"),
        IPv6Address("fd00::1"),
        IPv6Address("fd00::2"),
        IPv6Address("fd00::3"),
    ]


def test_hosts_of_whole_space_counts_everything():
    assert Ipv6Net.default().hosts().count() == 1 << 128


def test_subnets():
    assert list(net("fd00::/16").subnets(18)) == [
        net("fd00::/18"),
        net("fd00:4000::/18"),
        net("fd00:8000::/18"),
        net("fd00:c000::/18"),
    ]
    assert list(net("fd00::/126").subnets(128)) == [
        net("fd00::/128"),
        net("fd00::1/128"),
        net("fd00::2/128"),
        net("fd00::3/128"),
    ]


@pytest.mark.parametrize("prefix", [15, 129])
def test_subnets_rejects_bad_prefix(prefix):
    with pytest.raises(PrefixLenError):
        net("fd00::/16").subnets(prefix)


def test_contains():
    n = net("fd00::/16")
    assert n.contains(n)
    assert n.contains(net("fd00::/17"))
    assert not n.contains(net("fd00::/15"))
    assert n.contains(IPv6Address("fd00::1"))
    assert not n.contains(IPv6Address("fd01::"))
    assert IPv6Address("fd00::1") in n
    assert IPv4Address("10.0.0.1") not in n


def test_str_and_parse_round_trip():
    for text in ("fd00::/32", "::/0", "fd00::1/128"):
        assert str(net(text)) == text


@pytest.mark.parametrize("text", ["fd00::/129", "fd00::", "10.0.0.0/8", "fd00::/1x"])
def test_parse_errors(text):
    with pytest.raises(AddrParseError):
        Ipv6Net.parse(text)


def test_defaults_and_max_prefix():
    assert str(Ipv6Net.default()) == "::/0"
    assert Ipv6Net.from_addr("fd00::1").prefix_len == 128
    assert Ipv6Net.default().max_prefix_len() == 128


def test_ordering():
    assert net("fd00::/16") < net("fd00::/17") < net("fd01::/16")


def test_subnets_iterator_range():
    subnets = Ipv6Subnets("fd00::", "fd00:ef:ffff:ffff:ffff:ffff:ffff:ffff", 26)
    assert list(subnets) == [
        net("fd00::/26"),
        net("fd00:40::/26"),
        net("fd00:80::/26"),
        net("fd00:c0::/27"),
        net("fd00:e0::/28"),
    ]


def test_subnets_whole_space():
    assert list(Ipv6Subnets("::", MAX, 0)) == [net("::/0")]
    assert list(Ipv6Subnets("::", MAX, 1)) == [net("::/1"), net("8000::/1")]


def test_subnets_iterator_exhausts():
    subnets = Ipv6Subnets("fd00::1", "fd00::1", 0)
    assert next(subnets) == net("fd00::1/128")
    with pytest.raises(StopIteration):
        next(subnets)


def test_subnets_iterator_rejects_bad_prefix():
    with pytest.raises(PrefixLenError):
        Ipv6Subnets("::", "::1", 129)