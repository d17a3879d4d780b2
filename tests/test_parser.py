from ipaddress import IPv4Address, IPv6Address

import pytest

from netprefix.errors import AddrParseError
from netprefix.parser import (
    parse_ipv4_addr,
    parse_ipv4_net,
    parse_ipv6_addr,
    parse_ipv6_net,
)


def test_ipv4_net_from_docs():
    assert parse_ipv4_net("10.1.1.0/24") == (IPv4Address("10.1.1.0"), 24)


def test_ipv4_net_keeps_host_bits():
    assert parse_ipv4_net("192.168.12.34/16") == (IPv4Address("192.168.12.34"), 16)


@pytest.mark.parametrize("prefix_len", [0, 1, 9, 10, 31, 32])
def test_ipv4_prefix_lengths_round_trip(prefix_len):
    text = f"172.16.0.0/{prefix_len}"
    assert parse_ipv4_net(text) == (IPv4Address("172.16.0.0"), prefix_len)


def test_ipv4_leading_zeros_accepted():
    assert parse_ipv4_net("010.001.001.000/24") == (IPv4Address("10.1.1.0"), 24)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "10.1.1.0",
        "10.1.1.0/",
        "10.1.1.0/33",
        "10.1.1.0/024",
        "256.0.0.0/8",
        "10.1.1/24",
        "10.1.1.0.0/24",
        "10.1.1.0/24 ",
        " 10.1.1.0/24",
        "0010.1.1.0/24",
        "fd00::/32",
        "10.1.1.0/-1",
    ],
)
def test_ipv4_net_rejects(text):
    with pytest.raises(AddrParseError):
        parse_ipv4_net(text)


@pytest.mark.parametrize(
    "text",
    ["0.0.0.0", "255.255.255.255", "192.168.0.1", "10.0.0.3"],
)
def test_ipv4_addr_matches_stdlib(text):
    assert parse_ipv4_addr(text) == IPv4Address(text)


def test_ipv4_addr_rejects_cidr():
    with pytest.raises(AddrParseError):
        parse_ipv4_addr("10.0.0.0/8")


def test_error_message():
    with pytest.raises(AddrParseError) as info:
        parse_ipv4_net("not an address")
    assert str(info.value) == "invalid IP address syntax"


def test_ipv6_net_from_docs():
    assert parse_ipv6_net("fd00::/32") == (IPv6Address("fd00::"), 32)
    assert parse_ipv6_net("fd00::1:2:3:4/16") == (IPv6Address("fd00::1:2:3:4"), 16)


@pytest.mark.parametrize(
    "text",
    [
        "::",
        "::1",
        "fd00::",
        "fd00::1:2:3:4",
        "1:2:3:4:5:6:7:8",
        "1:2:3:4:5:6:7::",
        "::2:3:4:5:6:7:8",
        "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff",
        "FD00:ABCD::EF",
        "::ffff:192.168.0.1",
        "1:2:3:4:5:6:1.2.3.4",
        "fd00:ef:ffff:ffff:ffff:ffff:ffff:ffff",
    ],
)
def test_ipv6_addr_matches_stdlib(text):
    assert parse_ipv6_addr(text) == IPv6Address(text)


@pytest.mark.parametrize("prefix_len", [0, 1, 64, 99, 127, 128])
def test_ipv6_prefix_lengths_round_trip(prefix_len):
    assert parse_ipv6_net(f"fd00::/{prefix_len}") == (IPv6Address("fd00::"), prefix_len)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "fd00::",
        "fd00::/129",
        "fd00::/0128",
        "fd00::12345/64",
        "fd00::g/64",
        ":::/64",
        "1.2.3.4::/64",
        "1:2:3:4:5:6:7:8:9/64",
        "1:2:3:4:5:6:7:8::/64",
        "1:2:3:4:5:6:7:1.2.3.4/64",
        "1::2::3/64",
        "10.1.1.0/24",
        "fd00::/64/",
    ],
)
def test_ipv6_net_rejects(text):
    with pytest.raises(AddrParseError):
        parse_ipv6_net(text)


def test_non_string_rejected():
    with pytest.raises(TypeError):
        parse_ipv6_net(b"fd00::/32")