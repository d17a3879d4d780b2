"""Conversion of network masks into prefix lengths."""

from __future__ import annotations

import ipaddress
from ipaddress import IPv4Address, IPv6Address

from .errors import PrefixLenError


def _mask_to_prefix(value: int, width: int) -> int:
    full = (1 << width) - 1
    prefix = width - ((~value & full).bit_length())
    expected = (full << (width - prefix)) & full
    if value != expected:
        raise PrefixLenError()
    return prefix


def ipv4_mask_to_prefix(mask: IPv4Address | str | int) -> int:
    """Return the prefix length of an IPv4 netmask.

    Raises PrefixLenError if the mask's one bits are not contiguous from the top.
    """
    return _mask_to_prefix(int(IPv4Address(mask)), 32)


def ipv6_mask_to_prefix(mask: IPv6Address | str | int) -> int:
    """Return the prefix length of an IPv6 netmask.

    Raises PrefixLenError if the mask's one bits are not contiguous from the top.
    """
    return _mask_to_prefix(int(IPv6Address(mask)), 128)


def ip_mask_to_prefix(mask: IPv4Address | IPv6Address | str) -> int:
    """Return the prefix length of an IPv4 or IPv6 netmask."""
    address = mask if isinstance(mask, (IPv4Address, IPv6Address)) else ipaddress.ip_address(mask)
    if isinstance(address, IPv4Address):
        return ipv4_mask_to_prefix(address)
    return ipv6_mask_to_prefix(address)