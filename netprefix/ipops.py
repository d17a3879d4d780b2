"""Saturating arithmetic and bitwise operations on IP addresses."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Union

Address = Union[IPv4Address, IPv6Address]


def _max_value(addr: Address) -> int:
    if not isinstance(addr, (IPv4Address, IPv6Address)):
        raise TypeError(f"expected an IP address, got {type(addr).__name__}")
    return (1 << addr.max_prefixlen) - 1


def _check_int(addr: Address, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    limit = _max_value(addr)
    if not 0 <= value <= limit:
        raise ValueError(f"{value} is out of range for IPv{addr.version} operand")
    return value


def _check_same_version(addr: Address, other: Address) -> int:
    if type(other) is not type(addr):
        raise TypeError("cannot combine IPv4 and IPv6 addresses")
    return int(other)


def _operand(addr: Address, other: Address | int) -> int:
    _max_value(addr)
    if isinstance(other, (IPv4Address, IPv6Address)):
        return _check_same_version(addr, other)
    return _check_int(addr, other)


def saturating_add(addr: Address, value: int) -> Address:
    """Add an integer to an address, clamping at the highest address."""
    limit = _max_value(addr)
    amount = _check_int(addr, value)
    return type(addr)(min(int(addr) + amount, limit))


def saturating_sub(addr: Address, other: Address | int) -> Address | int:
    """Subtract from an address, clamping at zero.

    Subtracting an address of the same family returns the integer distance;
    subtracting an integer returns an address.
    """
    _max_value(addr)
    if isinstance(other, (IPv4Address, IPv6Address)):
        return max(int(addr) - _check_same_version(addr, other), 0)
    amount = _check_int(addr, other)
    return type(addr)(max(int(addr) - amount, 0))


def bitand(addr: Address, other: Address | int) -> Address:
    """Return the bitwise AND of an address with another address or integer."""
    return type(addr)(int(addr) & _operand(addr, other))


def bitor(addr: Address, other: Address | int) -> Address:
    """Return the bitwise OR of an address with another address or integer."""
    return type(addr)(int(addr) | _operand(addr, other))