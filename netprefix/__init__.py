"""IPv4 and IPv6 network prefixes: parsing, masks, host ranges, subnets and address arithmetic."""

__version__ = "2.12.0"

__all__ = ["errors", "mask", "ipops", "parser", "addrrange", "ipv4net", "ipv6net", "ipnet"]