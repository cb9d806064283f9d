"""Lexical checks for client IP addresses carried in anonymous tokens."""

from __future__ import annotations

import re
from typing import Optional

IPV4_PATTERN = re.compile(
    r"^(25[0-5]|2[0-4]\d|[0-1]?\d?\d)(\.(25[0-5]|2[0-4]\d|[0-1]?\d?\d)){3}$",
    re.ASCII,
)

IPV6_STD_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$")

# Group count on either side of "::" is not bounded.
IPV6_HEX_COMPRESSED_PATTERN = re.compile(
    r"^((?:[0-9A-Fa-f]{1,4}(?::[0-9A-Fa-f]{1,4})*)?)::"
    r"((?:[0-9A-Fa-f]{1,4}(?::[0-9A-Fa-f]{1,4})*)?)$"
)


def is_ipv4_address(address: str) -> bool:
    return IPV4_PATTERN.fullmatch(address) is not None


def is_ipv6_std_address(address: str) -> bool:
    return IPV6_STD_PATTERN.fullmatch(address) is not None


def is_ipv6_compressed_address(address: str) -> bool:
    return IPV6_HEX_COMPRESSED_PATTERN.fullmatch(address) is not None


def is_valid_ip_address(address: Optional[str]) -> bool:
    """Return ``True`` if ``address`` is a dotted-quad or hex IPv6 literal."""
    if not address:
        return False
    return (
        is_ipv4_address(address)
        or is_ipv6_std_address(address)
        or is_ipv6_compressed_address(address)
    )
