"""
IP address helpers
Client address extraction behind proxies, local address classification
and validation of explicitly supplied addresses
"""

import ipaddress
import re
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError

LOOPBACK_ADDRESS = '127.0.0.1'

# Checked in order; the first non-empty header wins
CLIENT_ADDRESS_HEADERS = (
    ('x-vercel-forwarded-for', True),   # platform
    ('cf-connecting-ip', False),        # Cloudflare
    ('x-real-ip', False),
    ('x-forwarded-for', True),
)

LOCAL_ADDRESSES = frozenset({'127.0.0.1', 'localhost', '::1', '::ffff:127.0.0.1'})

# 172. matches the whole 172/8 block, not only 172.16/12
LOCAL_PREFIXES = ('10.', '172.', '192.168.', 'fe80:', 'fc00:', 'fd00:')

IPV4_PATTERN = re.compile(
    r'^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'
    r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$'
)


def _header_value(headers: Mapping[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup; list values yield their first element"""
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if isinstance(key, str) and key.lower() == lowered:
                value = candidate
                break

    if isinstance(value, (list, tuple)):
        value = value[0] if value else None

    if value is None:
        return None
    value = str(value).strip()
    return value or None


def extract_client_address(headers: Optional[Mapping[str, Any]],
                           peer_address: Optional[str] = None) -> str:
    """
    Determine the originating client address of a request.

    Args:
        headers: Request headers (any casing, str or list-of-str values)
        peer_address: Transport-level remote address

    Returns:
        The best candidate address, falling back to 127.0.0.1
    """
    headers = headers or {}

    for name, comma_separated in CLIENT_ADDRESS_HEADERS:
        value = _header_value(headers, name)
        if not value:
            continue
        if comma_separated:
            value = value.split(',')[0].strip()
        if value:
            return value

    if peer_address and peer_address.strip():
        return peer_address.strip()

    return LOOPBACK_ADDRESS


def is_local_address(address: Optional[str]) -> bool:
    """Check whether an address must never be sent to external providers"""
    if not address:
        return True

    candidate = address.strip().lower()
    if candidate in LOCAL_ADDRESSES:
        return True

    return candidate.startswith(LOCAL_PREFIXES)


def get_ip_version(address: str) -> str:
    return 'IPv6' if ':' in (address or '') else 'IPv4'


def is_valid_ipv4(address: str) -> bool:
    return bool(IPV4_PATTERN.match(address))


def is_valid_ipv6(address: str) -> bool:
    if ':' not in address:
        return False
    try:
        ipaddress.IPv6Address(address)
        return True
    except ValueError:
        return False


def is_valid_ip_address(address: Optional[str]) -> bool:
    """Syntactic check for an explicit lookup parameter"""
    if not address:
        return False
    address = address.strip()
    return address == 'localhost' or is_valid_ipv4(address) or is_valid_ipv6(address)


def validate_ip_query(address: Optional[str]) -> str:
    """
    Validate the ``ip`` query parameter before it reaches the resolver.

    Raises:
        ValidationError: when the parameter is missing or malformed
    """
    if address is None or not address.strip():
        raise ValidationError("IP address parameter is required", value=address)

    address = address.strip()
    if not is_valid_ip_address(address):
        raise ValidationError(f"Invalid IP address format: {address}", value=address)

    return address
