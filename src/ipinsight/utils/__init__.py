"""Utility helpers"""

from .ip_utils import (
    extract_client_address, is_local_address, is_valid_ip_address,
    validate_ip_query, get_ip_version
)
from .logging_config import setup_logging

__all__ = [
    'extract_client_address', 'is_local_address', 'is_valid_ip_address',
    'validate_ip_query', 'get_ip_version', 'setup_logging'
]
