"""Geolocation providers, cascade resolver and mock data"""

from .catalog import PROVIDERS, DISCOVERY_PROVIDER, build_provider_chain
from .mock import get_mock_location
from .resolver import CascadeResolver

__all__ = [
    'PROVIDERS', 'DISCOVERY_PROVIDER', 'build_provider_chain',
    'get_mock_location', 'CascadeResolver'
]
