"""Core models and exceptions"""

from .exceptions import (
    IPInsightException, ValidationError, ProviderError,
    ProviderTimeoutError, TelemetryError, ConfigurationError
)
from .models import (
    LocationSource, LogLevel, RawLocationRecord, EnrichedProfile,
    ProviderSpec, TelemetryEvent, WIRE_FIELDS
)

__all__ = [
    'IPInsightException', 'ValidationError', 'ProviderError',
    'ProviderTimeoutError', 'TelemetryError', 'ConfigurationError',
    'LocationSource', 'LogLevel', 'RawLocationRecord', 'EnrichedProfile',
    'ProviderSpec', 'TelemetryEvent', 'WIRE_FIELDS'
]
