"""
Custom exceptions for the IP resolution and enrichment system
"""

from typing import Optional


class IPInsightException(Exception):
    def __init__(self, message: str, provider: Optional[str] = None):
        self.message = message
        self.provider = provider
        super().__init__(self.message)


class ValidationError(IPInsightException):
    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class ProviderError(IPInsightException):
    pass


class ProviderTimeoutError(ProviderError):
    pass


class TelemetryError(IPInsightException):
    pass


class ConfigurationError(IPInsightException):
    pass
