"""
ipinsight - client IP resolution and geolocation enrichment
"""

__version__ = "1.0.0"

from .core.exceptions import IPInsightException, ValidationError
from .core.models import EnrichedProfile, RawLocationRecord, LocationSource
from .enrichment.profile_enricher import enrich_location
from .service import IPInfoService

__all__ = [
    '__version__', 'IPInsightException', 'ValidationError',
    'EnrichedProfile', 'RawLocationRecord', 'LocationSource',
    'enrich_location', 'IPInfoService'
]
