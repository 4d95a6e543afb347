"""Profile enrichment from static reference data"""

from .profile_enricher import enrich_location

__all__ = ['enrich_location']
