"""
Core models for the IP resolution and enrichment system
Raw provider records, enriched wire profiles, provider specs and telemetry events
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from enum import Enum


class LocationSource(Enum):
    IPWHOIS = "ipwhois"
    IPGEOLOCATION = "ipgeolocation"
    IPAPI = "ipapi"
    IPAPI_COM = "ipapi_com"
    MOCK = "mock"

    @property
    def is_mock(self) -> bool:
        return self is LocationSource.MOCK


class LogLevel(Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


# Wire contract for the enriched profile, in response order
WIRE_FIELDS = (
    'ip', 'version', 'city', 'region', 'region_code', 'country',
    'country_name', 'country_code', 'country_code_iso3', 'country_capital',
    'country_tld', 'continent_code', 'in_eu', 'postal', 'latitude',
    'longitude', 'timezone', 'utc_offset', 'country_calling_code',
    'currency', 'currency_name', 'languages', 'country_area',
    'country_population', 'asn', 'org', 'network',
)


@dataclass
class RawLocationRecord:
    """Minimal location record produced by a provider or the mock generator"""
    address: str
    country: str = ""
    region: str = ""
    city: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    isp: str = ""
    source: LocationSource = LocationSource.MOCK

    def __post_init__(self):
        # Provider payloads are untrusted; normalise None and numeric strings
        self.address = _as_text(self.address)
        self.country = _as_text(self.country)
        self.region = _as_text(self.region)
        self.city = _as_text(self.city)
        self.timezone = _as_text(self.timezone)
        self.isp = _as_text(self.isp)
        self.latitude = _as_float(self.latitude)
        self.longitude = _as_float(self.longitude)


@dataclass
class EnrichedProfile:
    """Complete, internally consistent profile returned to callers"""
    ip: str
    version: str
    city: str
    region: str
    region_code: str
    country: str
    country_name: str
    country_code: str
    country_code_iso3: str
    country_capital: str
    country_tld: str
    continent_code: str
    in_eu: bool
    postal: str
    latitude: float
    longitude: float
    timezone: str
    utc_offset: str
    country_calling_code: str
    currency: str
    currency_name: str
    languages: str
    country_area: float
    country_population: int
    asn: str
    org: str
    network: str
    source: LocationSource = LocationSource.MOCK

    @property
    def is_mock(self) -> bool:
        return self.source.is_mock

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire contract (field order preserved)"""
        return {name: getattr(self, name) for name in WIRE_FIELDS}


@dataclass(frozen=True)
class ProviderSpec:
    """
    One entry of the provider cascade.

    url_template is formatted with ``ip``, ``ip_path`` and ``api_key``; response_mapper
    turns a successful payload into a RawLocationRecord and
    failure_predicate flags success-shaped payloads that carry an error.
    """
    name: str
    source: LocationSource
    url_template: str
    response_mapper: Callable[[Dict[str, Any], str], RawLocationRecord]
    failure_predicate: Callable[[Dict[str, Any]], bool]
    timeout_ms: int = 3000
    requires_api_key: bool = False

    def build_url(self, address: str, api_key: str = "") -> str:
        return self.url_template.format(
            ip=address,
            ip_path=f"{address}/" if address else "",
            api_key=api_key
        )


@dataclass
class TelemetryEvent:
    """Structured event shipped to the remote log sink"""
    level: LogLevel
    message: str
    service: str
    request_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp.isoformat(),
            'level': self.level.value,
            'message': self.message,
            'service': self.service,
            'requestId': self.request_id,
            'metadata': self.metadata,
        }


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN and infinity are not representable in JSON
    return number if math.isfinite(number) else 0.0
