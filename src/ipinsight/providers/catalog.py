"""
Geolocation provider catalogue
Each provider is a static ProviderSpec: endpoint, timeout, failure check and
a mapper from its own payload layout to a RawLocationRecord
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core.models import LocationSource, ProviderSpec, RawLocationRecord

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 3000


def _nested(data: Dict[str, Any], *keys: str) -> Any:
    value: Any = data
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


# ipwho.is

def _map_ipwhois(data: Dict[str, Any], address: str) -> RawLocationRecord:
    return RawLocationRecord(
        address=data.get('ip') or address,
        country=data.get('country'),
        region=data.get('region'),
        city=data.get('city'),
        latitude=data.get('latitude'),
        longitude=data.get('longitude'),
        timezone=_nested(data, 'timezone', 'id'),
        isp=_nested(data, 'connection', 'isp'),
        source=LocationSource.IPWHOIS
    )


def _ipwhois_failed(data: Dict[str, Any]) -> bool:
    return data.get('success') is False


# ipgeolocation.io

def _map_ipgeolocation(data: Dict[str, Any], address: str) -> RawLocationRecord:
    return RawLocationRecord(
        address=address or data.get('ip'),
        country=data.get('country_name'),
        region=data.get('state_prov'),
        city=data.get('city'),
        latitude=data.get('latitude'),
        longitude=data.get('longitude'),
        timezone=_nested(data, 'time_zone', 'name'),
        isp=data.get('isp'),
        source=LocationSource.IPGEOLOCATION
    )


def _ipgeolocation_failed(data: Dict[str, Any]) -> bool:
    message = data.get('message')
    return isinstance(message, str) and 'error' in message.lower()


# ipapi.co

def _map_ipapi(data: Dict[str, Any], address: str) -> RawLocationRecord:
    return RawLocationRecord(
        address=address or data.get('ip'),
        country=data.get('country_name'),
        region=data.get('region'),
        city=data.get('city'),
        latitude=data.get('latitude'),
        longitude=data.get('longitude'),
        timezone=data.get('timezone'),
        isp=data.get('org'),
        source=LocationSource.IPAPI
    )


def _ipapi_failed(data: Dict[str, Any]) -> bool:
    return bool(data.get('error'))


# ip-api.com

def _map_ipapi_com(data: Dict[str, Any], address: str) -> RawLocationRecord:
    return RawLocationRecord(
        address=address or data.get('query'),
        country=data.get('country'),
        region=data.get('regionName'),
        city=data.get('city'),
        latitude=data.get('lat'),
        longitude=data.get('lon'),
        timezone=data.get('timezone'),
        isp=data.get('isp') or data.get('org'),
        source=LocationSource.IPAPI_COM
    )


def _ipapi_com_failed(data: Dict[str, Any]) -> bool:
    return data.get('status') != 'success'


# {ip} is the raw address, {ip_path} is "address/" or "" for the caller's own address
PROVIDERS: Mapping[str, ProviderSpec] = MappingProxyType({
    'ipwhois': ProviderSpec(
        name='ipwhois',
        source=LocationSource.IPWHOIS,
        url_template='http://ipwho.is/{ip}',
        response_mapper=_map_ipwhois,
        failure_predicate=_ipwhois_failed
    ),
    'ipgeolocation': ProviderSpec(
        name='ipgeolocation',
        source=LocationSource.IPGEOLOCATION,
        url_template='https://api.ipgeolocation.io/ipgeo?apiKey={api_key}&ip={ip}',
        response_mapper=_map_ipgeolocation,
        failure_predicate=_ipgeolocation_failed,
        requires_api_key=True
    ),
    'ipapi': ProviderSpec(
        name='ipapi',
        source=LocationSource.IPAPI,
        url_template='https://ipapi.co/{ip_path}json/',
        response_mapper=_map_ipapi,
        failure_predicate=_ipapi_failed
    ),
    'ipapi_com': ProviderSpec(
        name='ipapi_com',
        source=LocationSource.IPAPI_COM,
        url_template='http://ip-api.com/json/{ip}',
        response_mapper=_map_ipapi_com,
        failure_predicate=_ipapi_com_failed
    ),
})

# Returns the caller's own public address as {"ip": ...}
DISCOVERY_PROVIDER = PROVIDERS['ipwhois']


def build_provider_chain(order: Optional[Sequence[str]] = None,
                         timeout_ms: int = DEFAULT_TIMEOUT_MS,
                         api_key: str = "") -> List[ProviderSpec]:
    """
    Build the ordered provider list for the cascade

    Unknown names are ignored; providers that need an API key are left out
    when none is configured.
    """
    chain = []
    for name in order or list(PROVIDERS):
        spec = PROVIDERS.get(name)
        if spec is None:
            logger.warning(f"Unknown geolocation provider in configuration: {name}")
            continue
        if spec.requires_api_key and not api_key:
            logger.debug(f"Skipping {name}: no API key configured")
            continue
        chain.append(replace(spec, timeout_ms=timeout_ms))
    return chain
