"""
Profile Enrichment Engine
Derives the full wire profile from a minimal location record using the
static reference tables; every lookup is total and falls back to a sentinel
"""

import logging
from typing import Mapping, Optional, TypeVar

from ..core.models import EnrichedProfile, RawLocationRecord
from ..utils.ip_utils import get_ip_version
from . import reference_data as ref

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _folded(table: Mapping[str, T]) -> Mapping[str, T]:
    return {key.casefold(): value for key, value in table.items()}


_COUNTRY_CODES_FOLDED = _folded(ref.COUNTRY_CODES)
_REGION_CODES_FOLDED = {code: _folded(regions) for code, regions in ref.REGION_CODES.items()}
_POSTAL_CODES_FOLDED = _folded(ref.POSTAL_CODES)


def _lookup(table: Mapping[str, T], key: Optional[str], default: T,
            folded: Optional[Mapping[str, T]] = None) -> T:
    """Exact match first, then a case-insensitive match when a folded table is given"""
    if not key:
        return default
    key = key.strip()
    if key in table:
        return table[key]
    if folded is not None:
        return folded.get(key.casefold(), default)
    return default


def get_country_code(country_name: str) -> str:
    return _lookup(ref.COUNTRY_CODES, country_name, ref.UNKNOWN_COUNTRY_CODE, _COUNTRY_CODES_FOLDED)


def get_region_code(region_name: str, country_code: str) -> str:
    regions = ref.REGION_CODES.get(country_code)
    if regions is None:
        return ref.UNKNOWN_REGION_CODE
    return _lookup(regions, region_name, ref.UNKNOWN_REGION_CODE, _REGION_CODES_FOLDED[country_code])


def get_country_code_iso3(country_code: str) -> str:
    return ref.ISO3_CODES.get(country_code, ref.UNKNOWN_ISO3)


def get_country_capital(country_code: str) -> str:
    return ref.CAPITALS.get(country_code, ref.UNKNOWN)


def get_country_tld(country_code: str) -> str:
    if country_code not in ref.ISO3_CODES:
        return ref.DEFAULT_TLD
    return ref.TLD_OVERRIDES.get(country_code, f".{country_code.lower()}")


def get_continent_code(country_code: str) -> str:
    return ref.CONTINENTS.get(country_code, ref.UNKNOWN_CONTINENT)


def is_in_eu(country_code: str) -> bool:
    return country_code in ref.EU_MEMBERS


def get_postal_code(city_name: str) -> str:
    return _lookup(ref.POSTAL_CODES, city_name, ref.DEFAULT_POSTAL, _POSTAL_CODES_FOLDED)


def get_utc_offset(timezone_name: str) -> str:
    return _lookup(ref.UTC_OFFSETS, timezone_name, ref.DEFAULT_UTC_OFFSET)


def get_calling_code(country_code: str) -> str:
    return ref.CALLING_CODES.get(country_code, ref.DEFAULT_CALLING_CODE)


def get_currency(country_code: str) -> str:
    return ref.CURRENCIES.get(country_code, ref.DEFAULT_CURRENCY)


def get_currency_name(currency_code: str) -> str:
    return ref.CURRENCY_NAMES.get(currency_code, ref.DEFAULT_CURRENCY_NAME)


def get_languages(country_code: str) -> str:
    return ref.LANGUAGES.get(country_code, ref.DEFAULT_LANGUAGES)


def get_country_area(country_code: str) -> float:
    return ref.COUNTRY_AREAS.get(country_code, 0.0)


def get_country_population(country_code: str) -> int:
    return ref.COUNTRY_POPULATIONS.get(country_code, 0)


def get_network(version: str) -> str:
    return ref.PLACEHOLDER_NETWORK_V6 if version == 'IPv6' else ref.PLACEHOLDER_NETWORK_V4


def enrich_location(record: RawLocationRecord) -> EnrichedProfile:
    """
    Convert a raw location record into the complete profile

    Args:
        record: Provider or mock output; any field but address may be empty

    Returns:
        EnrichedProfile with every derived field populated
    """
    country_code = get_country_code(record.country)
    currency = get_currency(country_code)
    version = get_ip_version(record.address)

    if country_code == ref.UNKNOWN_COUNTRY_CODE and record.country:
        logger.debug(f"No reference data for country '{record.country}', using defaults")

    return EnrichedProfile(
        ip=record.address or '127.0.0.1',
        version=version,
        city=record.city or ref.UNKNOWN,
        region=record.region or ref.UNKNOWN,
        region_code=get_region_code(record.region, country_code),
        country=country_code,
        country_name=record.country or ref.UNKNOWN,
        country_code=country_code,
        country_code_iso3=get_country_code_iso3(country_code),
        country_capital=get_country_capital(country_code),
        country_tld=get_country_tld(country_code),
        continent_code=get_continent_code(country_code),
        in_eu=is_in_eu(country_code),
        postal=get_postal_code(record.city),
        latitude=record.latitude,
        longitude=record.longitude,
        timezone=record.timezone or ref.DEFAULT_TIMEZONE,
        utc_offset=get_utc_offset(record.timezone),
        country_calling_code=get_calling_code(country_code),
        currency=currency,
        currency_name=get_currency_name(currency),
        languages=get_languages(country_code),
        country_area=get_country_area(country_code),
        country_population=get_country_population(country_code),
        asn=ref.PLACEHOLDER_ASN,
        org=record.isp or ref.UNKNOWN,
        network=get_network(version),
        source=record.source
    )
