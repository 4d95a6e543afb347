"""
Mock location data
Deterministic placeholder used for local addresses and when every provider fails
"""

from ..core.models import LocationSource, RawLocationRecord

MOCK_COUNTRY = 'China'
MOCK_REGION = 'Beijing'
MOCK_CITY = 'Beijing'
MOCK_LATITUDE = 39.9042
MOCK_LONGITUDE = 116.4074
MOCK_TIMEZONE = 'Asia/Shanghai'
MOCK_ISP = 'Local Development Environment'


def get_mock_location(address: str, timezone: str = MOCK_TIMEZONE) -> RawLocationRecord:
    """Build the offline placeholder record for an address"""
    return RawLocationRecord(
        address=address or '127.0.0.1',
        country=MOCK_COUNTRY,
        region=MOCK_REGION,
        city=MOCK_CITY,
        latitude=MOCK_LATITUDE,
        longitude=MOCK_LONGITUDE,
        timezone=timezone or MOCK_TIMEZONE,
        isp=MOCK_ISP,
        source=LocationSource.MOCK
    )
