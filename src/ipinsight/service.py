"""
IP information service
Ties together address extraction, the provider cascade, enrichment and
telemetry; every public resolve call always returns a profile
"""

import logging
import time
import uuid
from typing import Any, Mapping, Optional

from .config.config_manager import ConfigManager, get_config_manager
from .core.exceptions import ValidationError
from .core.models import EnrichedProfile, RawLocationRecord
from .enrichment.profile_enricher import enrich_location
from .providers.mock import get_mock_location
from .providers.resolver import CascadeResolver
from .telemetry.remote_logger import RemoteLogger
from .utils.ip_utils import (
    LOOPBACK_ADDRESS, extract_client_address, is_local_address, is_valid_ip_address,
    validate_ip_query
)


def generate_request_id(prefix: str = "req") -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class IPInfoService:
    """
    Resolution and enrichment entry point

    Usable as an async context manager; owns the resolver's HTTP session
    and the telemetry client unless they are passed in.
    """

    def __init__(self,
                 resolver: Optional[CascadeResolver] = None,
                 remote_logger: Optional[RemoteLogger] = None,
                 config_manager: Optional[ConfigManager] = None):
        self.logger = logging.getLogger(__name__)
        self.config_manager = config_manager or get_config_manager()
        self.resolver = resolver or CascadeResolver(config_manager=self.config_manager)
        self.remote_logger = remote_logger or RemoteLogger(self.config_manager)

    async def __aenter__(self):
        await self.resolver.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.resolver.close()
        await self.remote_logger.close()

    def _finish(self, record: RawLocationRecord, request_id: str,
                started: float, operation: str) -> EnrichedProfile:
        profile = enrich_location(record)
        metadata = {
            'operation': operation,
            'ip': profile.ip,
            'source': profile.source.value,
            'responseTime': round((time.monotonic() - started) * 1000, 1),
        }

        if profile.is_mock:
            self.logger.info(f"{operation}: served mock profile for {profile.ip}")
            self.remote_logger.warning("resolution.fallback", metadata, request_id)
        else:
            self.logger.info(f"{operation}: resolved {profile.ip} via {profile.source.value}")
            self.remote_logger.info("resolution.success", metadata, request_id)

        return profile

    def _failed(self, address: str, request_id: str, operation: str,
                error: Exception) -> EnrichedProfile:
        self.logger.error(f"{operation} failed for {address}: {error}", exc_info=True)
        self.remote_logger.error(
            "resolution.failure",
            {'operation': operation, 'ip': address, 'errorType': 'IP_INFO_FETCH_ERROR'},
            request_id,
            error=error
        )
        mock = get_mock_location(address, self.config_manager.get_mock_config().get('timezone'))
        return enrich_location(mock)

    async def resolve_by_address(self, address: str,
                                 request_id: Optional[str] = None) -> EnrichedProfile:
        """
        Resolve and enrich a specific address

        Never raises; local addresses and total provider failure both
        produce the mock profile for the address.
        """
        request_id = request_id or generate_request_id("ip")
        started = time.monotonic()
        self.remote_logger.info("request.start", {'operation': 'resolve_by_address', 'ip': address}, request_id)

        try:
            record = await self.resolver.resolve(address)
            return self._finish(record, request_id, started, 'resolve_by_address')
        except Exception as e:
            return self._failed(address or LOOPBACK_ADDRESS, request_id, 'resolve_by_address', e)

    async def resolve_self(self, request_id: Optional[str] = None) -> EnrichedProfile:
        """Resolve and enrich this host's own public address. Never raises."""
        request_id = request_id or generate_request_id("current-ip")
        started = time.monotonic()
        self.remote_logger.info("request.start", {'operation': 'resolve_self'}, request_id)

        try:
            record = await self.resolver.resolve_self()
            return self._finish(record, request_id, started, 'resolve_self')
        except Exception as e:
            return self._failed(LOOPBACK_ADDRESS, request_id, 'resolve_self', e)

    async def resolve_request(self, headers: Optional[Mapping[str, Any]],
                              peer_address: Optional[str] = None) -> EnrichedProfile:
        """
        Resolve the client behind an incoming request

        A local client address means the service runs next to the caller
        (development setup), so the host's own public address is used.
        """
        request_id = generate_request_id()
        address = extract_client_address(headers, peer_address)
        self.logger.info(f"Client address from request: {address}")
        self.remote_logger.debug('request.client_address', {'ip': address}, request_id)

        if is_local_address(address):
            self.logger.info("Local client address, resolving the public address instead")
            return await self.resolve_self(request_id)

        if not is_valid_ip_address(address):
            self.logger.warning(f"Malformed client address from request: {address!r}, using mock data")
            self.remote_logger.warning(
                'validation.rejected', {'operation': 'resolve_request', 'ip': address}, request_id
            )
            mock = get_mock_location(address, self.config_manager.get_mock_config().get('timezone'))
            return enrich_location(mock)

        return await self.resolve_by_address(address, request_id)

    async def query(self, ip: Optional[str]) -> EnrichedProfile:
        """
        Explicit lookup with input validation

        Raises:
            ValidationError: when ``ip`` is missing or malformed; raised
                before any provider is contacted
        """
        request_id = generate_request_id()
        try:
            address = validate_ip_query(ip)
        except ValidationError as e:
            self.logger.warning(f"Rejected explicit lookup: {e}")
            self.remote_logger.warning("validation.rejected", {'ip': ip, 'reason': str(e)}, request_id)
            raise

        return await self.resolve_by_address(address, request_id)
