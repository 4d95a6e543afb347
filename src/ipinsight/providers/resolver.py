"""
Provider Cascade Resolver
Queries geolocation providers strictly in order until one answers, falling
back to the mock record when every provider fails
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from ..config.config_manager import ConfigManager, get_config_manager
from ..core.exceptions import ProviderError, ProviderTimeoutError
from ..core.models import ProviderSpec, RawLocationRecord
from ..utils.ip_utils import LOOPBACK_ADDRESS, is_local_address
from .catalog import DISCOVERY_PROVIDER, build_provider_chain
from .mock import get_mock_location


class CascadeResolver:
    """
    Sequential multi-provider geolocation resolver

    Every attempt is a single bounded HTTP call. A timeout, transport error,
    non-2xx status or failure payload advances to the next provider; no
    provider is retried. Exhaustion yields the mock record instead of an error.
    """

    def __init__(self,
                 providers: Optional[Sequence[ProviderSpec]] = None,
                 discovery_provider: Optional[ProviderSpec] = None,
                 config_manager: Optional[ConfigManager] = None):
        self.logger = logging.getLogger(__name__)
        self.config_manager = config_manager or get_config_manager()

        provider_config = self.config_manager.get_provider_config()
        timeout_ms = self.config_manager.get_provider_timeout_ms()
        self.api_key = provider_config.get('ipgeolocation_api_key', '')
        self.user_agent = provider_config.get('user_agent', 'ipinsight/1.0')
        self.mock_timezone = self.config_manager.get_mock_config().get('timezone')

        if providers is None:
            providers = build_provider_chain(
                self.config_manager.get_provider_order(), timeout_ms, self.api_key
            )
        self.providers: List[ProviderSpec] = list(providers)
        self.discovery_provider = discovery_provider or replace(DISCOVERY_PROVIDER, timeout_ms=timeout_ms)

        # Session for HTTP requests
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                headers={'User-Agent': self.user_agent, 'Accept': 'application/json'},
                trust_env=True
            )
        return self.session

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    def _mock(self, address: str) -> RawLocationRecord:
        return get_mock_location(address or LOOPBACK_ADDRESS, self.mock_timezone)

    async def _fetch_payload(self, spec: ProviderSpec, address: str) -> Dict[str, Any]:
        """Issue one bounded request and return a payload that passed the failure check"""
        session = await self._get_session()
        url = spec.build_url(address, self.api_key)
        timeout = aiohttp.ClientTimeout(total=spec.timeout_ms / 1000)

        try:
            async with session.get(url, timeout=timeout) as response:
                if not 200 <= response.status < 300:
                    raise ProviderError(f"HTTP error status {response.status}", provider=spec.name)
                data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            raise ProviderTimeoutError(f"timed out after {spec.timeout_ms}ms", provider=spec.name)
        except aiohttp.ClientError as e:
            raise ProviderError(f"transport error: {e}", provider=spec.name)
        except ValueError as e:
            raise ProviderError(f"invalid JSON payload: {e}", provider=spec.name)

        if not isinstance(data, dict):
            raise ProviderError("unexpected payload shape", provider=spec.name)

        if spec.failure_predicate(data):
            reason = data.get('message') or data.get('reason') or data.get('error') or 'unknown error'
            raise ProviderError(f"provider reported failure: {reason}", provider=spec.name)

        return data

    async def _attempt(self, spec: ProviderSpec, address: str) -> RawLocationRecord:
        data = await self._fetch_payload(spec, address)

        try:
            record = spec.response_mapper(data, address)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"could not map payload: {e}", provider=spec.name)

        if not record.address:
            raise ProviderError("payload carried no address", provider=spec.name)

        return record

    async def _run_cascade(self, address: str, skip: Optional[str] = None) -> RawLocationRecord:
        for position, spec in enumerate(self.providers, start=1):
            if spec.name == skip:
                continue

            try:
                record = await self._attempt(spec, address)
            except ProviderError as e:
                self.logger.warning(
                    f"Provider {spec.name} ({position}/{len(self.providers)}) failed "
                    f"for {address or 'self'}: {e.message}"
                )
                continue

            self.logger.info(f"Resolved {record.address} via {spec.name}")
            return record

        self.logger.error(f"All geolocation providers failed for {address or 'self'}, using mock data")
        return self._mock(address)

    async def resolve(self, address: str) -> RawLocationRecord:
        """
        Resolve an address to a raw location record

        Args:
            address: IPv4/IPv6 address to geolocate

        Returns:
            The first provider answer, or the mock record for local
            addresses and when every provider fails
        """
        if is_local_address(address):
            self.logger.info(f"Local address detected: {address}, using mock data")
            return self._mock(address)

        try:
            return await self._run_cascade(address)
        except Exception as e:
            self.logger.error(f"Unexpected error resolving {address}: {e}", exc_info=True)
            return self._mock(address)

    async def discover_own_address(self) -> str:
        """Ask the discovery provider for this host's public address"""
        data = await self._fetch_payload(self.discovery_provider, "")
        address = str(data.get('ip') or '').strip()
        if not address:
            raise ProviderError("no address in discovery payload", provider=self.discovery_provider.name)
        return address

    async def resolve_self(self) -> RawLocationRecord:
        """
        Resolve the public address of the host running this service

        Discovery failure falls back to the remaining providers asked about
        the caller itself; anything unexpected yields the loopback mock.
        """
        try:
            try:
                address = await self.discover_own_address()
            except ProviderError as e:
                self.logger.warning(f"Own address discovery failed: {e.message}, trying fallback providers")
                return await self._run_cascade("", skip=self.discovery_provider.name)

            if is_local_address(address):
                self.logger.info(f"Local address detected: {address}, using mock data")
                return self._mock(address)

            return await self._run_cascade(address)

        except Exception as e:
            self.logger.error(f"Failed to resolve own location: {e}", exc_info=True)
            return self._mock(LOOPBACK_ADDRESS)
