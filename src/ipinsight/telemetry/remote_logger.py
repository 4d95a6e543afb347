"""
Remote log sink client
Ships structured telemetry events to the log service without ever blocking
or failing the resolution path
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Set

import aiohttp

from ..config.config_manager import ConfigManager, get_config_manager
from ..core.exceptions import TelemetryError
from ..core.models import LogLevel, TelemetryEvent


class RemoteLogger:
    """
    Fire-and-forget telemetry client

    emit() schedules a detached task per event and returns immediately.
    Send failures, including timeouts, are logged locally and dropped.
    """

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.logger = logging.getLogger(__name__)
        self.config_manager = config_manager or get_config_manager()

        config = self.config_manager.get_telemetry_config()
        self.log_service_url = (config.get('url') or '').rstrip('/')
        self.api_key = config.get('api_key') or ''
        self.service_name = config.get('service_name') or 'ip-info-backend'
        self.timeout_ms = int(config.get('timeout_ms', 5000))
        self.enabled = self.config_manager.is_telemetry_enabled()

        self.session: Optional[aiohttp.ClientSession] = None
        self._pending: Set[asyncio.Task] = set()
        self.sent_count = 0
        self.failed_count = 0

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_ms / 1000),
                headers={
                    'Content-Type': 'application/json',
                    'x-api-key': self.api_key
                }
            )
        return self.session

    def emit(self, level: LogLevel, message: str,
             metadata: Optional[Dict[str, Any]] = None,
             request_id: Optional[str] = None) -> Optional[asyncio.Task]:
        """
        Queue an event for delivery

        Returns:
            The detached delivery task, or None when remote logging is off
        """
        if not self.enabled:
            return None

        event = TelemetryEvent(
            level=level,
            message=message,
            service=self.service_name,
            request_id=request_id,
            metadata=metadata or {}
        )

        try:
            task = asyncio.get_running_loop().create_task(self._deliver(event))
        except RuntimeError:
            self.logger.debug("No running event loop, dropping telemetry event")
            return None

        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _deliver(self, event: TelemetryEvent):
        try:
            await self.send_event(event)
            self.sent_count += 1
        except TelemetryError as e:
            self.failed_count += 1
            self.logger.warning(f"Failed to send remote log: {e.message}")
        except Exception as e:
            self.failed_count += 1
            self.logger.error(f"Unexpected error sending remote log: {e}")

    async def send_event(self, event: TelemetryEvent):
        """
        POST a single event to the sink

        Raises:
            TelemetryError: on timeout, transport error or a rejected event
        """
        session = await self._get_session()
        url = f"{self.log_service_url}/api/logs"

        try:
            async with session.post(url, json=event.to_dict()) as response:
                if response.status >= 400:
                    raise TelemetryError(f"log service returned HTTP {response.status}")
                try:
                    body = await response.json(content_type=None)
                except ValueError:
                    body = None
        except asyncio.TimeoutError:
            raise TelemetryError(f"log service timed out after {self.timeout_ms}ms")
        except aiohttp.ClientError as e:
            raise TelemetryError(f"log service unreachable: {e}")

        if isinstance(body, dict) and body.get('success') is False:
            raise TelemetryError(f"log service rejected event: {body.get('error', 'unknown error')}")

        self.logger.debug(f"Remote log recorded: {event.level.value} - {event.message}")

    def error(self, message: str, metadata: Optional[Dict[str, Any]] = None,
              request_id: Optional[str] = None, error: Optional[BaseException] = None):
        metadata = dict(metadata or {})
        if error is not None:
            metadata['error'] = {'name': type(error).__name__, 'message': str(error)}
        return self.emit(LogLevel.ERROR, message, metadata, request_id)

    def warning(self, message: str, metadata: Optional[Dict[str, Any]] = None,
                request_id: Optional[str] = None):
        return self.emit(LogLevel.WARN, message, metadata, request_id)

    def info(self, message: str, metadata: Optional[Dict[str, Any]] = None,
             request_id: Optional[str] = None):
        return self.emit(LogLevel.INFO, message, metadata, request_id)

    def debug(self, message: str, metadata: Optional[Dict[str, Any]] = None,
              request_id: Optional[str] = None):
        return self.emit(LogLevel.DEBUG, message, metadata, request_id)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def flush(self, timeout: float = 5.0):
        """Wait for in-flight events, abandoning any still running after timeout"""
        if not self._pending:
            return
        _, not_done = await asyncio.wait(set(self._pending), timeout=timeout)
        for task in not_done:
            task.cancel()
        if not_done:
            self.logger.warning(f"Abandoned {len(not_done)} undelivered remote log events")

    async def health_check(self) -> bool:
        """Check that the log service answers its health endpoint"""
        if not self.enabled:
            return False

        try:
            session = await self._get_session()
            async with session.get(f"{self.log_service_url}/health") as response:
                data = await response.json(content_type=None)
                return isinstance(data, dict) and data.get('status') == 'healthy'
        except (asyncio.TimeoutError, aiohttp.ClientError, ValueError) as e:
            self.logger.error(f"Log service health check failed: {e}")
            return False

    async def close(self):
        await self.flush()
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None
