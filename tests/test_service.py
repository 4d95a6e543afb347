import time

import pytest

from ipinsight.config.config_manager import ConfigManager
from ipinsight.core.exceptions import ValidationError
from ipinsight.core.models import LocationSource
from ipinsight.providers.resolver import CascadeResolver
from ipinsight.service import IPInfoService, generate_request_id


@pytest.fixture
def telemetry_env(monkeypatch, provider_server):
    def _configure(path='/sink'):
        monkeypatch.setenv('LOG_SERVICE_URL', provider_server.base_url + path)
        monkeypatch.setenv('LOG_SERVICE_API_KEY', 'test-key')
        monkeypatch.setenv('SERVICE_NAME', 'ip-info-test')
        return ConfigManager()
    return _configure


def test_request_ids_are_unique_and_prefixed() -> None:
    ids = {generate_request_id('ip') for _ in range(50)}
    assert len(ids) == 50
    assert all(request_id.startswith('ip_') for request_id in ids)


async def test_malformed_query_is_rejected_before_any_provider(provider_server, build_service,
                                                               config_manager) -> None:
    async with build_service(config_manager) as service:
        with pytest.raises(ValidationError):
            await service.query('256.1.1.1')
        with pytest.raises(ValidationError):
            await service.query('')

    assert sum(provider_server.hits.values()) == 0


async def test_private_query_gets_mock_profile(provider_server, build_service, config_manager) -> None:
    async with build_service(config_manager) as service:
        profile = await service.query('192.168.1.5')

    assert profile.ip == '192.168.1.5'
    assert profile.source is LocationSource.MOCK
    assert profile.country_code == 'CN'
    assert sum(provider_server.hits.values()) == 0


async def test_public_query_is_enriched(provider_server, build_service, config_manager) -> None:
    async with build_service(config_manager) as service:
        profile = await service.query('8.8.8.8')

    assert profile.source is LocationSource.IPWHOIS
    assert profile.country_code == 'US'
    assert profile.region_code == 'CA'
    assert profile.org == 'Google LLC'
    assert profile.version == 'IPv4'


async def test_forwarded_client_is_resolved_directly(provider_server, build_service,
                                                     config_manager) -> None:
    async with build_service(config_manager) as service:
        profile = await service.resolve_request({'X-Forwarded-For': '8.8.8.8, 10.0.0.1'}, '10.0.0.1')

    assert profile.ip == '8.8.8.8'
    assert provider_server.hits['discover_public'] == 0


async def test_local_client_resolves_own_public_address(provider_server, build_service,
                                                        config_manager) -> None:
    async with build_service(config_manager) as service:
        profile = await service.resolve_request({}, '127.0.0.1')

    assert provider_server.hits['discover_public'] == 1
    assert profile.ip == '8.8.8.8'
    assert profile.source is LocationSource.IPWHOIS


async def test_telemetry_events_reach_the_sink(provider_server, build_service, telemetry_env) -> None:
    service = build_service(telemetry_env('/sink'))

    async with service:
        profile = await service.query('8.8.8.8')
        await service.remote_logger.flush()

    assert profile.source is LocationSource.IPWHOIS
    messages = sorted(event['message'] for event in provider_server.events)
    assert messages == ['request.start', 'resolution.success']

    for event in provider_server.events:
        assert event['api_key'] == 'test-key'
        assert event['service'] == 'ip-info-test'
        assert event['level'] == 'info'
        assert event['requestId']
        assert event['timestamp']

    success = next(e for e in provider_server.events if e['message'] == 'resolution.success')
    assert success['metadata']['source'] == 'ipwhois'
    assert success['metadata']['ip'] == '8.8.8.8'
    assert 'responseTime' in success['metadata']


async def test_rejected_query_is_reported(provider_server, build_service, telemetry_env) -> None:
    async with build_service(telemetry_env('/sink')) as service:
        with pytest.raises(ValidationError):
            await service.query('not-an-ip')
        await service.remote_logger.flush()

    assert [event['message'] for event in provider_server.events] == ['validation.rejected']
    assert provider_server.events[0]['level'] == 'warn'


async def test_mock_fallback_is_reported_as_warning(provider_server, build_service, telemetry_env) -> None:
    async with build_service(telemetry_env('/sink')) as service:
        await service.query('10.1.2.3')
        await service.remote_logger.flush()

    fallback = [event for event in provider_server.events if event['message'] == 'resolution.fallback']
    assert len(fallback) == 1
    assert fallback[0]['level'] == 'warn'
    assert fallback[0]['metadata']['source'] == 'mock'


async def test_failing_sink_does_not_affect_result(provider_server, build_service, telemetry_env) -> None:
    service = build_service(telemetry_env('/sink-down'))

    async with service:
        profile = await service.query('8.8.8.8')
        await service.remote_logger.flush()
        failed = service.remote_logger.failed_count

    assert profile.source is LocationSource.IPWHOIS
    assert provider_server.hits['log_sink_down'] == 2
    assert failed == 2


async def test_unreachable_sink_does_not_affect_result(provider_server, build_service, monkeypatch) -> None:
    monkeypatch.setenv('LOG_SERVICE_URL', 'http://127.0.0.1:1')
    monkeypatch.setenv('LOG_SERVICE_API_KEY', 'test-key')

    async with build_service(ConfigManager()) as service:
        profile = await service.query('8.8.8.8')
        await service.remote_logger.flush()
        failed = service.remote_logger.failed_count

    assert profile.ip == '8.8.8.8'
    assert failed == 2


async def test_unexpected_resolver_error_still_returns_profile(config_manager) -> None:
    class BrokenResolver(CascadeResolver):
        async def resolve(self, address):
            raise RuntimeError("boom")

    service = IPInfoService(resolver=BrokenResolver(providers=[], config_manager=config_manager),
                            config_manager=config_manager)
    async with service:
        profile = await service.resolve_by_address('8.8.8.8')

    assert profile.ip == '8.8.8.8'
    assert profile.source is LocationSource.MOCK


async def test_slow_sink_never_delays_the_response(provider_server, build_service, telemetry_env,
                                                   monkeypatch) -> None:
    monkeypatch.setenv('LOG_SERVICE_TIMEOUT_MS', '300')
    service = build_service(telemetry_env('/sink-slow'))

    async with service:
        started = time.monotonic()
        profile = await service.query('8.8.8.8')
        elapsed = time.monotonic() - started

        await service.remote_logger.flush()
        failed = service.remote_logger.failed_count

    assert profile.source is LocationSource.IPWHOIS
    assert elapsed < 1.0
    assert failed == 2
    assert service.remote_logger.sent_count == 0


async def test_unexpected_resolver_error_is_reported(provider_server, telemetry_env) -> None:
    class BrokenResolver(CascadeResolver):
        async def resolve(self, address):
            raise RuntimeError("boom")

    config = telemetry_env('/sink')
    service = IPInfoService(resolver=BrokenResolver(providers=[], config_manager=config),
                            config_manager=config)
    async with service:
        profile = await service.resolve_by_address('8.8.8.8')
        await service.remote_logger.flush()

    assert profile.is_mock
    failures = [event for event in provider_server.events if event['message'] == 'resolution.failure']
    assert len(failures) == 1
    assert failures[0]['level'] == 'error'
    assert failures[0]['metadata']['errorType'] == 'IP_INFO_FETCH_ERROR'
    assert failures[0]['metadata']['error'] == {'name': 'RuntimeError', 'message': 'boom'}


async def test_malformed_forwarded_address_gets_mock_without_provider_calls(provider_server, build_service,
                                                                            telemetry_env) -> None:
    async with build_service(telemetry_env('/sink')) as service:
        profile = await service.resolve_request({'X-Forwarded-For': '8.8.8.8/../../x?y='}, '10.0.0.1')
        await service.remote_logger.flush()

    assert profile.is_mock
    assert profile.ip == '8.8.8.8/../../x?y='
    assert provider_server.hits['ipwhois_ok'] == 0
    assert provider_server.hits['ipapi_ok'] == 0

    levels = {event['message']: event['level'] for event in provider_server.events}
    assert levels == {'request.client_address': 'debug', 'validation.rejected': 'warn'}
