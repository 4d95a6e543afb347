import asyncio
from collections import defaultdict
from dataclasses import replace

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from ipinsight.config.config_manager import ConfigManager, reset_config_manager
from ipinsight.providers.catalog import PROVIDERS
from ipinsight.providers.resolver import CascadeResolver
from ipinsight.service import IPInfoService
from ipinsight.telemetry.remote_logger import RemoteLogger

CONFIG_ENV_VARS = (
    'IPINSIGHT_CONFIG', 'IPINSIGHT_PROVIDERS', 'IPINSIGHT_PROVIDER_TIMEOUT_MS',
    'IPGEOLOCATION_API_KEY', 'IPINSIGHT_USER_AGENT', 'IPINSIGHT_MOCK_TIMEZONE',
    'REMOTE_LOGGING_ENABLED', 'LOG_SERVICE_URL', 'LOG_SERVICE_API_KEY',
    'SERVICE_NAME', 'LOG_SERVICE_TIMEOUT_MS', 'IPINSIGHT_HOST', 'IPINSIGHT_PORT',
    'LOG_LEVEL', 'LOG_FILE',
)

IPWHOIS_PAYLOAD = {
    'success': True,
    'country': 'United States',
    'region': 'California',
    'city': 'Mountain View',
    'latitude': 37.3860517,
    'longitude': -122.0838511,
    'timezone': {'id': 'America/Los_Angeles'},
    'connection': {'isp': 'Google LLC'},
}

IPAPI_PAYLOAD = {
    'country_name': 'Japan',
    'region': 'Tokyo',
    'city': 'Tokyo',
    'latitude': 35.6895,
    'longitude': 139.6917,
    'timezone': 'Asia/Tokyo',
    'org': 'NTT Communications',
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def config_manager():
    return ConfigManager()


@pytest_asyncio.fixture
async def provider_server():
    """Fake geolocation providers and log sink; ``server.hits`` counts calls per route"""
    hits = defaultdict(int)
    events = []

    async def ipwhois_ok(request):
        hits['ipwhois_ok'] += 1
        return web.json_response({**IPWHOIS_PAYLOAD, 'ip': request.match_info['ip']})

    async def ipwhois_fail(request):
        hits['ipwhois_fail'] += 1
        return web.json_response({'success': False, 'message': 'Reserved range'})

    async def ipwhois_slow(request):
        hits['ipwhois_slow'] += 1
        await asyncio.sleep(1)
        return web.json_response({**IPWHOIS_PAYLOAD, 'ip': request.match_info['ip']})

    async def ipapi_ok(request):
        hits['ipapi_ok'] += 1
        return web.json_response({**IPAPI_PAYLOAD, 'ip': request.match_info['ip']})

    async def ipapi_ok_self(request):
        hits['ipapi_ok_self'] += 1
        return web.json_response({**IPAPI_PAYLOAD, 'ip': '203.0.113.7'})

    async def ipapi_error(request):
        hits['ipapi_error'] += 1
        return web.json_response({'error': True, 'reason': 'RateLimited'})

    async def ipapi_com(request):
        hits['ipapi_com'] += 1
        return web.json_response({
            'status': 'success', 'query': request.match_info['ip'], 'country': 'Germany',
            'regionName': 'Hesse', 'city': 'Frankfurt am Main', 'lat': 50.11, 'lon': 8.68,
            'timezone': 'Europe/Berlin', 'isp': 'Hetzner Online GmbH',
        })

    async def server_error(request):
        hits['server_error'] += 1
        return web.json_response({'message': 'boom'}, status=500)

    async def not_json(request):
        hits['not_json'] += 1
        return web.Response(text='<html>maintenance</html>', content_type='text/html')

    async def discover_public(request):
        hits['discover_public'] += 1
        return web.json_response({'success': True, 'ip': '8.8.8.8'})

    async def discover_local(request):
        hits['discover_local'] += 1
        return web.json_response({'success': True, 'ip': '192.168.0.10'})

    async def log_sink(request):
        hits['log_sink'] += 1
        events.append({'api_key': request.headers.get('x-api-key'), **(await request.json())})
        return web.json_response({'success': True})

    async def log_sink_down(request):
        hits['log_sink_down'] += 1
        return web.json_response({'success': False, 'error': 'disk full'}, status=503)

    async def log_sink_slow(request):
        hits['log_sink_slow'] += 1
        await asyncio.sleep(2)
        return web.json_response({'success': True})

    async def log_health(request):
        return web.json_response({'status': 'healthy'})

    app = web.Application()
    app.router.add_get('/ipwhois/ok/{ip}', ipwhois_ok)
    app.router.add_get('/ipwhois/fail/{ip}', ipwhois_fail)
    app.router.add_get('/ipwhois/slow/{ip}', ipwhois_slow)
    app.router.add_get('/ipapi/ok/json/', ipapi_ok_self)
    app.router.add_get('/ipapi/ok/{ip}/json/', ipapi_ok)
    app.router.add_get('/ipapi/error/{ip}/json/', ipapi_error)
    app.router.add_get('/ipapicom/{ip}', ipapi_com)
    app.router.add_get('/status/500/{ip}', server_error)
    app.router.add_get('/status/500/', server_error)
    app.router.add_get('/html/{ip}', not_json)
    app.router.add_get('/discover/public/', discover_public)
    app.router.add_get('/discover/local/', discover_local)
    app.router.add_post('/sink/api/logs', log_sink)
    app.router.add_get('/sink/health', log_health)
    app.router.add_post('/sink-down/api/logs', log_sink_down)
    app.router.add_post('/sink-slow/api/logs', log_sink_slow)

    server = TestServer(app)
    await server.start_server()
    server.hits = hits
    server.events = events
    server.base_url = f"http://{server.host}:{server.port}"
    yield server
    await server.close()


@pytest.fixture
def make_spec(provider_server):
    """Point a catalogue provider at a route of the fake provider server"""
    def _make_spec(name, path, timeout_ms=3000):
        return replace(PROVIDERS[name], url_template=provider_server.base_url + path, timeout_ms=timeout_ms)
    return _make_spec


@pytest.fixture
def build_service(make_spec):
    """IPInfoService whose cascade and self discovery use the fake providers"""
    def _build(config_manager):
        providers = [
            make_spec('ipwhois', '/ipwhois/ok/{ip}'),
            make_spec('ipapi', '/ipapi/ok/{ip_path}json/'),
        ]
        resolver = CascadeResolver(
            providers=providers,
            discovery_provider=make_spec('ipwhois', '/discover/public/{ip}'),
            config_manager=config_manager
        )
        return IPInfoService(resolver=resolver, remote_logger=RemoteLogger(config_manager),
                             config_manager=config_manager)
    return _build
