"""
HTTP endpoints for IP information lookups (aiohttp.web)
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from aiohttp import web

from . import __version__
from .core.exceptions import ValidationError
from .service import IPInfoService

logger = logging.getLogger(__name__)

SERVICE_KEY = web.AppKey('ip_info_service', IPInfoService)


async def get_my_ip_info(request: web.Request) -> web.Response:
    """Profile for the client that made the request"""
    service = request.app[SERVICE_KEY]
    profile = await service.resolve_request(request.headers, request.remote)
    return web.json_response(profile.to_dict())


async def get_specific_ip_info(request: web.Request) -> web.Response:
    """Profile for the address in the ``ip`` query parameter"""
    service = request.app[SERVICE_KEY]
    try:
        profile = await service.query(request.query.get('ip'))
    except ValidationError as e:
        return web.json_response({'error': e.message}, status=400)
    return web.json_response(profile.to_dict())


async def health_check(request: web.Request) -> web.Response:
    return web.json_response({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': 'ip-info-api',
        'version': __version__,
    })


def create_app(service: Optional[IPInfoService] = None) -> web.Application:
    """
    Build the web application

    The service is closed together with the application unless it was
    passed in by the caller.
    """
    app = web.Application()
    owns_service = service is None
    app[SERVICE_KEY] = service or IPInfoService()

    app.router.add_get('/ip-info', get_my_ip_info)
    app.router.add_get('/ip-info/query', get_specific_ip_info)
    app.router.add_get('/ip-info/health', health_check)

    async def _close_service(app: web.Application):
        if owns_service:
            await app[SERVICE_KEY].close()

    app.on_cleanup.append(_close_service)
    return app


def run_server(host: str, port: int):
    logger.info(f"Starting IP info server on {host}:{port}")
    web.run_app(create_app(), host=host, port=port, print=None)
