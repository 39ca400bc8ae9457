from fastapi import APIRouter, Request
from roster_lib.services.resolver import resolve_optional_service
from .health import get_health

router = APIRouter()


@router.get('/health')
async def api_health(request: Request):
    server_cfg = resolve_optional_service(request, 'server_config')
    return get_health(getattr(server_cfg, 'server_name', None))
