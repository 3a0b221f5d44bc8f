from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.app.api.deps import get_ice_server_service
from backend.app.models.webrtc import IceServersResponse, IceServersValidateRequest
from backend.app.services.ice_server_service import IceServerService

router = APIRouter(prefix="/comms", tags=["comms"])


@router.get("/ice-servers", response_model=IceServersResponse, response_model_exclude_none=True)
async def get_ice_servers(service: IceServerService = Depends(get_ice_server_service)) -> IceServersResponse:
    return service.list_ice_servers()


@router.post("/ice-servers/validate", response_model=IceServersResponse, response_model_exclude_none=True)
async def validate_ice_servers(
    request: IceServersValidateRequest,
    service: IceServerService = Depends(get_ice_server_service),
) -> IceServersResponse:
    return service.preview(request.value)
