from __future__ import annotations

from fastapi import Depends, Request

from backend.app.core.container import AppContainer
from backend.app.services.ice_server_service import IceServerService


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_ice_server_service(container: AppContainer = Depends(get_container)) -> IceServerService:
    return container.ice_server_service
