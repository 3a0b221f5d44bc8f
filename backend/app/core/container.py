from __future__ import annotations

from dataclasses import dataclass

from backend.app.core.config import Settings
from backend.app.services.ice_server_service import IceServerService


@dataclass(slots=True)
class AppContainer:
    settings: Settings
    ice_server_service: IceServerService
