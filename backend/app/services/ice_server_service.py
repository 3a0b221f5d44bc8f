from __future__ import annotations

import logging

from fastapi import HTTPException

from backend.app.core.config import Settings
from backend.app.models.webrtc import IceServer, IceServersResponse
from backend.app.services.ice_server_parser import IceServerFormatError, parse_ice_server_urls

logger = logging.getLogger(__name__)


class IceServerService:
    def __init__(self, ice_servers: list[IceServer], *, using_defaults: bool = False):
        self._ice_servers = list(ice_servers)
        self.using_defaults = using_defaults

    @classmethod
    def from_settings(cls, settings: Settings) -> IceServerService:
        using_defaults = not settings.webrtc_ice_servers_configured
        ice_servers = settings.resolved_webrtc_ice_servers

        if using_defaults:
            logger.info("WEBRTC_ICE_SERVERS not set; using %d default STUN servers", len(ice_servers))
        else:
            logger.info(
                "Loaded %d ICE servers from WEBRTC_ICE_SERVERS: %s",
                len(ice_servers),
                ", ".join(url for server in ice_servers for url in server.url_list()),
            )
            if not any(server.has_credentials for server in ice_servers):
                logger.warning("No authenticated TURN relay configured; clients behind symmetric NAT may fail to connect")

        return cls(ice_servers, using_defaults=using_defaults)

    @property
    def ice_servers(self) -> list[IceServer]:
        return list(self._ice_servers)

    def list_ice_servers(self) -> IceServersResponse:
        return IceServersResponse(ice_servers=self.ice_servers)

    def preview(self, value: str) -> IceServersResponse:
        try:
            ice_servers = parse_ice_server_urls(value)
        except IceServerFormatError as error:
            logger.debug("Rejected ICE server configuration: %s", error)
            raise HTTPException(
                status_code=422,
                detail={"input": error.input, "expected": error.expected},
            ) from error
        return IceServersResponse(ice_servers=ice_servers)
