from __future__ import annotations

import logging
from typing import Any

from backend.app.models.webrtc import IceServer

logger = logging.getLogger(__name__)


def build_rtc_configuration(ice_servers: list[IceServer]) -> Any:
    """Build an ``aiortc.RTCConfiguration`` for a server side peer connection.

    Servers are passed through in order, since ICE gathering tries them in
    list order. Returns ``None`` for an empty list so aiortc keeps its own
    defaults.
    """
    try:
        from aiortc import RTCConfiguration, RTCIceServer  # type: ignore
    except Exception as exc:
        raise RuntimeError(
            "WebRTC peer connection dependencies are unavailable. Install the 'streaming' extras "
            "(aiortc) to build server side peer connections."
        ) from exc

    if not ice_servers:
        return None

    configured_servers: list[Any] = []
    for server in ice_servers:
        kwargs: dict[str, Any] = {"urls": server.urls}
        if server.has_credentials:
            kwargs["username"] = server.username
            kwargs["credential"] = server.credential
        configured_servers.append(RTCIceServer(**kwargs))

    logger.debug("Built RTCConfiguration with %d ICE servers", len(configured_servers))
    return RTCConfiguration(iceServers=configured_servers)


async def create_peer_connection(ice_servers: list[IceServer]) -> Any:
    from aiortc import RTCPeerConnection  # type: ignore

    pc = RTCPeerConnection(configuration=build_rtc_configuration(ice_servers))

    @pc.on("connectionstatechange")
    async def _on_connection_state_change() -> None:
        logger.info("WebRTC connection state changed: %s", pc.connectionState)
        if pc.connectionState in {"failed", "disconnected"}:
            await pc.close()

    return pc
