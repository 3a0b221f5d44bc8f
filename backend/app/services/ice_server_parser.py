"""Parse operator supplied ICE server strings into ``IceServer`` descriptors.

Accepted form is ``protocol:[username:password@]host:port`` where protocol is
one of ``stun``, ``turn`` or ``turns``. Several servers may be given as a
comma separated list, for example::

    stun:stun.l.google.com:19302,turn:monobase:secret@turn.example.com:3478
"""

from __future__ import annotations

import re

from backend.app.models.webrtc import IceServer

EXPECTED_ICE_SERVER_FORMAT = "protocol:[username:password@]host:port"

# host:port is kept opaque; anything after the protocol (or the '@') matches.
_ICE_SERVER_URL_RE = re.compile(r"^(stun|turn|turns):(?:([^:]+):([^@]+)@)?(.+)$")

DEFAULT_ICE_SERVERS: tuple[IceServer, ...] = (
    IceServer(urls="stun:stun.l.google.com:19302"),
    IceServer(urls="stun:stun1.l.google.com:19302"),
    IceServer(urls="stun:stun.services.mozilla.com"),
)


class IceServerFormatError(ValueError):
    def __init__(self, value: str):
        self.input = value
        self.expected = EXPECTED_ICE_SERVER_FORMAT
        super().__init__(f"Invalid ICE server URL format: {value!r} (expected {self.expected})")


def parse_ice_server_url(url: str) -> IceServer:
    trimmed = url.strip()
    match = _ICE_SERVER_URL_RE.match(trimmed)
    if match is None:
        raise IceServerFormatError(trimmed)

    protocol, username, password, host_port = match.groups()
    if protocol == "stun":
        return IceServer(urls=f"stun:{host_port}")

    if username and password:
        return IceServer(urls=f"{protocol}:{host_port}", username=username, credential=password)

    return IceServer(urls=f"{protocol}:{host_port}")


def parse_ice_server_urls(value: str) -> list[IceServer]:
    return [parse_ice_server_url(segment) for segment in value.split(",")]
