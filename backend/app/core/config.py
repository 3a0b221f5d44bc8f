from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.app.models.webrtc import IceServer
from backend.app.services.ice_server_parser import DEFAULT_ICE_SERVERS, parse_ice_server_urls


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MONOBASE_", extra="ignore", populate_by_name=True)

    app_name: str = "Monobase ICE Config API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "info"

    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 7213

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Also read without the MONOBASE_ prefix.
    webrtc_ice_servers: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MONOBASE_WEBRTC_ICE_SERVERS", "WEBRTC_ICE_SERVERS"),
    )

    @property
    def webrtc_ice_servers_configured(self) -> bool:
        return bool(self.webrtc_ice_servers and self.webrtc_ice_servers.strip())

    @property
    def resolved_webrtc_ice_servers(self) -> list[IceServer]:
        if not self.webrtc_ice_servers_configured:
            return [server.model_copy(deep=True) for server in DEFAULT_ICE_SERVERS]
        return parse_ice_server_urls(self.webrtc_ice_servers or "")


@lru_cache
def get_settings() -> Settings:
    return Settings()
