from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import Settings, get_settings
from backend.app.main import create_app
from backend.app.services.ice_server_parser import IceServerFormatError
from backend.app.services.ice_server_service import IceServerService


def test_startup_fails_on_malformed_ice_server_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONOBASE_WEBRTC_ICE_SERVERS", raising=False)
    monkeypatch.setenv("WEBRTC_ICE_SERVERS", "stun:stun.l.google.com:19302,turn-relay.example.com")
    get_settings.cache_clear()

    app = create_app()
    with pytest.raises(IceServerFormatError) as exc_info:
        with TestClient(app):
            pass

    assert exc_info.value.input == "turn-relay.example.com"
    get_settings.cache_clear()


def test_malformed_configuration_does_not_fall_back_to_defaults() -> None:
    settings = Settings(webrtc_ice_servers="invalid-string")

    assert settings.webrtc_ice_servers_configured
    with pytest.raises(IceServerFormatError):
        settings.resolved_webrtc_ice_servers


def test_service_logs_urls_without_credentials(caplog: pytest.LogCaptureFixture) -> None:
    settings = Settings(webrtc_ice_servers="turn:monobase:topsecret@turn.example.com:3478")

    with caplog.at_level(logging.INFO, logger="backend.app.services.ice_server_service"):
        service = IceServerService.from_settings(settings)

    assert not service.using_defaults
    assert "turn:turn.example.com:3478" in caplog.text
    assert "topsecret" not in caplog.text


def test_service_warns_when_no_turn_relay_is_configured(caplog: pytest.LogCaptureFixture) -> None:
    settings = Settings(webrtc_ice_servers="stun:stun.example.com:3478")

    with caplog.at_level(logging.INFO, logger="backend.app.services.ice_server_service"):
        IceServerService.from_settings(settings)

    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_service_returns_copies_of_default_servers() -> None:
    service = IceServerService.from_settings(Settings(webrtc_ice_servers=None))

    assert service.using_defaults
    listed = service.list_ice_servers().ice_servers
    listed.clear()
    assert service.ice_servers


def test_service_log_keeps_urls_intact_when_credential_matches_port(caplog: pytest.LogCaptureFixture) -> None:
    settings = Settings(webrtc_ice_servers="turn:relay:3478@turn.example.com:3478")

    with caplog.at_level(logging.INFO, logger="backend.app.services.ice_server_service"):
        IceServerService.from_settings(settings)
        IceServerService.from_settings(settings)

    assert "turn:turn.example.com:3478" in caplog.text
    assert "***" not in caplog.text
