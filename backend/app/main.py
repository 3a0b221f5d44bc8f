from __future__ import annotations

import argparse
import json
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import comms
from backend.app.core.config import Settings, get_settings
from backend.app.core.container import AppContainer
from backend.app.core.logging import configure_logging
from backend.app.services.ice_server_parser import IceServerFormatError
from backend.app.services.ice_server_service import IceServerService

MASKED_CREDENTIAL = "***"


def _build_container(settings: Settings) -> AppContainer:
    ice_server_service = IceServerService.from_settings(settings)
    return AppContainer(settings=settings, ice_server_service=ice_server_service)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.debug, settings.log_level)

    app.state.container = _build_container(settings)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(comms.router, prefix=settings.api_prefix)

    @app.get("/api/health")
    async def health() -> dict[str, str | bool | int]:
        ice_server_service = app.state.container.ice_server_service
        return {
            "status": "ok",
            "ice_servers": len(ice_server_service.ice_servers),
            "default_ice_servers": ice_server_service.using_defaults,
        }

    return app


app = create_app()


def check_ice_servers(settings: Settings) -> int:
    try:
        ice_servers = settings.resolved_webrtc_ice_servers
    except IceServerFormatError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    payload = [
        server.model_copy(update={"credential": MASKED_CREDENTIAL} if server.has_credentials else {}).model_dump(exclude_none=True)
        for server in ice_servers
    ]
    print(json.dumps({"iceServers": payload, "defaults": not settings.webrtc_ice_servers_configured}, indent=2))
    return 0


def run() -> None:
    parser = argparse.ArgumentParser(description="Run the ICE server configuration API")
    parser.add_argument(
        "--check-ice-servers",
        action="store_true",
        help="Parse WEBRTC_ICE_SERVERS, print the result and exit.",
    )
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", default="info")
    parser.add_argument("--reload", action=argparse.BooleanOptionalAction, default=False)
    parser.add_argument("--debug", action=argparse.BooleanOptionalAction, default=None)
    args = parser.parse_args()

    os.environ["MONOBASE_LOG_LEVEL"] = args.log_level

    if args.debug is True:
        os.environ["MONOBASE_DEBUG"] = "1"
    elif args.debug is False:
        os.environ["MONOBASE_DEBUG"] = "0"

    get_settings.cache_clear()
    settings = get_settings()

    if args.check_ice_servers:
        raise SystemExit(check_ice_servers(settings))

    globals()["app"] = create_app()

    uvicorn.run(
        "backend.app.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    run()
