from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from bgremover.api.routes import api_router
from bgremover.core.config import TEMP_ROUTE_NAME, TEMP_URL_PREFIX, Settings, get_settings
from bgremover.services.temp_store import TempStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, version="1.0.0")
    app.state.settings = settings
    app.state.temp_store = TempStore(root=settings.temp_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        settings.ensure_directories()

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router)
    app.mount(
        TEMP_URL_PREFIX,
        StaticFiles(directory=settings.temp_dir, check_dir=False),
        name=TEMP_ROUTE_NAME,
    )
    logger.debug("Serving temp images from %s at %s", settings.temp_dir, TEMP_URL_PREFIX)
    return app


app = create_app()
