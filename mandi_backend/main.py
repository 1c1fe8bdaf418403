"""
/**
 * @file mandi_backend/main.py
 * @description FastAPI application entry (MVC: wires routers and middleware only).
 */
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mandi_backend.config import Settings, load_settings
from mandi_backend.controllers import health_router, prices_router, translate_router
from mandi_backend.services import MyMemoryClient


logger = logging.getLogger("mandi_backend.main")


def create_app(settings: Optional[Settings] = None, client: Optional[MyMemoryClient] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    app = FastAPI(title="Multilingual Mandi Server")
    app.state.settings = settings
    app.state.translation_client = client or MyMemoryClient(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(translate_router)
    app.include_router(prices_router)

    logger.debug(f"App created, upstream={settings.translate_endpoint} timeout={settings.upstream_timeout}")
    return app
