"""
/**
 * @file mandi_backend/controllers/health_controller.py
 * @description Health check controller.
 */
"""

from fastapi import APIRouter, Depends

from mandi_backend.config import Settings
from mandi_backend.controllers.deps import get_settings


router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": "mandi_backend",
        "upstream": {
            "endpoint": settings.translate_endpoint,
            "engine": settings.engine_label,
            "timeout": settings.upstream_timeout,
        },
    }
