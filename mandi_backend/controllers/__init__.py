"""
/**
 * @file mandi_backend/controllers/__init__.py
 * @description Controller (router) exports.
 */
"""

from .health_controller import router as health_router
from .prices_controller import router as prices_router
from .translate_controller import router as translate_router

__all__ = [
    "health_router",
    "prices_router",
    "translate_router",
]
