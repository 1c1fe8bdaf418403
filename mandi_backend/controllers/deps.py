"""
/**
 * @file mandi_backend/controllers/deps.py
 * @description FastAPI dependencies: settings and upstream client held on app.state.
 */
"""

from fastapi import Request

from mandi_backend.config import Settings
from mandi_backend.services import MyMemoryClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_translation_client(request: Request) -> MyMemoryClient:
    return request.app.state.translation_client
