"""
/**
 * @file mandi_backend/models/translate_request_model.py
 * @description Translation request/response models (Pydantic).
 */
"""

from __future__ import annotations

from pydantic import BaseModel


class TranslateRequest(BaseModel):
    text: str
    targetLang: str


class TranslationResult(BaseModel):
    translatedText: str
    source: str


class ErrorResponse(BaseModel):
    error: str
