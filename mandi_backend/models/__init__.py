"""
/**
 * @file mandi_backend/models/__init__.py
 * @description Data model exports.
 */
"""

from .price_record_model import PriceRecord
from .translate_request_model import ErrorResponse, TranslateRequest, TranslationResult
from .upstream_result_model import FailureCause, TranslationOutcome, UpstreamError

__all__ = [
    "ErrorResponse",
    "FailureCause",
    "PriceRecord",
    "TranslateRequest",
    "TranslationOutcome",
    "TranslationResult",
    "UpstreamError",
]
