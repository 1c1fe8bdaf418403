"""
/**
 * @file mandi_backend/models/upstream_result_model.py
 * @description Outcome of an upstream translation call: success or categorized failure.
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mandi_backend.models.translate_request_model import TranslationResult


class FailureCause(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_PAYLOAD = "malformed_payload"
    PROVIDER_ERROR = "provider_error"
    INVALID_REQUEST = "invalid_request"
    UNEXPECTED = "unexpected"


class UpstreamError(Exception):
    """Any failure of the outbound translation call."""

    def __init__(self, cause: FailureCause, detail: str = "", status_code: Optional[int] = None):
        super().__init__(f"{cause.value}: {detail}" if detail else cause.value)
        self.cause = cause
        self.detail = detail
        self.status_code = status_code


@dataclass(frozen=True)
class TranslationOutcome:
    result: Optional[TranslationResult] = None
    error: Optional[UpstreamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @classmethod
    def success(cls, result: TranslationResult) -> "TranslationOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: UpstreamError) -> "TranslationOutcome":
        return cls(error=error)
