"""
/**
 * @file mandi_backend/services/mymemory_client_service.py
 * @description MyMemory public translation API wrapper.
 */
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from mandi_backend.config import Settings
from mandi_backend.models.upstream_result_model import FailureCause, UpstreamError


logger = logging.getLogger("mymemory_client")


class MyMemoryClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        # None: module-level requests.get, a fresh connection per call
        self._session = session

    @property
    def endpoint(self) -> str:
        return self.settings.translate_endpoint

    def langpair(self, target_lang: str) -> str:
        return f"{self.settings.source_lang}|{target_lang}"

    def _get(self, params: Dict[str, str]) -> requests.Response:
        http = self._session or requests
        try:
            return http.get(self.endpoint, params=params, timeout=self.settings.upstream_timeout)
        except requests.Timeout as e:
            raise UpstreamError(FailureCause.TIMEOUT, str(e)) from e
        except requests.RequestException as e:
            raise UpstreamError(FailureCause.NETWORK, str(e)) from e
        except UnicodeError as e:
            # e.g. lone surrogates in q cannot be url-encoded
            raise UpstreamError(FailureCause.INVALID_REQUEST, str(e)) from e

    def _extract_translated_text(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise UpstreamError(FailureCause.MALFORMED_PAYLOAD, f"expected a JSON object, got {type(data).__name__}")

        # MyMemory answers HTTP 200 with its own status for quota and langpair errors
        status = data.get("responseStatus")
        if status is not None and str(status) != "200":
            details = data.get("responseDetails") or ""
            raise UpstreamError(FailureCause.PROVIDER_ERROR, f"responseStatus={status} {details}".strip())

        response_data = data.get("responseData")
        if not isinstance(response_data, dict):
            raise UpstreamError(FailureCause.MALFORMED_PAYLOAD, "missing responseData")
        translated = response_data.get("translatedText")
        if not isinstance(translated, str):
            raise UpstreamError(FailureCause.MALFORMED_PAYLOAD, "missing responseData.translatedText")
        return translated

    def translate(self, text: str, target_lang: str) -> str:
        """
        One GET per call: q=<text>&langpair=<source>|<target>.
        Returns responseData.translatedText or raises UpstreamError.
        """
        params = {"q": text, "langpair": self.langpair(target_lang)}
        response = self._get(params)

        if not 200 <= response.status_code < 300:
            raise UpstreamError(
                FailureCause.HTTP_STATUS,
                (response.text or "")[:200],
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(FailureCause.MALFORMED_PAYLOAD, f"invalid JSON: {e}", status_code=response.status_code) from e

        return self._extract_translated_text(data)
