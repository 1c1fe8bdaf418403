"""
/**
 * @file mandi_backend/services/translation_service.py
 * @description Translation proxy service (en -> target via MyMemory).
 */
"""

from __future__ import annotations

import logging
from typing import Optional

from mandi_backend.config import Settings
from mandi_backend.models.translate_request_model import TranslationResult
from mandi_backend.models.upstream_result_model import FailureCause, TranslationOutcome, UpstreamError
from mandi_backend.services.mymemory_client_service import MyMemoryClient


logger = logging.getLogger("translation_service")


def translate(
    text: str,
    target_lang: str,
    client: Optional[MyMemoryClient] = None,
    settings: Optional[Settings] = None,
) -> TranslationOutcome:
    # text and target_lang go to the provider verbatim, it decides what is acceptable
    c = client or MyMemoryClient(settings=settings)
    label = (settings or c.settings).engine_label
    try:
        translated = c.translate(text, target_lang)
    except UpstreamError as e:
        logger.error(
            f"Translation failed: cause={e.cause.value} status={e.status_code} "
            f"langpair={c.langpair(target_lang)} detail={e.detail}"
        )
        return TranslationOutcome.failure(e)
    except Exception as e:
        logger.exception(f"Translation failed: cause={FailureCause.UNEXPECTED.value} langpair={c.langpair(target_lang)}")
        return TranslationOutcome.failure(UpstreamError(FailureCause.UNEXPECTED, f"{type(e).__name__}: {e}"))

    logger.debug(f"Translated {len(text)} chars to {target_lang}")
    return TranslationOutcome.success(TranslationResult(translatedText=translated, source=label))
