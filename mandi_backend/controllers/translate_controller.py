"""
/**
 * @file mandi_backend/controllers/translate_controller.py
 * @description Translation controller (proxy to the upstream provider).
 */
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mandi_backend.config import Settings
from mandi_backend.controllers.deps import get_settings, get_translation_client
from mandi_backend.models import ErrorResponse, TranslateRequest, TranslationResult
from mandi_backend.services import MyMemoryClient, translate as translate_text


TRANSLATION_FAILED = "Translation failed"

router = APIRouter()


@router.post(
    "/api/translate",
    response_model=TranslationResult,
    responses={500: {"model": ErrorResponse}},
)
def translate(
    req: TranslateRequest,
    client: MyMemoryClient = Depends(get_translation_client),
    settings: Settings = Depends(get_settings),
):
    outcome = translate_text(req.text, req.targetLang, client=client, settings=settings)
    if outcome.ok:
        return outcome.result
    # cause is already logged by the service, never forwarded
    return JSONResponse(status_code=500, content={"error": TRANSLATION_FAILED})
