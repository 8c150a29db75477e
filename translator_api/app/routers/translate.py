import logging

from fastapi import APIRouter, Depends, Request

from ..errors import BACKEND_EXCEPTION_MESSAGE, MissingParameter
from ..resolver import TranslationResolver, fallback_transform
from ..schemas import FallbackReason, TranslateRequest, TranslateResponse, TranslationOutcome

logger = logging.getLogger("Translator.Router")

router = APIRouter(tags=["translate"])


def get_resolver(request: Request) -> TranslationResolver:
    return request.app.state.resolver


async def handle_translate(payload: TranslateRequest | None, resolver: TranslationResolver) -> TranslationOutcome:
    """Validate the request and resolve it; exceptions become a degraded outcome."""
    if payload is None or not payload.text or not payload.target_lang:
        raise MissingParameter()

    # Any truthy JSON value is relayed as text.
    text, target_lang = str(payload.text), str(payload.target_lang)
    try:
        return await resolver.resolve(text, target_lang)
    except Exception:
        logger.exception("Error backend /translate")
        return TranslationOutcome.fallback(
            fallback_transform(text, target_lang),
            FallbackReason.UNHANDLED_EXCEPTION,
            error=BACKEND_EXCEPTION_MESSAGE,
        )


@router.post("/translate", response_model=TranslateResponse, response_model_exclude_none=True)
async def translate(
    payload: TranslateRequest | None = None,
    resolver: TranslationResolver = Depends(get_resolver),
) -> TranslateResponse:
    outcome = await handle_translate(payload, resolver)
    return outcome.to_response()
