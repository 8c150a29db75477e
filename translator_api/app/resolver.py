import logging

from .config import Settings
from .errors import EmptyTranslation, ProviderError
from .provider import OpenAIChatProvider, TranslationProvider
from .schemas import FallbackReason, TranslationOutcome

logger = logging.getLogger("Translator.Resolver")

FALLBACK_MARKERS = {
    "en": "[EN] ",
    "fr": "[FR] ",
    "de": "[DE] ",
}


def fallback_transform(text: str, target_lang: str) -> str:
    marker = FALLBACK_MARKERS.get(target_lang)
    if marker is None:
        return text
    return marker + text


class TranslationResolver:
    """
    Resolves a translation through the configured provider, substituting
    `fallback_transform` when the provider is unavailable, rejects the
    request or returns nothing usable.

    Transport errors are not handled here; they reach the caller.
    """

    def __init__(self, settings: Settings, provider: TranslationProvider | None = None) -> None:
        self.settings = settings
        if provider is None and settings.has_credential:
            provider = OpenAIChatProvider(settings)
        self.provider = provider

    async def resolve(self, text: str, target_lang: str) -> TranslationOutcome:
        if not self.settings.has_credential or self.provider is None:
            logger.warning("No OPENAI_API_KEY configured, using fallback translation")
            return TranslationOutcome.fallback(
                fallback_transform(text, target_lang),
                FallbackReason.NO_CREDENTIAL,
            )

        try:
            translated = await self.provider.translate(text, target_lang)
            translated = translated.strip() if isinstance(translated, str) else ""
            if not translated:
                raise EmptyTranslation()
        except ProviderError as exc:
            logger.error(f"Provider error: {exc.status_code} {exc.payload}")
            return TranslationOutcome.fallback(
                fallback_transform(text, target_lang),
                FallbackReason.PROVIDER_ERROR,
            )
        except EmptyTranslation:
            logger.warning("Provider returned an empty translation, using fallback")
            return TranslationOutcome.fallback(
                fallback_transform(text, target_lang),
                FallbackReason.EMPTY_TRANSLATION,
            )

        return TranslationOutcome.success(translated)
