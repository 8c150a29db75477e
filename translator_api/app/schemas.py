from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    text: Any = None
    target_lang: Any = Field(default=None, alias="targetLang")

    model_config = {"populate_by_name": True}


class TranslateResponse(BaseModel):
    translated: str
    error: str | None = None


class FallbackReason(str, Enum):
    NO_CREDENTIAL = "no_credential"
    PROVIDER_ERROR = "provider_error"
    EMPTY_TRANSLATION = "empty_translation"
    UNHANDLED_EXCEPTION = "unhandled_exception"


class TranslationOutcome(BaseModel):
    """Result of resolving one translation; `degraded` marks a fallback result."""

    translated: str
    degraded: bool = False
    reason: FallbackReason | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def success(cls, translated: str) -> "TranslationOutcome":
        return cls(translated=translated)

    @classmethod
    def fallback(
        cls,
        translated: str,
        reason: FallbackReason,
        error: str | None = None,
    ) -> "TranslationOutcome":
        return cls(translated=translated, degraded=True, reason=reason, error=error)

    def to_response(self) -> TranslateResponse:
        return TranslateResponse(translated=self.translated, error=self.error)
