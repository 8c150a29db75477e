from typing import Any

MISSING_PARAMETERS_MESSAGE = "Faltan parámetros text o targetLang"
BACKEND_EXCEPTION_MESSAGE = "Excepción en backend, se devuelve traducción falsa"


class TranslatorError(Exception):
    """Base class for translation relay errors."""


class MissingParameter(TranslatorError):
    def __init__(self, message: str = MISSING_PARAMETERS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class NoCredential(TranslatorError):
    """No provider credential is configured; the relay runs in fallback mode."""


class ProviderError(TranslatorError):
    def __init__(self, status_code: int, payload: Any = None) -> None:
        super().__init__(f"Provider returned HTTP {status_code}.")
        self.status_code = status_code
        self.payload = payload


class EmptyTranslation(TranslatorError):
    def __init__(self, message: str = "Provider returned no translated text.") -> None:
        super().__init__(message)
