from typing import Any, Protocol

import httpx

from .config import Settings
from .errors import EmptyTranslation, NoCredential, ProviderError

SYSTEM_PROMPT = (
    'You are a translation engine. Translate ALL user text to the language with ISO code "{target_lang}". '
    "Respond ONLY with the translated text, no explanations."
)


class TranslationProvider(Protocol):
    async def translate(self, text: str, target_lang: str) -> str: ...


def build_messages(text: str, target_lang: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT.format(target_lang=target_lang)},
        {"role": "user", "content": text},
    ]


def extract_content(data: Any) -> str:
    """Return the trimmed content of the first completion choice, or an empty string."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        return ""
    return content.strip()


class OpenAIChatProvider:
    def __init__(self, settings: Settings) -> None:
        if not settings.openai_api_key:
            raise NoCredential("OPENAI_API_KEY is not configured.")
        self.settings = settings
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.openai_api_key}",
        }

    async def translate(self, text: str, target_lang: str) -> str:
        payload = {
            "model": self.settings.openai_model,
            "messages": build_messages(text, target_lang),
            "temperature": 0,
        }

        async with httpx.AsyncClient(timeout=self.settings.provider_timeout_seconds) as client:
            response = await client.post(self.settings.openai_api_url, json=payload, headers=self.headers)

        # A body that is not JSON raises ValueError here, whatever the status.
        data = response.json()
        if not response.is_success:
            raise ProviderError(response.status_code, data)

        translated = extract_content(data)
        if not translated:
            raise EmptyTranslation()
        return translated
