import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_PORT = 3001


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings(BaseModel):
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_MODEL
    openai_api_url: str = DEFAULT_API_URL
    provider_timeout_seconds: float | None = Field(default=None, gt=0)
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @property
    def has_credential(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings once from the process environment (and `.env`, if present)."""
        load_dotenv()

        port = _env("PORT")
        timeout = _env("PROVIDER_TIMEOUT_SECONDS")
        origins = _env("CORS_ORIGINS")
        try:
            return cls(
                openai_api_key=_env("OPENAI_API_KEY"),
                openai_model=_env("OPENAI_MODEL") or DEFAULT_MODEL,
                openai_api_url=_env("OPENAI_API_URL") or DEFAULT_API_URL,
                provider_timeout_seconds=float(timeout) if timeout else None,
                host=_env("HOST") or "0.0.0.0",
                port=int(port) if port else DEFAULT_PORT,
                cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else ["*"],
                log_level=(_env("LOG_LEVEL") or "INFO").upper(),
            )
        except ValueError as exc:
            raise ValueError(f"Invalid translator configuration: {exc}") from exc
