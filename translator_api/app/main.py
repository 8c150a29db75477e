import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings
from .errors import MissingParameter
from .resolver import TranslationResolver
from .routers import translate

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LIVENESS_MESSAGE = "API de traducción Mich360 (OpenAI + fallback) está funcionando ✅"

logger = logging.getLogger("Translator.Main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.resolver = TranslationResolver(app.state.settings)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    app = FastAPI(
        title="Translator API",
        version="0.1.0",
        description="Translation relay with a chat-completion provider and a local fallback",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MissingParameter)
    async def missing_parameter_handler(_: Request, exc: MissingParameter) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    def landing_page() -> str:
        return LIVENESS_MESSAGE

    app.include_router(translate.router)
    return app


def serve() -> None:
    app = create_app()
    settings: Settings = app.state.settings
    logger.info(f"Translation server ready on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
