import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR, HTTP_503_SERVICE_UNAVAILABLE

from flashdeck.core.config import get_settings
from flashdeck.core.deps import build_study_session, get_storage
from flashdeck.core.exceptions import CardImportError, UpstreamServiceError
from flashdeck.core.logging import setup_logging
from flashdeck.routers import chat, study, system
from flashdeck.services.chat_service import ChatService, DefinitionService, build_openai_client

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API flashcards : session d'étude (vues, import, étoiles) + proxy chat / définitions",
    )

    # Middleware CORS
    origins = [o.strip() for o in (settings.CORS_ORIGINS or "").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],  # fallback si mal configuré
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Services (un seul exemplaire par application)
    client = build_openai_client(settings)
    app.state.chat_service = ChatService(
        client=client,
        model=settings.OPENAI_MODEL,
        max_tokens=settings.CHAT_MAX_TOKENS,
        temperature=settings.CHAT_TEMPERATURE,
    )
    app.state.definition_service = DefinitionService(
        client=client,
        model=settings.OPENAI_MODEL,
        max_tokens=settings.DEFINITION_MAX_TOKENS,
        temperature=settings.DEFINITION_TEMPERATURE,
    )
    app.state.study_session = build_study_session(get_storage(), default_layout=settings.DEFAULT_LAYOUT)

    # Erreurs métier -> JSON
    @app.exception_handler(CardImportError)
    async def card_import_error(request: Request, exc: CardImportError):
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    @app.exception_handler(UpstreamServiceError)
    async def upstream_error(request: Request, exc: UpstreamServiceError):
        status = HTTP_500_INTERNAL_SERVER_ERROR if exc.configured else HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(status_code=status, content=exc.to_payload())

    # Routers
    app.include_router(system.router)
    app.include_router(study.router)
    app.include_router(chat.router)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    logger.info(
        "%s %s (%s) prêt, OpenAI: %s",
        settings.APP_NAME,
        settings.APP_VERSION,
        settings.APP_ENV,
        "configuré" if client is not None else "non configuré",
    )
    return app


app = create_app()
