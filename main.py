# main.py
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from models import GENERIC_FAILURE, MISSING_MESSAGE, ChatReply, ChatRequest, ErrorReply
from provider import GeminiChatProvider, ProviderFailure
from settings import ConfigurationError, Settings, load_settings

logger = logging.getLogger(__name__)


def get_provider(request: Request) -> GeminiChatProvider:
    return request.app.state.provider


async def chat_amina(
    req: ChatRequest,
    provider: GeminiChatProvider = Depends(get_provider),
):
    if not req.has_message():
        raise HTTPException(status_code=400, detail=MISSING_MESSAGE)

    result = await provider.send(req.message)

    if isinstance(result, ProviderFailure):
        logger.error("Erro ao chamar a API do Gemini", exc_info=result.cause)
        raise HTTPException(status_code=500, detail=GENERIC_FAILURE)

    return ChatReply(reply=result.text)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorReply(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=ErrorReply(error=MISSING_MESSAGE).model_dump())


def create_app(settings: Settings, provider: Optional[GeminiChatProvider] = None) -> FastAPI:
    """Build the relay app around one shared, read-only provider."""
    app = FastAPI(title="Amina Chat Relay", version="1.0.0")
    app.state.provider = provider or GeminiChatProvider.from_settings(settings)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug("Recebida: %s %s", request.method, request.url.path)
        return await call_next(request)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.post(
        "/chatAmina",
        response_model=ChatReply,
        responses={400: {"model": ErrorReply}, 500: {"model": ErrorReply}},
    )(chat_amina)
    return app


def run() -> None:
    load_dotenv(override=True)
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
        logger.critical("--- ERRO FATAL --- %s", e)
        logger.critical("Verifique se o arquivo .env existe nesta pasta e contém GEMINI_API_KEY=SUA_CHAVE_AQUI")
        sys.exit(1)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app(settings)
    logger.info("Servidor da Amina rodando em http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
