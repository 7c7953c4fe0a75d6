import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .completion import CompletionClient
from .config import Settings, cors_origins_from_env
from .errors import InputValidationError, RelayError
from .knowledge_base import KnowledgeBase, load_knowledge_base
from .observability import configure_tracing
from .relay import CompletionBackend, Relay, utc_timestamp
from .schemas import ChatRequest, ChatResponse, ErrorResponse, HealthResponse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("vuesense")


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[CompletionBackend] = None,
    knowledge_base: Optional[KnowledgeBase] = None,
) -> FastAPI:
    """Build the relay application.

    Settings, the knowledge base and the completion backend are resolved when
    the app starts, not when it is built, so a missing OPENAI_API_KEY stops
    the server from starting while the module stays importable.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or Settings.from_env()
        kb = knowledge_base or load_knowledge_base(resolved.knowledge_base_dir)
        client = backend or CompletionClient(resolved)

        app.state.settings = resolved
        app.state.knowledge_base = kb
        app.state.relay = Relay(kb, client, resolved)

        tracing_active = configure_tracing()
        logger.info("Knowledge base: %s", "loaded" if kb.is_loaded else "using fallback")
        logger.info("OpenAI API key: configured")
        logger.info("Model: %s", resolved.model)
        logger.info("LangSmith tracing: %s", "enabled" if tracing_active else "disabled")
        yield

    app = FastAPI(title="VueSense AI Backend", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins if settings else cors_origins_from_env()),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        error = InputValidationError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/api/health", response_model=HealthResponse)
    async def health(request: Request):
        kb: KnowledgeBase = request.app.state.knowledge_base
        return HealthResponse(
            message="VueSense AI Backend is running",
            timestamp=utc_timestamp(),
            kb_loaded=kb.is_loaded,
            kb_size=kb.size_kb,
            volumes=len(kb.volumes),
        )

    @app.post(
        "/api/chat",
        response_model=ChatResponse,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            429: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def chat(body: ChatRequest, request: Request):
        relay: Relay = request.app.state.relay
        return await relay.handle(body)

    return app


app = create_app()
