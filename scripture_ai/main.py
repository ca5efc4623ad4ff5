"""
Scripture AI — FastAPI entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from loguru import logger

from scripture_ai.config import settings
from scripture_ai.services.knowledge_base import CONCEPT_CARDS, KNOWLEDGE_CARDS
from scripture_ai.services.translation_service import TeluguExplainer
from scripture_ai.middleware.error_handler import global_exception_handler
from scripture_ai.middleware.logging_middleware import logging_middleware, setup_logging

# ── Routes ───────────────────────────────────────────────
from scripture_ai.routes.assistant import router as assistant_router
from scripture_ai.routes.analysis import router as analysis_router
from scripture_ai.routes.knowledge import router as knowledge_router


# ── Lifespan ─────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Knowledge base loaded: {len(KNOWLEDGE_CARDS)} verse cards, {len(CONCEPT_CARDS)} concepts")

    # Providers are plugged in by setting app.state.translators before startup
    translators = getattr(app.state, "translators", [])
    app.state.telugu_explainer = TeluguExplainer(translators)
    if not translators:
        logger.warning("No Telugu translators configured; /api/assistant/telugu will return 502")
    yield
    logger.info("Shutting down")


# ── App ──────────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Offline scripture assistant: reference parsing, concept matching, sentiment and intents",
    lifespan=lifespan,
)

# ── Rate Limiter ─────────────────────────────────────────
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# ── CORS ─────────────────────────────────────────────────
origins = settings.CORS_ORIGINS.split(",") if settings.CORS_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Custom Middleware ────────────────────────────────────
app.middleware("http")(global_exception_handler)
app.middleware("http")(logging_middleware)

# ── Register Routers ────────────────────────────────────
app.include_router(assistant_router)
app.include_router(analysis_router)
app.include_router(knowledge_router)


# ── Health Check ─────────────────────────────────────────
@app.get("/api/health", tags=["health"])
async def health():
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "knowledge_cards": len(KNOWLEDGE_CARDS),
        "concept_cards": len(CONCEPT_CARDS),
    }


def run():
    import uvicorn
    uvicorn.run(
        "scripture_ai.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )


# ── Run ──────────────────────────────────────────────────
if __name__ == "__main__":
    run()
