"""
Global exception handler middleware.

Translation provider failures become a 502 carrying the provider message;
anything else unhandled is logged with its traceback and returned as a 500.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from scripture_ai.services.translation_service import TranslationError


async def global_exception_handler(request: Request, call_next):
    try:
        return await call_next(request)
    except TranslationError as exc:
        logger.error(f"Translation failed on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=502,
            content={"detail": str(exc), "type": type(exc).__name__},
        )
    except Exception as exc:
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "type": type(exc).__name__,
            },
        )
