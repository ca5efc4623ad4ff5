"""
Request / response logging middleware and loguru sink setup.
"""

import sys
import time
from fastapi import Request
from loguru import logger

from scripture_ai.config import settings


def setup_logging():
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper())


async def logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    elapsed = round((time.perf_counter() - start) * 1000, 2)
    logger.info(f"← {request.method} {request.url.path} [{response.status_code}] {elapsed}ms")

    return response
