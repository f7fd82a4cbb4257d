"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger


class AnalyticsError(Exception):
    """Exception raised when an analytics snapshot cannot be computed."""

    pass


async def http_exception_handler(request: Request, exc: AnalyticsError) -> JSONResponse:
    """Convert an AnalyticsError into an HTTP 500 response."""
    logger.error("AnalyticsError occurred: {}", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
    )
