"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers API routes.  An ASGI server such as uvicorn can point to
``session_analytics.main:app`` to serve the application.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .utils.logger import setup_logging
from .controllers.analytics_controller import router as analytics_router
from .utils.error_handler import AnalyticsError, http_exception_handler


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging()

    app = FastAPI(title="Demo Session Analytics", version="0.1.0")

    # Enable CORS for all origins; adjust in production as needed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AnalyticsError, http_exception_handler)

    app.include_router(analytics_router)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        logger.debug("Health check invoked")
        return {"status": "ok"}

    return app


# Create an application instance for ASGI servers
app = create_app()
