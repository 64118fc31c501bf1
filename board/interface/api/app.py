"""FastAPI application."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from board.config import Settings
from board.interface.api.routes import comments, health
from board.interface.error import request_validation_handler
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Board Comments API",
        description="Threaded, password-protected anonymous comments for board posts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    # Malformed bodies are client errors, not 422s
    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance


# Note: Logfire must be configured before this module is imported
app = create_app()
