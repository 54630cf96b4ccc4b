"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from joinery.api.errors import register_exception_handlers
from joinery.api.middleware import RequestTimingMiddleware
from joinery.api.routes import router
from joinery.config import Settings
from joinery.logging_config import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    app = FastAPI(
        title="Joinery Window Designer",
        description="Catalog-driven window and door drawing engine",
        version="0.1.0",
    )

    # CORS for the browser front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
