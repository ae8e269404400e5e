# app/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from ..config import settings
from .api.routers import availability, health, quotes


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Brightpane - Window Cleaning Quotes")

    # Routers
    app.include_router(health.router)
    app.include_router(quotes.router)
    app.include_router(availability.router)

    return app
