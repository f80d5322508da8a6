"""Showcase API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShowcaseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and the shared outbound httpx client created in lifespan, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One httpx.AsyncClient for every provider: connection pooling across requests
"""

import logging
import os
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from showcase import __version__
from showcase.api.error_handlers import register_error_handlers
from showcase.api.routes import (
    admin_account,
    admin_marketplace,
    admin_products,
    blog,
    boutique,
    contact,
    functions,
    health,
    marketplace,
)
from showcase.config import get_settings
from showcase.infrastructure.database import close_db, init_db
from showcase.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.http = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    logger.info("Showcase API started")
    yield
    logger.info("Showcase API shutting down")
    await app.state.http.aclose()
    await close_db()


app = FastAPI(title="Showcase API", version=__version__, lifespan=lifespan)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(blog.router)
app.include_router(boutique.router)
app.include_router(marketplace.router)
app.include_router(contact.router)
app.include_router(admin_account.router)
app.include_router(admin_products.router)
app.include_router(admin_marketplace.router)
app.include_router(functions.router)

register_error_handlers(app)

# Static files — serves the front-end build in production
# Mounted AFTER API routes so /api/v1/* and /functions/* take precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
