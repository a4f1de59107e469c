#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Captive portal Web UI — standalone FastAPI app.

Run:
    uvicorn portalui.app:app --host 127.0.0.1 --port 8000 --reload
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from authserver.core.config import get_settings
from authserver.core.database import create_all_tables, init_db
from portalui.pages import admin, auth, errors, portal


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings = get_settings()
    init_db()
    if settings.is_testing or settings.debug:
        await create_all_tables()
    yield


# -----------------------------------------------------------------------------

def create_webui() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    app = FastAPI(
        title=f"{settings.app_name} Web UI",
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # ── Static content (stylesheets, node content) ────────────────────────────

    if os.path.isdir(settings.content_dir):
        app.mount("/content", StaticFiles(directory=settings.content_dir), name="content")

    # ── Page routers ──────────────────────────────────────────────────────────

    app.include_router(portal.router)
    app.include_router(admin.router)
    app.include_router(auth.router)

    # ── Error pages ───────────────────────────────────────────────────────────

    app.add_exception_handler(404, errors.not_found)
    app.add_exception_handler(500, errors.server_error)

    return app


# -----------------------------------------------------------------------------

app = create_webui()


# -----------------------------------------------------------------------------
