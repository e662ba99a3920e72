#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
macrokit — FastAPI Application
==============================
Entry point.  Start with an ASGI server, e.g.:
    uvicorn macrokit.main:app --reload
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from macrokit.core.config import Settings, get_settings
from macrokit.routes import macros
from macrokit.services.macros import MacroRegistry, load_macros_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.getLogger("macrokit").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Seed the registry from the configured macros file, if any."""
        if settings.macros_file is not None:
            try:
                app.state.registry.add_many(load_macros_file(settings.macros_file))
            except Exception:
                logger.exception("Could not load macros from %s", settings.macros_file)
                raise
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Registry and resolver for #name text macros",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings
    app.state.registry = MacroRegistry()

    # ── Routers ───────────────────────────────────────────────────────────
    API = "/api/v1"
    app.include_router(macros.router, prefix=API)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/api/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "ok", "macros": len(app.state.registry)}

    return app


# -----------------------------------------------------------------------------

app = create_app()
