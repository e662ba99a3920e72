#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Each test gets a fresh application (and with it a fresh, empty registry)
and an AsyncClient talking to it over ASGITransport.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from httpx import ASGITransport, AsyncClient

# ── Env vars must be set before importing app modules ────────────────────────
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL",   "DEBUG")

from macrokit.core.config import Settings
from macrokit.main import create_app
from macrokit.schemas import MacroDefinition


# ── Settings / app ───────────────────────────────────────────────────────────
@pytest.fixture
def settings() -> Settings:
    return Settings(environment="testing", log_level="DEBUG")


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


# ── HTTP client bound to the per-test app ────────────────────────────────────
@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


# ── Helper ───────────────────────────────────────────────────────────────────

def macro(name: str, code: str, **extra) -> MacroDefinition:
    return MacroDefinition(name=name, code=code, **extra)


# -----------------------------------------------------------------------------
