#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Macros router
=============
GET    /api/v1/macros            — list all macro definitions
GET    /api/v1/macros/names      — list macro names
GET    /api/v1/macros/{name}     — get one macro
POST   /api/v1/macros            — add (or overwrite) a macro
POST   /api/v1/macros/bulk       — add many macros in order
POST   /api/v1/macros/detect     — report macro references found in a text
POST   /api/v1/macros/resolve    — replace macro references in a text
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from macrokit.core.config import Settings
from macrokit.schemas import (
    DetectResponse,
    MacroCreate,
    MacroDefinition,
    OKResponse,
    ResolveResponse,
    TextRequest,
)
from macrokit.services.macros import MacroRegistry, find_macros, resolve_macros

# -----------------------------------------------------------------------------

router = APIRouter(prefix="/macros", tags=["macros"])


# ── Dependencies ──────────────────────────────────────────────────────────────

def get_registry(request: Request) -> MacroRegistry:
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# -----------------------------------------------------------------------------

@router.get("", response_model=list[MacroDefinition])
async def list_macros(registry: MacroRegistry = Depends(get_registry)):
    return registry.to_array()


# -----------------------------------------------------------------------------

@router.get("/names", response_model=list[str])
async def list_macro_names(registry: MacroRegistry = Depends(get_registry)):
    return registry.list()


# -----------------------------------------------------------------------------

@router.get("/{name}", response_model=MacroDefinition)
async def get_macro(name: str, registry: MacroRegistry = Depends(get_registry)):
    macro = registry.get(name)
    if macro is None:
        raise HTTPException(status_code=404, detail=f"Macro '{name}' not found")
    return macro


# -----------------------------------------------------------------------------

@router.post("", response_model=MacroDefinition, status_code=201)
async def add_macro(data: MacroCreate, registry: MacroRegistry = Depends(get_registry)):
    registry.add(MacroDefinition.model_validate(data.model_dump()))
    return registry.get(data.name.removeprefix("#"))


# -----------------------------------------------------------------------------

@router.post("/bulk", response_model=OKResponse)
async def add_macros(data: list[MacroCreate], registry: MacroRegistry = Depends(get_registry)):
    registry.add_many(MacroDefinition.model_validate(d.model_dump()) for d in data)
    return OKResponse(message=f"{len(data)} macro(s) added")


# -----------------------------------------------------------------------------

@router.post("/detect", response_model=DetectResponse)
async def detect_macros(
    data: TextRequest,
    registry: MacroRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
):
    tokens = find_macros(registry.list(), data.text, word_boundary=settings.macro_word_boundary)
    return DetectResponse(has_macros=bool(tokens), tokens=tokens)


# -----------------------------------------------------------------------------

@router.post("/resolve", response_model=ResolveResponse)
async def resolve_text(
    data: TextRequest,
    registry: MacroRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
):
    text = resolve_macros(registry.to_array(), data.text, word_boundary=settings.macro_word_boundary)
    return ResolveResponse(text=text)
