"""
Pydantic v2 schemas for macro definitions, request validation and response
serialisation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Shared
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class OKResponse(BaseModel):
    ok: bool = True
    message: str = "success"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Macros
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MacroDefinition(BaseModel):
    """
    A named snippet substituted wherever ``#name`` appears in a text.

    Any extra fields supplied by the caller are kept on the model and
    returned unchanged; nothing in the macro subsystem reads them.
    """

    name: str
    code: str

    model_config = ConfigDict(extra="allow", frozen=True)


# -----------------------------------------------------------------------------

class MacroCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    code: str = Field(default="", max_length=1_000_000)

    model_config = ConfigDict(extra="allow")


# -----------------------------------------------------------------------------

class TextRequest(BaseModel):
    text: str = Field(default="", max_length=10_000_000)  # 10 MB


# -----------------------------------------------------------------------------

class DetectResponse(BaseModel):
    has_macros: bool
    tokens: list[str]


# -----------------------------------------------------------------------------

class ResolveResponse(BaseModel):
    text: str
