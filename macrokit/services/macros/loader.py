"""
Macro file loader
-----------------
Reads macro definitions from JSON or TOML.

Accepted shapes (JSON shown, TOML equivalent works the same)::

    [{"name": "greet", "code": "print('hi')"}]          # list of objects
    {"greet": "print('hi')"}                            # name -> code
    {"greet": {"code": "print('hi')", "owner": "bot"}}  # name -> object

A TOML document may also keep its entries under a top-level ``macros`` table.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from macrokit.schemas import MacroDefinition

logger = logging.getLogger(__name__)


class MacroLoadError(ValueError):
    """Raised when a macro source cannot be read or does not hold macros."""


# -----------------------------------------------------------------------------

def load_macros_mapping(data: Any) -> list[MacroDefinition]:
    """Turn decoded JSON/TOML data into a list of MacroDefinition."""
    if isinstance(data, dict) and set(data) == {"macros"} and isinstance(data["macros"], (dict, list)):
        data = data["macros"]

    if isinstance(data, dict):
        entries = []
        for name, value in data.items():
            if isinstance(value, dict):
                entries.append({**value, "name": name})
            else:
                entries.append({"name": name, "code": value})
    elif isinstance(data, list):
        entries = data
    else:
        raise MacroLoadError(f"Expected a list or table of macros, got {type(data).__name__}")

    try:
        return [MacroDefinition.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        raise MacroLoadError(f"Invalid macro definition: {exc}") from exc


# -----------------------------------------------------------------------------

def load_macros_file(path: Path | str) -> list[MacroDefinition]:
    """Read *path* (``.json`` or ``.toml``) and return its macros."""
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix == ".toml":
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        else:
            raise MacroLoadError(f"{path}: unsupported macro file type '{suffix}'")
    except OSError as exc:
        raise MacroLoadError(f"{path}: {exc.strerror or exc}") from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise MacroLoadError(f"{path}: {exc}") from exc

    macros = load_macros_mapping(data)
    logger.info("Loaded %d macro(s) from %s", len(macros), path)
    return macros
