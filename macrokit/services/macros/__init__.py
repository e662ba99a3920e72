"""
Macro subsystem — public API.
"""

from .registry import MacroRegistry
from .pattern import build_pattern
from .resolver import find_macros, has_macros, resolve_macros
from .loader import MacroLoadError, load_macros_file, load_macros_mapping

__all__ = [
    "MacroRegistry",
    "build_pattern",
    "has_macros",
    "find_macros",
    "resolve_macros",
    "MacroLoadError",
    "load_macros_file",
    "load_macros_mapping",
]
