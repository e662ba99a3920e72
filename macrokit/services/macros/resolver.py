"""
Resolver
========
Stateless detection and substitution of ``#name`` references.

Works on a plain sequence of definitions (usually ``registry.to_array()``)
and never touches a registry itself.

Substitution is a single pass over the input text. A macro body is inserted
verbatim and is not scanned again, so a body that contains another
reference token comes out literally:

    a = #b, b = 2:   "#a"  ->  "#b"
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from macrokit.schemas import MacroDefinition

from .pattern import build_pattern
from .registry import MacroInput, as_definition

logger = logging.getLogger(__name__)


def has_macros(names: Iterable[str], text: str, *, word_boundary: bool = False) -> bool:
    """True if *text* holds at least one ``#name`` reference to *names*."""
    return build_pattern(names, word_boundary=word_boundary).search(text) is not None


def find_macros(names: Iterable[str], text: str, *, word_boundary: bool = False) -> list[str]:
    """Distinct reference tokens (``#`` included) in first-seen order."""
    pattern = build_pattern(names, word_boundary=word_boundary)
    return list(dict.fromkeys(m.group(0) for m in pattern.finditer(text)))


def resolve_macros(
    definitions: Sequence[MacroInput],
    text: str,
    *,
    word_boundary: bool = False,
) -> str:
    """
    Replace every reference in *text* with the referenced macro's code.

    *definitions* may mix MacroDefinition objects and plain mappings.
    Where it holds the same name twice the first one wins.
    References without a matching definition are left untouched.
    """
    if not definitions:
        return text

    by_name: dict[str, MacroDefinition] = {}
    for definition in definitions:
        definition = as_definition(definition)
        by_name.setdefault(definition.name, definition)

    pattern = build_pattern(by_name, word_boundary=word_boundary)
    resolved: set[str] = set()

    def _substitute(match) -> str:
        definition = by_name.get(match.group(1))
        if definition is None:
            return match.group(0)
        resolved.add(match.group(0))
        return definition.code

    result = pattern.sub(_substitute, text)
    if resolved:
        logger.debug("Resolved %d distinct macro reference(s)", len(resolved))
    return result
