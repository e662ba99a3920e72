"""
Reference-token pattern
=======================
Builds one compiled regex recognising ``#name`` for every known macro name.

  * Names are literal: regex metacharacters in a name are escaped.
  * Longest name first, so with ``foo`` and ``foobar`` both known,
    ``#foobar`` is a single ``foobar`` reference.
  * No trailing boundary unless ``word_boundary=True``: with only ``foo``
    known, ``#foox`` matches ``#foo`` and leaves ``x`` behind.
  * Empty names are dropped; no names at all gives a pattern that never
    matches.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from .registry import MARKER

_NEVER = re.compile(r"(?!)")


def build_pattern(names: Iterable[str], *, word_boundary: bool = False) -> re.Pattern[str]:
    """Return the alternation pattern for *names*, group 1 being the bare name."""
    unique = tuple(sorted({n for n in names if isinstance(n, str) and n}, key=lambda n: (-len(n), n)))
    if not unique:
        return _NEVER
    return _compile(unique, word_boundary)


@lru_cache(maxsize=256)
def _compile(names: tuple[str, ...], word_boundary: bool) -> re.Pattern[str]:
    alternation = "|".join(re.escape(n) for n in names)
    tail = r"(?!\w)" if word_boundary else ""
    return re.compile(f"{re.escape(MARKER)}({alternation}){tail}")
