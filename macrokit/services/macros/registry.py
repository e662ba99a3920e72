"""
MacroRegistry — keyed store of macro definitions.

Definitions are keyed by name without the ``#`` reference marker:

    registry = MacroRegistry()
    registry.add({"name": "#greet", "code": "print('hi')"})
    registry.list()         # ["greet"]
    registry.get("greet")   # MacroDefinition(name="greet", code="print('hi')")

Adding a name that already exists replaces the stored definition.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

from macrokit.schemas import MacroDefinition

logger = logging.getLogger(__name__)


MARKER = "#"

MacroInput = Union[MacroDefinition, Mapping[str, Any]]
MacroPredicate = Callable[[MacroDefinition], Any]


def as_definition(definition: MacroInput) -> MacroDefinition:
    """
    Coerce *definition* into a MacroDefinition with text ``name`` and ``code``.

    Nothing is validated: a missing or ``None`` field becomes ``""`` and any
    other non-text value is converted with ``str()``. The marker is kept.
    """
    if not isinstance(definition, MacroDefinition):
        definition = MacroDefinition.model_construct(**dict(definition))

    fields = {}
    for field in ("name", "code"):
        value = getattr(definition, field, None)
        if not isinstance(value, str):
            fields[field] = "" if value is None else str(value)
    if fields:
        definition = definition.model_copy(update=fields)
    return definition


class MacroRegistry:
    def __init__(self, definitions: Optional[Iterable[MacroInput]] = None) -> None:
        self._macros: dict[str, MacroDefinition] = {}
        if definitions is not None:
            self.add_many(definitions)

    # --------------------------------------------------------------------- add

    def add(self, definition: MacroInput) -> MacroRegistry:
        """
        Store *definition* under its name, stripping one leading ``#``.

        Plain mappings are stored without validation. Returns the registry
        so calls can be chained.
        """
        definition = as_definition(definition)

        name = definition.name
        if name.startswith(MARKER):
            name = name[len(MARKER):]
            definition = definition.model_copy(update={"name": name})

        if name in self._macros:
            logger.debug("Overwriting macro: %s", name)
        else:
            logger.debug("Registered macro: %s", name)
        self._macros[name] = definition
        return self

    def add_many(self, definitions: Iterable[MacroInput]) -> MacroRegistry:
        for definition in definitions:
            self.add(definition)
        return self

    # ------------------------------------------------------------------ lookup

    def get(self, name: str) -> Optional[MacroDefinition]:
        """Exact-name lookup. The name must already be stripped of ``#``."""
        return self._macros.get(name)

    def find(self, predicate: MacroPredicate) -> Optional[MacroDefinition]:
        """First definition, in enumeration order, accepted by *predicate*."""
        for definition in self._macros.values():
            if predicate(definition):
                return definition
        return None

    # ---------------------------------------------------------- introspection

    def list(self) -> list[str]:
        return [*self._macros.keys()]

    def to_array(self) -> list[MacroDefinition]:
        return [*self._macros.values()]

    def __len__(self) -> int:
        return len(self._macros)

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __iter__(self) -> Iterator[MacroDefinition]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"<MacroRegistry macros={len(self._macros)}>"
