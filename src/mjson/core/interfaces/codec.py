"""Contratos del minificador y del parser.

Por qué Protocol:
- Minificador y parser son capacidades externas al pipeline: se pueden
  sustituir (p.ej. en tests) sin herencia rígida.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Minifier(Protocol):
    """Elimina comentarios y espacios no significativos. No valida."""

    def __call__(self, text: str) -> str:
        ...


@runtime_checkable
class JsonCodec(Protocol):
    """Parse con diagnóstico rico + render con indent.

    Reglas de diseño:
    - `parse` lanza `JsonSyntaxError` (nunca devuelve un valor parcial).
    - `render` es una función pura del valor y del indent.
    """

    def parse(self, text: str) -> Any:
        ...

    def render(self, value: Any, indent: str) -> str:
        ...
