"""Coloreado de literales string.

Es un post-proceso textual sobre la salida ya renderizada: no distingue claves
de valores, solo envuelve cada `"..."` en la secuencia ANSI del estilo.
"""

from __future__ import annotations

import re

from rich.color import ColorSystem
from rich.style import Style

# Literal JSON entre comillas, respetando escapes (\" no cierra el string).
STRING_LITERAL = re.compile(r'"(?:[^"\\\n]|\\.)*"')

ESCAPE = "\x1b"


def colorize(text: str, style: str | Style = "green") -> str:
    """Envuelve cada literal string de `text` en códigos de color ANSI."""

    rich_style = Style.parse(style) if isinstance(style, str) else style
    return STRING_LITERAL.sub(
        lambda match: rich_style.render(match.group(0), color_system=ColorSystem.STANDARD),
        text,
    )
