"""Minificador de JSON con comentarios (JSONC).

Por qué `JSON_minify`:
- Es el port Python de JSON.minify: quita `//` y `/* */` fuera de strings y
  los espacios entre tokens.
- No valida. Texto inválido sale igual de inválido y el parser se queja.
"""

from __future__ import annotations

from json_minify import json_minify


def minify(text: str) -> str:
    """Devuelve `text` sin comentarios ni espacios insignificantes."""

    return json_minify(text, strip_space=True)
