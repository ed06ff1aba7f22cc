"""Pipeline de formateo: minify -> parse -> render -> (color).

This module holds the only piece with real logic; I/O lives in
`core.services.modes` and printing in the CLI layer. Keeping it pure makes it
trivially reusable from tests or other entry-points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from mjson.adapters.colorizer import colorize as colorize_literals
from mjson.adapters.json_parser import StdlibJsonCodec
from mjson.adapters.minifier import minify
from mjson.core.interfaces import JsonCodec, Minifier


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (debug traces, warnings)."""

    debug: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None

    def trace(self, message: str) -> None:
        if self.debug is not None:
            self.debug(message)

    def warn(self, message: str) -> None:
        if self.warning is not None:
            self.warning(message)


_DEFAULT_CODEC = StdlibJsonCodec()


def process(
    raw_text: str,
    indent: str,
    colorize: bool,
    *,
    style: str = "green",
    hooks: PipelineHooks | None = None,
    minifier: Minifier = minify,
    codec: JsonCodec = _DEFAULT_CODEC,
) -> str:
    """Formatea `raw_text`.

    Raises:
        JsonSyntaxError: si el texto minificado no es JSON válido.
    """

    hooks = hooks or PipelineHooks()

    compact = minifier(raw_text)
    value = codec.parse(compact)
    output = codec.render(value, indent)

    if colorize:
        hooks.trace("color on")
        output = colorize_literals(output, style)
    else:
        hooks.trace("color off")
    return output
