"""Parser/validador y formateador JSON (stdlib `json`).

Por qué un único parser:
- `json.JSONDecodeError` ya trae línea, columna y posición, así que no hace
  falta un segundo parser "de diagnóstico": el error siempre es rico.
- Es estricto como JSON.parse: rechaza `NaN`/`Infinity`.
- Todo fallo de parseo sale como `JsonSyntaxError` (también enteros enormes
  o anidamiento excesivo), nunca como otra excepción.
"""

from __future__ import annotations

import json
import math
import re
import sys
from contextlib import contextmanager
from typing import Any, Iterator

from mjson.core.domain.errors import JsonSyntaxError

# JSON.stringify recorta el indent a 10 caracteres.
MAX_INDENT = 10

_CONTEXT_BEFORE = 40
_CONTEXT_AFTER = 20

# Strings primero para no confundir un `NaN` dentro de un literal.
_CONSTANT_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|-?Infinity|NaN')


class _NonStandardConstant(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(name)


def _parse_float(literal: str) -> float | None:
    # 1e400 desborda a inf; JSON.stringify lo escribe como null.
    value = float(literal)
    return value if math.isfinite(value) else None


@contextmanager
def _unbounded_int_digits() -> Iterator[None]:
    """Quita el límite de dígitos de int<->str (Python 3.11+) mientras dure."""

    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def _line_column(text: str, position: int) -> tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - text.rfind("\n", 0, position)
    return line, column


def _constant_position(text: str, name: str) -> int | None:
    for match in _CONSTANT_TOKEN.finditer(text):
        if match.group(0) == name:
            return match.start()
    return None


def _deepest_position(text: str) -> int:
    """Posición del primer `[`/`{` que alcanza la profundidad máxima."""

    depth = deepest = position = 0
    in_string = escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "[{":
            depth += 1
            if depth > deepest:
                deepest, position = depth, index
        elif char in "]}":
            depth -= 1
    return position


def _error_at(text: str, message: str, position: int | None) -> JsonSyntaxError:
    if position is None:
        return JsonSyntaxError(message)
    line, column = _line_column(text, position)
    return JsonSyntaxError(
        message,
        line=line,
        column=column,
        position=position,
        excerpt=build_excerpt(text, line, column),
    )


def build_excerpt(text: str, line: int, column: int) -> str:
    """Línea del error (recortada alrededor de la columna) + caret."""

    lines = text.splitlines() or [""]
    if not 1 <= line <= len(lines):
        return ""
    source = lines[line - 1]
    index = max(column - 1, 0)

    start = max(index - _CONTEXT_BEFORE, 0)
    end = min(index + _CONTEXT_AFTER, len(source))
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(source) else ""
    snippet = prefix + source[start:end] + suffix
    caret = " " * (len(prefix) + index - start) + "^"
    return f"{snippet}\n{caret}"


def parse(text: str) -> Any:
    """Parsea `text` o lanza `JsonSyntaxError` con ubicación."""

    try:
        with _unbounded_int_digits():
            return json.loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_float,
            )
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(
            exc.msg,
            line=exc.lineno,
            column=exc.colno,
            position=exc.pos,
            excerpt=build_excerpt(text, exc.lineno, exc.colno),
        ) from exc
    except _NonStandardConstant as exc:
        raise _error_at(
            text, f"Unexpected token {exc.name}", _constant_position(text, exc.name)
        ) from None
    except RecursionError as exc:
        raise _error_at(text, "Maximum nesting depth exceeded", _deepest_position(text)) from exc


def render(value: Any, indent: str) -> str:
    """Pretty-print de `value`.

    - indent vacío: una sola línea compacta (`{"a":[1,2]}`).
    - indent no vacío: se repite una vez por nivel de anidamiento.
    - nunca emite `NaN`/`Infinity` (allow_nan=False).
    """

    try:
        with _unbounded_int_digits():
            if not indent:
                return json.dumps(
                    value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
                )
            return json.dumps(
                value, ensure_ascii=False, allow_nan=False, indent=indent[:MAX_INDENT]
            )
    except RecursionError as exc:
        raise JsonSyntaxError("Maximum nesting depth exceeded while rendering") from exc


class StdlibJsonCodec:
    """Implementación de `JsonCodec` sobre el módulo `json`."""

    def parse(self, text: str) -> Any:
        return parse(text)

    def render(self, value: Any, indent: str) -> str:
        return render(value, indent)
