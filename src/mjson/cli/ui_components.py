"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- stdout queda reservado para el JSON; todo diagnóstico va a stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from mjson.core.domain.errors import JsonSyntaxError

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(Text.assemble(("error: ", "bold red"), message), soft_wrap=True)


def print_warning(message: str) -> None:
    err_console.print(Text.assemble(("warning: ", "yellow"), message), soft_wrap=True)


def print_debug(message: str) -> None:
    err_console.print(Text.assemble(("debug: ", "blue"), message), soft_wrap=True)


def print_info(message: str) -> None:
    err_console.print(Text.assemble(("info: ", "green"), message), soft_wrap=True)


def print_output_path(path: object) -> None:
    """Informa del fichero escrito (modo file->file)."""

    console.print(Text.assemble(("output: ", "green"), str(path)), soft_wrap=True)


def print_syntax_error(error: JsonSyntaxError) -> None:
    """Bloque de diagnóstico para JSON inválido."""

    err_console.print(Text.assemble(("SyntaxError: ", "bold red"), str(error)), soft_wrap=True)
