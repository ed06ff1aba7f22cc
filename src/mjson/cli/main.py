"""Comando principal de mjson.

Por qué aquí:
- Es el único punto que conoce Typer, stdout/stderr y exit status.
- Construye `FormatOptions` una vez y delega todo lo demás en el Core.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from mjson import __version__
from mjson.cli.ui_components import (
    err_console,
    print_debug,
    print_error,
    print_info,
    print_output_path,
    print_syntax_error,
    print_warning,
)
from mjson.core.config import AppSettings
from mjson.core.domain.errors import JsonSyntaxError
from mjson.core.domain.models import ExitStatus, FormatOptions, Mode
from mjson.core.services.modes import dispatch
from mjson.core.services.pipeline import PipelineHooks

app = typer.Typer(
    add_completion=False,
    help="Formatted output to the standard output, standard input (string JSON).",
    pretty_exceptions_show_locals=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mjson {__version__}")
        raise typer.Exit()


def build_options(
    settings: AppSettings,
    *,
    path: Path | None,
    src: Path | None,
    out: Path | None,
    indent: str | None,
    encode: str | None,
    color: bool | None,
    force: bool,
    debug: bool,
) -> FormatOptions:
    """Resuelve flags + settings en unas opciones inmutables.

    El path posicional tiene prioridad sobre `--src`.
    """

    try:
        return FormatOptions(
            indent=settings.indent if indent is None else indent,
            color=color,
            src=path if path is not None else src,
            out=out,
            encoding=settings.encoding if encode is None else encode,
            force=force,
            debug=debug or settings.debug,
        )
    except ValidationError as exc:
        messages = "; ".join(error["msg"] for error in exc.errors())
        raise typer.BadParameter(messages, param_hint="'--encode' / '-e'") from exc


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Read file path (same as --src).",
        show_default=False,
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug mode."),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        "-C",
        help="Color string literals on stdout (default: on). Files are never colored.",
        show_default=False,
    ),
    indent: Optional[str] = typer.Option(
        None,
        "--indent",
        "-i",
        help="Indent string (default: space 4).",
        show_default=False,
    ),
    src: Optional[Path] = typer.Option(None, "--src", "-s", help="Read file path."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write file path."),
    encode: Optional[str] = typer.Option(
        None,
        "--encode",
        "-e",
        help="Encoding for reading --src, writing --out and decoding stdin (default: utf-8).",
        show_default=False,
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite output file."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Pretty-print JSON (comments allowed) from stdin, a file, or into a file."""

    settings = AppSettings()
    options = build_options(
        settings,
        path=path,
        src=src,
        out=out,
        indent=indent,
        encode=encode,
        color=color,
        force=force,
        debug=debug,
    )

    hooks = PipelineHooks(
        debug=print_debug if options.debug else None,
        warning=print_warning,
    )
    if options.debug:
        print_info("debug mode.")

    try:
        result = dispatch(
            options,
            typer.get_binary_stream("stdin"),
            style=settings.string_color,
            hooks=hooks,
        )
    except JsonSyntaxError as exc:
        print_syntax_error(exc)
        if options.debug:
            err_console.print_exception()
        raise typer.Exit(code=int(ExitStatus.SYNTAX_ERROR)) from exc

    if not result.ok:
        print_error(result.message or result.failure.value)
        raise typer.Exit(code=int(result.status))

    if result.mode is Mode.FILE_TO_FILE:
        print_output_path(result.destination)
        return

    # color=True: el color ya lo decidió el pipeline, click no debe quitarlo.
    typer.echo(result.output, nl=False, color=True)


def run() -> None:
    app(prog_name="mjson")


if __name__ == "__main__":
    run()
