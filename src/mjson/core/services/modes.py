"""Modos de I/O (stdin->stdout, file->stdout, file->file).

Cada modo devuelve un `ModeResult` en vez de terminar el proceso: la CLI es el
único sitio que traduce el resultado a exit status. Los errores de sintaxis
JSON (`JsonSyntaxError`) no se capturan aquí; se propagan a quien llama.
"""

from __future__ import annotations

from typing import BinaryIO

from mjson.adapters import file_io
from mjson.core.domain.models import ExitStatus, Failure, FormatOptions, Mode, ModeResult
from mjson.core.services.pipeline import PipelineHooks, process


def select_mode(options: FormatOptions) -> Mode:
    if options.src is not None and options.out is not None:
        return Mode.FILE_TO_FILE
    if options.src is not None:
        return Mode.FILE_TO_STDOUT
    return Mode.STDIN_TO_STDOUT


def _source_not_found(mode: Mode, options: FormatOptions) -> ModeResult:
    return ModeResult(
        mode=mode,
        status=ExitStatus.USAGE,
        failure=Failure.SOURCE_NOT_FOUND,
        message=f"--src or -s file can not be read. --src: {options.src}",
    )


def stdin_to_stdout(
    options: FormatOptions,
    stdin: BinaryIO,
    *,
    style: str = "green",
    hooks: PipelineHooks | None = None,
) -> ModeResult:
    """STDIN -> STDOUT. Lee hasta EOF; útil como etapa de un pipe."""

    hooks = hooks or PipelineHooks()
    raw = file_io.read_stream(stdin, options.encoding)
    hooks.trace(f"stdin: {len(raw)} chars")

    output = process(
        raw,
        options.indent,
        options.colorize_stdout(),
        style=style,
        hooks=hooks,
    )
    return ModeResult(mode=Mode.STDIN_TO_STDOUT, output=output)


def file_to_stdout(
    options: FormatOptions,
    *,
    style: str = "green",
    hooks: PipelineHooks | None = None,
) -> ModeResult:
    """FILE -> STDOUT."""

    hooks = hooks or PipelineHooks()
    if not file_io.is_regular_file(options.src):
        return _source_not_found(Mode.FILE_TO_STDOUT, options)

    raw = file_io.read_text(options.src, options.encoding)
    output = process(
        raw,
        options.indent,
        options.colorize_stdout(),
        style=style,
        hooks=hooks,
    )
    return ModeResult(mode=Mode.FILE_TO_STDOUT, output=output)


def file_to_file(
    options: FormatOptions,
    *,
    hooks: PipelineHooks | None = None,
) -> ModeResult:
    """FILE -> FILE.

    Reglas:
    - Nunca escribe color en ficheros.
    - Sin `--force` no pisa un destino existente.
    - Con `--force` el destino se borra solo tras formatear con éxito, así una
      entrada inválida no destruye el fichero previo.
    """

    hooks = hooks or PipelineHooks()
    if not file_io.is_regular_file(options.src):
        return _source_not_found(Mode.FILE_TO_FILE, options)

    destination = options.out
    if destination.exists() and not options.force:
        return ModeResult(
            mode=Mode.FILE_TO_FILE,
            status=ExitStatus.USAGE,
            failure=Failure.DESTINATION_EXISTS,
            message=f"--out or -o file already exists --out: {destination}",
        )

    raw = file_io.read_text(options.src, options.encoding)
    output = process(raw, options.indent, False, hooks=hooks)

    hooks.trace("-- data start")
    hooks.trace(output)
    hooks.trace("-- data end")

    if options.force and destination.exists():
        hooks.trace(f"Overwrite remove output file. path: {destination}")
        file_io.remove_file(destination)

    file_io.write_text(destination, output, options.encoding)
    return ModeResult(mode=Mode.FILE_TO_FILE, destination=destination)


def dispatch(
    options: FormatOptions,
    stdin: BinaryIO,
    *,
    style: str = "green",
    hooks: PipelineHooks | None = None,
) -> ModeResult:
    """Selecciona y ejecuta el modo que corresponde a `options`."""

    hooks = hooks or PipelineHooks()
    mode = select_mode(options)
    hooks.trace(f"select {mode.value}")

    if mode is Mode.FILE_TO_FILE:
        return file_to_file(options, hooks=hooks)
    if mode is Mode.FILE_TO_STDOUT:
        return file_to_stdout(options, style=style, hooks=hooks)

    if options.out is not None:
        hooks.warn(f"--out ignored without --src or a path argument: {options.out}")
    return stdin_to_stdout(options, stdin, style=style, hooks=hooks)
