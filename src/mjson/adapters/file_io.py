"""Lectura/escritura de texto (ficheros y stdin)."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


def is_regular_file(path: Path | None) -> bool:
    return path is not None and path.exists() and path.is_file()


def read_text(path: Path, encoding: str) -> str:
    return path.read_text(encoding=encoding)


def write_text(path: Path, text: str, encoding: str) -> Path:
    # newline="" para no traducir \n en Windows.
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(text)
    return path


def remove_file(path: Path) -> None:
    path.unlink(missing_ok=True)


def read_stream(stream: BinaryIO, encoding: str) -> str:
    """Lee hasta EOF y decodifica."""

    return stream.read().decode(encoding)
