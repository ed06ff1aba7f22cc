"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las opciones se validan una sola vez en el borde (CLI) y luego viajan
  inmutables hasta el pipeline y los modos.
- `ModeResult` sustituye a las salidas de proceso dispersas: cada modo devuelve
  un valor y solo la CLI lo traduce a exit status.
"""

from __future__ import annotations

import codecs
from enum import Enum, IntEnum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

DEFAULT_INDENT = "    "
DEFAULT_ENCODING = "utf-8"


class Mode(str, Enum):
    """Modos de I/O soportados."""

    STDIN_TO_STDOUT = "stdin_to_stdout"
    FILE_TO_STDOUT = "file_to_stdout"
    FILE_TO_FILE = "file_to_file"


class ExitStatus(IntEnum):
    """Exit status del proceso."""

    OK = 0
    SYNTAX_ERROR = 1
    USAGE = 2


class Failure(str, Enum):
    """Fallos detectados antes de invocar el pipeline."""

    SOURCE_NOT_FOUND = "source_not_found"
    DESTINATION_EXISTS = "destination_exists"


class FormatOptions(BaseModel):
    """Configuración resuelta una vez por invocación.

    Reglas:
    - `indent` por defecto son cuatro espacios; un indent vacío explícito
      selecciona la salida compacta en una sola línea.
    - `color=None` deja la decisión al tipo de sink (stdout sí, fichero no).
    - `encoding` se normaliza al nombre canónico del codec.
    """

    model_config = ConfigDict(frozen=True)

    indent: str = Field(
        default=DEFAULT_INDENT,
        description="Unidad de indentación por nivel.",
    )
    color: bool | None = Field(
        default=None,
        description="Forzar color on/off en salidas a stdout (None = según sink).",
    )
    src: Path | None = Field(
        default=None,
        description="Fichero de entrada.",
    )
    out: Path | None = Field(
        default=None,
        description="Fichero de salida.",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        min_length=1,
        description="Encoding de lectura/escritura.",
    )
    force: bool = Field(
        default=False,
        description="Sobrescribir el fichero de salida si existe.",
    )
    debug: bool = Field(
        default=False,
        description="Trazas de depuración en stderr.",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc

    def colorize_stdout(self) -> bool:
        """Color para sinks de terminal: activo salvo `--no-color`."""

        return True if self.color is None else self.color


class ModeResult(BaseModel):
    """Resultado de un modo de I/O."""

    mode: Mode
    status: ExitStatus = ExitStatus.OK
    output: str | None = Field(
        default=None,
        description="Texto a escribir en stdout (modos stdout).",
    )
    destination: Path | None = Field(
        default=None,
        description="Fichero escrito (modo file_to_file).",
    )
    failure: Failure | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ExitStatus.OK
