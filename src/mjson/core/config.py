"""Configuración de mjson.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los flags de la CLI siempre ganan; esto solo aporta defaults por usuario.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.color import Color, ColorParseError

from mjson.core.domain.models import DEFAULT_ENCODING, DEFAULT_INDENT


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mjson"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mjson"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mjson"
    return Path.home() / ".config" / "mjson"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Defaults de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Permite fijar indent/encoding por usuario sin repetir flags.
    """

    model_config = SettingsConfigDict(
        env_prefix="MJSON_",
        extra="ignore",
        case_sensitive=False,
        env_file=str(get_user_env_file()),
        env_file_encoding="utf-8",
    )

    indent: str = Field(
        default=DEFAULT_INDENT,
        description="Unidad de indentación por defecto.",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        min_length=1,
        description="Encoding por defecto para leer/escribir ficheros.",
    )
    string_color: str = Field(
        default="green",
        min_length=1,
        description="Color (nombre Rich) para los literales string en stdout.",
    )
    debug: bool = Field(
        default=False,
        description="Activar trazas de depuración sin pasar --debug.",
    )

    @field_validator("string_color")
    @classmethod
    def _rich_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as exc:
            raise ValueError(str(exc)) from exc
        return value
