"""Errores del dominio."""

from __future__ import annotations


class JsonSyntaxError(ValueError):
    """El texto (ya minificado) no es JSON válido.

    Lleva la ubicación del error relativa al texto parseado y un extracto
    con caret para mostrarlo tal cual en stderr.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        position: int | None = None,
        excerpt: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.position = position
        self.excerpt = excerpt

    def __str__(self) -> str:
        if self.line is None:
            head = f"Parse error: {self.message}"
        else:
            head = f"Parse error on line {self.line}, column {self.column}: {self.message}"
        if self.excerpt:
            return f"{head}\n{self.excerpt}"
        return head
