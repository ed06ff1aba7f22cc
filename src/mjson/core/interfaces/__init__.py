"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el pipeline depende de abstracciones.
"""

from mjson.core.interfaces.codec import JsonCodec, Minifier

__all__ = ["JsonCodec", "Minifier"]
