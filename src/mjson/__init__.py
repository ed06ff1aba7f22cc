"""mjson: formateador de JSON (con comentarios) para la terminal."""

__version__ = "0.1.0"
