"""`python -m mjson`: mismo comando que el script de consola `mjson`."""

from __future__ import annotations

import sys

# Consolas Windows en cp1252: el JSON formateado puede traer texto no ASCII.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from mjson.cli.main import run

if __name__ == "__main__":
    run()
