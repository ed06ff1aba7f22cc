"""Lanzador de mjson desde un checkout, sin `pip install -e .`.

Uso:
- `python main.py data.jsonc`
- `cat data.json | python main.py -i "  "`

El paquete vive bajo `src/mjson`; este script solo añade `src/` al path y
delega en `mjson.cli.main.run`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from mjson.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
