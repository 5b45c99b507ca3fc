"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python src/main.py` durante desarrollo.
- Mantiene un entrypoint simple además del script `line-copier`.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; a copied line may hold any Unicode character.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
