"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` desde `src/`, además del script
`solid-showcase` instalado.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; the banner uses non-ASCII bullets.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
