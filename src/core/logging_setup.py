"""Logging del proyecto (Rich).

Por qué Rich:
- La CLI ya usa Rich para la salida; los logs comparten estilo.
- Los logs van a stderr y no se mezclan con las líneas de las demostraciones.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
