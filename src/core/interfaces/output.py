"""Contrato de salida para los drivers de demostración.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- La consola Rich, `print` o una lista en memoria son intercambiables y
  testeables sin acoplar el Core a ninguna de ellas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Destino de las líneas literales que produce una demostración."""

    def emit(self, line: str) -> None:
        """Escribe una línea completa (sin salto final)."""

        ...
