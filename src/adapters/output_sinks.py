"""Sinks de salida (implementaciones de `core.interfaces.output.OutputSink`).

Por qué varios:
- `RichConsoleSink` para uso interactivo.
- `PrintSink` para pipes o terminales sin estilos.
- `MemorySink` para tests y para el modo JSON (captura sin imprimir).
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.interfaces.output import OutputSink


class PrintSink(OutputSink):
    """Escribe cada línea tal cual con `print`."""

    def emit(self, line: str) -> None:
        print(line)


class RichConsoleSink(OutputSink):
    """Escribe a través de una `Console` de Rich."""

    def __init__(self, console: Console | None = None, *, style: str = "white") -> None:
        self._console = console or Console()
        self._style = style

    def emit(self, line: str) -> None:
        # Text evita que Rich interprete corchetes del literal como markup.
        self._console.print(Text(line, style=self._style))


class MemorySink(OutputSink):
    """Acumula las líneas en memoria."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)
