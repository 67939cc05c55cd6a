"""Dependency Inversion: `Computer` depende de `Keyboard`, no de un teclado concreto.

El teclado se inyecta por constructor; cambiar de variante cambia la salida
sin tocar `Computer`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ShowcaseReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.showcases.base import Demonstration


@runtime_checkable
class Keyboard(Protocol):
    def type(self) -> str:
        ...


class MechanicalKeyboard(Keyboard):
    def type(self) -> str:
        return "Typing on mechanical keyboard"


class MembraneKeyboard(Keyboard):
    def type(self) -> str:
        return "Typing on membrane keyboard"


class VirtualKeyboard(Keyboard):
    def type(self) -> str:
        return "Typing on virtual keyboard"


class Computer:
    """Consumidor: solo conoce la abstracción `Keyboard`."""

    def __init__(self, keyboard: Keyboard) -> None:
        self._keyboard = keyboard

    def type(self) -> str:
        return self._keyboard.type()


def demonstrate(sink: OutputSink | None = None) -> ShowcaseReport:
    demo = Demonstration(Principle.DIP, sink=sink)
    demo.call(Computer(MechanicalKeyboard()), "type")
    demo.call(Computer(MembraneKeyboard()), "type")
    demo.call(Computer(VirtualKeyboard()), "type")
    return demo.report()
