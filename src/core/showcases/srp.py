"""Single Responsibility: cada rol del restaurante hace una sola cosa.

`Chef`, `Waiter` y `Cleaner` no comparten estado ni se conocen entre sí; si
cambia la forma de limpiar, solo cambia `Cleaner`.
"""

from __future__ import annotations

from core.domain.models import ShowcaseReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.showcases.base import Demonstration


class Chef:
    def cook(self) -> str:
        return "Cooking food"


class Waiter:
    def serve(self) -> str:
        return "Serving food"


class Cleaner:
    def clean(self) -> str:
        return "Cleaning the kitchen"


def demonstrate(sink: OutputSink | None = None) -> ShowcaseReport:
    demo = Demonstration(Principle.SRP, sink=sink)
    demo.call(Chef(), "cook")
    demo.call(Waiter(), "serve")
    demo.call(Cleaner(), "clean")
    return demo.report()
