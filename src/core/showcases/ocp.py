"""Open/Closed: `SportsCar` extiende a `Car` sin tocarlo.

`Car` queda cerrado a modificación; la capacidad nueva (alerón) vive solo en
la subclase y las operaciones heredadas se reutilizan tal cual.
"""

from __future__ import annotations

from core.domain.models import ShowcaseReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.showcases.base import Demonstration


class Car:
    """Vehículo base."""

    def start_engine(self) -> str:
        return "Engine started"

    def drive(self) -> str:
        return "Car is driving"


class SportsCar(Car):
    """Extensión: añade `add_spoiler` y hereda el resto sin cambios."""

    def add_spoiler(self) -> str:
        return "Spoiler added"


def demonstrate(sink: OutputSink | None = None) -> ShowcaseReport:
    demo = Demonstration(Principle.OCP, sink=sink)
    demo.call(Car(), "start_engine")
    demo.call(Car(), "drive")
    demo.call(SportsCar(), "start_engine")
    demo.call(SportsCar(), "drive")
    demo.call(SportsCar(), "add_spoiler")
    return demo.report()
