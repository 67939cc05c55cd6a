"""Liskov Substitution: vehículos de combustión vs eléctricos.

Dos diseños:
- No conforme: `Vehicle` obliga a todos a tener `start_engine`; `ElectricCar`
  no tiene motor de combustión y solo puede fallar.
- Conforme: la abstracción se parte en `EngineVehicle` y `MotorVehicle`, y
  cada tipo declara únicamente lo que puede cumplir.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ShowcaseReport
from core.domain.principle import Principle, Variant
from core.errors import UnsupportedOperationError
from core.interfaces.output import OutputSink
from core.showcases.base import Demonstration


# --- No conforme -----------------------------------------------------------


@runtime_checkable
class Vehicle(Protocol):
    def start_engine(self) -> str:
        ...


class PetrolCar(Vehicle):
    def start_engine(self) -> str:
        return "Engine started"


class ElectricCar(Vehicle):
    """Sustituye a `Vehicle` solo en apariencia."""

    def start_engine(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "start_engine")


# --- Conforme --------------------------------------------------------------


@runtime_checkable
class EngineVehicle(Protocol):
    def start_engine(self) -> str:
        ...


@runtime_checkable
class MotorVehicle(Protocol):
    def start_motor(self) -> str:
        ...


class Car(EngineVehicle):
    def start_engine(self) -> str:
        return "Engine started"


class Tesla(MotorVehicle):
    def start_motor(self) -> str:
        return "Motor started"


def demonstrate(sink: OutputSink | None = None) -> ShowcaseReport:
    demo = Demonstration(Principle.LSP, sink=sink)
    demo.call(Car(), "start_engine")
    demo.call(Tesla(), "start_motor")
    return demo.report()


def demonstrate_violation(sink: OutputSink | None = None) -> ShowcaseReport:
    """Trata a ambos como `Vehicle`; la segunda llamada lanza `UnsupportedOperationError`."""

    demo = Demonstration(Principle.LSP, variant=Variant.VIOLATION, sink=sink)
    vehicles: list[Vehicle] = [PetrolCar(), ElectricCar()]
    for vehicle in vehicles:
        demo.call(vehicle, "start_engine")
    return demo.report()
