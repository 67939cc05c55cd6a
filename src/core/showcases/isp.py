"""Interface Segregation: cuidados de mascotas.

- No conforme: `PetCare` agrupa `feed`, `wash` y `pet`; un pez no se puede
  acariciar, pero `Goldfish` está obligado a declarar `pet`.
- Conforme: una interfaz por capacidad; cada mascota compone solo las que
  puede cumplir.
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
class PetCare(Protocol):
    def feed(self) -> str:
        ...

    def wash(self) -> str:
        ...

    def pet(self) -> str:
        ...


class Goldfish(PetCare):
    def feed(self) -> str:
        return "Feeding the fish"

    def wash(self) -> str:
        return "Cleaning the fish tank"

    def pet(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "pet")


# --- Conforme --------------------------------------------------------------


@runtime_checkable
class Feedable(Protocol):
    def feed(self) -> str:
        ...


@runtime_checkable
class Washable(Protocol):
    def wash(self) -> str:
        ...


@runtime_checkable
class Pettable(Protocol):
    def pet(self) -> str:
        ...


class Fish(Feedable, Washable):
    def feed(self) -> str:
        return "Feeding the fish"

    def wash(self) -> str:
        return "Cleaning the fish tank"


class Dog(Feedable, Washable, Pettable):
    def feed(self) -> str:
        return "Feeding the dog"

    def wash(self) -> str:
        return "Washing the dog"

    def pet(self) -> str:
        return "Petting the dog"


def demonstrate(sink: OutputSink | None = None) -> ShowcaseReport:
    demo = Demonstration(Principle.ISP, sink=sink)
    fish = Fish()
    demo.call(fish, "feed")
    demo.call(fish, "wash")
    dog = Dog()
    demo.call(dog, "feed")
    demo.call(dog, "wash")
    demo.call(dog, "pet")
    return demo.report()


def demonstrate_violation(sink: OutputSink | None = None) -> ShowcaseReport:
    """Recorre todo `PetCare` sobre `Goldfish`; `pet` lanza `UnsupportedOperationError`."""

    demo = Demonstration(Principle.ISP, variant=Variant.VIOLATION, sink=sink)
    goldfish = Goldfish()
    demo.call(goldfish, "feed")
    demo.call(goldfish, "wash")
    demo.call(goldfish, "pet")
    return demo.report()
