"""Showcase catalog and runner.

The CLI delegates every "which demo, in which order" decision to this module,
which keeps printing and exit codes out of the core and lets tests drive the
showcases without a console.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from core.domain.models import ShowcaseReport
from core.domain.principle import Principle
from core.errors import NoViolationDemoError
from core.interfaces.output import OutputSink
from core.showcases import dip, isp, lsp, ocp, srp

logger = logging.getLogger(__name__)

DemoFn = Callable[[OutputSink | None], ShowcaseReport]


@dataclass(frozen=True)
class Showcase:
    """One principle and the drivers that demonstrate it."""

    principle: Principle
    demonstrate: DemoFn
    demonstrate_violation: DemoFn | None = None
    types: tuple[str, ...] = ()

    @property
    def has_violation(self) -> bool:
        return self.demonstrate_violation is not None


CATALOG: dict[Principle, Showcase] = {
    Principle.SRP: Showcase(
        principle=Principle.SRP,
        demonstrate=srp.demonstrate,
        types=("Chef", "Waiter", "Cleaner"),
    ),
    Principle.OCP: Showcase(
        principle=Principle.OCP,
        demonstrate=ocp.demonstrate,
        types=("Car", "SportsCar"),
    ),
    Principle.LSP: Showcase(
        principle=Principle.LSP,
        demonstrate=lsp.demonstrate,
        demonstrate_violation=lsp.demonstrate_violation,
        types=("Vehicle", "PetrolCar", "ElectricCar", "EngineVehicle", "MotorVehicle", "Car", "Tesla"),
    ),
    Principle.ISP: Showcase(
        principle=Principle.ISP,
        demonstrate=isp.demonstrate,
        demonstrate_violation=isp.demonstrate_violation,
        types=("PetCare", "Goldfish", "Feedable", "Washable", "Pettable", "Fish", "Dog"),
    ),
    Principle.DIP: Showcase(
        principle=Principle.DIP,
        demonstrate=dip.demonstrate,
        types=("Keyboard", "MechanicalKeyboard", "MembraneKeyboard", "VirtualKeyboard", "Computer"),
    ),
}


def get_showcase(principle: Principle | str) -> Showcase:
    if not isinstance(principle, Principle):
        principle = Principle.parse(principle)
    return CATALOG[principle]


def run_showcase(principle: Principle | str, sink: OutputSink | None = None) -> ShowcaseReport:
    """Run the compliant demo of one principle."""

    showcase = get_showcase(principle)
    logger.debug("Running %s showcase", showcase.principle.value.upper())
    return showcase.demonstrate(sink)


def run_all(
    principles: Iterable[Principle | str] | None = None,
    sink: OutputSink | None = None,
) -> list[ShowcaseReport]:
    """Run compliant demos in catalog order (or in the order given)."""

    selected = list(principles) if principles is not None else list(CATALOG)
    return [run_showcase(p, sink) for p in selected]


def run_violation(principle: Principle | str, sink: OutputSink | None = None) -> ShowcaseReport:
    """Run the non-compliant demo.

    For LSP and ISP this raises `UnsupportedOperationError` from inside the
    demo; the error is not caught here.
    """

    showcase = get_showcase(principle)
    if showcase.demonstrate_violation is None:
        raise NoViolationDemoError(showcase.principle.value)
    logger.debug("Running %s violation demo", showcase.principle.value.upper())
    return showcase.demonstrate_violation(sink)
