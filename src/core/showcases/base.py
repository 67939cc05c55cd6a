"""Driver compartido por los cinco showcases.

Las operaciones de los tipos de ejemplo solo *devuelven* su literal; este
driver es quien lo escribe en el sink y lo registra como `DemoStep` antes de
pasar a la siguiente llamada.
"""

from __future__ import annotations

from typing import Callable

from core.domain.models import DemoStep, ShowcaseReport
from core.domain.principle import Principle, Variant
from core.interfaces.output import OutputSink


class Demonstration:
    """Secuencia de llamadas de un showcase.

    Reglas de diseño:
    - Sin sink explícito, las líneas van a stdout con `print`.
    - Si una operación lanza, la excepción se propaga tal cual: las líneas
      anteriores ya se emitieron y no hay paso registrado para la fallida.
    """

    def __init__(
        self,
        principle: Principle,
        *,
        variant: Variant = Variant.COMPLIANT,
        sink: OutputSink | None = None,
    ) -> None:
        self._principle = principle
        self._variant = variant
        self._emit: Callable[[str], None] = sink.emit if sink is not None else print
        self._steps: list[DemoStep] = []

    def call(self, subject: object, operation: str) -> str:
        output = getattr(subject, operation)()
        self._emit(output)
        self._steps.append(
            DemoStep(
                principle=self._principle,
                variant=self._variant,
                subject=type(subject).__name__,
                operation=operation,
                output=output,
            )
        )
        return output

    def report(self) -> ShowcaseReport:
        title = self._principle.label()
        if self._variant is Variant.VIOLATION:
            title = f"{title} (violation)"
        return ShowcaseReport(
            principle=self._principle,
            variant=self._variant,
            title=title,
            summary=self._principle.summary(),
            steps=list(self._steps),
        )
