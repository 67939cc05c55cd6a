"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field).
- Serialización estable a JSON sin lógica extra en la CLI.

Nota:
- Estos modelos describen *qué* produjo una demostración, no *cómo*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.principle import Principle, Variant


class DemoStep(BaseModel):
    """Una llamada a una operación dentro de una demostración."""

    model_config = ConfigDict(frozen=True)

    principle: Principle = Field(..., description="Principio demostrado.")
    variant: Variant = Field(
        default=Variant.COMPLIANT,
        description="Variante conforme o violación intencional.",
    )
    subject: str = Field(
        ...,
        min_length=1,
        description="Nombre del tipo que recibe la llamada (p.ej. 'Chef').",
    )
    operation: str = Field(
        ...,
        min_length=1,
        description="Nombre de la operación invocada (p.ej. 'cook').",
    )
    output: str = Field(
        ...,
        description="Texto literal devuelto por la operación.",
    )


class ShowcaseReport(BaseModel):
    """Resultado de ejecutar el driver de un showcase.

    Por qué un agregado:
    - La CLI puede renderizarlo como texto o JSON sin volver a ejecutar nada.
    - Los tests comparan pasos completos, no solo la salida por consola.
    """

    principle: Principle
    variant: Variant = Variant.COMPLIANT
    title: str = Field(..., min_length=1)
    summary: str = Field(default="")
    steps: list[DemoStep] = Field(default_factory=list)

    def lines(self) -> list[str]:
        """Salidas literales en el orden en que se produjeron."""

        return [step.output for step in self.steps]
