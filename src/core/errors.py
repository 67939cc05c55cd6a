"""Errores del Core.

Por qué una jerarquía propia:
- La CLI captura solo `ShowcaseError` en el borde; todo lo demás es un bug.
- `UnsupportedOperationError` es el fallo *intencional* de los ejemplos que
  violan LSP/ISP: no se recupera dentro del Core.
"""

from __future__ import annotations


class ShowcaseError(Exception):
    """Base de todos los errores esperables del paquete."""


class UnsupportedOperationError(ShowcaseError, NotImplementedError):
    """Un tipo declara una capacidad que en realidad no puede cumplir."""

    def __init__(self, subject: str, operation: str) -> None:
        self.subject = subject
        self.operation = operation
        super().__init__(f"{subject} does not support {operation}()")


class UnknownPrincipleError(ShowcaseError, ValueError):
    """El nombre recibido no corresponde a ningún principio SOLID."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown principle: {value!r} (expected one of srp, ocp, lsp, isp, dip)")


class NoViolationDemoError(ShowcaseError):
    """El principio pedido no tiene una variante no conforme que mostrar."""

    def __init__(self, principle: str) -> None:
        self.principle = principle
        super().__init__(f"No violation demo for {principle.upper()}")
