"""SOLID principle identifiers.

This module centralizes the principles the showcase knows about. Keeping it in
the domain layer lets the CLI, the config and the runner share one source of
truth without importing each other.
"""

from __future__ import annotations

from enum import Enum

from core.errors import UnknownPrincipleError


_LABELS = {
    "srp": "Single Responsibility Principle",
    "ocp": "Open/Closed Principle",
    "lsp": "Liskov Substitution Principle",
    "isp": "Interface Segregation Principle",
    "dip": "Dependency Inversion Principle",
}

_SUMMARIES = {
    "srp": "A class should have one, and only one, reason to change.",
    "ocp": "Software entities should be open for extension but closed for modification.",
    "lsp": "Subtypes must be substitutable for their base types without breaking callers.",
    "isp": "Clients should not be forced to depend on methods they do not use.",
    "dip": "Depend on abstractions, not on concrete implementations.",
}


class Principle(str, Enum):
    """The five SOLID principles, in their canonical order."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @classmethod
    def parse(cls, value: str) -> "Principle":
        """Resolve a user-supplied name (case-insensitive)."""

        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnknownPrincipleError(value) from None

    def label(self) -> str:
        """Full human readable name."""

        return _LABELS[self.value]

    def summary(self) -> str:
        return _SUMMARIES[self.value]


class Variant(str, Enum):
    """Whether a demonstration follows the principle or breaks it."""

    COMPLIANT = "compliant"
    VIOLATION = "violation"
