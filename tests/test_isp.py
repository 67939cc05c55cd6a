"""Tests for the interface segregation showcase."""

import pytest

from core.errors import UnsupportedOperationError
from core.showcases.isp import (
    Dog,
    Feedable,
    Fish,
    Goldfish,
    Pettable,
    Washable,
    demonstrate,
    demonstrate_violation,
)


class TestIspViolation:
    """The bundled PetCare interface forces Goldfish to declare pet()."""

    def test_supported_operations(self):
        """Feed and wash work."""
        goldfish = Goldfish()

        assert goldfish.feed() == "Feeding the fish"
        assert goldfish.wash() == "Cleaning the fish tank"

    def test_pet_always_fails(self):
        """The forced operation raises on every call."""
        goldfish = Goldfish()

        for _ in range(3):
            with pytest.raises(UnsupportedOperationError, match=r"Goldfish does not support pet\(\)"):
                goldfish.pet()

    def test_violation_demo(self, sink):
        """Driver emits the two supported lines, then fails."""
        with pytest.raises(UnsupportedOperationError):
            demonstrate_violation(sink)

        assert sink.lines == ["Feeding the fish", "Cleaning the fish tank"]


class TestIspCompliant:
    """Implementers compose only the capabilities they support."""

    def test_fish_has_only_feed_and_wash(self):
        """No pet operation exists to call."""
        fish = Fish()

        assert fish.feed() == "Feeding the fish"
        assert fish.wash() == "Cleaning the fish tank"
        assert not hasattr(fish, "pet")
        assert isinstance(fish, Feedable)
        assert isinstance(fish, Washable)
        assert not isinstance(fish, Pettable)

    def test_dog_supports_everything(self):
        """Dog composes all three capability sets."""
        dog = Dog()

        assert (dog.feed(), dog.wash(), dog.pet()) == (
            "Feeding the dog",
            "Washing the dog",
            "Petting the dog",
        )

    def test_demonstrate(self, sink):
        """Compliant driver never fails."""
        report = demonstrate(sink)

        assert len(report.steps) == 5
        assert sink.lines[-1] == "Petting the dog"
