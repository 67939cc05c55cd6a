"""Tests for the dependency inversion showcase."""

import pytest

from core.showcases.dip import (
    Computer,
    Keyboard,
    MechanicalKeyboard,
    MembraneKeyboard,
    VirtualKeyboard,
    demonstrate,
)


class TestDipShowcase:
    """Computer forwards to whatever keyboard it was given."""

    def test_mechanical_keyboard_end_to_end(self):
        """Reference example."""
        assert Computer(MechanicalKeyboard()).type() == "Typing on mechanical keyboard"

    @pytest.mark.parametrize(
        "keyboard, expected",
        [
            (MechanicalKeyboard(), "Typing on mechanical keyboard"),
            (MembraneKeyboard(), "Typing on membrane keyboard"),
            (VirtualKeyboard(), "Typing on virtual keyboard"),
        ],
    )
    def test_consumer_returns_injected_output(self, keyboard, expected):
        """Output is exactly the injected variant's output."""
        assert Computer(keyboard).type() == keyboard.type() == expected

    def test_swapping_variant_changes_output(self):
        """Same consumer type, different injection, different output."""
        a = Computer(MechanicalKeyboard()).type()
        b = Computer(MembraneKeyboard()).type()

        assert a != b

    def test_accepts_any_keyboard_implementation(self):
        """Consumer depends on the abstraction only."""

        class StubKeyboard:
            def type(self) -> str:
                return "stub"

        stub = StubKeyboard()

        assert isinstance(stub, Keyboard)
        assert Computer(stub).type() == "stub"

    def test_demonstrate(self, sink):
        """Driver output."""
        report = demonstrate(sink)

        assert sink.lines == [
            "Typing on mechanical keyboard",
            "Typing on membrane keyboard",
            "Typing on virtual keyboard",
        ]
        assert {s.subject for s in report.steps} == {"Computer"}
