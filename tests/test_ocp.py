"""Tests for the open/closed showcase."""

from core.showcases.ocp import Car, SportsCar, demonstrate


class TestOcpShowcase:
    """SportsCar extends Car without changing it."""

    def test_base_operations(self):
        """Car produces its fixed literals."""
        car = Car()

        assert car.start_engine() == "Engine started"
        assert car.drive() == "Car is driving"

    def test_inherited_operations_match_base_byte_for_byte(self):
        """Extension reuses the base behaviour unchanged."""
        car, sports = Car(), SportsCar()

        assert sports.start_engine().encode() == car.start_engine().encode()
        assert sports.drive().encode() == car.drive().encode()

    def test_inherited_operations_are_not_overridden(self):
        """SportsCar does not redefine the base methods."""
        assert SportsCar.start_engine is Car.start_engine
        assert SportsCar.drive is Car.drive

    def test_extension_adds_capability(self):
        """Only the extension knows how to add a spoiler."""
        assert SportsCar().add_spoiler() == "Spoiler added"
        assert not hasattr(Car(), "add_spoiler")

    def test_demonstrate(self, sink):
        """Driver output."""
        report = demonstrate(sink)

        assert sink.lines == [
            "Engine started",
            "Car is driving",
            "Engine started",
            "Car is driving",
            "Spoiler added",
        ]
        assert report.steps[-1].subject == "SportsCar"
        assert report.steps[-1].operation == "add_spoiler"
