"""Tests for pin configuration and pin positions."""

import math

import pytest

from rota_wheel import ConfigurationError, PinLayout, Pins
from rota_wheel.pins import pin_angle


class TestPinsConfig:
    def test_defaults(self):
        pins = Pins()
        assert pins.visible is False
        assert pins.number == 36
        assert pins.outer_radius == 3
        assert pins.spacing == 10.0

    @pytest.mark.parametrize("number", [0, -4])
    def test_number_must_be_positive(self, number):
        with pytest.raises(ConfigurationError, match="number"):
            Pins(number=number)

    def test_number_must_be_int(self):
        with pytest.raises(ConfigurationError):
            Pins(number=4.5)  # type: ignore[arg-type]

    def test_negative_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            Pins(outer_radius=-1)


def test_pin_angle_offsets_first_pin():
    """Pin i sits at (360 / count) * i - 90."""
    assert pin_angle(4, 1) == 0
    assert pin_angle(4, 4) == 270
    assert pin_angle(36, 1) == -80


class TestPinLayout:
    """Lazy, restartable pin positions."""

    def test_positions(self):
        layout = PinLayout(Pins(number=4, outer_radius=5), wheel_radius=100)
        points = list(layout)
        expected = [(95, 0), (0, 95), (-95, 0), (0, -95)]
        assert len(points) == 4
        for (x, y), (ex, ey) in zip(points, expected):
            assert x == pytest.approx(ex, abs=1e-9)
            assert y == pytest.approx(ey, abs=1e-9)

    def test_all_pins_on_one_circle(self):
        layout = PinLayout(Pins(number=36, outer_radius=3), wheel_radius=200)
        assert layout.distance == 197
        for x, y in layout:
            assert math.hypot(x, y) == pytest.approx(197)

    def test_len(self):
        assert len(PinLayout(Pins(number=12), wheel_radius=50)) == 12

    def test_restartable(self):
        layout = PinLayout(Pins(number=8), wheel_radius=50)
        assert list(layout) == list(layout)

    def test_lazy_iteration(self):
        layout = PinLayout(Pins(number=3), wheel_radius=10)
        it = iter(layout)
        first = next(it)
        assert first == pytest.approx((7 * math.cos(math.radians(30)), 7 * math.sin(math.radians(30))))

    def test_requires_wheel_radius(self):
        with pytest.raises(ConfigurationError, match="outer_radius"):
            PinLayout(Pins(), wheel_radius=None)
