"""Tests for easing functions."""

import pytest

from rota_easing import ALIASES, DEFAULT_EASING, EASINGS

SAMPLES = [i / 100 for i in range(101)]


class TestQuadraticCurves:
    """Spot values of the quadratic curves."""

    def test_linear_at_half(self):
        assert EASINGS["linear"](0.5) == 0.5

    def test_ease_in_at_half(self):
        """Ease-in is t*t."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        """Ease-out is t*(2-t)."""
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out_at_quarter(self):
        assert EASINGS["ease_in_out"](0.25) == 0.125

    def test_ease_in_out_at_three_quarters(self):
        assert abs(EASINGS["ease_in_out"](0.75) - 0.875) < 1e-9


class TestPowerCurves:
    """Spot values of the higher-order curves."""

    def test_ease_out_quart(self):
        """Quartic ease-out is 1 - (1 - t)^4."""
        assert abs(EASINGS["ease_out_quart"](0.5) - 0.9375) < 1e-12

    def test_ease_out_cubic(self):
        assert abs(EASINGS["ease_out_cubic"](0.5) - 0.875) < 1e-12

    def test_ease_in_quart(self):
        assert abs(EASINGS["ease_in_quart"](0.5) - 0.0625) < 1e-12

    @pytest.mark.parametrize(
        "name", ["ease_in_out_cubic", "ease_in_out_quart", "sine_in_out"]
    )
    def test_in_out_curves_pass_through_midpoint(self, name):
        assert abs(EASINGS[name](0.5) - 0.5) < 1e-12

    def test_default_is_quartic_ease_out(self):
        assert DEFAULT_EASING == "ease_out_quart"


class TestCurveProperties:
    """Every built-in curve is a valid progress curve."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_maps_zero_to_zero(self, name):
        assert EASINGS[name](0.0) == 0.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_maps_one_to_one(self, name):
        assert EASINGS[name](1.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_monotonically_non_decreasing(self, name):
        fn = EASINGS[name]
        values = [fn(t) for t in SAMPLES]
        for earlier, later in zip(values, values[1:]):
            assert later >= earlier - 1e-12

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_stays_in_unit_range(self, name):
        fn = EASINGS[name]
        for t in SAMPLES:
            assert -1e-12 <= fn(t) <= 1.0 + 1e-12


def test_aliases_point_at_registered_curves():
    for alias, name in ALIASES.items():
        assert name in EASINGS, f"{alias} -> {name} is not a curve"
