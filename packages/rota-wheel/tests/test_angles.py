"""Tests for angle normalization and directional deltas."""

import pytest

from rota_wheel import CLOCKWISE, COUNTERCLOCKWISE, ConfigurationError, normalize, signed_delta
from rota_wheel.angles import opposite


class TestNormalize:
    """Wrapping into [0, 360)."""

    def test_in_range_unchanged(self):
        assert normalize(95.0) == 95.0

    def test_positive_overflow(self):
        assert normalize(370.0) == 10.0

    def test_full_turn_is_zero(self):
        assert normalize(360.0) == 0.0

    def test_negative(self):
        assert normalize(-10.0) == 350.0

    def test_several_negative_periods(self):
        assert normalize(-720.5) == pytest.approx(359.5)

    def test_tiny_negative_stays_in_range(self):
        """A value that rounds to 360 wraps to 0."""
        result = normalize(-1e-20)
        assert 0.0 <= result < 360.0

    @pytest.mark.parametrize(
        "angle", [-1000.0, -360.0, -0.5, 0.0, 12.25, 359.999, 360.0, 725.0, 10_000.0]
    )
    def test_idempotent_and_in_range(self, angle):
        once = normalize(angle)
        assert 0.0 <= once < 360.0
        assert normalize(once) == once


class TestSignedDelta:
    """Forward distances in a given direction."""

    def test_clockwise_forward(self):
        assert signed_delta(10, 100, CLOCKWISE) == 90

    def test_counterclockwise_wraps(self):
        assert signed_delta(10, 100, COUNTERCLOCKWISE) == 270

    def test_clockwise_wraps(self):
        assert signed_delta(350, 10, CLOCKWISE) == 20

    def test_counterclockwise_forward(self):
        assert signed_delta(100, 10, COUNTERCLOCKWISE) == 90

    def test_same_angle_is_zero(self):
        assert signed_delta(45, 45, CLOCKWISE) == 0
        assert signed_delta(45, 45, COUNTERCLOCKWISE) == 0

    def test_unknown_direction_raises(self):
        with pytest.raises(ConfigurationError, match="direction"):
            signed_delta(0, 90, "sideways")


def test_opposite():
    assert opposite(CLOCKWISE) == COUNTERCLOCKWISE
    assert opposite(COUNTERCLOCKWISE) == CLOCKWISE
