"""Angular arithmetic in degrees."""
from __future__ import annotations

from rota_wheel.errors import ConfigurationError

FULL_CIRCLE = 360.0

CLOCKWISE = "clockwise"
COUNTERCLOCKWISE = "counterclockwise"
DIRECTIONS = (CLOCKWISE, COUNTERCLOCKWISE)


def check_direction(direction: str) -> None:
    if direction not in DIRECTIONS:
        raise ConfigurationError(
            f"direction must be one of {DIRECTIONS}, got {direction!r}"
        )


def opposite(direction: str) -> str:
    check_direction(direction)
    return COUNTERCLOCKWISE if direction == CLOCKWISE else CLOCKWISE


def normalize(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 360)``."""
    angle = angle % FULL_CIRCLE
    # Tiny negative inputs round up to exactly 360.0.
    if angle >= FULL_CIRCLE:
        angle -= FULL_CIRCLE
    return angle


def signed_delta(start: float, stop: float, direction: str) -> float:
    """Distance in ``[0, 360)`` from ``start`` to ``stop`` walking in ``direction``.

    Clockwise walks towards increasing angles, counterclockwise towards
    decreasing ones.
    """
    check_direction(direction)
    if direction == CLOCKWISE:
        return normalize(stop - start)
    return normalize(start - stop)
