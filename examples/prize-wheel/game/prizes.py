"""Prize table, wheel options, and spin callbacks."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from ui.constants import WHEEL_CX, WHEEL_CY, WHEEL_INNER, WHEEL_RADIUS

if TYPE_CHECKING:
    from rota_wheel import Wheel

_logger = logging.getLogger(__name__)

PRIZES = [
    {"text": "100", "fillStyle": "#eae56f"},
    {"text": "200", "fillStyle": "#89f26e"},
    {"text": "JACKPOT", "fillStyle": "#7de6ef", "size": 20},
    {"text": "50", "fillStyle": "#e7706f"},
    {"text": "300", "fillStyle": "#eae56f"},
    {"text": "Lose", "fillStyle": "#89f26e"},
    {"text": "150", "fillStyle": "#7de6ef"},
    {"text": "Free spin", "fillStyle": "#e7706f"},
]

WHEEL_OPTIONS = {
    "centerX": WHEEL_CX,
    "centerY": WHEEL_CY,
    "outerRadius": WHEEL_RADIUS,
    "innerRadius": WHEEL_INNER,
    "textFontSize": 16,
    "pointerAngle": 270,
    "segments": PRIZES,
    "pins": {"visible": True, "number": 24, "outerRadius": 4, "fillStyle": "white"},
    "pointerGuide": {"display": False},
    "animation": {"spins": 5},
}


def pick_stop_angle(wheel: Wheel, rng: random.Random) -> float | None:
    """Random angle strictly inside a random segment."""
    if not wheel.segments:
        return None
    segment = rng.choice(wheel.segments)
    return rng.uniform(segment.start_angle + 1, segment.end_angle - 1)


def make_on_finished(record: Callable[[str], None]):
    """Create a callback_finished that reports the winning segment."""

    def on_finished(wheel: Wheel) -> None:
        segment = wheel.indicated_segment()
        prize = segment.text if segment is not None else "?"
        _logger.info("wheel stopped at %.1f degrees: %s", wheel.rotation_position(), prize)
        record(prize)

    return on_finished


def make_on_click(count: Callable[[], None]):
    """Create a callback_sound that counts pin clicks."""

    def on_click(wheel: Wheel, pin: int | None) -> None:
        _logger.debug("pin %s", pin)
        count()

    return on_click
