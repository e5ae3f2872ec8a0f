"""Evenly spaced pin markers around the wheel rim."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

from rota_wheel.angles import FULL_CIRCLE
from rota_wheel.errors import ConfigurationError

Point = tuple[float, float]


@dataclass
class Pins:
    visible: bool = False
    number: int = 36
    outer_radius: float = 3
    fill_style: Any = "grey"
    stroke_style: Any = "black"
    line_width: float = 1

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise ConfigurationError(f"pin number must be an int, got {self.number!r}")
        if self.number < 1:
            raise ConfigurationError(f"pin number must be >= 1, got {self.number}")
        if self.outer_radius < 0:
            raise ConfigurationError(f"pin outer_radius must be >= 0, got {self.outer_radius}")

    @property
    def spacing(self) -> float:
        return FULL_CIRCLE / self.number


def pin_angle(number: int, i: int) -> float:
    """Drawing angle of pin ``i`` (1-based); pin 1 sits 90 degrees before 0."""
    return (FULL_CIRCLE / number) * i - 90


class PinLayout:
    """Pin centers as ``(x, y)`` offsets from the wheel center.

    Iterating computes positions lazily; each iteration starts over.
    """

    def __init__(self, pins: Pins, wheel_radius: float | None) -> None:
        if wheel_radius is None:
            raise ConfigurationError("outer_radius must be set to lay out pins")
        self._number = pins.number
        self._distance = wheel_radius - pins.outer_radius

    @property
    def distance(self) -> float:
        return self._distance

    def __len__(self) -> int:
        return self._number

    def __iter__(self) -> Iterator[Point]:
        for i in range(1, self._number + 1):
            radians = math.radians(pin_angle(self._number, i))
            yield (self._distance * math.cos(radians), self._distance * math.sin(radians))
