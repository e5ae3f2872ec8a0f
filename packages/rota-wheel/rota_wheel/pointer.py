"""Pointer guide: a line from the wheel center out to the rim."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from rota_wheel.pins import Point


@dataclass
class PointerGuide:
    display: bool = False
    stroke_style: Any = "red"
    line_width: float = 3


def guide_line(
    center_x: float, center_y: float, outer_radius: float, pointer_angle: float
) -> tuple[Point, Point]:
    """Start and end points of the guide at ``pointer_angle`` (drawing angle)."""
    radians = math.radians(pointer_angle)
    end = (
        center_x + outer_radius * math.cos(radians),
        center_y + outer_radius * math.sin(radians),
    )
    return (center_x, center_y), end
