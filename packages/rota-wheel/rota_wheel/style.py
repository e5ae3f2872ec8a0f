"""Wheel-wide geometry and display defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rota_wheel.errors import ConfigurationError

DRAW_MODES = ("code", "image")


@dataclass
class WheelStyle:
    """Geometry and default style handed to the renderer.

    None of these values take part in layout or animation math. Per-segment
    style fields left as ``None`` fall back to the matching field here.
    """

    center_x: float | None = None
    center_y: float | None = None
    outer_radius: float | None = None
    inner_radius: float = 0
    draw_mode: str = "code"
    text_font_family: str = "Arial"
    text_font_size: float = 20
    text_font_weight: Any = "bold"
    text_orientation: str = "horizontal"
    text_alignment: str = "center"
    text_direction: str = "normal"
    text_margin: float | None = None
    text_fill_style: Any = "black"
    text_stroke_style: Any = None
    text_line_width: float = 1
    fill_style: Any = "silver"
    stroke_style: Any = "black"
    line_width: float = 1
    clear_the_canvas: bool = True
    image_overlay: bool = False
    draw_text: bool = True
    image_direction: str = "N"

    def __post_init__(self) -> None:
        if self.draw_mode not in DRAW_MODES:
            raise ConfigurationError(
                f"draw_mode must be one of {DRAW_MODES}, got {self.draw_mode!r}"
            )
        if self.inner_radius < 0:
            raise ConfigurationError(f"inner_radius must be >= 0, got {self.inner_radius}")
        if self.outer_radius is not None:
            if self.outer_radius < 0:
                raise ConfigurationError(
                    f"outer_radius must be >= 0, got {self.outer_radius}"
                )
            if self.inner_radius > self.outer_radius:
                raise ConfigurationError(
                    f"inner_radius {self.inner_radius} exceeds outer_radius {self.outer_radius}"
                )

    @property
    def resolved_text_margin(self) -> float:
        if self.text_margin is None:
            return self.text_font_size / 1.7
        return self.text_margin
