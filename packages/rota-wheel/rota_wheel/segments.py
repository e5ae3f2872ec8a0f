"""Segment component."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from rota_wheel.errors import ConfigurationError
from rota_wheel.keys import init_kwargs

# Display attributes a segment may override; None inherits the wheel default.
STYLE_FIELDS = (
    "fill_style",
    "stroke_style",
    "line_width",
    "text_font_family",
    "text_font_size",
    "text_font_weight",
    "text_orientation",
    "text_alignment",
    "text_direction",
    "text_margin",
    "text_fill_style",
    "text_stroke_style",
    "text_line_width",
    "image_direction",
)


@dataclass
class Segment:
    """One arc slice of the wheel.

    ``size`` is the arc in degrees, or ``None`` to share whatever the
    explicitly sized segments leave over. ``start_angle`` and ``end_angle``
    are owned by the layout pass and are never passed in.
    """

    size: float | None = None
    text: str = ""
    fill_style: Any = None
    stroke_style: Any = None
    line_width: float | None = None
    text_font_family: str | None = None
    text_font_size: float | None = None
    text_font_weight: Any = None
    text_orientation: str | None = None
    text_alignment: str | None = None
    text_direction: str | None = None
    text_margin: float | None = None
    text_fill_style: Any = None
    text_stroke_style: Any = None
    text_line_width: float | None = None
    image: Any = None
    image_direction: str | None = None
    start_angle: float = field(default=0.0, init=False)
    end_angle: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.size is None:
            return
        if isinstance(self.size, bool) or not isinstance(self.size, (int, float)):
            raise ConfigurationError(f"segment size must be a number, got {self.size!r}")
        if self.size < 0:
            raise ConfigurationError(f"segment size must be >= 0, got {self.size}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Segment:
        """Build a segment from camelCase or snake_case keys."""
        return cls(**init_kwargs(cls, data))

    @property
    def arc(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2

    def contains(self, angle: float) -> bool:
        """Inclusive on both ends."""
        return self.start_angle <= angle <= self.end_angle


SegmentData = Union[Segment, Mapping[str, Any], None]


def make_segment(data: SegmentData = None) -> Segment:
    if data is None:
        return Segment()
    if isinstance(data, Segment):
        return data
    if isinstance(data, Mapping):
        return Segment.from_mapping(data)
    raise ConfigurationError(
        f"segment data must be a Segment or a mapping, got {type(data).__name__}"
    )
