"""Read-only frame handed to a renderer on every redraw."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping

from rota_wheel.pins import PinLayout, Point
from rota_wheel.pointer import guide_line
from rota_wheel.segments import STYLE_FIELDS, Segment
from rota_wheel.style import WheelStyle

if TYPE_CHECKING:
    from rota_wheel.wheel import Wheel

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class SegmentView:
    number: int
    start_angle: float
    end_angle: float
    text: str
    image: Any
    style: Mapping[str, Any]


@dataclass(frozen=True)
class WheelFrame:
    """Everything a renderer needs for one picture of the wheel."""

    segments: tuple[SegmentView, ...]
    rotation_angle: float
    pointer_angle: float
    center_x: float | None
    center_y: float | None
    outer_radius: float | None
    inner_radius: float
    clear: bool
    draw_text: bool
    draw_mode: str
    image_overlay: bool
    pins: tuple[Point, ...] = ()
    pin_radius: float = 0.0
    pin_style: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    pointer_guide: tuple[Point, Point] | None = None
    pointer_guide_style: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)


Renderer = Callable[[WheelFrame], None]


def resolve_style(segment: Segment, style: WheelStyle) -> Mapping[str, Any]:
    """Segment style with unset fields taken from the wheel defaults."""
    resolved: dict[str, Any] = {}
    for name in STYLE_FIELDS:
        value = getattr(segment, name)
        resolved[name] = getattr(style, name) if value is None else value
    if segment.text_margin is None:
        resolved["text_margin"] = style.resolved_text_margin
    return MappingProxyType(resolved)


def build_frame(wheel: Wheel, clear: bool) -> WheelFrame:
    style = wheel.style
    views = tuple(
        SegmentView(
            number=number,
            start_angle=segment.start_angle,
            end_angle=segment.end_angle,
            text=segment.text,
            image=segment.image,
            style=resolve_style(segment, style),
        )
        for number, segment in enumerate(wheel.segments, start=1)
    )

    pins: tuple[Point, ...] = ()
    pin_style: Mapping[str, Any] = _EMPTY
    if wheel.pins.visible and style.outer_radius is not None:
        pins = tuple(PinLayout(wheel.pins, style.outer_radius))
        pin_style = MappingProxyType({
            "fill_style": wheel.pins.fill_style,
            "stroke_style": wheel.pins.stroke_style,
            "line_width": wheel.pins.line_width,
        })

    guide = None
    guide_style: Mapping[str, Any] = _EMPTY
    if wheel.pointer_guide.display and style.outer_radius is not None:
        guide = guide_line(
            style.center_x if style.center_x is not None else 0.0,
            style.center_y if style.center_y is not None else 0.0,
            style.outer_radius,
            wheel.pointer_angle,
        )
        guide_style = MappingProxyType({
            "stroke_style": wheel.pointer_guide.stroke_style,
            "line_width": wheel.pointer_guide.line_width,
        })

    return WheelFrame(
        segments=views,
        rotation_angle=wheel.rotation_angle,
        pointer_angle=wheel.pointer_angle,
        center_x=style.center_x,
        center_y=style.center_y,
        outer_radius=style.outer_radius,
        inner_radius=style.inner_radius,
        clear=clear,
        draw_text=style.draw_text,
        draw_mode=style.draw_mode,
        image_overlay=style.image_overlay,
        pins=pins,
        pin_radius=wheel.pins.outer_radius if pins else 0.0,
        pin_style=pin_style,
        pointer_guide=guide,
        pointer_guide_style=guide_style,
    )
