"""pygame renderer for WheelFrame snapshots."""
from __future__ import annotations

import math

import pygame

from rota_wheel import WheelFrame

from ui.constants import ARC_STEP, BG_COLOR, POINTER_COLOR


def _color(value, fallback=(200, 200, 200)) -> pygame.Color:
    if value is None:
        return pygame.Color(fallback)
    try:
        return pygame.Color(value)
    except ValueError:
        return pygame.Color(fallback)


def _screen_angle(frame: WheelFrame, wheel_angle: float) -> float:
    """Screen radians for a wheel angle. The segment under the top pointer is
    the one containing the current rotation."""
    return math.radians(frame.rotation_angle - wheel_angle - 90)


def _polar(cx: float, cy: float, r: float, radians: float) -> tuple[float, float]:
    return cx + r * math.cos(radians), cy + r * math.sin(radians)


class WheelView:
    """Renderer callback that keeps the latest frame for the display loop."""

    def __init__(self) -> None:
        self.frame: WheelFrame | None = None
        self.frames_seen = 0

    def __call__(self, frame: WheelFrame) -> None:
        self.frame = frame
        self.frames_seen += 1

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        frame = self.frame
        if frame is None or frame.outer_radius is None:
            return
        if frame.clear:
            surface.fill(BG_COLOR)

        cx = frame.center_x or 0
        cy = frame.center_y or 0
        for view in frame.segments:
            self._draw_segment(surface, font, frame, view, cx, cy)

        if frame.inner_radius:
            pygame.draw.circle(surface, BG_COLOR, (cx, cy), frame.inner_radius)

        for x, y in frame.pins:
            # Pin offsets are unrotated drawing angles, 90 degrees behind wheel angles.
            dist = math.hypot(x, y)
            angle = _screen_angle(frame, math.degrees(math.atan2(y, x)) + 90)
            px, py = _polar(cx, cy, dist, angle)
            pygame.draw.circle(
                surface, _color(frame.pin_style.get("fill_style")), (px, py), frame.pin_radius
            )

        if frame.pointer_guide is not None:
            start, end = frame.pointer_guide
            pygame.draw.line(
                surface,
                _color(frame.pointer_guide_style.get("stroke_style"), POINTER_COLOR),
                start,
                end,
                int(frame.pointer_guide_style.get("line_width", 1)),
            )

        self._draw_pointer(surface, cx, cy - frame.outer_radius)

    def _draw_segment(self, surface, font, frame, view, cx, cy) -> None:
        radius = frame.outer_radius
        points = [(cx, cy)]
        angle = view.start_angle
        while angle < view.end_angle:
            points.append(_polar(cx, cy, radius, _screen_angle(frame, angle)))
            angle += ARC_STEP
        points.append(_polar(cx, cy, radius, _screen_angle(frame, view.end_angle)))
        if len(points) < 3:
            return

        style = view.style
        pygame.draw.polygon(surface, _color(style["fill_style"]), points)
        line_width = max(int(style["line_width"]), 1)
        pygame.draw.polygon(surface, _color(style["stroke_style"], (0, 0, 0)), points, line_width)

        if frame.draw_text and view.text:
            mid = _screen_angle(frame, (view.start_angle + view.end_angle) / 2)
            tx, ty = _polar(cx, cy, radius - style["text_margin"] - 40, mid)
            label = font.render(view.text, True, _color(style["text_fill_style"], (0, 0, 0)))
            surface.blit(label, (tx - label.get_width() / 2, ty - label.get_height() / 2))

    def _draw_pointer(self, surface: pygame.Surface, x: float, y: float) -> None:
        pygame.draw.polygon(
            surface, POINTER_COLOR, [(x - 12, y - 22), (x + 12, y - 22), (x, y + 6)]
        )
