"""Wheel - segments, rotation, and the spin animation driven one frame at a time."""
from __future__ import annotations

import logging
from typing import Sequence

from rota_easing import EasingRegistry

from rota_wheel.angles import normalize
from rota_wheel.animation import (
    FINISHED,
    IDLE,
    RUNNING,
    Animation,
    begin_next_leg,
    prepare_run,
    rotation_at,
)
from rota_wheel.errors import ConfigurationError
from rota_wheel.frame import Renderer, WheelFrame, build_frame
from rota_wheel.layout import SegmentLayout
from rota_wheel.pins import PinLayout, Pins
from rota_wheel.pointer import PointerGuide
from rota_wheel.segments import Segment, SegmentData, make_segment
from rota_wheel.style import WheelStyle

_logger = logging.getLogger(__name__)


def _initial_segments(
    supplied: Sequence[SegmentData] | None, num_segments: int | None
) -> list[Segment]:
    supplied = list(supplied or ())
    if num_segments is None:
        num_segments = max(len(supplied), 1)
    if isinstance(num_segments, bool) or not isinstance(num_segments, int):
        raise ConfigurationError(f"num_segments must be an int, got {num_segments!r}")
    if num_segments < 0:
        raise ConfigurationError(f"num_segments must be >= 0, got {num_segments}")
    if len(supplied) > num_segments:
        _logger.debug(
            "%d segments supplied for a %d segment wheel, ignoring the rest",
            len(supplied), num_segments,
        )
    return [
        make_segment(supplied[i] if i < len(supplied) else None)
        for i in range(num_segments)
    ]


class Wheel:
    """A segmented wheel and its spin animation.

    The wheel never draws anything itself: every redraw builds a
    :class:`WheelFrame` and hands it to ``renderer`` when one is set. A
    scheduler is expected to call :meth:`tick` once per frame while a run
    is active.

    Segment *numbers* and positions are 1-based; segment *indexes* are
    0-based.
    """

    def __init__(
        self,
        segments: Sequence[SegmentData] | None = None,
        num_segments: int | None = None,
        *,
        style: WheelStyle | None = None,
        rotation_angle: float = 0.0,
        pointer_angle: float = 0.0,
        animation: Animation | None = None,
        pins: Pins | None = None,
        pointer_guide: PointerGuide | None = None,
        renderer: Renderer | None = None,
        easings: EasingRegistry | None = None,
    ) -> None:
        self.style = style if style is not None else WheelStyle()
        self.rotation_angle = rotation_angle
        self.pointer_angle = pointer_angle
        self.animation = animation if animation is not None else Animation()
        self.pins = pins if pins is not None else Pins()
        self.pointer_guide = pointer_guide if pointer_guide is not None else PointerGuide()
        self.renderer = renderer
        self.easings = easings if easings is not None else EasingRegistry.with_defaults()
        self._layout = SegmentLayout(_initial_segments(segments, num_segments))

    # -- Segments --

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._layout)

    @property
    def num_segments(self) -> int:
        return len(self._layout)

    def segment(self, number: int) -> Segment:
        """Segment by 1-based number. Raises OutOfRangeError."""
        return self._layout.segment(number)

    def insert_segment(self, data: SegmentData = None, position: int | None = None) -> Segment:
        return self._layout.insert(data, position)

    def delete_segment(self, position: int) -> Segment:
        return self._layout.delete(position)

    def update_segments(self) -> None:
        self._layout.update()

    # -- Indicated segment / pin --

    def rotation_position(self) -> float:
        """Current rotation wrapped into ``[0, 360)``. ``pointer_angle`` is not applied."""
        return normalize(self.rotation_angle)

    def indicated_segment_index(self) -> int | None:
        return self._layout.indicated_index(self.rotation_position())

    def indicated_segment_number(self) -> int | None:
        index = self.indicated_segment_index()
        return None if index is None else index + 1

    def indicated_segment(self) -> Segment | None:
        index = self.indicated_segment_index()
        return None if index is None else self._layout[index]

    def indicated_pin_index(self) -> int:
        """0-based pin slot the rotation has most recently passed."""
        index = int(self.rotation_position() // self.pins.spacing)
        return min(index, self.pins.number - 1)

    def pin_layout(self) -> PinLayout:
        return PinLayout(self.pins, self.style.outer_radius)

    # -- Rendering --

    def frame(self, clear: bool | None = None) -> WheelFrame:
        if clear is None:
            clear = self.style.clear_the_canvas
        return build_frame(self, clear)

    def draw(self, clear: bool | None = None) -> WheelFrame:
        frame = self.frame(clear)
        if self.renderer is not None:
            self.renderer(frame)
        return frame

    def _animation_clear(self) -> bool:
        if self.animation.clear_the_canvas is None:
            return self.style.clear_the_canvas
        return self.animation.clear_the_canvas

    # -- Animation --

    @property
    def is_spinning(self) -> bool:
        return self.animation.state == RUNNING

    def start_animation(self) -> None:
        """Begin a run. A run already in progress is discarded."""
        anim = self.animation
        anim.validate()
        if anim.callback_before is not None:
            anim.callback_before(self)
        prepare_run(anim, self.rotation_angle, self.easings)
        anim.transition(RUNNING)

    def tick(self) -> bool:
        """Advance the run by one frame. Returns True while it continues."""
        anim = self.animation
        if anim.state != RUNNING:
            return False

        anim.current_step = min(anim.current_step + 1, anim.duration)
        self.rotation_angle = rotation_at(anim)
        self.draw(clear=self._animation_clear())
        if anim.callback_after is not None:
            anim.callback_after(self)
        # A callback may have stopped the run; it is already finished.
        if anim.state != RUNNING:
            return False
        self._check_crossing()
        if anim.state != RUNNING:
            return False

        if anim.current_step < anim.duration:
            return True
        if anim.legs_remaining > 0:
            begin_next_leg(anim, self.rotation_angle)
            return True
        self._finish(invoke_callback=True)
        return False

    def stop_animation(self, invoke_callback: bool = True) -> bool:
        """End the run where the wheel is now. Returns False if nothing was running."""
        anim = self.animation
        if anim.state != RUNNING:
            self.draw()
            return False
        anim.current_step = anim.duration
        anim.legs_remaining = 0
        self.draw(clear=self._animation_clear())
        self._finish(invoke_callback)
        return True

    def rotate(self, delta: float) -> None:
        self.rotation_angle += delta
        self.draw()

    def _finish(self, invoke_callback: bool) -> None:
        anim = self.animation
        anim.transition(FINISHED)
        if invoke_callback and anim.callback_finished is not None:
            anim.callback_finished(self)
        # The callback may already have started the next run.
        if anim.state == FINISHED:
            anim.transition(IDLE)

    def _check_crossing(self) -> None:
        anim = self.animation
        if anim.callback_sound is None:
            return
        if anim.sound_trigger == "pin":
            current: int | None = self.indicated_pin_index()
        else:
            current = self.indicated_segment_number()
        if current != anim.last_indicated:
            anim.last_indicated = current
            anim.callback_sound(self, current)
