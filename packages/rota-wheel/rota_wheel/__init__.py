"""rota-wheel - Segment layout and frame-stepped spin animation for prize wheels."""
from __future__ import annotations

from rota_wheel.angles import CLOCKWISE, COUNTERCLOCKWISE, normalize, signed_delta
from rota_wheel.animation import FINISHED, IDLE, RUNNING, Animation
from rota_wheel.config import wheel_from_config
from rota_wheel.errors import ConfigurationError, OutOfRangeError, WheelError
from rota_wheel.frame import Renderer, SegmentView, WheelFrame
from rota_wheel.layout import SegmentLayout, partition
from rota_wheel.pins import PinLayout, Pins
from rota_wheel.pointer import PointerGuide, guide_line
from rota_wheel.segments import Segment
from rota_wheel.style import WheelStyle
from rota_wheel.systems import make_wheel_ticker, spin_to_completion
from rota_wheel.wheel import Wheel

__all__ = [
    "Wheel",
    "Segment",
    "SegmentLayout",
    "partition",
    "Animation",
    "IDLE",
    "RUNNING",
    "FINISHED",
    "WheelStyle",
    "Pins",
    "PinLayout",
    "PointerGuide",
    "guide_line",
    "WheelFrame",
    "SegmentView",
    "Renderer",
    "CLOCKWISE",
    "COUNTERCLOCKWISE",
    "normalize",
    "signed_delta",
    "WheelError",
    "ConfigurationError",
    "OutOfRangeError",
    "wheel_from_config",
    "make_wheel_ticker",
    "spin_to_completion",
]
