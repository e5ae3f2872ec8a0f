"""Shared types for the frame scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


Ticker = Callable[[FrameContext], None]
