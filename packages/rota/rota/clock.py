"""Frame counter and frame/seconds conversion at a fixed rate."""

import math
from typing import Callable

from rota.types import FrameContext


class Clock:
    """Counts frames at ``fps``. Spin durations are given in frames, so the
    clock also converts between frames and wall-clock seconds."""

    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return 1.0 / self._fps

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self.seconds_for(self._frame_number)

    def frames_for(self, seconds: float) -> int:
        """Number of whole frames covering ``seconds`` (at least one)."""
        return max(1, math.ceil(seconds * self._fps))

    def seconds_for(self, frames: int) -> float:
        return frames / self._fps

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self.dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )
