"""Ticker factories wiring wheels into a rota Scheduler."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rota_wheel.wheel import Wheel

if TYPE_CHECKING:
    from rota import FrameContext, Scheduler, Ticker


def make_wheel_ticker(wheel: Wheel) -> Ticker:
    """Return a ticker that advances ``wheel`` by one frame per call."""

    def wheel_ticker(ctx: FrameContext) -> None:
        wheel.tick()

    return wheel_ticker


def spin_to_completion(wheel: Wheel, scheduler: Scheduler, limit: int | None = None) -> int:
    """Start a run if none is active and step ``scheduler`` until it ends.

    Returns the number of frames stepped. ``limit`` defaults to the frames
    the configured run needs.
    """
    if not wheel.is_spinning:
        wheel.start_animation()
    if limit is None:
        anim = wheel.animation
        limit = anim.duration * (anim.repeat + 1)

    ticker = make_wheel_ticker(wheel)
    scheduler.add_ticker(ticker)
    try:
        return scheduler.run_until(lambda: not wheel.is_spinning, limit)
    finally:
        scheduler.remove_ticker(ticker)
