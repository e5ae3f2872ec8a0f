"""rota - A small fixed-rate frame scheduler."""

from rota.clock import Clock
from rota.scheduler import Scheduler
from rota.types import FrameContext, Ticker

__all__ = [
    "Scheduler",
    "Clock",
    "FrameContext",
    "Ticker",
]
