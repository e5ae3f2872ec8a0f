"""Scheduler - frame loop, pacing, and lifecycle hooks."""
from __future__ import annotations

import time
from typing import Callable

from rota.clock import Clock
from rota.types import FrameContext, Ticker

Hook = Callable[[FrameContext], None]


class Scheduler:
    """Calls every registered ticker once per frame, in registration order."""

    def __init__(self, fps: int = 60) -> None:
        self._clock = Clock(fps)
        self._tickers: list[Ticker] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_ticker(self, ticker: Ticker) -> None:
        self._tickers.append(ticker)

    def remove_ticker(self, ticker: Ticker) -> None:
        try:
            self._tickers.remove(ticker)
        except ValueError:
            pass

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for ticker in list(self._tickers):
            ticker(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> int:
        """Run ``n`` frames between the start and stop hooks."""
        return self._loop(_never, n, paced=False)

    def run_until(self, predicate: Callable[[], bool], limit: int) -> int:
        """Step until ``predicate()`` is true or ``limit`` frames have run.

        Returns the number of frames stepped. The predicate is checked
        before every frame, so an already-satisfied predicate runs none.
        """
        return self._loop(predicate, limit, paced=False)

    def run_forever(self) -> int:
        """Run in real time at ``fps`` until a ticker requests a stop."""
        return self._loop(_never, None, paced=True)

    def _loop(self, predicate: Callable[[], bool], limit: int | None, paced: bool) -> int:
        self._stop_requested = False
        self._fire(self._start_hooks)

        frames = 0
        while (limit is None or frames < limit) and not predicate():
            started = time.monotonic()
            self._frame()
            frames += 1
            if self._stop_requested:
                break
            if paced:
                remaining = self._clock.dt - (time.monotonic() - started)
                if remaining > 0:
                    time.sleep(remaining)

        self._fire(self._stop_hooks)
        return frames


def _never() -> bool:
    return False
