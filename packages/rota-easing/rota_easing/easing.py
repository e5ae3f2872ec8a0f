"""Easing functions mapping normalized time to normalized progress."""
from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def power_in(power: int) -> Easing:
    """``t ** power``."""

    def fn(t: float) -> float:
        return t**power

    fn.__name__ = f"power{power}_in"
    return fn


def power_out(power: int) -> Easing:
    """``1 - (1 - t) ** power``."""

    def fn(t: float) -> float:
        return 1 - (1 - t) ** power

    fn.__name__ = f"power{power}_out"
    return fn


def power_in_out(power: int) -> Easing:
    def fn(t: float) -> float:
        if t < 0.5:
            return 2 ** (power - 1) * t**power
        return 1 - (-2 * t + 2) ** power / 2

    fn.__name__ = f"power{power}_in_out"
    return fn


def sine_in(t: float) -> float:
    if t >= 1.0:
        return 1.0
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


ease_out_cubic = power_out(3)
ease_out_quart = power_out(4)

# Default curve for spins: fast start, long quartic slow-down.
DEFAULT_EASING = "ease_out_quart"

EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_in_cubic": power_in(3),
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": power_in_out(3),
    "ease_in_quart": power_in(4),
    "ease_out_quart": ease_out_quart,
    "ease_in_out_quart": power_in_out(4),
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
}

# GSAP-style names accepted by wheel animation configs. PowerN is degree N+1.
ALIASES: dict[str, str] = {
    "Linear.easeNone": "linear",
    "easeOut": "ease_out_quart",
    "Power1.easeIn": "ease_in",
    "Power1.easeOut": "ease_out",
    "Power1.easeInOut": "ease_in_out",
    "Power2.easeIn": "ease_in_cubic",
    "Power2.easeOut": "ease_out_cubic",
    "Power2.easeInOut": "ease_in_out_cubic",
    "Power3.easeIn": "ease_in_quart",
    "Power3.easeOut": "ease_out_quart",
    "Power3.easeInOut": "ease_in_out_quart",
    "Sine.easeIn": "sine_in",
    "Sine.easeOut": "sine_out",
    "Sine.easeInOut": "sine_in_out",
}
