"""rota-easing - Named progress curves for frame-stepped animation."""
from __future__ import annotations

from rota_easing.easing import ALIASES, DEFAULT_EASING, EASINGS, Easing
from rota_easing.registry import EasingRegistry, EasingSpec

__all__ = [
    "EASINGS",
    "ALIASES",
    "DEFAULT_EASING",
    "Easing",
    "EasingRegistry",
    "EasingSpec",
]
