"""Building a wheel from a plain configuration mapping.

Keys follow the wheel's flat option table, either in camelCase::

    wheel_from_config({
        "numSegments": 4,
        "outerRadius": 200,
        "segments": [{"text": "A", "fillStyle": "#eae56f"}, {"size": 30}],
        "animation": {"duration": 120, "spins": 3, "stopAngle": 45},
        "pins": {"visible": True, "number": 16},
        "pointerGuide": {"display": True},
    })

or in snake_case. Keys the wheel does not know about are ignored.
"""
from __future__ import annotations

from typing import Any, Mapping

from rota_easing import EasingRegistry

from rota_wheel.animation import Animation
from rota_wheel.errors import ConfigurationError
from rota_wheel.frame import Renderer
from rota_wheel.keys import init_kwargs, snake_key
from rota_wheel.pins import Pins
from rota_wheel.pointer import PointerGuide
from rota_wheel.style import WheelStyle
from rota_wheel.wheel import Wheel

# Keys consumed by Wheel itself rather than by WheelStyle.
_WHEEL_KEYS = {
    "num_segments",
    "segments",
    "rotation_angle",
    "pointer_angle",
    "animation",
    "pins",
    "pointer_guide",
}


def _section(params: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = params.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def animation_from_config(data: Mapping[str, Any]) -> Animation:
    return Animation(**init_kwargs(Animation, data))


def pins_from_config(data: Mapping[str, Any]) -> Pins:
    return Pins(**init_kwargs(Pins, data))


def pointer_guide_from_config(data: Mapping[str, Any]) -> PointerGuide:
    return PointerGuide(**init_kwargs(PointerGuide, data))


def wheel_from_config(
    params: Mapping[str, Any] | None = None,
    *,
    renderer: Renderer | None = None,
    easings: EasingRegistry | None = None,
) -> Wheel:
    """Create a :class:`Wheel` from the flat option table."""
    params = {snake_key(k): v for k, v in (params or {}).items()}
    style_params = {k: v for k, v in params.items() if k not in _WHEEL_KEYS}

    segments = params.get("segments")
    if segments is not None and not isinstance(segments, (list, tuple)):
        raise ConfigurationError(f"segments must be a list, got {type(segments).__name__}")

    return Wheel(
        segments=segments,
        num_segments=params.get("num_segments"),
        style=WheelStyle(**init_kwargs(WheelStyle, style_params)),
        rotation_angle=params.get("rotation_angle", 0.0),
        pointer_angle=params.get("pointer_angle", 0.0),
        animation=animation_from_config(_section(params, "animation")),
        pins=pins_from_config(_section(params, "pins")),
        pointer_guide=pointer_guide_from_config(_section(params, "pointer_guide")),
        renderer=renderer,
        easings=easings,
    )
