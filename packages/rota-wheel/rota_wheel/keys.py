"""Mapping-to-dataclass helpers for config dictionaries."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import Any, Mapping

_logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_key(key: str) -> str:
    """``"textFontSize"`` -> ``"text_font_size"``; snake_case passes through."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def init_kwargs(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the entries of ``data`` that name init fields of dataclass ``cls``.

    Keys may be camelCase or snake_case. Unknown keys are dropped.
    """
    accepted = {f.name for f in dataclasses.fields(cls) if f.init}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = snake_key(key)
        if name in accepted:
            kwargs[name] = value
        else:
            _logger.debug("ignoring unknown %s key %r", cls.__name__, key)
    return kwargs
