"""EasingRegistry - named lookup of easing curves."""
from __future__ import annotations

import logging
from typing import Union

from rota_easing.easing import ALIASES, DEFAULT_EASING, EASINGS, Easing

_logger = logging.getLogger(__name__)

EasingSpec = Union[str, Easing, None]


class EasingRegistry:
    """Maps curve names to easing functions.

    ``resolve`` never fails: unknown names fall back to the default curve.
    """

    def __init__(self, default: str = DEFAULT_EASING) -> None:
        self._easings: dict[str, Easing] = {}
        self._aliases: dict[str, str] = {}
        self._default = default

    @classmethod
    def with_defaults(cls) -> EasingRegistry:
        """Registry preloaded with the built-in curves and their aliases."""
        registry = cls()
        for name, fn in EASINGS.items():
            registry.register(name, fn)
        for alias, name in ALIASES.items():
            registry.alias(alias, name)
        return registry

    @property
    def default(self) -> str:
        return self._default

    def register(self, name: str, fn: Easing) -> None:
        """Register a named curve. Overwrites if already registered."""
        if not callable(fn):
            raise TypeError(f"easing {name!r} is not callable")
        self._easings[name] = fn

    def alias(self, alias: str, name: str) -> None:
        """Make ``alias`` resolve to the curve registered as ``name``."""
        self._aliases[alias] = name

    def get(self, name: str) -> Easing:
        """Look up a curve by name or alias. Raises KeyError if unknown."""
        return self._easings[self._aliases.get(name, name)]

    def has(self, name: str) -> bool:
        return self._aliases.get(name, name) in self._easings

    def names(self) -> list[str]:
        """List registered curve names (aliases excluded)."""
        return list(self._easings)

    def resolve(self, easing: EasingSpec) -> Easing:
        """Turn a name, a callable or ``None`` into an easing function."""
        if easing is None:
            return self.get(self._default)
        if callable(easing):
            return easing
        if self.has(easing):
            return self.get(easing)
        _logger.debug("unknown easing %r, using %r", easing, self._default)
        return self.get(self._default)
