"""Tests for EasingRegistry."""
import logging

import pytest

from rota_easing import EASINGS, EasingRegistry


class TestEasingRegistry:
    """Registration and lookup."""

    def test_register_and_get(self):
        registry = EasingRegistry()

        def half(t):
            return t / 2

        registry.register("half", half)
        assert registry.get("half") is half

    def test_register_overwrites(self):
        registry = EasingRegistry()
        registry.register("curve", EASINGS["linear"])
        registry.register("curve", EASINGS["ease_in"])
        assert registry.get("curve") is EASINGS["ease_in"]

    def test_register_rejects_non_callable(self):
        registry = EasingRegistry()
        with pytest.raises(TypeError):
            registry.register("broken", 3)  # type: ignore[arg-type]

    def test_get_unknown_raises_keyerror(self):
        with pytest.raises(KeyError):
            EasingRegistry().get("nonexistent")

    def test_has_and_names(self):
        registry = EasingRegistry()
        registry.register("a", EASINGS["linear"])
        registry.alias("A", "a")
        assert registry.has("a")
        assert registry.has("A")
        assert not registry.has("b")
        assert registry.names() == ["a"]

    def test_with_defaults_loads_builtins(self):
        registry = EasingRegistry.with_defaults()
        assert set(registry.names()) == set(EASINGS)
        assert registry.get("Power3.easeOut") is EASINGS["ease_out_quart"]
        assert registry.get("easeOut") is EASINGS["ease_out_quart"]

    def test_registries_are_independent(self):
        first = EasingRegistry.with_defaults()
        second = EasingRegistry.with_defaults()
        first.register("custom", EASINGS["linear"])
        assert not second.has("custom")


class TestResolve:
    """Turning easing specs into functions."""

    def test_resolve_name(self):
        registry = EasingRegistry.with_defaults()
        assert registry.resolve("ease_in") is EASINGS["ease_in"]

    def test_resolve_callable_passes_through(self):
        registry = EasingRegistry.with_defaults()

        def custom(t):
            return t**5

        assert registry.resolve(custom) is custom

    def test_resolve_none_uses_default(self):
        registry = EasingRegistry.with_defaults()
        assert registry.resolve(None) is EASINGS["ease_out_quart"]

    def test_unknown_name_falls_back_to_default(self, caplog):
        registry = EasingRegistry.with_defaults()
        with caplog.at_level(logging.DEBUG, logger="rota_easing.registry"):
            fn = registry.resolve("Bounce.easeOut")
        assert fn is EASINGS["ease_out_quart"]
        assert "Bounce.easeOut" in caplog.text

    def test_custom_default(self):
        registry = EasingRegistry(default="linear")
        registry.register("linear", EASINGS["linear"])
        assert registry.resolve("missing") is EASINGS["linear"]
        assert registry.default == "linear"
