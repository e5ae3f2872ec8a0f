"""Tests for the Segment component."""

import pytest

from rota_wheel import ConfigurationError, Segment
from rota_wheel.segments import make_segment


class TestSegmentConstruction:
    """Defaults and validation."""

    def test_defaults(self):
        segment = Segment()
        assert segment.size is None
        assert segment.text == ""
        assert segment.fill_style is None
        assert segment.start_angle == 0.0
        assert segment.end_angle == 0.0

    def test_angles_are_not_init_arguments(self):
        with pytest.raises(TypeError):
            Segment(start_angle=10)  # type: ignore[call-arg]

    @pytest.mark.parametrize("size", ["90", True, [90]])
    def test_non_numeric_size_rejected(self, size):
        with pytest.raises(ConfigurationError, match="size"):
            Segment(size=size)

    def test_negative_size_rejected(self):
        with pytest.raises(ConfigurationError, match=">= 0"):
            Segment(size=-5)

    def test_zero_size_allowed(self):
        assert Segment(size=0).size == 0


class TestFromMapping:
    """Building segments from config dictionaries."""

    def test_camel_case_keys(self):
        segment = Segment.from_mapping(
            {"size": 45, "text": "Prize", "fillStyle": "#eae56f", "textFontSize": 14}
        )
        assert segment.size == 45
        assert segment.text == "Prize"
        assert segment.fill_style == "#eae56f"
        assert segment.text_font_size == 14

    def test_snake_case_keys(self):
        segment = Segment.from_mapping({"text_fill_style": "white"})
        assert segment.text_fill_style == "white"

    def test_unknown_keys_ignored(self):
        segment = Segment.from_mapping({"text": "x", "imgData": object(), "startAngle": 40})
        assert segment.text == "x"
        assert segment.start_angle == 0.0


class TestMakeSegment:
    def test_none_gives_default(self):
        assert make_segment(None) == Segment()

    def test_segment_passes_through(self):
        segment = Segment(text="keep")
        assert make_segment(segment) is segment

    def test_mapping(self):
        assert make_segment({"text": "m"}).text == "m"

    def test_other_types_rejected(self):
        with pytest.raises(ConfigurationError):
            make_segment("not a segment")  # type: ignore[arg-type]


def test_arc_mid_and_contains():
    segment = Segment()
    segment.start_angle = 90.0
    segment.end_angle = 180.0
    assert segment.arc == 90.0
    assert segment.mid_angle == 135.0
    assert segment.contains(90.0)
    assert segment.contains(180.0)
    assert not segment.contains(180.5)
