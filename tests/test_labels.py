# tests/test_labels.py
"""
Tests for tick label layout: slot budgets, wrap, truncation with ellipsis,
vertical fallback, suppression and centering.
Uses a fixed-advance measure (7 px per character) so results do not depend on fonts.
See: docs/ALGORITHM.md L1-L7.
"""

from __future__ import annotations

import math

import pytest

from speedometer.core.config import ELLIPSIS, LAYOUT_TOLERANCE_PX
from speedometer.core.labels import (
    centering_offset,
    fit_lines,
    label_radius,
    label_slots,
    label_text_for,
    layout_label,
    layout_labels,
    line_offsets,
    radial_budget,
    side_budget,
    trim_once,
    wrap_words,
)
from speedometer.core.types import GaugeConfig


def measure(text: str) -> float:
    return 7.0 * len(text)


def test_label_radius_outer_and_inner() -> None:
    assert label_radius(GaugeConfig()) == 140.0
    assert label_radius(GaugeConfig(padding_segment=True)) == 134.0
    assert label_radius(GaugeConfig(position_label="inner")) == 60.0


def test_radial_budget() -> None:
    assert radial_budget(GaugeConfig()) == 10.0
    assert radial_budget(GaugeConfig(position_label="inner")) == pytest.approx(36.0)


def test_side_budget_is_half_chord_and_capped() -> None:
    assert side_budget(140, 36, 75) == pytest.approx(140 * math.tan(math.radians(18)))
    assert side_budget(140, 90, 75) == 75
    assert side_budget(140, 180, 75) == 75
    assert side_budget(0, 36, 75) == 0.0


def test_slots_symmetric_for_equal_segments() -> None:
    slots = label_slots(GaugeConfig())
    assert len(slots) == 6
    expected = 140 * math.tan(math.radians(18))
    for slot in slots:
        assert slot.available_width_left == pytest.approx(expected)
        assert slot.available_width_right == pytest.approx(expected)
        assert slot.available_width == pytest.approx(2 * expected)


def test_slots_asymmetric_with_custom_stops() -> None:
    slots = label_slots(GaugeConfig(custom_segment_stops=[0, 500, 750, 900, 1000]))
    at_45 = slots[2]
    assert at_45.angle_deg == pytest.approx(45.0)
    assert at_45.available_width_left == pytest.approx(140 * math.tan(math.radians(22.5)))
    assert at_45.available_width_right == pytest.approx(140 * math.tan(math.radians(13.5)))
    # 90 degree gap on the first tick hits the cap (half the radius).
    assert slots[0].available_width_left == pytest.approx(75.0)


def test_label_text_prefers_custom_labels() -> None:
    config = GaugeConfig(segments=2, custom_segment_labels=["Low", "", "High"])
    assert label_text_for(config, 0) == "Low"
    assert label_text_for(config, 1) == "500"
    assert label_text_for(config, 2) == "High"


def test_short_label_is_returned_unmodified() -> None:
    result = layout_label(GaugeConfig(), 5, None, measure)
    assert result.lines == ("1000",)
    assert result.text == "1000"
    assert not result.truncated
    assert not result.suppressed
    assert result.offset_x == 0.0
    assert result.line_offsets == (0.0,)
    assert result.rotation_deg == pytest.approx(90.0)


def test_long_label_wraps_to_two_lines() -> None:
    result = layout_label(GaugeConfig(), 2, "Hello world again", measure)
    assert result.lines == ("Hello world", "again")
    assert not result.truncated
    assert result.line_offsets == pytest.approx((-8.4, 8.4))


def test_overflowing_words_are_dropped_with_ellipsis() -> None:
    result = layout_label(GaugeConfig(), 2, "alpha beta gamma delta epsilon", measure)
    assert result.lines == ("alpha beta", "gamma delta" + ELLIPSIS)
    assert result.truncated


def test_single_long_word_is_trimmed_to_fit() -> None:
    result = layout_label(GaugeConfig(), 2, "Supercalifragilistic", measure)
    assert result.lines == ("Supercalifra" + ELLIPSIS,)
    assert result.truncated
    assert result.width <= result.available_width + LAYOUT_TOLERANCE_PX


def test_narrow_slot_suppresses_long_label() -> None:
    config = GaugeConfig(max_segment_labels=20)
    hidden = layout_label(config, 20, None, measure)
    assert hidden.suppressed
    assert hidden.lines == ()
    shown = layout_label(config, 1, None, measure)
    assert shown.lines == ("50",)
    assert not shown.suppressed


def test_inner_narrow_slot_falls_back_to_vertical_writing() -> None:
    config = GaugeConfig(position_label="inner", max_segment_labels=8)
    result = layout_label(config, 8, None, measure)
    assert result.writing_mode == "vertical"
    assert result.text_anchor == "start"
    assert result.lines == ("1000",)
    assert result.rotation_deg == pytest.approx(180.0)
    assert not result.suppressed


def test_blank_label_has_no_lines() -> None:
    result = layout_label(GaugeConfig(), 0, "   ", measure)
    assert result.lines == ()
    assert not result.suppressed


def test_layout_label_rejects_bad_index() -> None:
    with pytest.raises(IndexError):
        layout_label(GaugeConfig(), 6, None, measure)


@pytest.mark.parametrize(
    "config",
    [
        GaugeConfig(),
        GaugeConfig(max_segment_labels=12),
        GaugeConfig(position_label="inner", max_segment_labels=10),
        GaugeConfig(custom_segment_stops=[0, 500, 750, 900, 1000], padding_segment=True),
        GaugeConfig(width=180, height=180, ring_width=30, ring_inset=10),
    ],
)
@pytest.mark.parametrize(
    "text",
    ["0", "Medium", "Two words", "A rather long label text", "Unbreakablewordthatgoesonandon"],
)
def test_horizontal_lines_never_exceed_slot(config: GaugeConfig, text: str) -> None:
    for index in range(len(label_slots(config))):
        result = layout_label(config, index, text, measure)
        if result.suppressed:
            assert result.lines == ()
            continue
        limit = result.available_width + LAYOUT_TOLERANCE_PX
        assert len(result.lines) <= 2
        assert all(measure(line) <= limit for line in result.lines)


def test_layout_is_deterministic_across_equal_configs() -> None:
    first = layout_labels(GaugeConfig(max_segment_labels=8), measure)
    second = layout_labels(GaugeConfig(max_segment_labels=8), measure)
    assert first == second


def test_centering_offset() -> None:
    assert centering_offset(10, 20, 20) == 0.0
    assert centering_offset(50, 10, 40) == pytest.approx(15.0)
    assert centering_offset(50, 40, 10) == pytest.approx(-15.0)
    assert centering_offset(100, 10, 20) == pytest.approx(5.0)


def test_asymmetric_slot_shifts_label_toward_roomier_side() -> None:
    config = GaugeConfig(custom_segment_stops=[0, 500, 750, 900, 1000])
    result = layout_label(config, 2, "abcdefghij", measure)
    right = 140 * math.tan(math.radians(13.5))
    assert result.lines == ("abcdefghij",)
    assert result.offset_x == pytest.approx(right - 35.0)
    assert result.offset_x < 0


def test_trim_once() -> None:
    assert trim_once("hello world foo") == "hello world" + ELLIPSIS
    assert trim_once("abc") == "ab" + ELLIPSIS
    assert trim_once("a" + ELLIPSIS) == ELLIPSIS
    assert trim_once(ELLIPSIS) == ""


def test_wrap_words_limits_lines() -> None:
    lines, dropped = wrap_words(["aa", "bb", "cc"], 14.0, measure)
    assert lines == ["aa", "bb" + ELLIPSIS]
    assert dropped
    assert wrap_words([], 10.0, measure) == ([], False)


def test_fit_lines_drops_lines_that_cannot_hold_ellipsis() -> None:
    lines, trimmed = fit_lines(["abcdef"], 3.0, measure)
    assert lines == []
    assert trimmed


def test_line_offsets_center_block() -> None:
    assert line_offsets(1, 10) == (0.0,)
    assert line_offsets(2, 10) == (-5.0, 5.0)
    assert line_offsets(3, 10) == (-10.0, 0.0, 10.0)


@pytest.mark.parametrize("max_labels", [2, 10])
def test_custom_stops_label_every_stop_whatever_the_label_count(max_labels: int) -> None:
    config = GaugeConfig(custom_segment_stops=[0, 500, 750, 900, 1000], max_segment_labels=max_labels)
    slots = label_slots(config)
    assert [s.angle_deg for s in slots] == pytest.approx([-90.0, 0.0, 45.0, 72.0, 90.0])
    assert [s.value for s in slots] == [0.0, 500.0, 750.0, 900.0, 1000.0]
    results = layout_labels(config, measure)
    assert [r.lines for r in results] == [("0",), ("500",), ("750",), ("900",), ("1000",)]


def test_zero_segments_have_no_labels() -> None:
    config = GaugeConfig(segments=0)
    assert label_slots(config) == ()
    assert layout_labels(config, measure) == ()
    # An explicit label count does not bring labels back without segments.
    assert layout_labels(GaugeConfig(segments=0, max_segment_labels=4), measure) == ()
