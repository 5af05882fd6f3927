# tests/test_validate_config.py
"""
Tests for GaugeConfig validation: every rejected configuration raises
ConfigurationError with a stable key.
"""

from __future__ import annotations

import pytest

from speedometer.core.error_codes import (
    INVALID_CONFIG_FILE,
    INVALID_DOMAIN,
    INVALID_NEEDLE_RATIO,
    INVALID_PLACEHOLDER,
    INVALID_POSITION_LABEL,
    INVALID_SEGMENT_STOPS,
    INVALID_SEGMENTS,
    INVALID_SWEEP,
    NEGATIVE_DIMENSION,
    RING_TOO_LARGE,
    USER_MESSAGES,
    ConfigurationError,
    user_message,
)
from speedometer.core.types import GaugeConfig


@pytest.mark.parametrize(
    ("kwargs", "key"),
    [
        ({"min_value": 10, "max_value": 10}, INVALID_DOMAIN),
        ({"min_value": 10, "max_value": 0}, INVALID_DOMAIN),
        ({"max_value": float("inf")}, INVALID_DOMAIN),
        ({"min_angle": 90, "max_angle": -90}, INVALID_SWEEP),
        ({"segments": -1}, INVALID_SEGMENTS),
        ({"segments": "abc"}, INVALID_SEGMENTS),
        ({"segments": float("nan")}, INVALID_SEGMENTS),
        ({"segments": True}, INVALID_SEGMENTS),
        ({"max_segment_labels": "3"}, INVALID_SEGMENTS),
        ({"ring_width": float("nan")}, NEGATIVE_DIMENSION),
        ({"segments": 2.5}, INVALID_SEGMENTS),
        ({"max_segment_labels": -1}, INVALID_SEGMENTS),
        ({"custom_segment_stops": [0]}, INVALID_SEGMENT_STOPS),
        ({"custom_segment_stops": [0, 600, 500, 1000]}, INVALID_SEGMENT_STOPS),
        ({"custom_segment_stops": [0, 500, 500, 1000]}, INVALID_SEGMENT_STOPS),
        ({"custom_segment_stops": [100, 500, 1000]}, INVALID_SEGMENT_STOPS),
        ({"custom_segment_stops": [0, 500, 900]}, INVALID_SEGMENT_STOPS),
        ({"ring_width": -1}, NEGATIVE_DIMENSION),
        ({"width": -300}, NEGATIVE_DIMENSION),
        ({"label_inset": -5}, NEGATIVE_DIMENSION),
        ({"ring_width": 140, "ring_inset": 20}, RING_TOO_LARGE),
        ({"needle_height_ratio": 1.5}, INVALID_NEEDLE_RATIO),
        ({"needle_height_ratio": -0.1}, INVALID_NEEDLE_RATIO),
        ({"position_label": "left"}, INVALID_POSITION_LABEL),
        ({"current_value_placeholder_style": "{value}"}, INVALID_PLACEHOLDER),
    ],
)
def test_invalid_config_raises_with_key(kwargs: dict, key: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        GaugeConfig(**kwargs)
    assert exc_info.value.key == key


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        GaugeConfig(segments=-1)


def test_valid_edge_configs_are_accepted() -> None:
    assert GaugeConfig(segments=1).segments == 1
    assert GaugeConfig(max_segment_labels=0).label_count == 0
    assert GaugeConfig(ring_width=130, ring_inset=20).ring_width == 130
    assert GaugeConfig(needle_height_ratio=0.0).needle_height_ratio == 0.0
    config = GaugeConfig(custom_segment_stops=[0, 1000])
    assert config.custom_segment_stops == (0.0, 1000.0)


def test_sequences_are_frozen_as_tuples() -> None:
    config = GaugeConfig(segment_colors=["red", "blue"], custom_segment_labels=["a"])
    assert config.segment_colors == ("red", "blue")
    assert config.custom_segment_labels == ("a",)
    assert hash(config.segment_colors)


def test_error_message_includes_user_message_and_detail() -> None:
    err = ConfigurationError(INVALID_SEGMENTS, "segments=-1")
    assert err.key == INVALID_SEGMENTS
    assert err.detail == "segments=-1"
    assert str(err).startswith(USER_MESSAGES[INVALID_SEGMENTS])
    assert "segments=-1" in str(err)


def test_user_message_fallback() -> None:
    assert user_message(INVALID_CONFIG_FILE) == USER_MESSAGES[INVALID_CONFIG_FILE]
    assert user_message("no_such_key", "fallback") == "fallback"


def test_zero_segments_is_accepted_as_degenerate_gauge() -> None:
    config = GaugeConfig(segments=0)
    assert config.segments == 0
    assert config.label_count == 0
    assert GaugeConfig(segments=0, max_segment_labels=3).label_count == 0
    # Custom stops still partition the arc, but labels stay off unless asked for.
    assert GaugeConfig(segments=0, custom_segment_stops=[0, 400, 1000]).label_count == 0
    assert GaugeConfig(segments=0, custom_segment_stops=[0, 400, 1000], max_segment_labels=2).label_count == 2
