# tests/test_io.py
"""
Tests for loading gauge configuration from mappings, JSON files and presets.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from speedometer.core.error_codes import (
    INVALID_CONFIG_FILE,
    INVALID_SEGMENT_STOPS,
    INVALID_SEGMENTS,
    UNKNOWN_FIELD,
    ConfigurationError,
)
from speedometer.core.io import config_from_dict, load_config, normalize_keys
from speedometer.core.presets import PRESETS, preset_config, preset_names
from speedometer.core.runner import main


def test_camel_case_props_map_to_fields() -> None:
    config = config_from_dict(
        {
            "maxValue": 500,
            "maxSegmentLabels": 5,
            "customSegmentStops": [0, 100, 500],
            "needleHeightRatio": 0.7,
            "positionLabel": "inner",
            "majorTicks": 3,
        }
    )
    assert config.max_value == 500
    assert config.max_segment_labels == 5
    assert config.custom_segment_stops == (0.0, 100.0, 500.0)
    assert config.needle_height_ratio == 0.7
    assert config.position_label == "inner"
    assert config.segments == 3


def test_snake_case_and_px_strings() -> None:
    kwargs = normalize_keys({"ring_width": 40, "labelFontSize": "12px", "valueTextFontSize": "18.5 px"})
    assert kwargs == {"ring_width": 40, "label_font_size_px": 12.0, "value_font_size_px": 18.5}


def test_bad_px_string_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        config_from_dict({"labelFontSize": "large"})
    assert exc_info.value.key == INVALID_CONFIG_FILE


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        config_from_dict({"maxValue": 10, "colour": "red"})
    assert exc_info.value.key == UNKNOWN_FIELD
    assert exc_info.value.detail == "colour"


def test_overrides_win_over_data() -> None:
    config = config_from_dict({"value": 10, "positionLabel": "inner"}, position_label="outer")
    assert config.position_label == "outer"
    assert config.value == 10


def test_non_mapping_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        config_from_dict([1, 2, 3])  # type: ignore[arg-type]


def test_load_config_from_repo_relative_path(tmp_path: Path) -> None:
    (tmp_path / "gauges").mkdir()
    (tmp_path / "gauges" / "g.json").write_text(
        json.dumps({"segments": 4, "segmentLabels": ["a", "b", "c", "d"]}), encoding="utf-8"
    )
    config = load_config("gauges/g.json", repo_root=tmp_path)
    assert config.segments == 4
    assert config.segment_labels == ("a", "b", "c", "d")


def test_load_config_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(bad)
    assert exc_info.value.key == INVALID_CONFIG_FILE
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"customSegmentStops": [0, 2000]}), encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(invalid)
    assert exc_info.value.key == INVALID_SEGMENT_STOPS


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_every_preset_builds(name: str) -> None:
    config = preset_config(name)
    assert config.sweep > 0
    assert name in preset_names()


def test_unknown_preset_raises_key_error() -> None:
    with pytest.raises(KeyError):
        preset_config("nope")


@pytest.mark.parametrize("segments", ["abc", float("nan"), 2.5, -3])
def test_bad_segment_counts_raise_configuration_error(segments: object) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        config_from_dict({"segments": segments})
    assert exc_info.value.key == INVALID_SEGMENTS


def test_wrong_json_types_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        config_from_dict({"customSegmentStops": [0, "half", 1000]})
    assert exc_info.value.key == INVALID_CONFIG_FILE
    with pytest.raises(ConfigurationError):
        config_from_dict({"ringWidth": "wide"})


def test_integral_float_segments_from_json() -> None:
    config = config_from_dict(json.loads('{"segments": 4.0, "maxSegmentLabels": 2.0}'))
    assert config.segments == 4
    assert isinstance(config.segments, int)
    assert isinstance(config.max_segment_labels, int)


def test_runner_exits_cleanly_on_non_numeric_segments(tmp_path: Path) -> None:
    (tmp_path / "g.json").write_text(json.dumps({"segments": "abc"}), encoding="utf-8")
    assert main(["--config", "g.json", "--repo-root", str(tmp_path)]) == 2
