# speedometer/core/presets.py
"""
Named demo gauges, written as component props (camelCase) and built through
config_from_dict. Used by the CLI (--preset) and the Streamlit preview.
"""

from __future__ import annotations

from typing import Any

from speedometer.core.io import config_from_dict
from speedometer.core.types import GaugeConfig

_HOVER_LABELS = [f"Label {i}" for i in range(1, 9)]
_TRICOLOR = ["#FF9933", "#ECEFF4", "#138808"]

PRESETS: dict[str, dict[str, Any]] = {
    "default": {},
    "configuring_values": {
        "maxValue": 500,
        "value": 473,
        "needleColor": "red",
        "startColor": "green",
        "segments": 10,
        "endColor": "blue",
        "textColor": "grey",
    },
    "custom_segment_stops": {
        "needleHeightRatio": 0.7,
        "maxSegmentLabels": 5,
        "segments": 3,
        "customSegmentStops": [0, 500, 750, 900, 1000],
        "segmentColors": ["firebrick", "tomato", "gold", "limegreen"],
        "value": 333,
    },
    "value_format": {
        "maxValue": 150,
        "value": 70.7,
        "valueFormat": "d",
        "customSegmentStops": [0, 50, 70, 90, 150],
        "segmentColors": ["#bf616a", "#d08770", "#ebcb8b", "#a3be8c"],
    },
    "custom_value_text": {
        "value": 333,
        "currentValueText": "Current Value: #{value}",
        "currentValuePlaceholderStyle": "#{value}",
    },
    "gradient": {
        "needleHeightRatio": 0.7,
        "maxSegmentLabels": 5,
        "segments": 1000,
        "value": 333,
    },
    "no_labels": {
        "maxSegmentLabels": 0,
        "segments": 4,
        "value": 333,
        "startColor": "#2E3440",
        "endColor": "#4C566A",
        "needleColor": "#D8DEE9",
    },
    "padding_segments": {
        "paddingSegment": True,
        "maxSegmentLabels": 12,
        "segments": 3,
        "value": 470,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
    "hover_labels": {
        "maxValue": 500,
        "value": 473,
        "growSegmentOnHover": True,
        "segmentLabels": _HOVER_LABELS,
        "paddingSegment": True,
        "segments": 10,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
    "inner_labels": {
        "positionLabel": "inner",
        "maxValue": 500,
        "value": 473,
        "growSegmentOnHover": True,
        "segmentLabels": _HOVER_LABELS,
        "paddingSegment": True,
        "segments": 10,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
        "width": 800,
        "height": 800,
    },
    "out_of_range": {
        "maxValue": 500,
        "value": 1100,
        "paddingSegment": True,
        "segments": 10,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
    "custom_stop_labels": {
        "positionLabel": "inner",
        "value": 473,
        "growSegmentOnHover": True,
        "customSegmentStops": [0, 500, 750, 900, 1000],
        "customSegmentLabels": ["Label 1", "Label 2"],
        "segmentLabels": _HOVER_LABELS,
        "paddingSegment": True,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
    "adaptive_labels": {
        "width": 800,
        "height": 600,
        "positionLabel": "outer",
        "value": 500,
        "maxValue": 40,
        "growSegmentOnHover": True,
        "segmentLabels": _HOVER_LABELS,
        "paddingSegment": True,
        "customSegmentStops": [0, 20, 30, 40],
        "customSegmentLabels": [
            "1wwwwwwwwwwwwwwwwww1 2wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww2",
            "Label2 Lab el2Label 2",
            "Label 3",
            "Label7Label7Label7Label7Label7",
        ],
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
    "custom_title": {
        "title": "Custom title",
        "maxValue": 500,
        "value": 473,
        "growSegmentOnHover": True,
        "paddingSegment": True,
        "segments": 10,
        "segmentColors": _TRICOLOR,
        "needleColor": "#000080",
    },
}


def preset_names() -> list[str]:
    return list(PRESETS)


def preset_config(name: str, **overrides: Any) -> GaugeConfig:
    """Build the named preset; keyword overrides use GaugeConfig field names."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}; choose from {', '.join(PRESETS)}")
    return config_from_dict(PRESETS[name], **overrides)
