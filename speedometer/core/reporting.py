# speedometer/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json (computed geometry) and
run_metadata.json (timestamp + tunables snapshot).
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from speedometer.core.arcs import arcs_for, stroke_width_for, stubs_for
from speedometer.core.colors import segment_colors_for, tooltip_for
from speedometer.core.config import (
    ELLIPSIS,
    HOVER_GROWTH_PX,
    LABEL_MAX_SIDE_RATIO,
    LABEL_PROBE_TEXT,
    LAYOUT_TOLERANCE_PX,
    MAX_LABEL_LINES,
    NEEDLE_OVERRANGE_DEG,
    REPORTS_DIR,
    STROKE_RING_FRACTION,
)
from speedometer.core.formatting import format_current_value_text
from speedometer.core.labels import label_slots, layout_labels
from speedometer.core.needle import needle_length, resolve_needle_angle
from speedometer.core.scale import build_tick_data, build_ticks
from speedometer.core.text_metrics import Measure
from speedometer.core.types import GaugeConfig

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def config_to_dict(config: GaugeConfig) -> dict:
    """JSON-safe snapshot of the configuration (label_format is not serializable)."""
    out = {}
    for f in fields(config):
        if f.name == "label_format":
            continue
        value = getattr(config, f.name)
        out[f.name] = list(value) if isinstance(value, tuple) else value
    return out


def layout_to_dict(
    config: GaugeConfig,
    value: Optional[float] = None,
    measure: Optional[Measure] = None,
) -> dict:
    """Exact structure for layout.json."""
    v = config.value if value is None else value
    colors = segment_colors_for(config)
    labels = []
    for slot, layout in zip(label_slots(config), layout_labels(config, measure)):
        labels.append(
            {
                "index": slot.index,
                "value": slot.value,
                "angle_deg": slot.angle_deg,
                "radius": slot.radius,
                "available_width_left": slot.available_width_left,
                "available_width_right": slot.available_width_right,
                "text": layout.text,
                "lines": list(layout.lines),
                "truncated": layout.truncated,
                "suppressed": layout.suppressed,
                "writing_mode": layout.writing_mode,
                "rotation_deg": layout.rotation_deg,
                "offset_x": layout.offset_x,
            }
        )
    segments = []
    for desc in arcs_for(config):
        tip = tooltip_for(config, desc.index)
        segments.append(
            {
                **asdict(desc),
                "color": colors[desc.index],
                "tooltip": tip.text if tip is not None else None,
            }
        )
    return {
        "schema_version": SCHEMA_VERSION,
        "config": config_to_dict(config),
        "scale": {"min_value": config.min_value, "max_value": config.max_value},
        "ticks": list(build_ticks(config)),
        "tick_data": list(build_tick_data(config)),
        "stroke_width": stroke_width_for(config),
        "segments": segments,
        "stubs": [asdict(s) for s in stubs_for(config)],
        "labels": labels,
        "needle": {
            "value": v,
            "angle_deg": resolve_needle_angle(config, v),
            "length": needle_length(config),
            "text": format_current_value_text(config, v),
        },
    }


def run_metadata_dict(run_name: str, source: str, value: float) -> dict:
    """Timestamp and tunables snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "value": value,
        "config": {
            "HOVER_GROWTH_PX": HOVER_GROWTH_PX,
            "STROKE_RING_FRACTION": STROKE_RING_FRACTION,
            "NEEDLE_OVERRANGE_DEG": NEEDLE_OVERRANGE_DEG,
            "LABEL_PROBE_TEXT": LABEL_PROBE_TEXT,
            "ELLIPSIS": ELLIPSIS,
            "MAX_LABEL_LINES": MAX_LABEL_LINES,
            "LABEL_MAX_SIDE_RATIO": LABEL_MAX_SIDE_RATIO,
            "LAYOUT_TOLERANCE_PX": LAYOUT_TOLERANCE_PX,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(
    report_dir: Path,
    config: GaugeConfig,
    value: Optional[float] = None,
    measure: Optional[Measure] = None,
) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(config, value=value, measure=measure)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path


def write_run_metadata_json(report_dir: Path, run_name: str, source: str, value: float) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, source, value)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
