# speedometer/core/config.py
"""
Central configuration for gauge geometry and label layout.
All tunable values live here; no magic numbers in other modules.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Gauge defaults (GaugeConfig field defaults) -----
DEFAULT_MIN_VALUE: float = 0.0
DEFAULT_MAX_VALUE: float = 1000.0
DEFAULT_SEGMENTS: int = 5
DEFAULT_MIN_ANGLE: float = -90.0
DEFAULT_MAX_ANGLE: float = 90.0

DEFAULT_WIDTH: float = 300.0
DEFAULT_HEIGHT: float = 300.0
DEFAULT_RING_WIDTH: float = 60.0
DEFAULT_RING_INSET: float = 20.0
DEFAULT_LABEL_INSET: float = 10.0
DEFAULT_POINTER_WIDTH: float = 10.0
DEFAULT_POINTER_TAIL_LENGTH: float = 5.0
DEFAULT_NEEDLE_HEIGHT_RATIO: float = 0.9

DEFAULT_START_COLOR: str = "#FF471A"
DEFAULT_END_COLOR: str = "#33CC33"
DEFAULT_NEEDLE_COLOR: str = "steelblue"
DEFAULT_TEXT_COLOR: str = "#666"
DEFAULT_SEGMENT_STROKE_COLOR: str = "#fff"

DEFAULT_CURRENT_VALUE_TEXT: str = "${value}"
DEFAULT_NEEDLE_TRANSITION: str = "easeQuadInOut"
DEFAULT_NEEDLE_TRANSITION_DURATION_MS: int = 500

VALUE_PLACEHOLDERS: tuple[str, ...] = ("${value}", "#{value}")
"""Accepted placeholder styles inside current_value_text."""

# ----- Default font -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_LABEL_FONT_SIZE_PX: float = 14.0
DEFAULT_VALUE_FONT_SIZE_PX: float = 16.0
FALLBACK_FONT_FILES: tuple[str, ...] = ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf")
"""TrueType files tried, in order, when the requested family has no file of its own."""

# ----- Arc geometry -----
HOVER_GROWTH_PX: float = 10.0
"""Radial growth (px) of a hovered segment."""

STROKE_RING_FRACTION: float = 0.1
"""Stroke width between padded segments as a fraction of ring thickness (rounded up)."""

ARC_POLYGON_POINTS: int = 48
"""Points per arc edge when an arc descriptor is converted to a polygon."""

# ----- Needle -----
NEEDLE_OVERRANGE_DEG: float = 10.0
"""Needle rests this far past min/max angle when the value is out of range."""

CURRENT_VALUE_OFFSET_Y_PX: float = 23.0
TITLE_OFFSET_Y_PX: float = 40.0

# ----- Label layout. See docs/ALGORITHM.md L1-L7 -----
LABEL_PROBE_TEXT: str = "wwww…"
"""Probe string whose measured width is the minimum drawable label width (L3)."""

ELLIPSIS: str = "…"
"""Marker appended to truncated label text."""

MAX_LABEL_LINES: int = 2
"""Greedy wrap never produces more lines than this (L4)."""

TRIM_WHITESPACE_WINDOW: int = 5
"""When trimming, cut at the last whitespace within this many trailing characters (L5)."""

LABEL_MAX_SIDE_RATIO: float = 0.5
"""Cap for each side budget, as a fraction of the gauge radius (L2)."""

LABEL_RADIAL_RATIO: float = 0.6
"""Radial budget for inner labels as a fraction of the label radius (vertical writing)."""

LABEL_LINE_HEIGHT_RATIO: float = 1.2
"""Line height as a multiple of label font size (L7)."""

LAYOUT_TOLERANCE_PX: float = 0.5
"""Slack (px) when comparing measured widths with available widths."""

# ----- Rendering -----
RENDER_DPI: int = 100

# ----- Debug flags -----
SPEEDOMETER_DEBUG: bool = os.environ.get("SPEEDOMETER_DEBUG", "").lower() in ("1", "true", "yes")
"""Emit layout debug logging. Set env SPEEDOMETER_DEBUG=1 to enable."""
