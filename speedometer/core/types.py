# speedometer/core/types.py
"""
Dataclasses for gauge configuration, arc descriptors, label slots and layout results.
GaugeConfig is immutable and validated at construction; geometry code trusts it.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional

from speedometer.core.config import (
    DEFAULT_CURRENT_VALUE_TEXT,
    DEFAULT_END_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_HEIGHT,
    DEFAULT_LABEL_FONT_SIZE_PX,
    DEFAULT_LABEL_INSET,
    DEFAULT_MAX_ANGLE,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_ANGLE,
    DEFAULT_MIN_VALUE,
    DEFAULT_NEEDLE_COLOR,
    DEFAULT_NEEDLE_HEIGHT_RATIO,
    DEFAULT_NEEDLE_TRANSITION,
    DEFAULT_NEEDLE_TRANSITION_DURATION_MS,
    DEFAULT_POINTER_TAIL_LENGTH,
    DEFAULT_POINTER_WIDTH,
    DEFAULT_RING_INSET,
    DEFAULT_RING_WIDTH,
    DEFAULT_SEGMENTS,
    DEFAULT_START_COLOR,
    DEFAULT_TEXT_COLOR,
    DEFAULT_VALUE_FONT_SIZE_PX,
    DEFAULT_WIDTH,
    VALUE_PLACEHOLDERS,
)
from speedometer.core.error_codes import (
    INVALID_DOMAIN,
    INVALID_NEEDLE_RATIO,
    INVALID_PLACEHOLDER,
    INVALID_POSITION_LABEL,
    INVALID_SEGMENT_STOPS,
    INVALID_SEGMENTS,
    INVALID_SWEEP,
    NEGATIVE_DIMENSION,
    RING_TOO_LARGE,
    ConfigurationError,
)


PositionLabel = Literal["outer", "inner"]
StubEdge = Literal["start", "end"]
WritingMode = Literal["horizontal", "vertical"]

_NON_NEGATIVE_FIELDS = (
    "width",
    "height",
    "ring_width",
    "ring_inset",
    "label_inset",
    "pointer_width",
    "pointer_tail_length",
    "label_font_size_px",
    "value_font_size_px",
    "needle_transition_duration",
)


def _count(value: object, name: str) -> int:
    """Non-negative whole number (int or integral float) as int; ConfigurationError otherwise."""
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not math.isfinite(value)
        or int(value) != value
        or value < 0
    ):
        raise ConfigurationError(INVALID_SEGMENTS, f"{name}={value!r}")
    return int(value)


@dataclass(frozen=True)
class GaugeConfig:
    """
    One configuration snapshot per render pass.
    Sequences are stored as tuples so the object stays immutable.
    label_format is excluded from equality and hashing: two configs differing
    only in their formatter compare equal, and so do their layout results.
    segments == 0 (without custom stops) is a degenerate gauge with no arcs
    and no labels.
    """
    min_value: float = DEFAULT_MIN_VALUE
    max_value: float = DEFAULT_MAX_VALUE
    segments: int = DEFAULT_SEGMENTS
    max_segment_labels: Optional[int] = None
    custom_segment_stops: tuple[float, ...] = ()
    segment_colors: tuple[str, ...] = ()
    segment_labels: tuple[str, ...] = ()
    custom_segment_labels: tuple[str, ...] = ()

    min_angle: float = DEFAULT_MIN_ANGLE
    max_angle: float = DEFAULT_MAX_ANGLE

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    ring_width: float = DEFAULT_RING_WIDTH
    ring_inset: float = DEFAULT_RING_INSET
    label_inset: float = DEFAULT_LABEL_INSET
    pointer_width: float = DEFAULT_POINTER_WIDTH
    pointer_tail_length: float = DEFAULT_POINTER_TAIL_LENGTH
    needle_height_ratio: float = DEFAULT_NEEDLE_HEIGHT_RATIO

    position_label: PositionLabel = "outer"
    padding_segment: bool = False
    grow_segment_on_hover: bool = False

    value: float = 0.0
    current_value_text: str = DEFAULT_CURRENT_VALUE_TEXT
    current_value_placeholder_style: str = "${value}"
    needle_transition_duration: float = DEFAULT_NEEDLE_TRANSITION_DURATION_MS
    needle_transition: str = DEFAULT_NEEDLE_TRANSITION
    title: str = ""

    start_color: str = DEFAULT_START_COLOR
    end_color: str = DEFAULT_END_COLOR
    needle_color: str = DEFAULT_NEEDLE_COLOR
    text_color: str = DEFAULT_TEXT_COLOR

    value_format: str = ""
    label_format: Optional[Callable[[float], str]] = field(default=None, compare=False)

    font_family: str = DEFAULT_FONT_FAMILY
    label_font_size_px: float = DEFAULT_LABEL_FONT_SIZE_PX
    value_font_size_px: float = DEFAULT_VALUE_FONT_SIZE_PX

    def __post_init__(self) -> None:
        # Normalize list inputs to tuples (frozen: go through object.__setattr__).
        for name in ("custom_segment_stops", "segment_colors", "segment_labels", "custom_segment_labels"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value or ()))
        object.__setattr__(
            self, "custom_segment_stops", tuple(float(s) for s in self.custom_segment_stops)
        )
        self._validate()

    def _validate(self) -> None:
        if not (math.isfinite(self.min_value) and math.isfinite(self.max_value)):
            raise ConfigurationError(INVALID_DOMAIN, "bounds must be finite")
        if self.min_value >= self.max_value:
            raise ConfigurationError(INVALID_DOMAIN, f"min={self.min_value}, max={self.max_value}")
        if self.min_angle >= self.max_angle:
            raise ConfigurationError(INVALID_SWEEP, f"minAngle={self.min_angle}, maxAngle={self.max_angle}")
        # Counts arrive as JSON numbers; store them as ints once validated.
        object.__setattr__(self, "segments", _count(self.segments, "segments"))
        if self.max_segment_labels is not None:
            object.__setattr__(
                self, "max_segment_labels", _count(self.max_segment_labels, "maxSegmentLabels")
            )
        for name in _NON_NEGATIVE_FIELDS:
            if not math.isfinite(getattr(self, name)) or getattr(self, name) < 0:
                raise ConfigurationError(NEGATIVE_DIMENSION, f"{name}={getattr(self, name)}")
        if self.ring_width + self.ring_inset > self.width / 2.0:
            raise ConfigurationError(
                RING_TOO_LARGE,
                f"ringWidth={self.ring_width}, ringInset={self.ring_inset}, width={self.width}",
            )
        if not 0.0 <= self.needle_height_ratio <= 1.0:
            raise ConfigurationError(INVALID_NEEDLE_RATIO, f"needleHeightRatio={self.needle_height_ratio}")
        if self.position_label not in ("outer", "inner"):
            raise ConfigurationError(INVALID_POSITION_LABEL, repr(self.position_label))
        if self.current_value_placeholder_style not in VALUE_PLACEHOLDERS:
            raise ConfigurationError(INVALID_PLACEHOLDER, repr(self.current_value_placeholder_style))
        self._validate_stops()

    def _validate_stops(self) -> None:
        stops = self.custom_segment_stops
        if not stops:
            return
        if len(stops) < 2:
            raise ConfigurationError(INVALID_SEGMENT_STOPS, "need at least two stops")
        if any(b <= a for a, b in zip(stops, stops[1:])):
            raise ConfigurationError(INVALID_SEGMENT_STOPS, f"not strictly increasing: {list(stops)}")
        if not (math.isclose(stops[0], self.min_value) and math.isclose(stops[-1], self.max_value)):
            raise ConfigurationError(
                INVALID_SEGMENT_STOPS,
                f"stops span [{stops[0]}, {stops[-1]}], domain is [{self.min_value}, {self.max_value}]",
            )

    @property
    def sweep(self) -> float:
        """Total angular range in degrees."""
        return self.max_angle - self.min_angle

    @property
    def radius(self) -> float:
        return self.width / 2.0

    @property
    def label_count(self) -> int:
        """Number of label intervals (maxSegmentLabels, defaulting to segments); 0 for a zero-segment gauge."""
        if self.segments == 0 and not self.custom_segment_stops:
            return 0
        return self.segments if self.max_segment_labels is None else self.max_segment_labels


@dataclass(frozen=True)
class ArcDescriptor:
    """Annular sector in gauge-center coordinates; angles in degrees, 0 = 12 o'clock, clockwise."""
    index: int
    inner_radius: float
    outer_radius: float
    start_angle_deg: float
    end_angle_deg: float

    @property
    def sweep_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg


@dataclass(frozen=True)
class LabelSlot:
    """Space available to the label of one tick. Widths in px, measured along the tangent."""
    index: int
    value: float
    angle_deg: float
    radius: float
    available_width_left: float
    available_width_right: float
    radial_width: float

    @property
    def available_width(self) -> float:
        return self.available_width_left + self.available_width_right


@dataclass(frozen=True)
class LabelLayoutResult:
    """
    Placed label text for one tick.
    offset_x shifts the block along the tangent (positive = toward larger angles);
    line_offsets are per-line dy in the rotated label frame.
    """
    index: int
    text: str
    lines: tuple[str, ...]
    truncated: bool
    rotation_deg: float
    suppressed: bool = False
    writing_mode: WritingMode = "horizontal"
    text_anchor: str = "middle"
    offset_x: float = 0.0
    line_offsets: tuple[float, ...] = ()
    width: float = 0.0
    available_width: float = 0.0


@dataclass(frozen=True)
class TooltipContent:
    """Hover tooltip for one segment."""
    index: int
    text: str
    color: str
