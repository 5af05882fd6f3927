# speedometer/core/labels.py
"""
Tick label layout: per-tick width budgets from neighbor angles, greedy word
wrap, measured trimming with ellipsis, vertical fallback and suppression.
Text measurement is injected (measure(text) -> width_px), so the algorithm
runs without a rendering surface. See: docs/ALGORITHM.md L1-L7.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from speedometer.core.arcs import ring_radii, stroke_width_for
from speedometer.core.cache import memoize_one
from speedometer.core.config import (
    ELLIPSIS,
    LABEL_LINE_HEIGHT_RATIO,
    LABEL_MAX_SIDE_RATIO,
    LABEL_PROBE_TEXT,
    LABEL_RADIAL_RATIO,
    LAYOUT_TOLERANCE_PX,
    MAX_LABEL_LINES,
    SPEEDOMETER_DEBUG,
    TRIM_WHITESPACE_WINDOW,
)
from speedometer.core.formatting import format_value
from speedometer.core.scale import build_ticks, tick_angles
from speedometer.core.text_metrics import Measure, default_measure
from speedometer.core.types import GaugeConfig, LabelLayoutResult, LabelSlot

logger = logging.getLogger(__name__)
if SPEEDOMETER_DEBUG:
    logger.setLevel(logging.DEBUG)


def label_radius(config: GaugeConfig) -> float:
    """Distance from the gauge center to the label anchor."""
    r = config.radius - stroke_width_for(config)
    if config.position_label == "inner":
        r -= config.ring_width + config.ring_inset
    return max(0.0, r - config.label_inset)


def radial_budget(config: GaugeConfig) -> float:
    """Room (px) for vertically written text starting at the label anchor."""
    r = label_radius(config)
    if config.position_label == "inner":
        inner, _ = ring_radii(config)
        return max(0.0, min(r, inner) * LABEL_RADIAL_RATIO)
    return max(0.0, config.radius - r)


def side_budget(radius: float, gap_deg: float, cap: float) -> float:
    """
    Tangential room on one side of a tick: r * tan(gap / 2), i.e. half of the
    2 r tan(halfAngle) width a symmetric slot of this gap would have. Capped.
    """
    half = math.radians(gap_deg) / 2.0
    if half <= 0 or radius <= 0:
        return 0.0
    if half >= math.pi / 2:
        return cap
    return min(radius * math.tan(half), cap)


@memoize_one
def label_slots(config: GaugeConfig) -> tuple[LabelSlot, ...]:
    """One slot per tick (L1, L2). Boundary ticks reuse the adjacent gap."""
    angles = tick_angles(config)
    ticks = build_ticks(config)
    r = label_radius(config)
    radial = radial_budget(config)
    cap = LABEL_MAX_SIDE_RATIO * config.radius
    n = len(angles)
    slots: list[LabelSlot] = []
    for i, angle in enumerate(angles):
        before: Optional[float] = angle - angles[i - 1] if i > 0 else None
        after: Optional[float] = angles[i + 1] - angle if i < n - 1 else None
        if before is None and after is None:
            before = after = config.sweep
        elif before is None:
            before = after
        elif after is None:
            after = before
        slots.append(
            LabelSlot(
                index=i,
                value=ticks[i],
                angle_deg=angle,
                radius=r,
                available_width_left=side_budget(r, before, cap),
                available_width_right=side_budget(r, after, cap),
                radial_width=radial,
            )
        )
    return tuple(slots)


def label_text_for(config: GaugeConfig, index: int) -> str:
    """custom_segment_labels[index] when present, else the formatted tick value."""
    if index < len(config.custom_segment_labels) and config.custom_segment_labels[index]:
        return config.custom_segment_labels[index]
    return format_value(config, build_ticks(config)[index])


def wrap_words(
    words: list[str],
    width: float,
    measure: Measure,
    max_lines: int = MAX_LABEL_LINES,
) -> tuple[list[str], bool]:
    """
    Greedy wrap (L4). A word that alone exceeds width stops wrapping; words that
    do not fit within max_lines are dropped and the last placed word gets an
    ellipsis. Returns (lines, truncated).
    """
    if not words:
        return [], False
    lines: list[list[str]] = []
    current: list[str] = []
    dropped = False
    for pos, word in enumerate(words):
        if measure(" ".join(current + [word])) <= width:
            current.append(word)
            continue
        if not current:
            # Cannot split a single word; keep it and let trimming handle it.
            current.append(word)
            dropped = pos + 1 < len(words)
            break
        if len(lines) + 1 >= max_lines:
            dropped = True
            break
        lines.append(current)
        current = [word]
        if measure(word) > width:
            dropped = pos + 1 < len(words)
            break
    lines.append(current)
    if dropped:
        lines[-1][-1] += ELLIPSIS
    return [" ".join(line) for line in lines], dropped


def trim_once(line: str, window: int = TRIM_WHITESPACE_WINDOW) -> str:
    """Drop one trailing character (or back to nearby whitespace) and re-append the ellipsis."""
    body = line[: -len(ELLIPSIS)] if line.endswith(ELLIPSIS) else line
    if not body:
        return ""
    body = body[:-1]
    cut = body.rfind(" ", max(0, len(body) - window))
    if cut > 0:
        body = body[:cut]
    return body.rstrip() + ELLIPSIS


def fit_lines(
    lines: list[str],
    width: float,
    measure: Measure,
    tolerance: float = LAYOUT_TOLERANCE_PX,
) -> tuple[list[str], bool]:
    """
    Trim the widest line until every line fits (L5). A line that cannot hold even
    the ellipsis becomes empty. Returns (lines, trimmed).
    """
    out = list(lines)
    trimmed = False
    while out:
        widths = [measure(line) for line in out]
        i = max(range(len(out)), key=lambda k: widths[k])
        if widths[i] <= width + tolerance:
            break
        out[i] = trim_once(out[i])
        trimmed = True
    return [line for line in out if line], trimmed


def centering_offset(block_width: float, left: float, right: float) -> float:
    """
    Tangential shift keeping the block inside [-left, right] (L6). Zero when a
    centered block already fits; the slot center when it cannot fit at all.
    """
    half = block_width / 2.0
    lo = half - left
    hi = right - half
    if lo > hi:
        return (right - left) / 2.0
    return min(max(0.0, lo), hi)


def line_offsets(n_lines: int, line_height: float) -> tuple[float, ...]:
    """Per-line dy so the block is centered on the anchor (L7)."""
    return tuple((k - (n_lines - 1) / 2.0) * line_height for k in range(n_lines))


def _vertical_layout(
    config: GaugeConfig,
    slot: LabelSlot,
    text: str,
    measure: Measure,
    line_height: float,
    min_width: float,
) -> Optional[LabelLayoutResult]:
    """Radial writing when the tangential slot is too narrow; None if it does not help."""
    if slot.available_width + LAYOUT_TOLERANCE_PX < line_height:
        return None
    if measure(text) <= slot.radial_width + LAYOUT_TOLERANCE_PX:
        lines, truncated = [text], False
    elif slot.radial_width >= min_width:
        lines, truncated = fit_lines([text], slot.radial_width, measure)
    else:
        return None
    if not lines:
        return None
    # Outer labels run outward from the anchor, inner labels toward the center.
    turn = -90.0 if config.position_label == "outer" else 90.0
    return LabelLayoutResult(
        index=slot.index,
        text=text,
        lines=tuple(lines),
        truncated=truncated,
        rotation_deg=slot.angle_deg + turn,
        writing_mode="vertical",
        text_anchor="start",
        offset_x=0.0,
        line_offsets=(0.0,),
        width=measure(lines[0]),
        available_width=slot.radial_width,
    )


def _resolve_measure(config: GaugeConfig, measure: Optional[Measure]) -> Measure:
    return measure if measure is not None else default_measure(config.font_family, config.label_font_size_px)


@memoize_one
def layout_label(
    config: GaugeConfig,
    index: int,
    text: Optional[str] = None,
    measure: Optional[Measure] = None,
) -> LabelLayoutResult:
    """Fit the label of tick index into its slot."""
    slots = label_slots(config)
    if not 0 <= index < len(slots):
        raise IndexError(f"tick index {index} out of range (0..{len(slots) - 1})")
    slot = slots[index]
    measure = _resolve_measure(config, measure)
    text = label_text_for(config, index) if text is None else text
    available = slot.available_width
    line_height = config.label_font_size_px * LABEL_LINE_HEIGHT_RATIO

    def horizontal(lines: list[str], truncated: bool) -> LabelLayoutResult:
        width = max((measure(line) for line in lines), default=0.0)
        return LabelLayoutResult(
            index=index,
            text=text,
            lines=tuple(lines),
            truncated=truncated,
            rotation_deg=slot.angle_deg,
            offset_x=centering_offset(width, slot.available_width_left, slot.available_width_right),
            line_offsets=line_offsets(len(lines), line_height),
            width=width,
            available_width=available,
        )

    if not text.strip():
        return horizontal([], False)
    if measure(text) <= available + LAYOUT_TOLERANCE_PX:
        return horizontal([text], False)

    min_width = measure(LABEL_PROBE_TEXT)
    if available < min_width:
        vertical = _vertical_layout(config, slot, text, measure, line_height, min_width)
        if vertical is not None:
            logger.debug(f"Label {index}: vertical writing ({available:.1f}px tangential)")
            return vertical
        logger.debug(f"Label {index}: suppressed, {available:.1f}px < minimum {min_width:.1f}px")
        return LabelLayoutResult(
            index=index,
            text=text,
            lines=(),
            truncated=True,
            rotation_deg=slot.angle_deg,
            suppressed=True,
            available_width=available,
        )

    lines, truncated = wrap_words(text.split(), available, measure)
    lines, trimmed = fit_lines(lines, available, measure)
    if truncated or trimmed:
        logger.debug(f"Label {index}: truncated {text!r} -> {lines!r}")
    return horizontal(lines, truncated or trimmed)


@memoize_one
def layout_labels(config: GaugeConfig, measure: Optional[Measure] = None) -> tuple[LabelLayoutResult, ...]:
    """Layouts for every tick, in tick order."""
    measure = _resolve_measure(config, measure)
    return tuple(layout_label(config, i, None, measure) for i in range(len(label_slots(config))))
