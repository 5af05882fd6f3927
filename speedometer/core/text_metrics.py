# speedometer/core/text_metrics.py
"""
Label width measurement with Pillow.
The layout engine only needs a measure(text) -> width callable; default_measure
builds one per (family, size) and shares it, so memoized layouts keyed on the
callable keep hitting.
"""

from __future__ import annotations

import logging
import warnings
from functools import lru_cache
from typing import Callable, Iterator

from PIL import Image, ImageDraw, ImageFont

from speedometer.core.config import FALLBACK_FONT_FILES

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]

# Families already reported as missing; one warning each per process.
_missing_families: set[str] = set()


def _font_files(font_family: str) -> Iterator[str]:
    """File names for a CSS family ("DejaVu Sans" -> DejaVuSans.ttf), then the fallbacks."""
    seen: set[str] = set()
    for name in (font_family.replace(" ", "") + ".ttf", font_family + ".ttf", *FALLBACK_FONT_FILES):
        if name not in seen:
            seen.add(name)
            yield name


@lru_cache(maxsize=32)
def label_font(font_family: str, font_size_px: float) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    size = max(1, int(round(font_size_px)))
    for name in _font_files(font_family):
        try:
            font = ImageFont.truetype(name, size=size)
        except OSError:
            continue
        if not name.startswith(font_family.replace(" ", "")):
            logger.debug(f"{font_family!r} measured with {name}")
        return font
    if font_family not in _missing_families:
        _missing_families.add(font_family)
        warnings.warn(f"No TrueType font for {font_family!r}; label widths use Pillow's default font.", UserWarning)
    return ImageFont.load_default()


def measure_text_px(text: str, font_family: str, font_size_px: float) -> tuple[float, float]:
    """(width_px, height_px) of one line of text in the given font."""
    if not text:
        return (0.0, 0.0)
    font = label_font(font_family, font_size_px)
    left, top, right, bottom = ImageDraw.Draw(Image.new("L", (1, 1))).textbbox((0, 0), text, font=font)
    # The bitmap fallback ignores the requested size; rescale to it.
    rendered = float(getattr(font, "size", None) or font_size_px)
    scale = font_size_px / max(1.0, rendered)
    return (float(right - left) * scale, float(bottom - top) * scale)


@lru_cache(maxsize=8)
def default_measure(font_family: str, font_size_px: float) -> Measure:
    """Shared measure(text) -> width_px callable per font."""

    def measure(text: str) -> float:
        return measure_text_px(text, font_family, font_size_px)[0]

    return measure
