"""
Reusable help strings for UI tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_PRESET = "Demo gauges mirroring the component's stories. Sidebar controls override the preset."
TOOLTIP_VALUE = "Needle value. Values outside [min, max] park the needle 10° past the dial end."
TOOLTIP_POSITION_LABEL = "Draw tick labels outside the ring (outer) or between ring and center (inner)."
TOOLTIP_PADDING = "White gaps between segments; end stubs keep the first/last segment flush with the ring ends."
TOOLTIP_GROW = "Hovered segments move 10 px outward (see data-hover-d in the SVG)."
TOOLTIP_CUSTOM_LABELS = "One label per line; empty lines fall back to the formatted tick value."
TOOLTIP_RENDER_SCALE = "1x, 2x or 4x the gauge size. Applies to PNG output only."

# Full glossary for Help & glossary expander
GLOSSARY_MD = """
### Sweep
Total angular range `maxAngle - minAngle` over which the dial is drawn.

### Tick data
Fractions of the sweep assigned to each segment; they always sum to 1.
Custom segment stops make them unequal.

### Segment
One colored arc wedge between two consecutive tick boundaries.

### Stub
Small filler wedge at the very start/end of the arc, drawn only with segment padding.

### Label slot
Tangential room left and right of a tick label, from the angle to the neighboring ticks
at the label radius. Labels wrap to two lines, then truncate with an ellipsis; labels
in slots narrower than a short probe string are written radially or hidden.
"""

QUICK_TROUBLESHOOT_MD = """
- **Label shows "…"**: the slot is too narrow; use fewer labels (maxSegmentLabels) or a wider gauge.
- **Label missing**: the slot is narrower than the minimum drawable width and radial writing did not fit.
- **Configuration error**: custom stops must start at min, end at max and strictly increase.
"""
