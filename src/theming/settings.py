"""Tunable constants for color derivation and brand loading."""

from __future__ import annotations

import os
from typing import Final

# WCAG thresholds
TEXT_MINIMUM_CONTRAST: Final = 4.5
NON_TEXT_MINIMUM_CONTRAST: Final = 3.0
DISABLED_MINIMUM_CONTRAST: Final = 3.0

# Background / border value deltas per interaction state (HSV V units)
HOVERED_DELTA: Final = 6.0
FOCUSED_DELTA: Final = 8.0
PRESSED_DELTA: Final = 12.0
DRAGGED_DELTA: Final = 16.0
BORDER_OFFSET: Final = 2.0  # border moves this much further than the fill

# Elevation deltas
HIGH_DELTA: Final = 8.0
HIGHEST_DELTA: Final = 12.0

# Non-directional states
DISABLED_DESATURATION: Final = 60.0
VISITED_DESATURATION: Final = 30.0
VALUE_BLEND_TOWARD_MID: Final = 0.15

# Seed palette construction
FOREGROUND_SHIFT: Final = 90.0
BORDER_SHIFT: Final = 60.0
ACCENT_SHIFT: Final = 60.0

# Contrast search rails (one unit per step)
VALUE_STEP: Final = 1.0
SATURATION_STEP: Final = 1.0

BRAND_FILE: Final = os.environ.get("THEMING_BRAND_FILE")
