"""Contrast utilities for accessible color pairs.

Implements the WCAG 2.1 relative luminance and contrast ratio formulas and a
bounded search that nudges a foreground color until it reaches a minimum ratio
against a background.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float
- ensure_minimum_contrast(fg, bg, minimum_ratio=4.5) -> ContrastResult

Colors may be passed as `ColorValue` instances or any string `ColorValue.parse`
accepts. Alpha is ignored by all three functions.

Search order used by `ensure_minimum_contrast`:
1. Walk V away from the background (darker on light, lighter on dark) in
   1-unit steps, keeping hue and saturation.
2. If V runs out, drop S toward 0 in 1-unit steps with V pinned at the pole
   (white or black) that contrasts more with the background. At the first
   saturation that can reach the target, walk V from its original value toward
   that pole and keep the first color that meets it.
3. Otherwise return the best candidate seen, flagged as not meeting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .color_value import ColorValue
from .settings import SATURATION_STEP, TEXT_MINIMUM_CONTRAST, VALUE_STEP

ColorLike = Union[ColorValue, str]

_WHITE = ColorValue(255, 255, 255)
_BLACK = ColorValue(0, 0, 0)


@dataclass(frozen=True)
class ContrastResult:
    color: ColorValue
    ratio: float
    meets_minimum: bool


def _coerce(color: ColorLike) -> ColorValue:
    return color if isinstance(color, ColorValue) else ColorValue.parse(color)


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    value = _coerce(color)
    # Rec. 709 coefficients used by WCAG
    return (
        0.2126 * _linear_channel(value.r)
        + 0.7152 * _linear_channel(value.g)
        + 0.0722 * _linear_channel(value.b)
    )


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def _walk_value(start: float, target: float) -> Iterator[float]:
    """Yield V values from ``start`` toward ``target`` (exclusive of start, inclusive of target)."""
    step = VALUE_STEP if target > start else -VALUE_STEP
    v = start
    while v != target:
        v = min(v + step, target) if step > 0 else max(v + step, target)
        yield v


def ensure_minimum_contrast(
    foreground: ColorLike,
    background: ColorLike,
    minimum_ratio: float = TEXT_MINIMUM_CONTRAST,
) -> ContrastResult:
    """Return a foreground that meets ``minimum_ratio`` against ``background``.

    The input is returned unchanged when it already meets the ratio. The search
    never raises; when the target is unreachable the best candidate is returned
    with ``meets_minimum`` set to False.
    """
    fg = _coerce(foreground)
    bg = _coerce(background)
    ratio = contrast_ratio(fg, bg)
    if ratio >= minimum_ratio:
        return ContrastResult(fg, ratio, True)

    best = ContrastResult(fg, ratio, False)
    h, s, a = fg.h, fg.s, fg.a

    # Value rail
    boundary = 0.0 if bg.v >= 50.0 else 100.0
    for v in _walk_value(fg.v, boundary):
        candidate = ColorValue.from_hsva(h, s, v, a)
        r = contrast_ratio(candidate, bg)
        if r >= minimum_ratio:
            return ContrastResult(candidate, r, True)
        if r > best.ratio:
            best = ContrastResult(candidate, r, False)

    # Desaturation rail toward the stronger pole
    pole = 100.0 if contrast_ratio(_WHITE, bg) >= contrast_ratio(_BLACK, bg) else 0.0
    sat = s
    while True:
        probe = ColorValue.from_hsva(h, sat, pole, a)
        r = contrast_ratio(probe, bg)
        if r >= minimum_ratio:
            for v in _walk_value(fg.v, pole):
                candidate = ColorValue.from_hsva(h, sat, v, a)
                cr = contrast_ratio(candidate, bg)
                if cr >= minimum_ratio:
                    return ContrastResult(candidate, cr, True)
            return ContrastResult(probe, r, True)
        if r > best.ratio:
            best = ContrastResult(probe, r, False)
        if sat <= 0.0:
            break
        sat = max(0.0, sat - SATURATION_STEP)

    return best


__all__ = [
    "ColorLike",
    "ContrastResult",
    "contrast_ratio",
    "ensure_minimum_contrast",
    "relative_luminance",
]
