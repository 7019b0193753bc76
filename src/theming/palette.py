"""Palette variants and their state / elevation derivations.

A `PaletteVariant` is the (background, foreground, border) triple used to
paint one component in one state. Construction always contrast-ensures the
foreground against an opaque background, so every variant handed out by this
module satisfies its own minimum ratio (best effort when unreachable).

Derivations are pure functions of their inputs and are memoized:

=============  =========================================  ===================
Derivation     Background / border change                 Direction
=============  =========================================  ===================
hovered        V +/- 6   (border 8)                       darker on light bg
focused        V +/- 8   (border 10)                      darker on light bg
pressed        V +/- 12  (border 14)                      darker on light bg
dragged        V +/- 16  (border 18)                      darker on light bg
high           V +/- 8   (border 10)                      away from mid gray
highest        V +/- 12  (border 14)                      away from mid gray
low            V +/- 8   (border 10)                      toward mid gray
lowest         V +/- 12  (border 14)                      toward mid gray
disabled       S - 60, V blended 15% toward 50            n/a (min ratio 3.0)
visited        S - 30, V blended 15% toward 50            n/a
=============  =========================================  ===================

A background counts as light when its V is at least 50.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property, lru_cache
from typing import Optional

from .color_value import ColorValue
from .contrast import ensure_minimum_contrast
from .settings import (
    ACCENT_SHIFT,
    BORDER_OFFSET,
    BORDER_SHIFT,
    DISABLED_DESATURATION,
    DISABLED_MINIMUM_CONTRAST,
    DRAGGED_DELTA,
    FOCUSED_DELTA,
    FOREGROUND_SHIFT,
    HIGH_DELTA,
    HIGHEST_DELTA,
    HOVERED_DELTA,
    NON_TEXT_MINIMUM_CONTRAST,
    PRESSED_DELTA,
    TEXT_MINIMUM_CONTRAST,
    VALUE_BLEND_TOWARD_MID,
    VISITED_DESATURATION,
)

__all__ = [
    "PaletteVariant",
    "derive_disabled",
    "derive_dragged",
    "derive_focused",
    "derive_high",
    "derive_highest",
    "derive_hovered",
    "derive_low",
    "derive_lowest",
    "derive_pressed",
    "derive_visited",
]


def _is_light(color: ColorValue) -> bool:
    return color.v >= 50.0


def _away_from(color: ColorValue, reference: ColorValue, amount: float) -> ColorValue:
    """Shift ``color`` by ``amount`` V-units away from ``reference``'s lightness."""
    return color.shift_value(-amount if _is_light(reference) else amount)


@dataclass(frozen=True)
class PaletteVariant:
    background: ColorValue
    foreground: ColorValue
    border: ColorValue
    minimum_contrast: float = field(default=TEXT_MINIMUM_CONTRAST, compare=False)

    def __post_init__(self) -> None:
        if self.minimum_contrast <= 0:
            raise ValueError("minimum_contrast must be positive")
        if not self.background.is_transparent:
            result = ensure_minimum_contrast(self.foreground, self.background, self.minimum_contrast)
            object.__setattr__(self, "foreground", result.color)

    @classmethod
    def from_background(
        cls, color: ColorValue, minimum_contrast: float = TEXT_MINIMUM_CONTRAST
    ) -> "PaletteVariant":
        """Seed a full variant from a single background color."""
        background = color.with_alpha(1.0)
        foreground = _away_from(background, background, FOREGROUND_SHIFT)
        border = _away_from(background, background, BORDER_SHIFT)
        return cls(background, foreground, border, minimum_contrast)

    @property
    def caret(self) -> ColorValue:
        return self.foreground

    @cached_property
    def accent(self) -> ColorValue:
        # Pull the foreground back toward the background, then restore
        # non-text contrast so focus and accent marks stay visible.
        softened = _away_from(self.foreground, self.foreground, ACCENT_SHIFT)
        return ensure_minimum_contrast(softened, self.background, NON_TEXT_MINIMUM_CONTRAST).color

    @property
    def outline(self) -> ColorValue:
        return self.accent

    @property
    def text_decoration(self) -> ColorValue:
        return self.accent


@lru_cache(maxsize=1024)
def _shifted(
    base: PaletteVariant, direction: float, delta: float, border_delta: float, minimum: float
) -> PaletteVariant:
    return PaletteVariant(
        base.background.shift_value(direction * delta),
        base.foreground,
        base.border.shift_value(direction * border_delta),
        minimum,
    )


@lru_cache(maxsize=1024)
def _desaturated(
    base: PaletteVariant, amount: float, value_blend: float, minimum: float
) -> PaletteVariant:
    return PaletteVariant(
        base.background.desaturate(amount, value_blend),
        base.foreground,
        base.border.desaturate(amount, value_blend),
        minimum,
    )


def _state_shift(
    base: PaletteVariant, delta: float, border_delta: Optional[float], minimum: float
) -> PaletteVariant:
    direction = -1.0 if _is_light(base.background) else 1.0
    if border_delta is None:
        border_delta = delta + BORDER_OFFSET
    return _shifted(base, direction, delta, border_delta, minimum)


def derive_hovered(
    base: PaletteVariant,
    delta: float = HOVERED_DELTA,
    border_delta: Optional[float] = None,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _state_shift(base, delta, border_delta, minimum_contrast)


def derive_focused(
    base: PaletteVariant,
    delta: float = FOCUSED_DELTA,
    border_delta: Optional[float] = None,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _state_shift(base, delta, border_delta, minimum_contrast)


def derive_pressed(
    base: PaletteVariant,
    delta: float = PRESSED_DELTA,
    border_delta: Optional[float] = None,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _state_shift(base, delta, border_delta, minimum_contrast)


def derive_dragged(
    base: PaletteVariant,
    delta: float = DRAGGED_DELTA,
    border_delta: Optional[float] = None,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _state_shift(base, delta, border_delta, minimum_contrast)


def _elevation(base: PaletteVariant, delta: float, raise_: bool, minimum: float) -> PaletteVariant:
    light = _is_light(base.background)
    # Raised surfaces move away from mid gray; recessed ones move toward it.
    direction = 1.0 if light == raise_ else -1.0
    return _shifted(base, direction, delta, delta + BORDER_OFFSET, minimum)


def derive_high(
    base: PaletteVariant,
    delta: float = HIGH_DELTA,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _elevation(base, delta, True, minimum_contrast)


def derive_highest(
    base: PaletteVariant,
    delta: float = HIGHEST_DELTA,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _elevation(base, delta, True, minimum_contrast)


def derive_low(
    base: PaletteVariant,
    delta: float = HIGH_DELTA,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _elevation(base, delta, False, minimum_contrast)


def derive_lowest(
    base: PaletteVariant,
    delta: float = HIGHEST_DELTA,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _elevation(base, delta, False, minimum_contrast)


def derive_disabled(
    base: PaletteVariant,
    desaturate_by: float = DISABLED_DESATURATION,
    value_blend_toward_mid: float = VALUE_BLEND_TOWARD_MID,
    minimum_contrast: float = DISABLED_MINIMUM_CONTRAST,
) -> PaletteVariant:
    """Muted variant: less saturated, closer to mid gray, relaxed text contrast."""
    return _desaturated(base, desaturate_by, value_blend_toward_mid, minimum_contrast)


def derive_visited(
    base: PaletteVariant,
    desaturate_by: float = VISITED_DESATURATION,
    value_blend_toward_mid: float = VALUE_BLEND_TOWARD_MID,
    minimum_contrast: float = TEXT_MINIMUM_CONTRAST,
) -> PaletteVariant:
    return _desaturated(base, desaturate_by, value_blend_toward_mid, minimum_contrast)
