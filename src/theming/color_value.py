"""Immutable color value with RGBA and HSVA views.

A `ColorValue` stores 8-bit red/green/blue channels plus a float alpha in
[0, 1]. Hue/saturation/value are derived from the RGB bytes on demand, so the
two representations can never drift apart; every HSV transform goes through
`from_hsva`, which quantizes back to bytes. Two colors built through the same
HSV path are therefore bit-identical.

Accepted textual notations (case-insensitive):
  #RGB, #RGBA, #RRGGBB, #RRGGBBAA
  rgb(r, g, b) / rgba(r, g, b, a) / rgb(r g b / a)   (channels 0-255 or %)
  hsv(h, s%, v%) / hsva(h, s%, v%, a)                 (h 0-360, s/v 0-100)
  CSS web color names and Material shade names (see `named_colors`)

Equality, hashing and ordering use the canonical ``#RRGGBBAA`` string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, total_ordering
import math
import re
from typing import Any, Tuple

from . import named_colors
from .errors import ColorFormatError

__all__ = ["ColorValue"]

_NUM = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
_ALPHA = rf"(?P<a>{_NUM}%?)"

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGB_RE = re.compile(
    rf"^rgba?\(\s*(?P<r>{_NUM}%?)\s*,\s*(?P<g>{_NUM}%?)\s*,\s*(?P<b>{_NUM}%?)\s*(?:,\s*{_ALPHA}\s*)?\)$",
    re.IGNORECASE,
)
_RGB_CSS4_RE = re.compile(
    rf"^rgba?\(\s*(?P<r>{_NUM}%?)\s+(?P<g>{_NUM}%?)\s+(?P<b>{_NUM}%?)\s*(?:/\s*{_ALPHA}\s*)?\)$",
    re.IGNORECASE,
)
_HSV_RE = re.compile(
    rf"^hsva?\(\s*(?P<h>{_NUM})\s*,\s*(?P<s>{_NUM})%?\s*,\s*(?P<v>{_NUM})%?\s*(?:,\s*{_ALPHA}\s*)?\)$",
    re.IGNORECASE,
)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _to_byte(unit: float) -> int:
    return int(_clamp(round(unit * 255.0), 0, 255))


def _hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    s = _clamp(s / 100.0, 0.0, 1.0)
    v = _clamp(v / 100.0, 0.0, 1.0)
    if s <= 0.0:
        c = _to_byte(v)
        return c, c, c
    h = h % 360.0
    hh = h / 60.0
    i = int(math.floor(hh))
    ff = hh - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * ff)
    t = v * (1.0 - s * (1.0 - ff))
    if i == 0:
        rgb = (v, t, p)
    elif i == 1:
        rgb = (q, v, p)
    elif i == 2:
        rgb = (p, v, t)
    elif i == 3:
        rgb = (p, q, v)
    elif i == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    return _to_byte(rgb[0]), _to_byte(rgb[1]), _to_byte(rgb[2])


def _rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    delta = mx - mn
    if delta < 1e-9:
        h = 0.0
    elif mx == rf:
        h = 60.0 * (((gf - bf) / delta) % 6.0)
    elif mx == gf:
        h = 60.0 * ((bf - rf) / delta + 2.0)
    else:
        h = 60.0 * ((rf - gf) / delta + 4.0)
    if h < 0:
        h += 360.0
    s = 0.0 if mx <= 0 else delta / mx * 100.0
    return h, s, mx * 100.0


def _parse_ranged(raw: str, lo: float, hi: float, source: str, label: str) -> float:
    value = float(raw)
    if not lo <= value <= hi:
        raise ColorFormatError(source, f"{label} {raw!r} outside {lo:g}-{hi:g}")
    return value


def _parse_alpha(raw: str | None, source: str) -> float:
    if raw is None:
        return 1.0
    if raw.endswith("%"):
        return _parse_ranged(raw[:-1], 0.0, 100.0, source, "alpha percent") / 100.0
    return _parse_ranged(raw, 0.0, 1.0, source, "alpha")


def _parse_channel(raw: str, source: str) -> int:
    if raw.endswith("%"):
        pct = float(raw[:-1])
        if not 0.0 <= pct <= 100.0:
            raise ColorFormatError(source, f"channel {raw!r} outside 0%-100%")
        return _to_byte(pct / 100.0)
    value = float(raw)
    if not 0.0 <= value <= 255.0:
        raise ColorFormatError(source, f"channel {raw!r} outside 0-255")
    return int(round(value))


@total_ordering
@dataclass(frozen=True, eq=False)
class ColorValue:
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", int(_clamp(round(self.r), 0, 255)))
        object.__setattr__(self, "g", int(_clamp(round(self.g), 0, 255)))
        object.__setattr__(self, "b", int(_clamp(round(self.b), 0, 255)))
        object.__setattr__(self, "a", _clamp(float(self.a), 0.0, 1.0))

    # Construction ---------------------------------------------------------
    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: float = 1.0) -> "ColorValue":
        return cls(r, g, b, a)

    @classmethod
    def from_hsva(cls, h: float, s: float, v: float, a: float = 1.0) -> "ColorValue":
        """Build a color from HSV(A); each channel is clamped before conversion."""
        r, g, b = _hsv_to_rgb(_clamp(h, 0.0, 360.0), _clamp(s, 0.0, 100.0), _clamp(v, 0.0, 100.0))
        return cls(r, g, b, a)

    @classmethod
    def parse(cls, value: Any) -> "ColorValue":
        """Parse a textual color; raises ColorFormatError when no notation matches."""
        if isinstance(value, ColorValue):
            return value
        if not isinstance(value, str):
            raise ColorFormatError(value, "expected a string")
        text = value.strip()
        lowered = text.lower()
        if text.startswith("#"):
            return cls._from_hex(text, value)
        if lowered.startswith("rgb"):
            return cls._from_rgb_function(text, value)
        if lowered.startswith("hsv"):
            return cls._from_hsv_function(text, value)
        named = named_colors.lookup(text) if text else None
        if named is None:
            raise ColorFormatError(value)
        return cls(*named)

    @classmethod
    def _from_hex(cls, text: str, source: str) -> "ColorValue":
        m = _HEX_RE.match(text)
        if not m:
            raise ColorFormatError(source, "hex color must be #RGB, #RGBA, #RRGGBB or #RRGGBBAA")
        digits = m.group(1)
        if len(digits) in (3, 4):
            channels = [int(ch, 16) * 17 for ch in digits]
        else:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255.0 if len(channels) == 4 else 1.0
        return cls(channels[0], channels[1], channels[2], alpha)

    @classmethod
    def _from_rgb_function(cls, text: str, source: str) -> "ColorValue":
        m = _RGB_RE.match(text) or _RGB_CSS4_RE.match(text)
        if not m:
            raise ColorFormatError(source, "expected rgb(r, g, b) or rgba(r, g, b, a)")
        r = _parse_channel(m.group("r"), source)
        g = _parse_channel(m.group("g"), source)
        b = _parse_channel(m.group("b"), source)
        return cls(r, g, b, _parse_alpha(m.group("a"), source))

    @classmethod
    def _from_hsv_function(cls, text: str, source: str) -> "ColorValue":
        m = _HSV_RE.match(text)
        if not m:
            raise ColorFormatError(source, "expected hsv(h, s%, v%) or hsva(h, s%, v%, a)")
        return cls.from_hsva(
            _parse_ranged(m.group("h"), 0.0, 360.0, source, "hue"),
            _parse_ranged(m.group("s"), 0.0, 100.0, source, "saturation"),
            _parse_ranged(m.group("v"), 0.0, 100.0, source, "value"),
            _parse_alpha(m.group("a"), source),
        )

    # HSV view -------------------------------------------------------------
    @cached_property
    def _hsv(self) -> Tuple[float, float, float]:
        return _rgb_to_hsv(self.r, self.g, self.b)

    @property
    def h(self) -> float:
        return self._hsv[0]

    @property
    def s(self) -> float:
        return self._hsv[1]

    @property
    def v(self) -> float:
        return self._hsv[2]

    @property
    def alpha_byte(self) -> int:
        return int(_clamp(math.floor(self.a * 255.0 + 0.5), 0, 255))

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBBAA`` form (uppercase)."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.alpha_byte:02X}"

    @property
    def is_transparent(self) -> bool:
        return self.alpha_byte == 0

    # Transforms -----------------------------------------------------------
    def shift_value(self, percent: float) -> "ColorValue":
        """Move V by ``percent`` (clamped to +/-100), keeping H, S and alpha."""
        percent = _clamp(percent, -100.0, 100.0)
        return ColorValue.from_hsva(self.h, self.s, _clamp(self.v + percent, 0.0, 100.0), self.a)

    def desaturate(self, amount: float, value_blend: float = 0.0) -> "ColorValue":
        """Reduce S by ``amount`` units and blend V toward 50 by ``value_blend``."""
        t = _clamp(value_blend, 0.0, 1.0)
        return ColorValue.from_hsva(
            self.h,
            _clamp(self.s - amount, 0.0, 100.0),
            self.v + (50.0 - self.v) * t,
            self.a,
        )

    def with_alpha(self, alpha: float) -> "ColorValue":
        return ColorValue(self.r, self.g, self.b, alpha)

    def is_light(self) -> bool:
        from .contrast import relative_luminance

        return relative_luminance(self) >= 0.5

    def is_dark(self) -> bool:
        return not self.is_light()

    def to_css(self, name: str | None = None) -> str:
        prop = name.strip() if name and name.strip() else "color"
        return f"{prop}: {self.hex};"

    # Comparison -----------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.hex == other.hex

    def __lt__(self, other: "ColorValue") -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.hex < other.hex

    def __hash__(self) -> int:
        return hash(self.hex)

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"ColorValue({self.hex})"
