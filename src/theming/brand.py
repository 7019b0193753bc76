"""Brand definition: font stacks plus per-theme seed colors.

`Brand.palette(theme_type, role)` is the palette-role lookup the expander uses.
Seeds become full variants through `PaletteVariant.from_background`; the four
surface elevation roles are derived from the Surface seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Callable, Dict, Mapping, Union

from . import defaults
from .axes import FontFace, PaletteRole, ThemeType
from .color_value import ColorValue
from .palette import PaletteVariant, derive_high, derive_highest, derive_low, derive_lowest

__all__ = ["Brand", "BrandFont", "BrandTheme"]

_ELEVATIONS: Dict[PaletteRole, Callable[[PaletteVariant], PaletteVariant]] = {
    PaletteRole.SURFACE_LOWEST: derive_lowest,
    PaletteRole.SURFACE_LOW: derive_low,
    PaletteRole.SURFACE_HIGH: derive_high,
    PaletteRole.SURFACE_HIGHEST: derive_highest,
}


@dataclass(frozen=True)
class BrandFont:
    sans_serif: str = defaults.FONTS[FontFace.SANS_SERIF]
    serif: str = defaults.FONTS[FontFace.SERIF]
    monospace: str = defaults.FONTS[FontFace.MONOSPACE]

    def family(self, face: FontFace) -> str:
        if face is FontFace.SERIF:
            return self.serif
        if face is FontFace.MONOSPACE:
            return self.monospace
        return self.sans_serif


@dataclass(frozen=True)
class BrandTheme:
    surface: ColorValue
    primary: ColorValue
    secondary: ColorValue
    tertiary: ColorValue
    error: ColorValue
    warning: ColorValue
    success: ColorValue
    info: ColorValue

    @classmethod
    def from_seeds(cls, seeds: Mapping[PaletteRole, Union[ColorValue, str]]) -> "BrandTheme":
        """Build a theme from a role -> color mapping (colors may be text)."""
        kwargs = {}
        for f in fields(cls):
            role = PaletteRole[f.name.upper()]
            kwargs[f.name] = ColorValue.parse(seeds[role])
        return cls(**kwargs)

    def seed(self, role: PaletteRole) -> ColorValue:
        if role in _ELEVATIONS:
            return self.surface
        return getattr(self, role.name.lower())

    def palette(self, role: PaletteRole) -> PaletteVariant:
        return _theme_palette(self, role)


@lru_cache(maxsize=256)
def _theme_palette(theme: BrandTheme, role: PaletteRole) -> PaletteVariant:
    base = PaletteVariant.from_background(theme.seed(role))
    derive = _ELEVATIONS.get(role)
    return derive(base) if derive is not None else base


_HIGH_CONTRAST_LIGHT = BrandTheme.from_seeds(defaults.HIGH_CONTRAST_LIGHT_SEEDS)
_HIGH_CONTRAST_DARK = BrandTheme.from_seeds(defaults.HIGH_CONTRAST_DARK_SEEDS)


@dataclass(frozen=True)
class Brand:
    font: BrandFont = field(default_factory=BrandFont)
    light: BrandTheme = field(default_factory=lambda: BrandTheme.from_seeds(defaults.LIGHT_SEEDS))
    dark: BrandTheme = field(default_factory=lambda: BrandTheme.from_seeds(defaults.DARK_SEEDS))

    def theme(self, theme_type: ThemeType) -> BrandTheme:
        if theme_type is ThemeType.LIGHT:
            return self.light
        if theme_type is ThemeType.DARK:
            return self.dark
        if theme_type is ThemeType.HIGH_CONTRAST_LIGHT:
            return _HIGH_CONTRAST_LIGHT
        if theme_type is ThemeType.HIGH_CONTRAST_DARK:
            return _HIGH_CONTRAST_DARK
        raise ValueError(f"{theme_type.value} has no palette; resolve it to a concrete theme first")

    def font_for(self, theme_type: ThemeType) -> BrandFont:
        # High-contrast themes always use the stock font stacks.
        if theme_type in (ThemeType.HIGH_CONTRAST_LIGHT, ThemeType.HIGH_CONTRAST_DARK):
            return BrandFont()
        if theme_type is ThemeType.SYSTEM:
            raise ValueError("System has no fonts; resolve it to a concrete theme first")
        return self.font

    def palette(self, theme_type: ThemeType, role: PaletteRole) -> PaletteVariant:
        return self.theme(theme_type).palette(role)
