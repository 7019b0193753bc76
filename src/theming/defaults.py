"""Built-in brand defaults.

Seed colors are Material palette shades (plus a few CSS names for the
high-contrast variants). High-contrast seeds are fixed here and are never
read from a brand file.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from .axes import FontFace, PaletteRole

# Roles a brand theme carries a seed for; elevation roles derive from SURFACE.
SEED_ROLES: Final = (
    PaletteRole.SURFACE,
    PaletteRole.PRIMARY,
    PaletteRole.SECONDARY,
    PaletteRole.TERTIARY,
    PaletteRole.ERROR,
    PaletteRole.WARNING,
    PaletteRole.SUCCESS,
    PaletteRole.INFO,
)

LIGHT_SEEDS: Final[Mapping[PaletteRole, str]] = MappingProxyType(
    {
        PaletteRole.SURFACE: "Grey50",
        PaletteRole.PRIMARY: "Blue700",
        PaletteRole.SECONDARY: "Indigo600",
        PaletteRole.TERTIARY: "Teal600",
        PaletteRole.ERROR: "RedA700",
        PaletteRole.WARNING: "Amber700",
        PaletteRole.SUCCESS: "Green600",
        PaletteRole.INFO: "LightBlueA700",
    }
)

DARK_SEEDS: Final[Mapping[PaletteRole, str]] = MappingProxyType(
    {
        PaletteRole.SURFACE: "Grey900",
        PaletteRole.PRIMARY: "Blue300",
        PaletteRole.SECONDARY: "Indigo300",
        PaletteRole.TERTIARY: "Teal300",
        PaletteRole.ERROR: "Red300",
        PaletteRole.WARNING: "Amber300",
        PaletteRole.SUCCESS: "Green300",
        PaletteRole.INFO: "LightBlue300",
    }
)

HIGH_CONTRAST_LIGHT_SEEDS: Final[Mapping[PaletteRole, str]] = MappingProxyType(
    {
        PaletteRole.SURFACE: "White",
        PaletteRole.PRIMARY: "Black",
        PaletteRole.SECONDARY: "Blue700",
        PaletteRole.TERTIARY: "Purple800",
        PaletteRole.ERROR: "RedA700",
        PaletteRole.WARNING: "Black",
        PaletteRole.SUCCESS: "Green800",
        PaletteRole.INFO: "Blue700",
    }
)

HIGH_CONTRAST_DARK_SEEDS: Final[Mapping[PaletteRole, str]] = MappingProxyType(
    {
        PaletteRole.SURFACE: "Black",
        PaletteRole.PRIMARY: "Aqua",
        PaletteRole.SECONDARY: "YellowA400",
        PaletteRole.TERTIARY: "Fuchsia",
        PaletteRole.ERROR: "RedA400",
        PaletteRole.WARNING: "YellowA400",
        PaletteRole.SUCCESS: "LimeA200",
        PaletteRole.INFO: "Aqua",
    }
)

FONTS: Final[Mapping[FontFace, str]] = MappingProxyType(
    {
        FontFace.SANS_SERIF: (
            "system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
            "Helvetica, Arial, sans-serif"
        ),
        FontFace.SERIF: "ui-serif, Georgia, Cambria, 'Times New Roman', Times, serif",
        FontFace.MONOSPACE: (
            "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "
            "'Liberation Mono', 'Courier New', monospace"
        ),
    }
)

# Focus indicator geometry (not overridable per component)
OUTLINE_OFFSET: Final = "4px"
OUTLINE_STYLE: Final = "solid"
OUTLINE_WIDTH: Final = "2px"

__all__ = [
    "DARK_SEEDS",
    "FONTS",
    "HIGH_CONTRAST_DARK_SEEDS",
    "HIGH_CONTRAST_LIGHT_SEEDS",
    "LIGHT_SEEDS",
    "OUTLINE_OFFSET",
    "OUTLINE_STYLE",
    "OUTLINE_WIDTH",
    "SEED_ROLES",
]
