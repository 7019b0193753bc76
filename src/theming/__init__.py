"""Contrast-aware theme derivation.

Contains the color value type, WCAG contrast utilities, per-state palette
derivations, the four-axis theme selector with its override validator, and
the intent expander that turns one customization into concrete updates.
"""

from .errors import (  # noqa: F401
    BrandValidationError,
    ColorFormatError,
    OverrideValidationError,
    ThemingError,
)
from .color_value import ColorValue  # noqa: F401
from .contrast import (  # noqa: F401
    ContrastResult,
    contrast_ratio,
    ensure_minimum_contrast,
    relative_luminance,
)
from .palette import (  # noqa: F401
    PaletteVariant,
    derive_disabled,
    derive_dragged,
    derive_focused,
    derive_high,
    derive_highest,
    derive_hovered,
    derive_low,
    derive_lowest,
    derive_pressed,
    derive_visited,
)
from .axes import (  # noqa: F401
    ComponentState,
    ComponentType,
    FontFace,
    PaletteRole,
    StyleType,
    ThemeType,
    parse_tag,
)
from .selector import ThemeSelector, ThemeUpdate, contrast_theme_types  # noqa: F401
from .validator import OverrideValidator  # noqa: F401
from .brand import Brand, BrandFont, BrandTheme  # noqa: F401
from .loader import load_brand  # noqa: F401
from .expander import (  # noqa: F401
    IntentExpander,
    ThemeIntent,
    outline_intents,
    palette_intents,
    typography_intents,
)

__all__ = [
    "BrandValidationError",
    "ColorFormatError",
    "OverrideValidationError",
    "ThemingError",
    "ColorValue",
    "ContrastResult",
    "contrast_ratio",
    "ensure_minimum_contrast",
    "relative_luminance",
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
    "ComponentState",
    "ComponentType",
    "FontFace",
    "PaletteRole",
    "StyleType",
    "ThemeType",
    "parse_tag",
    "ThemeSelector",
    "ThemeUpdate",
    "contrast_theme_types",
    "OverrideValidator",
    "Brand",
    "BrandFont",
    "BrandTheme",
    "load_brand",
    "IntentExpander",
    "ThemeIntent",
    "outline_intents",
    "palette_intents",
    "typography_intents",
]
