"""Closed-set symbolic tags for the four selector axes and palette lookups.

Each enumeration's value is its canonical string: PascalCase tags for
components, themes, states, palette roles and font faces, and the CSS
property name for style types. `parse_tag` performs the case-insensitive
reverse lookup (member name, tag, or CSS name).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Type, TypeVar

__all__ = [
    "ComponentState",
    "ComponentType",
    "FOCUS_GEOMETRY",
    "FontFace",
    "HIGH_CONTRAST_THEMES",
    "INTERACTIVE_STATES",
    "NON_INTERACTIVE_STATES",
    "PALETTE_CHANNELS",
    "PaletteRole",
    "StyleType",
    "ThemeType",
    "parse_tag",
]


class ComponentType(str, Enum):
    BODY = "Body"
    BODY_VARIANT = "BodyVariant"
    GLOBAL_BODY = "GlobalBody"
    GLOBAL_FOCUS = "GlobalFocus"
    GLOBAL_HTML = "GlobalHtml"
    HEADING1 = "Heading1"
    HEADING2 = "Heading2"
    HEADING3 = "Heading3"
    HEADING4 = "Heading4"
    HEADING5 = "Heading5"
    HEADING6 = "Heading6"
    LINK = "Link"
    LINK_VARIANT = "LinkVariant"
    SURFACE = "Surface"
    SURFACE_VARIANT = "SurfaceVariant"
    TEXT = "Text"


class ThemeType(str, Enum):
    SYSTEM = "System"
    LIGHT = "Light"
    DARK = "Dark"
    HIGH_CONTRAST_LIGHT = "HighContrastLight"
    HIGH_CONTRAST_DARK = "HighContrastDark"


class ComponentState(str, Enum):
    DEFAULT = "Default"
    HOVERED = "Hovered"
    FOCUSED = "Focused"
    PRESSED = "Pressed"
    DRAGGED = "Dragged"
    DISABLED = "Disabled"
    VISITED = "Visited"
    READ_ONLY = "ReadOnly"
    HIDDEN = "Hidden"


class StyleType(str, Enum):
    ACCENT_COLOR = "accent-color"
    BACKGROUND_COLOR = "background-color"
    BORDER_COLOR = "border-color"
    CARET_COLOR = "caret-color"
    COLOR = "color"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    LINE_HEIGHT = "line-height"
    MARGIN = "margin"
    OUTLINE_COLOR = "outline-color"
    OUTLINE_OFFSET = "outline-offset"
    OUTLINE_STYLE = "outline-style"
    OUTLINE_WIDTH = "outline-width"
    PADDING = "padding"
    TEXT_DECORATION_COLOR = "text-decoration-color"
    TEXT_DECORATION_LINE = "text-decoration-line"
    TEXT_DECORATION_STYLE = "text-decoration-style"
    TEXT_DECORATION_THICKNESS = "text-decoration-thickness"
    TEXT_TRANSFORM = "text-transform"

    @property
    def css_name(self) -> str:
        return self.value


class PaletteRole(str, Enum):
    SURFACE_LOWEST = "SurfaceLowest"
    SURFACE_LOW = "SurfaceLow"
    SURFACE = "Surface"
    SURFACE_HIGH = "SurfaceHigh"
    SURFACE_HIGHEST = "SurfaceHighest"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"
    ERROR = "Error"
    WARNING = "Warning"
    SUCCESS = "Success"
    INFO = "Info"


class FontFace(str, Enum):
    SANS_SERIF = "SansSerif"
    SERIF = "Serif"
    MONOSPACE = "Monospace"


INTERACTIVE_STATES: Tuple[ComponentState, ...] = tuple(
    s for s in ComponentState if s not in (ComponentState.READ_ONLY, ComponentState.HIDDEN)
)
NON_INTERACTIVE_STATES = frozenset({ComponentState.READ_ONLY, ComponentState.HIDDEN})
HIGH_CONTRAST_THEMES = frozenset({ThemeType.HIGH_CONTRAST_LIGHT, ThemeType.HIGH_CONTRAST_DARK})
FOCUS_GEOMETRY = frozenset({StyleType.OUTLINE_OFFSET, StyleType.OUTLINE_STYLE, StyleType.OUTLINE_WIDTH})

# Style types that read a channel of a PaletteVariant, in emission order.
PALETTE_CHANNELS: Dict[StyleType, str] = {
    StyleType.BACKGROUND_COLOR: "background",
    StyleType.ACCENT_COLOR: "accent",
    StyleType.BORDER_COLOR: "border",
    StyleType.CARET_COLOR: "caret",
    StyleType.COLOR: "foreground",
    StyleType.TEXT_DECORATION_COLOR: "text_decoration",
    StyleType.OUTLINE_COLOR: "outline",
}

E = TypeVar("E", bound=Enum)

_LOOKUPS: Dict[type, Dict[str, Enum]] = {}


def _normalize(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


def _lookup_table(enum_cls: Type[E]) -> Dict[str, E]:
    table = _LOOKUPS.get(enum_cls)
    if table is None:
        table = {}
        for member in enum_cls:
            table[_normalize(member.name)] = member
            table[_normalize(str(member.value))] = member
        _LOOKUPS[enum_cls] = table
    return table  # type: ignore[return-value]


def parse_tag(enum_cls: Type[E], text: str) -> E:
    """Resolve ``text`` to a member of ``enum_cls`` ignoring case and separators.

    ``parse_tag(StyleType, "background-color")``, ``"BackgroundColor"`` and
    ``"BACKGROUND_COLOR"`` all resolve to ``StyleType.BACKGROUND_COLOR``.
    """
    if isinstance(text, enum_cls):
        return text
    member = _lookup_table(enum_cls).get(_normalize(str(text)))
    if member is None:
        raise ValueError(f"Unknown {enum_cls.__name__}: {text!r}")
    return member
