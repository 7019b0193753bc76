"""Expand a single customization intent into concrete theme updates.

An intent names one component and one style property, plus either a palette
role (for color channels), a font face (for font-family) or an explicit
value. Expansion covers the theme pair chosen by the high-contrast flag and
every interaction state except Hidden/ReadOnly, so a typical intent becomes
2 x 7 = 14 updates. Palette colors are derived per state; other values are
repeated unchanged.

Example:
    expander = IntentExpander(Brand())
    updates = expander.expand(
        ThemeIntent(ComponentType.SURFACE, StyleType.BACKGROUND_COLOR, PaletteRole.PRIMARY)
    )
    expander.apply(palette_intents(ComponentType.LINK, PaletteRole.PRIMARY))
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from . import defaults
from .axes import (
    PALETTE_CHANNELS,
    ComponentState,
    ComponentType,
    FontFace,
    PaletteRole,
    StyleType,
    ThemeType,
)
from .brand import Brand
from .palette import (
    PaletteVariant,
    derive_disabled,
    derive_dragged,
    derive_focused,
    derive_hovered,
    derive_pressed,
    derive_visited,
)
from .selector import ThemeSelector, ThemeUpdate
from .validator import OverrideValidator

__all__ = [
    "IntentExpander",
    "ThemeIntent",
    "outline_intents",
    "palette_intents",
    "typography_intents",
]

_logger = logging.getLogger(__name__)

_STATE_DERIVATIONS: Dict[ComponentState, Callable[[PaletteVariant], PaletteVariant]] = {
    ComponentState.HOVERED: derive_hovered,
    ComponentState.FOCUSED: derive_focused,
    ComponentState.PRESSED: derive_pressed,
    ComponentState.DRAGGED: derive_dragged,
    ComponentState.DISABLED: derive_disabled,
    ComponentState.VISITED: derive_visited,
}


@dataclass(frozen=True)
class ThemeIntent:
    component: ComponentType
    style_type: StyleType
    palette_role: Optional[PaletteRole] = None
    high_contrast: bool = False
    value: Any = None
    font_face: Optional[FontFace] = None

    def __post_init__(self) -> None:
        if self.palette_role is not None and self.style_type not in PALETTE_CHANNELS:
            raise ValueError(f"{self.style_type.name} is not a palette color channel")
        if self.font_face is not None and self.style_type is not StyleType.FONT_FAMILY:
            raise ValueError("font_face only applies to FONT_FAMILY")
        if self.palette_role is not None and (self.value is not None or self.font_face is not None):
            raise ValueError("palette_role cannot be combined with an explicit value or font face")
        if self.palette_role is None and self.font_face is None and self.value is None:
            raise ValueError(f"Intent for {self.style_type.name} needs a palette role, font face or value")

    @property
    def is_palette_color(self) -> bool:
        return self.palette_role is not None

    @property
    def selector(self) -> ThemeSelector:
        return (
            ThemeSelector()
            .with_component_types(self.component)
            .with_contrast_theme_types(self.high_contrast)
            .with_all_component_states()
            .with_style_types(self.style_type)
        )


class IntentExpander:
    """Turns `ThemeIntent` values into validated `ThemeUpdate` entries."""

    def __init__(self, brand: Optional[Brand] = None, validator: Optional[OverrideValidator] = None):
        self.brand = brand or Brand()
        self.validator = validator if validator is not None else OverrideValidator()
        self._palette_cache: Dict[Tuple[ThemeType, PaletteRole, ComponentState], PaletteVariant] = {}

    def state_palette(
        self, theme: ThemeType, role: PaletteRole, state: ComponentState
    ) -> PaletteVariant:
        """Palette for (theme, role) in ``state``; Default is the underived base."""
        key = (theme, role, state)
        cached = self._palette_cache.get(key)
        if cached is not None:
            return cached
        base = self.brand.palette(theme, role)
        derive = _STATE_DERIVATIONS.get(state)
        palette = derive(base) if derive is not None else base
        self._palette_cache[key] = palette
        return palette

    def _resolve(self, intent: ThemeIntent, theme: ThemeType, state: ComponentState) -> Any:
        if intent.is_palette_color:
            palette = self.state_palette(theme, intent.palette_role, state)
            return getattr(palette, PALETTE_CHANNELS[intent.style_type])
        if intent.font_face is not None:
            return self.brand.font_for(theme).family(intent.font_face)
        return intent.value

    def expand(self, intent: ThemeIntent) -> List[ThemeUpdate]:
        updates: List[ThemeUpdate] = []
        for concrete in intent.selector.combinations():
            _component, theme, state, _style = concrete.single()
            updates.append(ThemeUpdate(concrete, self._resolve(intent, theme, state)))
        _logger.debug(
            "expanded %s/%s into %d updates",
            intent.component.value,
            intent.style_type.css_name,
            len(updates),
        )
        return updates

    def expand_all(self, intents: Iterable[ThemeIntent]) -> List[ThemeUpdate]:
        out: List[ThemeUpdate] = []
        for intent in intents:
            out.extend(self.expand(intent))
        return out

    def apply(self, intents: Union[ThemeIntent, Iterable[ThemeIntent]]) -> OverrideValidator:
        """Expand and record intents atomically; raises OverrideValidationError."""
        if isinstance(intents, ThemeIntent):
            intents = (intents,)
        return self.validator.override_all(self.expand_all(intents))


# Intent helpers -----------------------------------------------------------


def palette_intents(
    component: ComponentType,
    role: PaletteRole,
    high_contrast: bool = False,
    *,
    include_background: bool = True,
    outline_only: bool = False,
) -> List[ThemeIntent]:
    """Color intents for every palette channel of ``component``.

    ``outline_only`` restricts the result to the outline color (plus the
    background when ``include_background`` is set).
    """
    styles = []
    for style in PALETTE_CHANNELS:
        if style is StyleType.BACKGROUND_COLOR:
            if include_background:
                styles.append(style)
        elif not outline_only or style is StyleType.OUTLINE_COLOR:
            styles.append(style)
    return [ThemeIntent(component, style, role, high_contrast) for style in styles]


def typography_intents(
    component: ComponentType,
    high_contrast: bool = False,
    *,
    font_face: Optional[FontFace] = FontFace.SANS_SERIF,
    font_size: Optional[str] = None,
    font_style: Optional[str] = None,
    font_weight: Optional[str] = None,
    line_height: Optional[str] = None,
    margin_bottom: Optional[str] = None,
    text_decoration_line: Optional[str] = None,
    text_decoration_style: Optional[str] = None,
    text_decoration_thickness: Optional[str] = None,
    text_transform: Optional[str] = None,
) -> List[ThemeIntent]:
    intents: List[ThemeIntent] = []
    if font_face is not None:
        intents.append(
            ThemeIntent(component, StyleType.FONT_FAMILY, high_contrast=high_contrast, font_face=font_face)
        )
    simple = (
        (StyleType.FONT_SIZE, font_size),
        (StyleType.FONT_STYLE, font_style),
        (StyleType.FONT_WEIGHT, font_weight),
        (StyleType.LINE_HEIGHT, line_height),
        (StyleType.TEXT_DECORATION_LINE, text_decoration_line),
        (StyleType.TEXT_DECORATION_STYLE, text_decoration_style),
        (StyleType.TEXT_DECORATION_THICKNESS, text_decoration_thickness),
        (StyleType.TEXT_TRANSFORM, text_transform),
    )
    for style, value in simple:
        if value is not None:
            intents.append(ThemeIntent(component, style, high_contrast=high_contrast, value=value))
    if margin_bottom is not None:
        intents.append(
            ThemeIntent(component, StyleType.MARGIN, high_contrast=high_contrast, value=f"0 0 {margin_bottom} 0")
        )
    return intents


def outline_intents(
    component: ComponentType,
    role: PaletteRole,
    high_contrast: bool = False,
    *,
    offset: str = defaults.OUTLINE_OFFSET,
    style: str = defaults.OUTLINE_STYLE,
    width: str = defaults.OUTLINE_WIDTH,
) -> List[ThemeIntent]:
    """Outline color plus geometry.

    Geometry spans the Focused state, so applying these through a validator
    is rejected by the focus-outline rule.
    """
    return [
        ThemeIntent(component, StyleType.OUTLINE_COLOR, role, high_contrast),
        ThemeIntent(component, StyleType.OUTLINE_OFFSET, high_contrast=high_contrast, value=offset),
        ThemeIntent(component, StyleType.OUTLINE_STYLE, high_contrast=high_contrast, value=style),
        ThemeIntent(component, StyleType.OUTLINE_WIDTH, high_contrast=high_contrast, value=width),
    ]
