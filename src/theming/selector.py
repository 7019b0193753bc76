"""Four-axis theme selector and the (selector, value) update record.

A `ThemeSelector` names a set of (component, theme, state, style) combinations.
An empty axis means "not yet specified". Builders never mutate; they return a
new selector.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Iterable, Iterator, List, Tuple, Type, TypeVar

from .axes import (
    INTERACTIVE_STATES,
    ComponentState,
    ComponentType,
    StyleType,
    ThemeType,
)

__all__ = ["ThemeSelector", "ThemeUpdate", "contrast_theme_types"]

E = TypeVar("E", ComponentType, ThemeType, ComponentState, StyleType)


def contrast_theme_types(is_high_contrast: bool) -> Tuple[ThemeType, ThemeType]:
    """Theme pair addressed by an intent: (Light, Dark) or the high-contrast pair."""
    if is_high_contrast:
        return ThemeType.HIGH_CONTRAST_LIGHT, ThemeType.HIGH_CONTRAST_DARK
    return ThemeType.LIGHT, ThemeType.DARK


def _ordered(items: FrozenSet[E], enum_cls: Type[E]) -> List[E]:
    return [m for m in enum_cls if m in items]


def _freeze(values: Iterable[E], enum_cls: Type[E]) -> FrozenSet[E]:
    out = frozenset(values)
    for v in out:
        if not isinstance(v, enum_cls):
            raise ValueError(f"Expected {enum_cls.__name__}, got {v!r}")
    return out


@dataclass(frozen=True)
class ThemeSelector:
    component_types: FrozenSet[ComponentType] = field(default_factory=frozenset)
    theme_types: FrozenSet[ThemeType] = field(default_factory=frozenset)
    component_states: FrozenSet[ComponentState] = field(default_factory=frozenset)
    style_types: FrozenSet[StyleType] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "component_types", _freeze(self.component_types, ComponentType))
        object.__setattr__(self, "theme_types", _freeze(self.theme_types, ThemeType))
        object.__setattr__(self, "component_states", _freeze(self.component_states, ComponentState))
        object.__setattr__(self, "style_types", _freeze(self.style_types, StyleType))

    # Builders -------------------------------------------------------------
    def with_component_types(self, *types: ComponentType) -> "ThemeSelector":
        return replace(self, component_types=frozenset(types))

    def with_all_component_types(self) -> "ThemeSelector":
        return replace(self, component_types=frozenset(ComponentType))

    def with_theme_types(self, *themes: ThemeType) -> "ThemeSelector":
        return replace(self, theme_types=frozenset(themes))

    def with_contrast_theme_types(self, is_high_contrast: bool) -> "ThemeSelector":
        return replace(self, theme_types=frozenset(contrast_theme_types(is_high_contrast)))

    def with_component_states(self, *states: ComponentState) -> "ThemeSelector":
        return replace(self, component_states=frozenset(states))

    def with_all_component_states(self) -> "ThemeSelector":
        """Every interaction state except Hidden and ReadOnly."""
        return replace(self, component_states=frozenset(INTERACTIVE_STATES))

    def with_style_types(self, *styles: StyleType) -> "ThemeSelector":
        return replace(self, style_types=frozenset(styles))

    def with_all_style_types(self) -> "ThemeSelector":
        return replace(self, style_types=frozenset(StyleType))

    # Queries --------------------------------------------------------------
    @property
    def is_concrete(self) -> bool:
        return all(
            len(axis) == 1
            for axis in (self.component_types, self.theme_types, self.component_states, self.style_types)
        )

    @property
    def is_specified(self) -> bool:
        return all((self.component_types, self.theme_types, self.component_states, self.style_types))

    def combinations(self) -> Iterator["ThemeSelector"]:
        """Yield every concrete selector covered by this one, in declaration order.

        Raises ValueError if any axis is still unspecified.
        """
        if not self.is_specified:
            raise ValueError("Cannot expand a selector with an unspecified axis")
        for theme in _ordered(self.theme_types, ThemeType):
            for state in _ordered(self.component_states, ComponentState):
                for component in _ordered(self.component_types, ComponentType):
                    for style in _ordered(self.style_types, StyleType):
                        yield ThemeSelector(
                            frozenset((component,)),
                            frozenset((theme,)),
                            frozenset((state,)),
                            frozenset((style,)),
                        )

    def single(self) -> Tuple[ComponentType, ThemeType, ComponentState, StyleType]:
        """Unpack a concrete selector into its four tags."""
        if not self.is_concrete:
            raise ValueError("Selector is not concrete")
        (component,) = self.component_types
        (theme,) = self.theme_types
        (state,) = self.component_states
        (style,) = self.style_types
        return component, theme, state, style

    def __str__(self) -> str:
        def fmt(items: FrozenSet[Any], enum_cls: Type[Any]) -> str:
            return "|".join(m.name for m in _ordered(items, enum_cls)) or "*"

        return "/".join(
            (
                fmt(self.component_types, ComponentType),
                fmt(self.theme_types, ThemeType),
                fmt(self.component_states, ComponentState),
                fmt(self.style_types, StyleType),
            )
        )


@dataclass(frozen=True)
class ThemeUpdate:
    selector: ThemeSelector
    value: Any

    def declarations(self) -> List[Tuple[str, str]]:
        """(css-property-name, value-string) for each style type of the selector."""
        text = str(self.value)
        return [(style.css_name, text) for style in _ordered(self.selector.style_types, StyleType)]
