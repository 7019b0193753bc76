"""Append-only override log guarded by the theme invariants.

Rules are checked in this order and the first violation raises
`OverrideValidationError` without touching the log:

1. ``system-theme``      the System theme is resolved at runtime, never set.
2. ``high-contrast``     high-contrast themes are always derived.
3. ``hidden-read-only``  Hidden and ReadOnly states are not stylable.
4. ``focus-outline``     focus outline offset/style/width are fixed.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .axes import FOCUS_GEOMETRY, HIGH_CONTRAST_THEMES, NON_INTERACTIVE_STATES, ComponentState, ThemeType
from .errors import OverrideValidationError
from .selector import ThemeUpdate

__all__ = ["OverrideValidator"]

_logger = logging.getLogger(__name__)


def _check(update: ThemeUpdate) -> None:
    selector = update.selector
    if ThemeType.SYSTEM in selector.theme_types:
        raise OverrideValidationError(
            "The System theme is resolved dynamically and cannot be overridden",
            rule="system-theme",
            axis="theme_types",
        )
    if selector.theme_types & HIGH_CONTRAST_THEMES:
        raise OverrideValidationError(
            "High-contrast themes are derived and cannot be overridden",
            rule="high-contrast",
            axis="theme_types",
        )
    if selector.component_states & NON_INTERACTIVE_STATES:
        raise OverrideValidationError(
            "Hidden and ReadOnly states cannot be styled directly",
            rule="hidden-read-only",
            axis="component_states",
        )
    if ComponentState.FOCUSED in selector.component_states and selector.style_types & FOCUS_GEOMETRY:
        raise OverrideValidationError(
            "Focus outline offset, style and width are fixed",
            rule="focus-outline",
            axis="style_types",
        )


class OverrideValidator:
    """Ordered log of accepted `ThemeUpdate` entries."""

    def __init__(self) -> None:
        self._updates: List[ThemeUpdate] = []

    def override(self, update: ThemeUpdate) -> "OverrideValidator":
        _check(update)
        self._updates.append(update)
        _logger.debug("accepted override %s = %s", update.selector, update.value)
        return self

    def override_all(self, updates: Iterable[ThemeUpdate]) -> "OverrideValidator":
        """Validate every update first; append all of them or none."""
        batch = list(updates)
        for update in batch:
            _check(update)
        self._updates.extend(batch)
        _logger.debug("accepted %d overrides", len(batch))
        return self

    @property
    def updates(self) -> Tuple[ThemeUpdate, ...]:
        return tuple(self._updates)

    def __len__(self) -> int:
        return len(self._updates)

    def __getitem__(self, index: int) -> ThemeUpdate:
        return self._updates[index]

    def __iter__(self) -> Iterator[ThemeUpdate]:
        return iter(tuple(self._updates))
