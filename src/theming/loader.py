"""Brand file loading.

A brand file is JSON shaped like::

    {
      "fonts": {"sans_serif": "...", "serif": "...", "monospace": "..."},
      "light": {"surface": "#FAFAFA", "primary": "Blue700", ...},
      "dark":  {"surface": "Grey900", ...}
    }

The ``light`` and ``dark`` groups are required; roles they omit keep the
built-in seed. ``fonts`` is optional. Keys are matched case-insensitively and
``SansSerif`` / ``sans-serif`` / ``sans_serif`` are equivalent. High-contrast
seeds cannot be configured.

Usage:
    from theming.loader import load_brand
    brand = load_brand("brand.json")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from . import defaults, settings
from .axes import FontFace, PaletteRole, parse_tag
from .brand import Brand, BrandFont, BrandTheme
from .errors import BrandValidationError

__all__ = ["load_brand", "brand_from_mapping"]

_logger = logging.getLogger(__name__)

_THEME_GROUPS = ("light", "dark")


def load_brand(path: str | Path | None = None) -> Brand:
    """Load a brand from JSON.

    Parameters
    ----------
    path: optional explicit path; defaults to ``settings.BRAND_FILE``. When
        neither is set the built-in brand is returned.
    """
    source = path if path is not None else settings.BRAND_FILE
    if not source:
        return Brand()
    brand_path = Path(source)
    if not brand_path.exists():
        raise FileNotFoundError(f"Brand file not found: {brand_path}")
    with brand_path.open("r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    brand = brand_from_mapping(data)
    _logger.debug("loaded brand from %s", brand_path)
    return brand


def brand_from_mapping(data: Mapping[str, Any]) -> Brand:
    if not isinstance(data, Mapping):
        raise BrandValidationError("Brand file must contain a JSON object")
    for group in _THEME_GROUPS:
        if group not in data:
            raise BrandValidationError(f"Missing brand group: {group}", context={"group": group})
    unknown = set(data) - set(_THEME_GROUPS) - {"fonts"}
    if unknown:
        raise BrandValidationError(
            f"Unknown brand groups: {', '.join(sorted(unknown))}", context={"groups": sorted(unknown)}
        )
    return Brand(
        font=_fonts(data.get("fonts", {})),
        light=_theme("light", data["light"], defaults.LIGHT_SEEDS),
        dark=_theme("dark", data["dark"], defaults.DARK_SEEDS),
    )


def _fonts(raw: Any) -> BrandFont:
    if not isinstance(raw, Mapping):
        raise BrandValidationError("fonts group must be an object")
    stacks = {}
    for key, value in raw.items():
        try:
            face = parse_tag(FontFace, key)
        except ValueError:
            raise BrandValidationError(f"Unknown font face: {key}", context={"key": key}) from None
        if not isinstance(value, str) or not value.strip():
            raise BrandValidationError(f"Font stack for {key} must be a non-empty string")
        stacks[face.name.lower()] = value.strip()
    return BrandFont(**stacks)


def _theme(group: str, raw: Any, fallback: Mapping[PaletteRole, str]) -> BrandTheme:
    if not isinstance(raw, Mapping):
        raise BrandValidationError(f"{group} group must be an object", context={"group": group})
    seeds: Dict[PaletteRole, Any] = dict(fallback)
    for key, value in raw.items():
        try:
            role = parse_tag(PaletteRole, key)
        except ValueError:
            role = None
        if role is None or role not in defaults.SEED_ROLES:
            raise BrandValidationError(
                f"Unknown palette role in {group}: {key}", context={"group": group, "key": key}
            )
        seeds[role] = value
    return BrandTheme.from_seeds(seeds)
