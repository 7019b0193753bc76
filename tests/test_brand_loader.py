import json

import pytest

from theming import (
    Brand,
    BrandValidationError,
    ColorFormatError,
    ColorValue,
    FontFace,
    PaletteRole,
    ThemeType,
    derive_high,
    derive_lowest,
    load_brand,
    settings,
)


def test_default_seeds(brand):
    assert brand.palette(ThemeType.LIGHT, PaletteRole.SURFACE).background == ColorValue.parse("Grey50")
    assert brand.palette(ThemeType.DARK, PaletteRole.PRIMARY).background == ColorValue.parse("Blue300")
    assert brand.palette(ThemeType.HIGH_CONTRAST_LIGHT, PaletteRole.SURFACE).background == ColorValue.parse("white")
    assert brand.palette(ThemeType.HIGH_CONTRAST_DARK, PaletteRole.PRIMARY).background == ColorValue.parse("aqua")


def test_elevation_roles_derive_from_surface(brand):
    surface = brand.palette(ThemeType.LIGHT, PaletteRole.SURFACE)
    assert brand.palette(ThemeType.LIGHT, PaletteRole.SURFACE_HIGH) == derive_high(surface)
    assert brand.palette(ThemeType.LIGHT, PaletteRole.SURFACE_LOWEST) == derive_lowest(surface)


def test_palette_lookup_is_memoized(brand):
    first = brand.palette(ThemeType.DARK, PaletteRole.ERROR)
    assert brand.palette(ThemeType.DARK, PaletteRole.ERROR) is first


def test_system_theme_has_no_palette(brand):
    with pytest.raises(ValueError):
        brand.palette(ThemeType.SYSTEM, PaletteRole.PRIMARY)


def test_high_contrast_fonts_are_stock(brand_file):
    brand = load_brand(brand_file)
    assert brand.font_for(ThemeType.LIGHT).family(FontFace.SANS_SERIF) == "Inter, sans-serif"
    assert brand.font_for(ThemeType.HIGH_CONTRAST_DARK) == Brand().font


def test_load_brand_overrides_and_fallbacks(brand_file):
    brand = load_brand(brand_file)
    assert brand.light.primary == ColorValue.parse("#6200EE")
    assert brand.light.surface == ColorValue.parse("white")
    assert brand.light.secondary == Brand().light.secondary
    assert brand.dark.primary == ColorValue.parse("#BB86FC")
    assert brand.font.monospace == "JetBrains Mono, monospace"
    assert brand.font.serif == Brand().font.serif


def test_load_brand_uses_configured_file(monkeypatch, brand_file):
    monkeypatch.setattr(settings, "BRAND_FILE", str(brand_file))
    assert load_brand().light.primary == ColorValue.parse("#6200EE")
    monkeypatch.setattr(settings, "BRAND_FILE", None)
    assert load_brand() == Brand()


def _write(tmp_path, payload):
    path = tmp_path / "brand.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "payload",
    [
        {"light": {}},
        {"light": {}, "dark": {}, "highContrastLight": {}},
        {"light": {"accent": "red"}, "dark": {}},
        {"light": {"SurfaceHigh": "red"}, "dark": {}},
        {"light": {}, "dark": {}, "fonts": {"cursive": "Comic Sans"}},
        {"light": {}, "dark": {}, "fonts": {"serif": ""}},
        {"light": [], "dark": {}},
        [],
    ],
)
def test_load_brand_rejects_malformed_files(tmp_path, payload):
    with pytest.raises(BrandValidationError):
        load_brand(_write(tmp_path, payload))


def test_load_brand_reports_bad_colors(tmp_path):
    with pytest.raises(ColorFormatError):
        load_brand(_write(tmp_path, {"light": {"primary": "blurple"}, "dark": {}}))


def test_load_brand_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_brand(tmp_path / "absent.json")
