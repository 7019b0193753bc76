import pytest

from theming import ColorValue, contrast_ratio, ensure_minimum_contrast, relative_luminance


def test_relative_luminance_monotonic():
    # White > Gray > Black
    white = '#ffffff'
    gray = '#777777'
    black = '#000000'
    assert relative_luminance(white) > relative_luminance(gray) > relative_luminance(black)


def test_relative_luminance_extremes():
    assert relative_luminance("#000000") == pytest.approx(0.0, abs=1e-6)
    assert relative_luminance("#ffffff") == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize(
    "color,expected",
    [("#ff0000", 0.2126), ("#00ff00", 0.7152), ("#0000ff", 0.0722)],
)
def test_relative_luminance_primaries(color, expected):
    assert relative_luminance(color) == pytest.approx(expected, abs=1e-4)


def test_contrast_ratio_basic():
    ratio = contrast_ratio('#ffffff', '#000000')
    assert abs(ratio - 21.0) < 1e-9
    assert contrast_ratio('#000000', '#ffffff') == ratio


def test_contrast_ratio_ignores_alpha():
    assert contrast_ratio("#00000000", "#ffffff") == pytest.approx(21.0)


def test_ensure_returns_input_when_already_sufficient():
    black = ColorValue.parse("black")
    result = ensure_minimum_contrast(black, "white", 4.5)
    assert result.color is black
    assert result.meets_minimum
    assert result.ratio == pytest.approx(21.0)


def test_ensure_darkens_on_light_background():
    fg = ColorValue.parse("#777777")
    result = ensure_minimum_contrast(fg, "#ffffff", 4.5)
    assert result.meets_minimum
    assert result.ratio >= 4.5
    assert result.color.v < fg.v
    # Value rail keeps hue and saturation (grey stays grey)
    assert result.color.r == result.color.g == result.color.b


def test_ensure_lightens_on_dark_background():
    fg = ColorValue.parse("#333333")
    result = ensure_minimum_contrast(fg, "#000000", 4.5)
    assert result.meets_minimum
    assert result.color.v > fg.v


def test_ensure_preserves_alpha():
    fg = ColorValue.parse("#77777780")
    result = ensure_minimum_contrast(fg, "#ffffff", 4.5)
    assert result.color.a == fg.a


def test_ensure_desaturates_when_value_rail_is_exhausted():
    # Blue counts as a light background (V=100) yet even black only reaches ~2.4:1.
    fg = ColorValue.parse("#0000AA")
    result = ensure_minimum_contrast(fg, "#0000FF", 4.5)
    assert result.meets_minimum
    assert result.ratio >= 4.5
    assert result.color.s < fg.s


def test_ensure_reports_best_effort_when_unreachable():
    fg = ColorValue.parse("#777777")
    bg = ColorValue.parse("#777777")
    result = ensure_minimum_contrast(fg, bg, 25.0)
    assert not result.meets_minimum
    assert result.ratio == pytest.approx(contrast_ratio(result.color, bg))
    assert result.ratio > contrast_ratio(fg, bg)


@pytest.mark.parametrize(
    "fg,bg",
    [
        ("#FFEB3B", "#FFFFFF"),
        ("#1976D2", "#0D47A1"),
        ("#808080", "#7F7F7F"),
        ("#E91E63", "#212121"),
        ("#FAFAFA", "#00FFFF"),
    ],
)
def test_ensure_reaches_text_minimum(fg, bg):
    result = ensure_minimum_contrast(fg, bg, 4.5)
    assert result.meets_minimum
    assert result.ratio >= 4.5
    assert result.ratio == pytest.approx(contrast_ratio(result.color, bg))
