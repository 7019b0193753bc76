import dataclasses

import pytest

from theming import ColorFormatError, ColorValue


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#FFF", "#FFFFFFFF"),
        ("#0f08", "#00FF0088"),
        ("#336699", "#336699FF"),
        ("#33669980", "#33669980"),
        ("rgb(255, 0, 0)", "#FF0000FF"),
        ("rgba(0, 0, 255, 0.5)", "#0000FF80"),
        ("rgb(0 128 0 / 50%)", "#00800080"),
        ("RGB(100%, 0%, 0%)", "#FF0000FF"),
        ("hsv(0, 100%, 100%)", "#FF0000FF"),
        ("hsv(120, 100, 50)", "#008000FF"),
        ("hsva(240, 100%, 100%, 0.25)", "#0000FF40"),
        ("RebeccaPurple", "#663399FF"),
        ("transparent", "#00000000"),
        ("Blue700", "#1976D2FF"),
        ("blue-700", "#1976D2FF"),
        ("  #abc  ", "#AABBCCFF"),
    ],
)
def test_parse_notations(text, expected):
    assert ColorValue.parse(text).hex == expected


@pytest.mark.parametrize(
    "raw",
    [
        "not-a-color",
        "#12345",
        "#GGGGGG",
        "rgb(300, 0, 0)",
        "hsv(1, 2)",
        "",
        42,
        "rgba(0, 0, 0, 1.5)",
        "rgb(0 0 0 / 120%)",
        "hsv(400, 50%, 50%)",
        "hsv(-10, 50%, 50%)",
        "hsva(10, 150%, 50%, 0.5)",
        "hsva(10, 50%, 50%, 2)",
    ],
)
def test_parse_rejects_unknown_input(raw):
    with pytest.raises(ColorFormatError) as exc:
        ColorValue.parse(raw)
    assert exc.value.raw == raw
    assert isinstance(exc.value, ValueError)


def test_equality_and_hash_use_canonical_hex():
    a = ColorValue.parse("#ff0000")
    b = ColorValue.parse("red")
    c = ColorValue.parse("rgb(255,0,0)")
    assert a == b == c
    assert len({a, b, c}) == 1
    assert ColorValue.parse("#ff000080") != a


def test_ordering_follows_hex_string():
    white = ColorValue.parse("white")
    black = ColorValue.parse("black")
    red = ColorValue.parse("red")
    assert sorted([white, black, red]) == [black, red, white]
    assert black < white


def test_construction_clamps_channels():
    c = ColorValue.from_hsva(400, 150, -5, 2)
    assert c.hex == "#000000FF"
    assert ColorValue(300, -4, 12, -1).hex == "#FF000C00"


@pytest.mark.parametrize(
    "text,h,s,v",
    [
        ("#FF0000", 0.0, 100.0, 100.0),
        ("#00FF00", 120.0, 100.0, 100.0),
        ("#0000FF", 240.0, 100.0, 100.0),
        ("#000000", 0.0, 0.0, 0.0),
    ],
)
def test_hsv_view(text, h, s, v):
    c = ColorValue.parse(text)
    assert c.h == pytest.approx(h)
    assert c.s == pytest.approx(s)
    assert c.v == pytest.approx(v)


def test_shift_value_uses_hsv_quantization_path():
    c = ColorValue.parse("#3366CC80")
    shifted = c.shift_value(-10)
    assert shifted == ColorValue.from_hsva(c.h, c.s, c.v - 10, c.a)
    assert shifted.a == c.a
    assert shifted.h == pytest.approx(c.h, abs=1.0)


def test_shift_value_clamps():
    grey = ColorValue.parse("#808080")
    assert grey.shift_value(200) == ColorValue.parse("white")
    assert grey.shift_value(-100) == ColorValue.parse("black")


def test_value_is_immutable():
    c = ColorValue.parse("red")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.r = 0  # type: ignore[misc]


def test_utilities():
    red = ColorValue.parse("red")
    assert red.with_alpha(0).is_transparent
    assert red.with_alpha(0.5).hex == "#FF000080"
    assert ColorValue.parse("white").is_light()
    assert ColorValue.parse("#777777").is_dark()
    assert red.to_css("background-color") == "background-color: #FF0000FF;"
    assert red.to_css() == "color: #FF0000FF;"
    assert str(red) == "#FF0000FF"


def test_from_rgba_matches_parsed_color():
    assert ColorValue.from_rgba(25, 118, 210) == ColorValue.parse("#1976D2")
    assert ColorValue.from_rgba(0, 0, 255, 0.5).hex == "#0000FF80"


def test_fractional_channels_round_like_parsing():
    assert ColorValue(127.6, 0.4, 254.5) == ColorValue.parse("rgb(127.6, 0.4, 254.5)")
    assert ColorValue(127.6, 0.4, 254.5).r == 128
