import pytest

from theming import (
    ComponentState,
    ComponentType,
    FontFace,
    OverrideValidationError,
    PaletteRole,
    StyleType,
    ThemeIntent,
    ThemeType,
    derive_disabled,
    derive_hovered,
    outline_intents,
    palette_intents,
    typography_intents,
)


def test_background_intent_expands_to_fourteen_updates(expander):
    intent = ThemeIntent(ComponentType.SURFACE, StyleType.BACKGROUND_COLOR, PaletteRole.PRIMARY)
    updates = expander.expand(intent)
    assert len(updates) == 14
    assert all(u.selector.is_concrete for u in updates)
    assert {u.selector.single()[0] for u in updates} == {ComponentType.SURFACE}
    assert {u.selector.single()[3] for u in updates} == {StyleType.BACKGROUND_COLOR}
    assert {u.selector.single()[1] for u in updates} == {ThemeType.LIGHT, ThemeType.DARK}
    states = [u.selector.single()[2] for u in updates if ThemeType.LIGHT in u.selector.theme_types]
    assert len(set(states)) == 7
    assert ComponentState.HIDDEN not in states and ComponentState.READ_ONLY not in states


def test_palette_values_follow_state_derivations(expander, brand):
    intent = ThemeIntent(ComponentType.SURFACE, StyleType.BACKGROUND_COLOR, PaletteRole.PRIMARY)
    by_key = {u.selector.single()[1:3]: u.value for u in expander.expand(intent)}
    base = brand.palette(ThemeType.LIGHT, PaletteRole.PRIMARY)
    assert by_key[(ThemeType.LIGHT, ComponentState.DEFAULT)] == base.background
    assert by_key[(ThemeType.LIGHT, ComponentState.HOVERED)] == derive_hovered(base).background
    dark = brand.palette(ThemeType.DARK, PaletteRole.PRIMARY)
    assert by_key[(ThemeType.DARK, ComponentState.DISABLED)] == derive_disabled(dark).background


def test_channel_extraction(expander, brand):
    base = brand.palette(ThemeType.DARK, PaletteRole.SECONDARY)
    intent = ThemeIntent(ComponentType.LINK, StyleType.OUTLINE_COLOR, PaletteRole.SECONDARY)
    values = {u.selector.single()[1:3]: u.value for u in expander.expand(intent)}
    assert values[(ThemeType.DARK, ComponentState.DEFAULT)] == base.outline


def test_full_palette_intent_records_ninety_eight_updates(expander, validator):
    intents = palette_intents(ComponentType.SURFACE, PaletteRole.SURFACE)
    assert len(intents) == 7
    expander.apply(intents)
    assert len(validator) == 98


def test_palette_intent_variants():
    no_bg = palette_intents(ComponentType.TEXT, PaletteRole.PRIMARY, include_background=False)
    assert StyleType.BACKGROUND_COLOR not in {i.style_type for i in no_bg}
    outline = palette_intents(ComponentType.TEXT, PaletteRole.PRIMARY, include_background=False, outline_only=True)
    assert [i.style_type for i in outline] == [StyleType.OUTLINE_COLOR]


def test_high_contrast_intents_expand_but_are_rejected(expander, validator):
    intent = ThemeIntent(ComponentType.SURFACE, StyleType.BACKGROUND_COLOR, PaletteRole.PRIMARY, high_contrast=True)
    updates = expander.expand(intent)
    assert {u.selector.single()[1] for u in updates} == {
        ThemeType.HIGH_CONTRAST_LIGHT,
        ThemeType.HIGH_CONTRAST_DARK,
    }
    with pytest.raises(OverrideValidationError) as exc:
        expander.apply(intent)
    assert exc.value.rule == "high-contrast"
    assert len(validator) == 0


def test_outline_geometry_is_rejected_atomically(expander, validator):
    with pytest.raises(OverrideValidationError) as exc:
        expander.apply(outline_intents(ComponentType.LINK, PaletteRole.PRIMARY))
    assert exc.value.rule == "focus-outline"
    assert len(validator) == 0


def test_non_color_values_are_repeated(expander):
    intent = ThemeIntent(ComponentType.HEADING1, StyleType.FONT_SIZE, value="2rem")
    updates = expander.expand(intent)
    assert len(updates) == 14
    assert {u.value for u in updates} == {"2rem"}


def test_typography_intents(expander, validator, brand):
    intents = typography_intents(
        ComponentType.BODY,
        font_face=FontFace.SERIF,
        font_size="1rem",
        line_height="1.5",
        margin_bottom="1rem",
    )
    assert [i.style_type for i in intents] == [
        StyleType.FONT_FAMILY,
        StyleType.FONT_SIZE,
        StyleType.LINE_HEIGHT,
        StyleType.MARGIN,
    ]
    expander.apply(intents)
    assert len(validator) == 4 * 14
    families = {u.value for u in validator if StyleType.FONT_FAMILY in u.selector.style_types}
    assert families == {brand.font.serif}
    margins = {u.value for u in validator if StyleType.MARGIN in u.selector.style_types}
    assert margins == {"0 0 1rem 0"}


def test_intent_validation():
    with pytest.raises(ValueError):
        ThemeIntent(ComponentType.TEXT, StyleType.FONT_SIZE)
    with pytest.raises(ValueError):
        ThemeIntent(ComponentType.TEXT, StyleType.FONT_SIZE, PaletteRole.PRIMARY)
    with pytest.raises(ValueError):
        ThemeIntent(ComponentType.TEXT, StyleType.COLOR, font_face=FontFace.SERIF)


def test_palette_role_excludes_explicit_value(expander):
    with pytest.raises(ValueError):
        ThemeIntent(ComponentType.TEXT, StyleType.COLOR, PaletteRole.PRIMARY, value="red")
    intent = ThemeIntent(ComponentType.TEXT, StyleType.COLOR, value="red")
    assert not intent.is_palette_color
    assert {u.value for u in expander.expand(intent)} == {"red"}
