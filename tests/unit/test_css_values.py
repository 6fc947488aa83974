"""Tests for token value formatting."""

from __future__ import annotations

import pytest

from radix_css.core.css_values import CSSOptions, format_color, format_number, token_to_css
from radix_css.core.errors import TokenGraphError
from radix_css.core.ir import (
    BorderValue,
    ColorFormat,
    ColorValue,
    DimensionValue,
    GradientKind,
    GradientStop,
    GradientValue,
    ShadowLayer,
    ShadowValue,
    TextValue,
    Token,
    TokenType,
    TypographyValue,
    Unit,
)

BLUE = ColorValue(r=26, g=115, b=232)
BLACK = ColorValue(r=0, g=0, b=0)


def _token(token_type: TokenType, value, token_id: str = "t") -> Token:
    return Token(id=token_id, token_type=token_type, name=token_id, parent_group_id="g", value=value)


def _options(**kwargs) -> CSSOptions:
    return CSSOptions(token_to_variable_ref=lambda t: f"var(--{t.name})", **kwargs)


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(16.0, "16"), (0.875, "0.875"), (1.23456, "1.235"), (-0.0001, "0"), (2.5, "2.5")],
    )
    def test_trailing_zeros(self, value, expected):
        assert format_number(value) == expected


class TestFormatColor:
    def test_hex(self):
        assert format_color(BLUE, ColorFormat.HEX6) == "#1a73e8"
        assert format_color(BLUE, ColorFormat.HEX8) == "#1a73e8ff"
        assert format_color(BLUE, ColorFormat.SMART_HEX) == "#1a73e8"

    def test_smart_hex_keeps_alpha_for_translucent(self):
        translucent = BLUE.model_copy(update={"opacity": 0.5})
        assert format_color(translucent, ColorFormat.SMART_HEX) == "#1a73e880"

    def test_rgb(self):
        assert format_color(BLUE, ColorFormat.RGB) == "rgb(26, 115, 232)"
        assert format_color(BLUE, ColorFormat.RGBA) == "rgba(26, 115, 232, 1)"
        assert format_color(BLUE, ColorFormat.SMART_RGBA) == "rgb(26, 115, 232)"
        translucent = BLUE.model_copy(update={"opacity": 0.25})
        assert format_color(translucent, ColorFormat.SMART_RGBA) == "rgba(26, 115, 232, 0.25)"

    def test_hsl(self):
        red = ColorValue(r=255, g=0, b=0)
        assert format_color(red, ColorFormat.HSL) == "hsl(0, 100%, 50%)"
        assert format_color(red, ColorFormat.SMART_HSLA) == "hsl(0, 100%, 50%)"
        half = red.model_copy(update={"opacity": 0.5})
        assert format_color(half, ColorFormat.HSLA) == "hsla(0, 100%, 50%, 0.5)"

    def test_precision_applies_to_alpha(self):
        color = BLUE.model_copy(update={"opacity": 0.123456})
        assert format_color(color, ColorFormat.RGBA, decimals=2) == "rgba(26, 115, 232, 0.12)"

    def test_oklch(self):
        white = ColorValue(r=255, g=255, b=255)
        assert format_color(white, ColorFormat.OKLCH) == "oklch(1.000 0.0000 0.0)"
        assert format_color(BLUE, ColorFormat.OKLCH).startswith("oklch(0.")


class TestDimensions:
    def test_units(self):
        assert token_to_css(_token(TokenType.SPACE, DimensionValue(measure=16)), {}, _options()) == "16px"
        rem = DimensionValue(measure=1.5, unit=Unit.REM)
        assert token_to_css(_token(TokenType.SIZE, rem), {}, _options()) == "1.5rem"
        raw = DimensionValue(measure=0.5, unit=Unit.RAW)
        assert token_to_css(_token(TokenType.OPACITY, raw), {}, _options()) == "0.5"

    def test_force_rem(self):
        token = _token(TokenType.FONT_SIZE, DimensionValue(measure=14))
        assert token_to_css(token, {}, _options(force_rem_unit=True)) == "0.875rem"
        assert token_to_css(token, {}, _options(force_rem_unit=True, rem_base=10)) == "1.4rem"

    def test_force_rem_leaves_other_units(self):
        token = _token(TokenType.SIZE, DimensionValue(measure=50, unit=Unit.PERCENT))
        assert token_to_css(token, {}, _options(force_rem_unit=True)) == "50%"


class TestComposites:
    def test_typography_shorthand(self):
        value = TypographyValue(
            font_family="Inter",
            font_weight="700",
            font_size=DimensionValue(measure=16),
            line_height=DimensionValue(measure=1.5, unit=Unit.RAW),
        )
        css = token_to_css(_token(TokenType.TYPOGRAPHY, value), {}, _options())
        assert css == '700 16px/1.5 "Inter"'

    def test_typography_italic_with_stack(self):
        value = TypographyValue(
            font_family="Inter, sans-serif",
            font_size=DimensionValue(measure=12),
            italic=True,
        )
        css = token_to_css(_token(TokenType.TYPOGRAPHY, value), {}, _options())
        assert css == "italic 400 12px Inter, sans-serif"

    def test_shadow(self):
        layer = ShadowLayer(y=1, radius=3, color=BLACK.model_copy(update={"opacity": 0.12}))
        css = token_to_css(_token(TokenType.SHADOW, ShadowValue(layers=[layer])), {}, _options())
        assert css == "0px 1px 3px 0px #0000001f"

    def test_shadow_layers_and_inset(self):
        layers = [ShadowLayer(color=BLACK), ShadowLayer(x=2, color=BLACK, inset=True)]
        css = token_to_css(_token(TokenType.SHADOW, ShadowValue(layers=layers)), {}, _options())
        assert css == "0px 0px 0px 0px #000000, inset 2px 0px 0px 0px #000000"

    def test_empty_shadow(self):
        assert token_to_css(_token(TokenType.SHADOW, ShadowValue()), {}, _options()) == "none"

    def test_border(self):
        value = BorderValue(width=DimensionValue(measure=1), color=BLACK)
        assert token_to_css(_token(TokenType.BORDER, value), {}, _options()) == "1px solid #000000"

    def test_gradients(self):
        stops = [
            GradientStop(position=0, color=ColorValue(r=255, g=0, b=0)),
            GradientStop(position=1, color=ColorValue(r=0, g=0, b=255)),
        ]
        linear = GradientValue(angle=90, stops=stops)
        radial = GradientValue(kind=GradientKind.RADIAL, stops=stops)
        assert (
            token_to_css(_token(TokenType.GRADIENT, linear), {}, _options())
            == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"
        )
        assert (
            token_to_css(_token(TokenType.GRADIENT, radial), {}, _options())
            == "radial-gradient(circle, #ff0000 0%, #0000ff 100%)"
        )


class TestText:
    def test_string_is_quoted_and_escaped(self):
        token = _token(TokenType.STRING, TextValue(text='Say "hi"'))
        assert token_to_css(token, {}, _options()) == '"Say \\"hi\\""'

    def test_font_family_quoted(self):
        token = _token(TokenType.FONT_FAMILY, TextValue(text="Inter"))
        assert token_to_css(token, {}, _options()) == '"Inter"'

    def test_keywords_are_raw(self):
        token = _token(TokenType.TEXT_CASE, TextValue(text="uppercase"))
        assert token_to_css(token, {}, _options()) == "uppercase"


class TestReferences:
    def test_reference_goes_through_callback(self):
        base = _token(TokenType.COLOR, BLUE, token_id="base")
        alias = _token(TokenType.COLOR, BLUE.model_copy(update={"referenced_token_id": "base"}), "alias")
        assert token_to_css(alias, {"base": base}, _options()) == "var(--base)"

    def test_reference_flattened(self):
        base = _token(TokenType.COLOR, BLUE, token_id="base")
        alias = _token(TokenType.COLOR, BLUE.model_copy(update={"referenced_token_id": "base"}), "alias")
        assert token_to_css(alias, {"base": base}, _options(allow_references=False)) == "#1a73e8"

    def test_nested_reference(self):
        base = _token(TokenType.COLOR, BLACK, token_id="ink")
        value = BorderValue(
            width=DimensionValue(measure=2),
            style="dashed",
            color=BLACK.model_copy(update={"referenced_token_id": "ink"}),
        )
        css = token_to_css(_token(TokenType.BORDER, value), {"ink": base}, _options())
        assert css == "2px dashed var(--ink)"

    def test_missing_reference(self):
        alias = _token(TokenType.COLOR, BLUE.model_copy(update={"referenced_token_id": "gone"}))
        with pytest.raises(TokenGraphError):
            token_to_css(alias, {}, _options())

    def test_missing_reference_ignored_when_flattening(self):
        alias = _token(TokenType.COLOR, BLUE.model_copy(update={"referenced_token_id": "gone"}))
        assert token_to_css(alias, {}, _options(allow_references=False)) == "#1a73e8"

    def test_flattening_uses_current_target_value(self):
        # The alias still carries the literal the target had when loaded
        themed = _token(TokenType.COLOR, BLACK, token_id="base")
        alias = _token(TokenType.COLOR, BLUE.model_copy(update={"referenced_token_id": "base"}), "alias")
        assert token_to_css(alias, {"base": themed}, _options(allow_references=False)) == "#000000"

    def test_flattening_nested_reference(self):
        themed = _token(TokenType.COLOR, BLACK, token_id="ink")
        value = BorderValue(
            width=DimensionValue(measure=2),
            color=BLUE.model_copy(update={"referenced_token_id": "ink"}),
        )
        options = _options(allow_references=False)
        css = token_to_css(_token(TokenType.BORDER, value), {"ink": themed}, options)
        assert css == "2px solid #000000"
