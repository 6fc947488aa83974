"""
CSS value formatting for token values.

Converts typed token values into CSS value strings. References to other
tokens are either emitted through a caller-supplied callback (usually
producing `var(--name)`) or flattened to the resolved literal value.
"""

from __future__ import annotations

import colorsys
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .errors import TokenGraphError
from .ir import (
    BorderValue,
    ColorFormat,
    ColorValue,
    DimensionValue,
    GradientKind,
    GradientValue,
    ShadowValue,
    TextValue,
    Token,
    TokenType,
    TokenValue,
    TypographyValue,
    Unit,
)
from .oklch import oklch_to_css, rgb_to_oklch

DIMENSION_DECIMALS = 3

# Text token types rendered as quoted CSS strings
_QUOTED_TEXT_TYPES = frozenset({TokenType.STRING, TokenType.PRODUCT_COPY})


@dataclass(frozen=True)
class CSSOptions:
    """Options for a token-to-CSS conversion."""

    token_to_variable_ref: Callable[[Token], str]
    allow_references: bool = True
    decimals: int = 3
    color_format: ColorFormat = ColorFormat.SMART_HEX
    force_rem_unit: bool = False
    rem_base: float = 16.0


def format_number(value: float, decimals: int = DIMENSION_DECIMALS) -> str:
    """
    Format a number without trailing zeros.

    Examples:
        >>> format_number(0.875)
        '0.875'
        >>> format_number(16.0)
        '16'
    """
    text = f"{round(value, decimals):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


# =============================================================================
# Entry point
# =============================================================================


def token_to_css(token: Token, tokens_by_id: Mapping[str, Token], options: CSSOptions) -> str:
    """
    Convert a token's value to a CSS value string.

    Args:
        token: Token to convert
        tokens_by_id: All tokens, used to resolve references
        options: Formatting options and the reference callback

    Returns:
        CSS value (without the property name or trailing semicolon)

    Raises:
        TokenGraphError: If a reference points at a token that isn't in the map
    """
    reference = _reference(token.value.referenced_token_id, tokens_by_id, options)
    if reference is not None:
        return reference

    value = _flattened(token.value, tokens_by_id)
    if isinstance(value, ColorValue):
        return _color(value, tokens_by_id, options)
    if isinstance(value, DimensionValue):
        return _dimension(value, tokens_by_id, options)
    if isinstance(value, TypographyValue):
        return _typography(value, tokens_by_id, options)
    if isinstance(value, ShadowValue):
        return _shadow(value, tokens_by_id, options)
    if isinstance(value, BorderValue):
        return _border(value, tokens_by_id, options)
    if isinstance(value, GradientValue):
        return _gradient(value, tokens_by_id, options)
    return _text(value, token.token_type)


def _reference(
    referenced_token_id: str | None,
    tokens_by_id: Mapping[str, Token],
    options: CSSOptions,
) -> str | None:
    """Reference expression for a value, or None to use the literal."""
    if not options.allow_references or not referenced_token_id:
        return None
    referenced = tokens_by_id.get(referenced_token_id)
    if referenced is None:
        raise TokenGraphError(f"Referenced token not found: {referenced_token_id}")
    return options.token_to_variable_ref(referenced)


def _flattened(value: TokenValue, tokens_by_id: Mapping[str, Token]) -> TokenValue:
    """
    Follow a value's references to the current value of the token at the end.

    The literal stored alongside a reference is what the target held when the
    document was loaded; under a theme the target may hold a different value.
    The stored literal is used when a target is missing or of another kind.
    """
    seen: set[str] = set()
    while value.referenced_token_id and value.referenced_token_id not in seen:
        seen.add(value.referenced_token_id)
        referenced = tokens_by_id.get(value.referenced_token_id)
        if referenced is None or not isinstance(referenced.value, type(value)):
            break
        value = referenced.value
    return value


# =============================================================================
# Colors
# =============================================================================


def _color(value: ColorValue, tokens_by_id: Mapping[str, Token], options: CSSOptions) -> str:
    reference = _reference(value.referenced_token_id, tokens_by_id, options)
    if reference is not None:
        return reference
    value = _flattened(value, tokens_by_id)
    return format_color(value, options.color_format, options.decimals)


def format_color(value: ColorValue, color_format: ColorFormat, decimals: int = 3) -> str:
    """
    Format a color in the requested CSS notation.

    Smart formats drop the alpha component for fully opaque colors.

    Examples:
        >>> format_color(ColorValue(r=26, g=115, b=232), ColorFormat.SMART_HEX)
        '#1a73e8'
    """
    opaque = value.opacity >= 1.0
    alpha = format_number(value.opacity, decimals)

    if color_format == ColorFormat.HEX6 or (color_format == ColorFormat.SMART_HEX and opaque):
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}"
    if color_format in (ColorFormat.HEX8, ColorFormat.SMART_HEX):
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}{round(value.opacity * 255):02x}"

    if color_format == ColorFormat.RGB or (color_format == ColorFormat.SMART_RGBA and opaque):
        return f"rgb({value.r}, {value.g}, {value.b})"
    if color_format in (ColorFormat.RGBA, ColorFormat.SMART_RGBA):
        return f"rgba({value.r}, {value.g}, {value.b}, {alpha})"

    if color_format == ColorFormat.OKLCH:
        L, C, H = rgb_to_oklch(value.r, value.g, value.b)
        return oklch_to_css(L, C, H, alpha=value.opacity, decimals=decimals)

    h, lightness, s = colorsys.rgb_to_hls(value.r / 255, value.g / 255, value.b / 255)
    hue = format_number(h * 360, decimals)
    sat = format_number(s * 100, decimals)
    light = format_number(lightness * 100, decimals)
    if color_format == ColorFormat.HSL or (color_format == ColorFormat.SMART_HSLA and opaque):
        return f"hsl({hue}, {sat}%, {light}%)"
    return f"hsla({hue}, {sat}%, {light}%, {alpha})"


# =============================================================================
# Dimensions
# =============================================================================


def _dimension(
    value: DimensionValue, tokens_by_id: Mapping[str, Token], options: CSSOptions
) -> str:
    reference = _reference(value.referenced_token_id, tokens_by_id, options)
    if reference is not None:
        return reference
    value = _flattened(value, tokens_by_id)

    if value.unit == Unit.RAW:
        return format_number(value.measure)
    if value.unit == Unit.PIXELS and options.force_rem_unit:
        return f"{format_number(value.measure / options.rem_base)}rem"
    return f"{format_number(value.measure)}{value.unit.value}"


# =============================================================================
# Composites
# =============================================================================


def _quote_font_family(family: str) -> str:
    # Stacks and already quoted names are passed through
    if "," in family or family.startswith(("'", '"')):
        return family
    return f'"{family}"'


def _typography(
    value: TypographyValue, tokens_by_id: Mapping[str, Token], options: CSSOptions
) -> str:
    """Typography as the CSS `font` shorthand."""
    parts: list[str] = []
    if value.italic:
        parts.append("italic")
    parts.append(value.font_weight)

    size = _dimension(value.font_size, tokens_by_id, options)
    if value.line_height is not None:
        size = f"{size}/{_dimension(value.line_height, tokens_by_id, options)}"
    parts.append(size)
    parts.append(_quote_font_family(value.font_family))
    return " ".join(parts)


def _shadow(value: ShadowValue, tokens_by_id: Mapping[str, Token], options: CSSOptions) -> str:
    if not value.layers:
        return "none"
    layers = []
    for layer in value.layers:
        offsets = " ".join(
            f"{format_number(n)}px" for n in (layer.x, layer.y, layer.radius, layer.spread)
        )
        color = _color(layer.color, tokens_by_id, options)
        prefix = "inset " if layer.inset else ""
        layers.append(f"{prefix}{offsets} {color}")
    return ", ".join(layers)


def _border(value: BorderValue, tokens_by_id: Mapping[str, Token], options: CSSOptions) -> str:
    width = _dimension(value.width, tokens_by_id, options)
    color = _color(value.color, tokens_by_id, options)
    return f"{width} {value.style} {color}"


def _gradient(
    value: GradientValue, tokens_by_id: Mapping[str, Token], options: CSSOptions
) -> str:
    stops = ", ".join(
        f"{_color(stop.color, tokens_by_id, options)} {format_number(stop.position * 100)}%"
        for stop in value.stops
    )
    if value.kind == GradientKind.RADIAL:
        return f"radial-gradient(circle, {stops})"
    return f"linear-gradient({format_number(value.angle)}deg, {stops})"


def _text(value: TextValue, token_type: TokenType) -> str:
    if token_type in _QUOTED_TEXT_TYPES:
        escaped = value.text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if token_type == TokenType.FONT_FAMILY:
        return _quote_font_family(value.text)
    return value.text
