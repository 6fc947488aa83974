"""
Token graph IR types.

Defines tokens, their typed values, token groups, collections and themes.
All models are frozen: the exporter only reads them.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Design token types."""

    COLOR = "color"
    TYPOGRAPHY = "typography"
    DIMENSION = "dimension"
    SIZE = "size"
    SPACE = "space"
    OPACITY = "opacity"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    PARAGRAPH_SPACING = "paragraphSpacing"
    BORDER_WIDTH = "borderWidth"
    RADIUS = "radius"
    DURATION = "duration"
    Z_INDEX = "zIndex"
    SHADOW = "shadow"
    BORDER = "border"
    GRADIENT = "gradient"
    STRING = "string"
    PRODUCT_COPY = "productCopy"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    TEXT_CASE = "textCase"
    TEXT_DECORATION = "textDecoration"
    VISIBILITY = "visibility"
    BLUR = "blur"


class Unit(StrEnum):
    """Units a dimension value can carry."""

    PIXELS = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "%"
    MS = "ms"
    SECONDS = "s"
    RAW = "raw"


class GradientKind(StrEnum):
    """Supported gradient kinds."""

    LINEAR = "linear"
    RADIAL = "radial"


# Token types whose value is a DimensionValue
DIMENSION_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.DIMENSION,
        TokenType.SIZE,
        TokenType.SPACE,
        TokenType.OPACITY,
        TokenType.FONT_SIZE,
        TokenType.LINE_HEIGHT,
        TokenType.LETTER_SPACING,
        TokenType.PARAGRAPH_SPACING,
        TokenType.BORDER_WIDTH,
        TokenType.RADIUS,
        TokenType.DURATION,
        TokenType.Z_INDEX,
        TokenType.BLUR,
    }
)

# Token types whose value is a TextValue
TEXT_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.STRING,
        TokenType.PRODUCT_COPY,
        TokenType.FONT_FAMILY,
        TokenType.FONT_WEIGHT,
        TokenType.TEXT_CASE,
        TokenType.TEXT_DECORATION,
        TokenType.VISIBILITY,
    }
)


# =============================================================================
# Values
# =============================================================================


class ColorValue(BaseModel):
    """
    sRGB color with opacity.

    Example:
        ColorValue(r=26, g=115, b=232)
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red channel")
    g: int = Field(ge=0, le=255, description="Green channel")
    b: int = Field(ge=0, le=255, description="Blue channel")
    opacity: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0-1)")
    referenced_token_id: str | None = Field(
        default=None, description="Id of the color token this value points to"
    )


class DimensionValue(BaseModel):
    """Numeric measure with a unit."""

    model_config = ConfigDict(frozen=True)

    measure: float = Field(description="Numeric value")
    unit: Unit = Field(default=Unit.PIXELS, description="Measure unit")
    referenced_token_id: str | None = None


class TextValue(BaseModel):
    """Plain text value (strings, font families, keywords)."""

    model_config = ConfigDict(frozen=True)

    text: str
    referenced_token_id: str | None = None


class TypographyValue(BaseModel):
    """Composite typography value rendered as the CSS `font` shorthand."""

    model_config = ConfigDict(frozen=True)

    font_family: str = Field(description="Font family name")
    font_weight: str = Field(default="400", description="Weight keyword or number")
    font_size: DimensionValue = Field(description="Font size")
    line_height: DimensionValue | None = Field(default=None, description="Line height")
    italic: bool = False
    referenced_token_id: str | None = None


class ShadowLayer(BaseModel):
    """One layer of a box shadow."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    spread: float = 0.0
    color: ColorValue
    inset: bool = False


class ShadowValue(BaseModel):
    """Layered box shadow."""

    model_config = ConfigDict(frozen=True)

    layers: list[ShadowLayer] = Field(default_factory=list)
    referenced_token_id: str | None = None


class BorderValue(BaseModel):
    """Border shorthand value."""

    model_config = ConfigDict(frozen=True)

    width: DimensionValue
    style: str = "solid"
    color: ColorValue
    referenced_token_id: str | None = None


class GradientStop(BaseModel):
    """Color stop of a gradient; position is 0-1."""

    model_config = ConfigDict(frozen=True)

    position: float = Field(ge=0.0, le=1.0)
    color: ColorValue


class GradientValue(BaseModel):
    """Linear or radial gradient."""

    model_config = ConfigDict(frozen=True)

    kind: GradientKind = GradientKind.LINEAR
    angle: float = Field(default=180.0, description="Angle in degrees (linear only)")
    stops: list[GradientStop] = Field(default_factory=list)
    referenced_token_id: str | None = None


TokenValue = (
    ColorValue
    | DimensionValue
    | TextValue
    | TypographyValue
    | ShadowValue
    | BorderValue
    | GradientValue
)


def value_model_for(token_type: TokenType) -> type[BaseModel]:
    """Get the value model class used by a token type."""
    if token_type == TokenType.COLOR:
        return ColorValue
    if token_type == TokenType.TYPOGRAPHY:
        return TypographyValue
    if token_type == TokenType.SHADOW:
        return ShadowValue
    if token_type == TokenType.BORDER:
        return BorderValue
    if token_type == TokenType.GRADIENT:
        return GradientValue
    if token_type in DIMENSION_TYPES:
        return DimensionValue
    return TextValue


# =============================================================================
# Graph
# =============================================================================


class Token(BaseModel):
    """
    A named, typed design value.

    Example:
        Token(
            id="t-blue-500",
            token_type=TokenType.COLOR,
            name="500",
            parent_group_id="g-blue",
            value=ColorValue(r=26, g=115, b=232),
        )
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique token id")
    token_type: TokenType = Field(description="Token type")
    name: str = Field(description="Token name (last path segment)")
    description: str = Field(default="", description="Free-form description")
    parent_group_id: str = Field(description="Id of the owning group")
    collection_id: str | None = Field(default=None, description="Owning collection id")
    value: TokenValue = Field(description="Resolved value")


class TokenGroup(BaseModel):
    """
    Node in the group hierarchy.

    `path` holds the names of every ancestor below the root, so the full
    path of a non-root group is `path + [name]`.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    path: list[str] = Field(default_factory=list)
    is_root: bool = False
    parent_id: str | None = None


class TokenCollection(BaseModel):
    """Named grouping of tokens."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class TokenTheme(BaseModel):
    """
    Named override set.

    `overridden_tokens` carry the themed values and share ids with the
    base tokens they override.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    overridden_tokens: list[Token] = Field(default_factory=list)

    def overrides(self, token_id: str) -> bool:
        """Check whether this theme overrides a token."""
        return any(t.id == token_id for t in self.overridden_tokens)


class TokenGraph(BaseModel):
    """Everything the exporter consumes in one bundle."""

    model_config = ConfigDict(frozen=True)

    tokens: list[Token] = Field(default_factory=list)
    groups: list[TokenGroup] = Field(default_factory=list)
    collections: list[TokenCollection] = Field(default_factory=list)
    themes: list[TokenTheme] = Field(default_factory=list)

    def get_theme(self, name: str) -> TokenTheme | None:
        """Get theme by name."""
        for theme in self.themes:
            if theme.name == name:
                return theme
        return None
