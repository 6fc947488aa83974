"""
Exporter configuration IR.

All options that shape the generated stylesheets. Field names are
snake_case; the camelCase names used by design-tool exporter settings
are accepted as aliases.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .tokens import TokenType

# =============================================================================
# Enums
# =============================================================================


class FileStructure(StrEnum):
    """How style files are split."""

    SEPARATE_BY_TYPE = "separateByType"
    SINGLE_FILE = "singleFile"


class StringCase(StrEnum):
    """Naming styles for CSS variable names."""

    CAMEL = "camelCase"
    PASCAL = "pascalCase"
    SNAKE = "snakeCase"
    CONSTANT = "constantCase"
    KEBAB = "kebabCase"
    FLAT = "flatCase"


class TokenNameStructure(StrEnum):
    """Which parts of the hierarchy go into a variable name."""

    PATH_AND_NAME = "pathAndName"
    NAME_ONLY = "nameOnly"
    COLLECTION_PATH_AND_NAME = "collectionPathAndName"


class ColorFormat(StrEnum):
    """Output formats for color values."""

    HEX6 = "hashHex6"
    HEX8 = "hashHex8"
    SMART_HEX = "smartHashHex"
    RGB = "rgb"
    RGBA = "rgba"
    SMART_RGBA = "smartRgba"
    HSL = "hsl"
    HSLA = "hsla"
    SMART_HSLA = "smartHsla"
    OKLCH = "oklch"


# Default prefix per token type, used unless prefixes are customized
DEFAULT_TOKEN_PREFIXES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.TYPOGRAPHY: "typography",
    TokenType.DIMENSION: "dimension",
    TokenType.SIZE: "size",
    TokenType.SPACE: "space",
    TokenType.OPACITY: "opacity",
    TokenType.FONT_SIZE: "font-size",
    TokenType.LINE_HEIGHT: "line-height",
    TokenType.LETTER_SPACING: "letter-spacing",
    TokenType.PARAGRAPH_SPACING: "paragraph-spacing",
    TokenType.BORDER_WIDTH: "border-width",
    TokenType.RADIUS: "border-radius",
    TokenType.DURATION: "duration",
    TokenType.Z_INDEX: "z-index",
    TokenType.SHADOW: "shadow",
    TokenType.BORDER: "border",
    TokenType.GRADIENT: "gradient",
    TokenType.STRING: "string",
    TokenType.PRODUCT_COPY: "product-copy",
    TokenType.FONT_FAMILY: "font-family",
    TokenType.FONT_WEIGHT: "font-weight",
    TokenType.TEXT_CASE: "text-case",
    TokenType.TEXT_DECORATION: "text-decoration",
    TokenType.VISIBILITY: "visibility",
    TokenType.BLUR: "blur",
}

DEFAULT_DISCLAIMER = "This file was generated automatically. Do not edit it by hand."


def default_style_file_name(token_type: TokenType) -> str:
    """Default style file name for a token type (e.g. ``font-size.css``)."""
    return f"{DEFAULT_TOKEN_PREFIXES[token_type]}.css"


def _default_style_file_names() -> dict[TokenType, str]:
    return {token_type: default_style_file_name(token_type) for token_type in TokenType}


# =============================================================================
# Config
# =============================================================================


class ExporterConfig(BaseModel):
    """
    Exporter options.

    Example:
        ExporterConfig(
            file_structure=FileStructure.SINGLE_FILE,
            token_name_style=StringCase.KEBAB,
            theme_selector='[data-theme="{theme}"]',
        )
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    # Which files
    export_base_values: bool = Field(default=True, description="Emit base (non-theme) files")
    file_structure: FileStructure = FileStructure.SEPARATE_BY_TYPE
    token_type: Literal["all"] | TokenType = Field(
        default="all", description="'all' or a single token type to export"
    )
    export_only_themed_tokens: bool = Field(
        default=False, description="Theme files only contain tokens the theme overrides"
    )
    generate_empty_files: bool = False
    themes: list[str] | None = Field(
        default=None, description="Names of themes to export (all when unset)"
    )
    generate_index_file: bool = False
    index_file_name: str = "index.css"

    # File names
    customize_style_file_names: bool = False
    style_file_names: dict[TokenType, str] = Field(default_factory=_default_style_file_names)
    base_style_file_path: str = "./base"

    # Naming
    customize_token_prefixes: bool = False
    token_prefixes: dict[TokenType, str] = Field(
        default_factory=lambda: dict(DEFAULT_TOKEN_PREFIXES)
    )
    token_name_style: StringCase = StringCase.KEBAB
    token_name_structure: TokenNameStructure = TokenNameStructure.PATH_AND_NAME
    global_name_prefix: str = ""

    # Values
    use_references: bool = True
    color_precision: int = Field(default=3, ge=0, le=10)
    color_format: ColorFormat = ColorFormat.SMART_HEX
    force_rem_unit: bool = False
    rem_base: float = Field(default=16.0, gt=0)

    # Output formatting
    css_selector: str = ":root"
    theme_selector: str = '[data-theme="{theme}"]'
    indent: int = Field(default=2, ge=0)
    show_descriptions: bool = True
    show_generated_file_disclaimer: bool = True
    disclaimer: str = DEFAULT_DISCLAIMER

    @field_validator("style_file_names", mode="after")
    @classmethod
    def _fill_file_names(cls, value: dict[TokenType, str]) -> dict[TokenType, str]:
        return {**_default_style_file_names(), **value}

    @field_validator("token_prefixes", mode="after")
    @classmethod
    def _fill_prefixes(cls, value: dict[TokenType, str]) -> dict[TokenType, str]:
        return {**DEFAULT_TOKEN_PREFIXES, **value}

    def exports_all_types(self) -> bool:
        """Whether every token type present gets its own file."""
        return self.token_type == "all"

    def theme_selector_for(self, theme: str) -> str:
        """Substitute a theme name into the theme selector template."""
        return self.theme_selector.replace("{theme}", theme)
