"""
Intermediate representation for the token graph and exporter options.
"""

from .config import (
    DEFAULT_DISCLAIMER,
    DEFAULT_TOKEN_PREFIXES,
    ColorFormat,
    ExporterConfig,
    FileStructure,
    StringCase,
    TokenNameStructure,
    default_style_file_name,
)
from .tokens import (
    DIMENSION_TYPES,
    TEXT_TYPES,
    BorderValue,
    ColorValue,
    DimensionValue,
    GradientKind,
    GradientStop,
    GradientValue,
    ShadowLayer,
    ShadowValue,
    TextValue,
    Token,
    TokenCollection,
    TokenGraph,
    TokenGroup,
    TokenTheme,
    TokenType,
    TokenValue,
    TypographyValue,
    Unit,
    value_model_for,
)

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "TokenGroup",
    "TokenCollection",
    "TokenTheme",
    "TokenGraph",
    "DIMENSION_TYPES",
    "TEXT_TYPES",
    "value_model_for",
    # Values
    "TokenValue",
    "ColorValue",
    "DimensionValue",
    "TextValue",
    "TypographyValue",
    "ShadowLayer",
    "ShadowValue",
    "BorderValue",
    "GradientKind",
    "GradientStop",
    "GradientValue",
    "Unit",
    # Config
    "ExporterConfig",
    "FileStructure",
    "StringCase",
    "TokenNameStructure",
    "ColorFormat",
    "DEFAULT_TOKEN_PREFIXES",
    "DEFAULT_DISCLAIMER",
    "default_style_file_name",
]
