"""
CSS custom property names and declarations for tokens.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .classification import TokenClass, classify_path, find_parent_group, group_full_path
from .css_values import CSSOptions, token_to_css
from .ir import (
    DEFAULT_TOKEN_PREFIXES,
    ExporterConfig,
    Token,
    TokenCollection,
    TokenGroup,
    TokenNameStructure,
    TokenType,
)
from .naming import code_safe_variable_name_for_token
from .output import indent


def get_token_prefix(token_type: TokenType, config: ExporterConfig) -> str:
    """Prefix for a token type, from the config when prefixes are customized."""
    if config.customize_token_prefixes:
        return config.token_prefixes[token_type]
    return DEFAULT_TOKEN_PREFIXES[token_type]


def _collection_name(
    token: Token, collections: Sequence[TokenCollection], config: ExporterConfig
) -> str | None:
    if config.token_name_structure != TokenNameStructure.COLLECTION_PATH_AND_NAME:
        return None
    if not token.collection_id:
        return None
    for collection in collections:
        if collection.id == token.collection_id:
            return collection.name
    # Unknown collections still qualify the name
    return token.collection_id


def token_variable_name(
    token: Token,
    groups: Sequence[TokenGroup],
    collections: Sequence[TokenCollection],
    config: ExporterConfig,
) -> str:
    """
    Get the CSS variable name of a token, without the leading ``--``.

    Palette and custom colors are named from the token alone: Radix
    variables are named after the palette step (``blue-9``) and custom
    colors keep the name the user gave them. Ordinary tokens get the type
    prefix, the group path and optionally the collection name.

    Raises:
        TokenGraphError: If the token's parent group is missing
    """
    parent = find_parent_group(token, groups)
    token_class = classify_path(group_full_path(parent))

    if token_class in (TokenClass.PALETTE_COLOR, TokenClass.CUSTOM_COLOR):
        return code_safe_variable_name_for_token(
            token,
            config.token_name_style,
            None,
            None,
            None,
            config.global_name_prefix,
        )

    return code_safe_variable_name_for_token(
        token,
        config.token_name_style,
        parent if config.token_name_structure != TokenNameStructure.NAME_ONLY else None,
        get_token_prefix(token.token_type, config),
        _collection_name(token, collections, config),
        config.global_name_prefix,
    )


def converted_token(
    token: Token,
    tokens_by_id: Mapping[str, Token],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
    collections: Sequence[TokenCollection] = (),
) -> str:
    """
    Convert a token into a CSS custom property declaration.

    Args:
        token: Token to convert
        tokens_by_id: All tokens by id, for resolving references
        groups: Token groups, for hierarchy and classification
        config: Exporter options
        collections: Collections, for collection-qualified names

    Returns:
        ``<indent>--name: value;`` with an optional trailing description comment
    """
    name = token_variable_name(token, groups, collections, config)

    def to_variable_ref(referenced: Token) -> str:
        return f"var(--{token_variable_name(referenced, groups, collections, config)})"

    value = token_to_css(
        token,
        tokens_by_id,
        CSSOptions(
            token_to_variable_ref=to_variable_ref,
            allow_references=config.use_references,
            decimals=config.color_precision,
            color_format=config.color_format,
            force_rem_unit=config.force_rem_unit,
            rem_base=config.rem_base,
        ),
    )
    indent_string = indent(config.indent)

    description = token.description.strip()
    if config.show_descriptions and description:
        return f"{indent_string}--{name}: {value}; /* {description} */"
    return f"{indent_string}--{name}: {value};"
