"""
Style file generation.

Builds the CSS files of an export:

- one file per token type (split mode) or one combined file (single-file mode),
  for the base values and for each theme
- `radix-colors.css`, importing the Radix palettes the color tokens point to
- `custom-colors.css`, holding user-defined custom colors for every theme
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from .classification import (
    TokenClass,
    classify_path,
    group_full_path,
    is_custom_color_token,
    is_palette_color_token,
)
from .ir import (
    ExporterConfig,
    FileStructure,
    Token,
    TokenCollection,
    TokenGroup,
    TokenTheme,
    TokenType,
    default_style_file_name,
)
from .output import OutputFile, add_disclaimer, indent
from .themes import filter_themed_tokens
from .variables import converted_token

logger = logging.getLogger(__name__)

RADIX_COLORS_FILE = "radix-colors.css"
CUSTOM_COLORS_FILE = "custom-colors.css"
COMBINED_FILE_STEM = "tokens"

RADIX_IMPORT_ROOT = "@radix-ui/colors"
# Radix ships black and white as alpha scales only
_ALPHA_ONLY_FAMILIES = frozenset({"black", "white"})

# Every split-mode style file pulls in the palette and custom colors
STYLE_FILE_IMPORTS = (
    f"@import './{RADIX_COLORS_FILE}';\n"
    f"@import './{CUSTOM_COLORS_FILE}';\n"
)


def _with_disclaimer(content: str, config: ExporterConfig) -> str:
    if config.show_generated_file_disclaimer:
        return add_disclaimer(config.disclaimer, content)
    return content


def _selector(theme_path: str, config: ExporterConfig) -> str:
    if theme_path:
        return config.theme_selector_for(theme_path)
    return config.css_selector


def _tokens_by_id(tokens: Sequence[Token]) -> dict[str, Token]:
    return {token.id: token for token in tokens}


# =============================================================================
# Entry point
# =============================================================================


def generate_style_files(
    tokens: Sequence[Token],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
    theme_path: str = "",
    theme: TokenTheme | None = None,
    collections: Sequence[TokenCollection] = (),
) -> list[OutputFile]:
    """
    Generate the style files for base values or for one theme.

    Args:
        tokens: All tokens (already themed when building a theme)
        groups: Token groups
        config: Exporter options
        theme_path: Theme identifier; empty for base values
        theme: Theme being exported, used for themed-token filtering
        collections: Token collections

    Returns:
        Generated files; empty when base values are disabled and no theme is given
    """
    if not config.export_base_values and not theme_path:
        return []

    if config.file_structure == FileStructure.SINGLE_FILE:
        combined = generate_combined_style_file(
            tokens, groups, config, theme_path, theme, collections
        )
        return [combined] if combined is not None else []

    if config.exports_all_types():
        types = list(dict.fromkeys(token.token_type for token in tokens))
    else:
        types = [TokenType(config.token_type)]

    files = [
        style_output_file(token_type, tokens, groups, config, theme_path, theme, collections)
        for token_type in types
    ]
    return [file for file in files if file is not None]


# =============================================================================
# Palette imports
# =============================================================================


def _radix_imports(color: Token) -> list[str]:
    """Import lines for the palette a Radix color token belongs to."""
    parts = color.name.split("-")
    family = parts[0]
    is_alpha = len(parts) > 1 and parts[1].startswith("a")

    if family in _ALPHA_ONLY_FAMILIES:
        if is_alpha:
            return [f"@import '{RADIX_IMPORT_ROOT}/{family}-alpha.css';"]
        return []

    suffix = "-alpha" if is_alpha else ""
    return [
        f"@import '{RADIX_IMPORT_ROOT}/{family}{suffix}.css';",
        f"@import '{RADIX_IMPORT_ROOT}/{family}-dark{suffix}.css';",
    ]


def generate_radix_colors_file(
    tokens: Sequence[Token],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
) -> OutputFile:
    """
    Generate a CSS file importing the Radix palettes used by color tokens.

    Color tokens referencing a palette token pull in that palette's light
    and dark scales (or the alpha variants). References that don't resolve
    to a palette token are ignored.
    """
    referenced_ids = dict.fromkeys(
        token.value.referenced_token_id
        for token in tokens
        if token.token_type == TokenType.COLOR and token.value.referenced_token_id
    )
    mapped = _tokens_by_id(tokens)
    groups_by_id = {group.id: group for group in groups}

    imports: dict[str, None] = {}
    for token_id in referenced_ids:
        color = mapped.get(token_id)
        parent = groups_by_id.get(color.parent_group_id) if color is not None else None
        if color is None or parent is None:
            continue
        if classify_path(group_full_path(parent)) != TokenClass.PALETTE_COLOR:
            continue
        imports.update(dict.fromkeys(_radix_imports(color)))

    logger.debug(f"Radix palette imports: {len(imports)}")
    content = _with_disclaimer("\n".join(imports), config)

    return OutputFile(
        relative_path=config.base_style_file_path,
        file_name=RADIX_COLORS_FILE,
        content=content,
    )


# =============================================================================
# Custom colors
# =============================================================================


def _custom_color_block(
    selector: str,
    tokens: Sequence[Token],
    groups: Sequence[TokenGroup],
    collections: Sequence[TokenCollection],
    config: ExporterConfig,
) -> str:
    indent_string = indent(config.indent)
    tokens_by_id = _tokens_by_id(tokens)
    variables = "\n".join(
        f"{indent_string}{converted_token(token, tokens_by_id, groups, config, collections)}"
        for token in tokens
        if is_custom_color_token(token, groups)
    )
    return f"{indent_string}{selector} {{\n{variables}\n{indent_string}}}"


def generate_custom_colors_file(
    base_tokens: Sequence[Token],
    tokens_by_theme: Mapping[str, Sequence[Token]],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
    collections: Sequence[TokenCollection] = (),
) -> OutputFile:
    """
    Generate a CSS file with the custom colors of the base values and every theme.

    Args:
        base_tokens: Base tokens
        tokens_by_theme: Theme identifier -> tokens with that theme applied
        groups: Token groups
        config: Exporter options
        collections: Token collections

    Returns:
        `custom-colors.css`, one selector block per theme inside `@layer base`
    """
    blocks = [_custom_color_block(":root", base_tokens, groups, collections, config)]
    for theme_name, themed_tokens in tokens_by_theme.items():
        selector = config.theme_selector_for(theme_name)
        blocks.append(_custom_color_block(selector, themed_tokens, groups, collections, config))

    content = _with_disclaimer("@layer base {\n" + "\n\n".join(blocks) + "\n}", config)

    return OutputFile(
        relative_path=config.base_style_file_path,
        file_name=CUSTOM_COLORS_FILE,
        content=content,
    )


# =============================================================================
# Type files
# =============================================================================


def _style_file_name(token_type: TokenType, config: ExporterConfig) -> str:
    if config.customize_style_file_names:
        file_name = config.style_file_names[token_type]
    else:
        file_name = default_style_file_name(token_type)
    if not file_name.lower().endswith(".css"):
        file_name += ".css"
    return file_name


def style_output_file(
    token_type: TokenType,
    tokens: Sequence[Token],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
    theme_path: str = "",
    theme: TokenTheme | None = None,
    collections: Sequence[TokenCollection] = (),
) -> OutputFile | None:
    """
    Generate the CSS file for one token type.

    Palette and custom colors are left out of the color file; they live in
    `radix-colors.css` and `custom-colors.css`, which every type file imports.

    Returns:
        The file, or None if there is nothing to write
    """
    if not config.export_base_values and not theme_path:
        return None

    tokens_of_type = [token for token in tokens if token.token_type == token_type]

    if token_type == TokenType.COLOR:
        tokens_of_type = [
            token
            for token in tokens_of_type
            if not is_palette_color_token(token, groups)
            and not is_custom_color_token(token, groups)
        ]

    if theme_path and theme is not None and config.export_only_themed_tokens:
        tokens_of_type = filter_themed_tokens(tokens_of_type, theme)
        if not tokens_of_type:
            logger.debug(f"No themed {token_type} tokens for theme {theme_path}, skipping")
            return None

    if not config.generate_empty_files and not tokens_of_type:
        logger.debug(f"No {token_type} tokens, skipping")
        return None

    tokens_by_id = _tokens_by_id(tokens)
    variables = "\n".join(
        converted_token(token, tokens_by_id, groups, config, collections)
        for token in tokens_of_type
    )
    selector = _selector(theme_path, config)
    content = _with_disclaimer(f"{STYLE_FILE_IMPORTS}\n{selector} {{\n{variables}\n}}", config)

    return OutputFile(
        relative_path=f"./{theme_path}" if theme_path else config.base_style_file_path,
        file_name=_style_file_name(token_type, config),
        content=content,
    )


# =============================================================================
# Combined file
# =============================================================================


def generate_combined_style_file(
    tokens: Sequence[Token],
    groups: Sequence[TokenGroup],
    config: ExporterConfig,
    theme_path: str = "",
    theme: TokenTheme | None = None,
    collections: Sequence[TokenCollection] = (),
) -> OutputFile | None:
    """
    Generate a single CSS file holding every token type.

    Palette colors are excluded. Custom colors stay in, so the combined file
    is self-contained and needs no imports.
    """
    processed = [token for token in tokens if not is_palette_color_token(token, groups)]

    if theme_path and theme is not None and config.export_only_themed_tokens:
        processed = filter_themed_tokens(processed, theme)
        if not processed:
            logger.debug(f"No themed tokens for theme {theme_path}, skipping")
            return None

    if not config.generate_empty_files and not processed:
        return None

    tokens_by_id = _tokens_by_id(tokens)
    variables = "\n".join(
        converted_token(token, tokens_by_id, groups, config, collections) for token in processed
    )
    selector = _selector(theme_path, config)
    content = _with_disclaimer(f"{selector} {{\n{variables}\n}}", config)

    file_name = (
        f"{COMBINED_FILE_STEM}.{theme_path}.css" if theme_path else f"{COMBINED_FILE_STEM}.css"
    )
    return OutputFile(relative_path="./", file_name=file_name, content=content)
