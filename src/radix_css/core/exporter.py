"""
Full export of a token graph to CSS files.

Runs the style file generators for the base values and every selected
theme, then adds the palette, custom colors and index files.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import ConfigError
from .ir import ExporterConfig, FileStructure, Token, TokenGraph, TokenTheme
from .output import OutputFile, add_disclaimer
from .style_files import (
    generate_custom_colors_file,
    generate_radix_colors_file,
    generate_style_files,
)
from .themes import apply_theme, theme_identifier

logger = logging.getLogger(__name__)


def select_themes(graph: TokenGraph, config: ExporterConfig) -> list[TokenTheme]:
    """
    Themes to export, in the order the config names them.

    Raises:
        ConfigError: If the config names a theme the graph doesn't have
    """
    if config.themes is None:
        return list(graph.themes)

    selected: list[TokenTheme] = []
    for name in config.themes:
        theme = graph.get_theme(name)
        if theme is None:
            available = ", ".join(t.name for t in graph.themes) or "none"
            raise ConfigError(f"Unknown theme '{name}' (available: {available})")
        selected.append(theme)
    return selected


def _import_path(file: OutputFile) -> str:
    directory = file.relative_path.strip("/")
    if directory in ("", "."):
        return f"./{file.file_name}"
    if not directory.startswith("."):
        directory = f"./{directory}"
    return f"{directory}/{file.file_name}"


def generate_index_file(files: Sequence[OutputFile], config: ExporterConfig) -> OutputFile | None:
    """
    Generate a CSS file importing every style file.

    Returns:
        The index file, or None if there is nothing to import
    """
    if not files:
        return None

    content = "\n".join(f"@import '{_import_path(file)}';" for file in files)
    if config.show_generated_file_disclaimer:
        content = add_disclaimer(config.disclaimer, content)

    file_name = config.index_file_name
    if not file_name.lower().endswith(".css"):
        file_name += ".css"
    return OutputFile(relative_path="./", file_name=file_name, content=content)


def export_tokens(graph: TokenGraph, config: ExporterConfig) -> list[OutputFile]:
    """
    Export a token graph to CSS files.

    Args:
        graph: Tokens, groups, collections and themes
        config: Exporter options

    Returns:
        All generated files: style files for the base values and each theme,
        followed by the palette file, the custom colors file (split mode
        only) and the index file (when enabled)
    """
    style_files = generate_style_files(
        graph.tokens, graph.groups, config, collections=graph.collections
    )

    tokens_by_theme: dict[str, list[Token]] = {}
    for theme in select_themes(graph, config):
        identifier = theme_identifier(theme)
        themed_tokens = apply_theme(graph.tokens, theme)
        tokens_by_theme[identifier] = themed_tokens

        theme_files = generate_style_files(
            themed_tokens,
            graph.groups,
            config,
            theme_path=identifier,
            theme=theme,
            collections=graph.collections,
        )
        logger.debug(f"Theme '{theme.name}': {len(theme_files)} file(s)")
        style_files.extend(theme_files)

    files = list(style_files)
    files.append(generate_radix_colors_file(graph.tokens, graph.groups, config))
    if config.file_structure == FileStructure.SEPARATE_BY_TYPE:
        files.append(
            generate_custom_colors_file(
                graph.tokens, tokens_by_theme, graph.groups, config, graph.collections
            )
        )

    if config.generate_index_file:
        index = generate_index_file(style_files, config)
        if index is not None:
            files.append(index)

    logger.info(f"Exported {len(graph.tokens)} tokens to {len(files)} file(s)")
    return files
