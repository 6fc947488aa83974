"""Core export pipeline: token IR, classification, naming, value formatting, style files."""

from . import ir
from .classification import (
    CORE_COLOR_SEGMENT,
    CUSTOM_COLOR_SEGMENT,
    TokenClass,
    classify,
    group_full_path,
)
from .errors import ConfigError, ExporterError, TokenGraphError, TokenSourceError
from .exporter import export_tokens, generate_index_file
from .manifest import load_config, parse_config
from .output import OutputFile
from .style_files import (
    generate_combined_style_file,
    generate_custom_colors_file,
    generate_radix_colors_file,
    generate_style_files,
    style_output_file,
)
from .token_loader import load_token_graph, parse_token_graph
from .variables import converted_token, get_token_prefix, token_variable_name
from .writer import write_output_files

__all__ = [
    "ir",
    # Errors
    "ExporterError",
    "TokenGraphError",
    "ConfigError",
    "TokenSourceError",
    # Classification
    "CORE_COLOR_SEGMENT",
    "CUSTOM_COLOR_SEGMENT",
    "TokenClass",
    "classify",
    "group_full_path",
    # Names and values
    "get_token_prefix",
    "token_variable_name",
    "converted_token",
    # Files
    "OutputFile",
    "generate_style_files",
    "style_output_file",
    "generate_combined_style_file",
    "generate_radix_colors_file",
    "generate_custom_colors_file",
    "generate_index_file",
    "export_tokens",
    # Loading and writing
    "load_config",
    "parse_config",
    "load_token_graph",
    "parse_token_graph",
    "write_output_files",
]
