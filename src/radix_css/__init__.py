"""
radix_css - design tokens to CSS custom properties.

Exports a token graph (tokens, groups, collections, themes) as CSS
stylesheets, with Radix palette imports and custom colors in their own files.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, ExporterError, TokenGraphError, TokenSourceError
from .core.exporter import export_tokens
from .core.ir import ExporterConfig, TokenGraph
from .core.output import OutputFile

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ExporterConfig",
    "TokenGraph",
    "OutputFile",
    "export_tokens",
    "ExporterError",
    "TokenGraphError",
    "ConfigError",
    "TokenSourceError",
]
