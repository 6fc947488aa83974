"""
Exporter configuration loading.

Reads `radix-css.toml`:

    [exporter]
    file_structure = "separateByType"
    token_name_style = "kebabCase"
    theme_selector = '[data-theme="{theme}"]'
    show_descriptions = false

    [exporter.token_prefixes]
    color = "clr"

A file without an `[exporter]` table is read as the options themselves.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError
from .ir import ExporterConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "radix-css.toml"


def parse_config(data: dict[str, Any]) -> ExporterConfig:
    """
    Validate raw options into an ExporterConfig.

    Raises:
        ConfigError: If an option is unknown or has an invalid value
    """
    options = data.get("exporter", data)
    try:
        return ExporterConfig.model_validate(options)
    except ValidationError as e:
        raise ConfigError(f"Invalid exporter configuration: {e}") from e


def load_config(path: Path | None = None, *, use_defaults: bool = True) -> ExporterConfig:
    """
    Load exporter configuration from a TOML file.

    Args:
        path: Config file; defaults to `radix-css.toml` in the working directory
        use_defaults: Return default options when the file doesn't exist

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is missing (without defaults) or invalid
    """
    config_path = path or Path(CONFIG_FILE)

    if not config_path.exists():
        if use_defaults:
            logger.debug(f"No {config_path} found, using default exporter options")
            return ExporterConfig()
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    return parse_config(data)
