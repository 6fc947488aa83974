"""
Error types for token graph loading, configuration and CSS export.
"""


class ExporterError(Exception):
    """Base exception for all radix_css errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TokenGraphError(ExporterError, LookupError):
    """
    Raised when the token graph violates its own contract.

    Examples:
    - Token whose parent group is not in the group list
    - Reference to a token id that is not in the token map
    """

    pass


class ConfigError(ExporterError):
    """
    Raised when exporter configuration cannot be loaded or is invalid.

    Examples:
    - TOML syntax errors
    - Unknown enum values (file structure, color format, ...)
    - Theme names that do not exist in the token graph
    """

    pass


class TokenSourceError(ExporterError):
    """
    Raised when a token document cannot be read or parsed.

    Examples:
    - Unsupported file extension
    - Malformed color or dimension values
    - Theme overrides pointing at unknown tokens
    """

    pass
