"""
Theme helpers: applying overrides and selecting themed tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ir import StringCase, Token, TokenTheme
from .naming import change_case


def theme_identifier(theme: TokenTheme) -> str:
    """
    Identifier used for a theme's folder, file suffix and selector.

    Examples:
        >>> theme_identifier(TokenTheme(id="t1", name="High Contrast"))
        'high-contrast'
    """
    return change_case(theme.name, StringCase.KEBAB)


def filter_themed_tokens(tokens: Sequence[Token], theme: TokenTheme) -> list[Token]:
    """Keep only the tokens the theme overrides, in their original order."""
    overridden = {t.id for t in theme.overridden_tokens}
    return [token for token in tokens if token.id in overridden]


def apply_theme(tokens: Sequence[Token], theme: TokenTheme) -> list[Token]:
    """
    Compute the token list as seen under a theme.

    Overridden tokens take the theme's value; every other token is kept
    unchanged. Order follows `tokens`.
    """
    overrides = {t.id: t for t in theme.overridden_tokens}
    themed: list[Token] = []
    for token in tokens:
        override = overrides.get(token.id)
        if override is None:
            themed.append(token)
        else:
            themed.append(token.model_copy(update={"value": override.value}))
    return themed
