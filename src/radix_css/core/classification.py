"""
Token classification by group path.

Tokens below the `core-color` group are backed by the Radix color
palette, except those in `core-color/custom`, which are user-defined
custom colors. Everything else is an ordinary token. Every caller goes
through `group_full_path` so naming and filtering never disagree.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from .errors import TokenGraphError
from .ir import Token, TokenGroup

CORE_COLOR_SEGMENT = "core-color"
CUSTOM_COLOR_SEGMENT = "custom"


class TokenClass(StrEnum):
    """Where a token's CSS lives and how it is named."""

    ORDINARY = "ordinary"
    PALETTE_COLOR = "paletteColor"
    CUSTOM_COLOR = "customColor"


def find_parent_group(token: Token, groups: Sequence[TokenGroup]) -> TokenGroup:
    """
    Get the group that owns a token.

    Raises:
        TokenGraphError: If the token's parent group is not in `groups`
    """
    for group in groups:
        if group.id == token.parent_group_id:
            return group
    raise TokenGraphError(
        f"Parent group {token.parent_group_id!r} not found for token {token.id!r}"
    )


def group_full_path(group: TokenGroup) -> list[str]:
    """Path segments from the root down to and including the group."""
    path = list(group.path)
    if not group.is_root:
        path.append(group.name)
    return path


def classify_path(path: Sequence[str]) -> TokenClass:
    """Classify a full group path."""
    if not path or path[0] != CORE_COLOR_SEGMENT:
        return TokenClass.ORDINARY
    if len(path) > 1 and path[1] == CUSTOM_COLOR_SEGMENT:
        return TokenClass.CUSTOM_COLOR
    return TokenClass.PALETTE_COLOR


def classify(token: Token, groups: Sequence[TokenGroup]) -> TokenClass:
    """Classify a token from its parent group's path."""
    return classify_path(group_full_path(find_parent_group(token, groups)))


def is_palette_color_token(token: Token, groups: Sequence[TokenGroup]) -> bool:
    return classify(token, groups) == TokenClass.PALETTE_COLOR


def is_custom_color_token(token: Token, groups: Sequence[TokenGroup]) -> bool:
    return classify(token, groups) == TokenClass.CUSTOM_COLOR
