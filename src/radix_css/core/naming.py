"""
Naming helpers for CSS variable names.

Turns token names, group paths and prefixes into code-safe identifiers
in one of the supported case styles.
"""

from __future__ import annotations

import re

from .ir import StringCase, Token, TokenGroup

# Lower/digit followed by upper: fontSize -> font Size
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
# Acronym followed by a word: HTMLParser -> HTML Parser
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
# Anything that is not a letter or a digit separates words
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """
    Split free text into words.

    Examples:
        >>> split_words("core-color/blue 500")
        ['core', 'color', 'blue', '500']
        >>> split_words("fontSize")
        ['font', 'Size']
    """
    text = _LOWER_UPPER.sub(r"\1 \2", text)
    text = _ACRONYM_WORD.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(text) if word]


def _pascal_word(word: str, index: int) -> str:
    # Digits can't glue onto the previous word without changing its meaning
    if index > 0 and word[0].isdigit():
        return "_" + word.lower()
    return word[0].upper() + word[1:].lower()


def change_case(text: str, style: StringCase) -> str:
    """
    Convert text to a case style.

    Examples:
        >>> change_case("color blue 500", StringCase.KEBAB)
        'color-blue-500'
        >>> change_case("color blue 500", StringCase.CAMEL)
        'colorBlue_500'
    """
    words = split_words(text)
    if not words:
        return ""

    if style == StringCase.KEBAB:
        return "-".join(word.lower() for word in words)
    if style == StringCase.SNAKE:
        return "_".join(word.lower() for word in words)
    if style == StringCase.CONSTANT:
        return "_".join(word.upper() for word in words)
    if style == StringCase.FLAT:
        return "".join(word.lower() for word in words)

    pascal = "".join(_pascal_word(word, i) for i, word in enumerate(words))
    if style == StringCase.PASCAL:
        return pascal
    return pascal[0].lower() + pascal[1:]


def code_safe_variable_name(text: str, style: StringCase) -> str:
    """Convert text to an identifier that never starts with a digit."""
    name = change_case(text, style)
    if name and name[0].isdigit():
        name = "_" + name
    return name


def code_safe_variable_name_for_token(
    token: Token,
    style: StringCase,
    parent: TokenGroup | None,
    prefix: str | None,
    collection_name: str | None = None,
    global_prefix: str | None = None,
) -> str:
    """
    Build a token's variable name.

    Fragments are joined in order: global prefix, type prefix, collection
    name, group path, token name. The group path is skipped when no parent
    is given.
    """
    fragments: list[str] = []
    if global_prefix:
        fragments.append(global_prefix)
    if prefix:
        fragments.append(prefix)
    if collection_name:
        fragments.append(collection_name)
    if parent is not None:
        fragments.extend(parent.path)
        if not parent.is_root:
            fragments.append(parent.name)
    fragments.append(token.name)

    return code_safe_variable_name(" ".join(fragments), style)
