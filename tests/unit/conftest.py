"""Shared fixtures: a small token graph with ordinary, Radix and custom colors."""

from __future__ import annotations

import pytest

from radix_css.core.ir import (
    ColorValue,
    DimensionValue,
    ExporterConfig,
    Token,
    TokenCollection,
    TokenGraph,
    TokenGroup,
    TokenTheme,
    TokenType,
)


def color_token(
    token_id: str,
    name: str,
    group: str,
    hex_value: str,
    *,
    ref: str | None = None,
    opacity: float = 1.0,
    description: str = "",
    collection_id: str | None = None,
) -> Token:
    """Build a color token from a #rrggbb string."""
    digits = hex_value.lstrip("#")
    return Token(
        id=token_id,
        token_type=TokenType.COLOR,
        name=name,
        description=description,
        parent_group_id=group,
        collection_id=collection_id,
        value=ColorValue(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            opacity=opacity,
            referenced_token_id=ref,
        ),
    )


def space_token(token_id: str, name: str, measure: float) -> Token:
    return Token(
        id=token_id,
        token_type=TokenType.SPACE,
        name=name,
        parent_group_id="g-spacing",
        value=DimensionValue(measure=measure),
    )


@pytest.fixture
def groups() -> list[TokenGroup]:
    return [
        TokenGroup(id="g-root", name="Tokens", is_root=True),
        TokenGroup(id="g-blue", name="blue", parent_id="g-root"),
        TokenGroup(id="g-semantic", name="semantic", parent_id="g-root"),
        TokenGroup(id="g-spacing", name="spacing", parent_id="g-root"),
        TokenGroup(id="g-core", name="core-color", parent_id="g-root"),
        TokenGroup(id="g-radix-blue", name="blue", path=["core-color"], parent_id="g-core"),
        TokenGroup(id="g-radix-green", name="green", path=["core-color"], parent_id="g-core"),
        TokenGroup(id="g-radix-black", name="black", path=["core-color"], parent_id="g-core"),
        TokenGroup(id="g-custom", name="custom", path=["core-color"], parent_id="g-core"),
    ]


@pytest.fixture
def collections() -> list[TokenCollection]:
    return [TokenCollection(id="c-brand", name="Brand")]


@pytest.fixture
def blue_500() -> Token:
    return color_token("t-blue-500", "500", "g-blue", "#1a73e8")


@pytest.fixture
def radix_blue_9() -> Token:
    return color_token("radix-blue-9", "blue-9", "g-radix-blue", "#0090ff")


@pytest.fixture
def radix_black_a3() -> Token:
    return color_token("radix-black-a3", "black-a3", "g-radix-black", "#000000", opacity=0.05)


@pytest.fixture
def primary(radix_blue_9: Token) -> Token:
    return color_token(
        "t-primary",
        "primary",
        "g-semantic",
        "#0090ff",
        ref=radix_blue_9.id,
        description="  Primary brand color  ",
    )


@pytest.fixture
def overlay(radix_black_a3: Token) -> Token:
    return color_token(
        "t-overlay", "overlay", "g-semantic", "#000000", ref=radix_black_a3.id, opacity=0.05
    )


@pytest.fixture
def accent() -> Token:
    return color_token("custom-accent", "accent", "g-custom", "#ff6600")


@pytest.fixture
def space_4() -> Token:
    return space_token("t-space-4", "4", 16)


@pytest.fixture
def tokens(
    blue_500: Token,
    radix_blue_9: Token,
    radix_black_a3: Token,
    primary: Token,
    overlay: Token,
    accent: Token,
    space_4: Token,
) -> list[Token]:
    return [blue_500, radix_blue_9, radix_black_a3, primary, overlay, accent, space_4]


@pytest.fixture
def dark_theme(primary: Token, accent: Token) -> TokenTheme:
    return TokenTheme(
        id="theme-dark",
        name="Dark",
        overridden_tokens=[
            color_token("t-primary", "primary", "g-semantic", "#0b57d0"),
            color_token("custom-accent", "accent", "g-custom", "#ff00ff"),
        ],
    )


@pytest.fixture
def graph(
    tokens: list[Token],
    groups: list[TokenGroup],
    collections: list[TokenCollection],
    dark_theme: TokenTheme,
) -> TokenGraph:
    return TokenGraph(tokens=tokens, groups=groups, collections=collections, themes=[dark_theme])


@pytest.fixture
def config() -> ExporterConfig:
    """Defaults without the disclaimer and descriptions, to keep expected CSS short."""
    return ExporterConfig(show_generated_file_disclaimer=False, show_descriptions=False)


@pytest.fixture
def make_color_token():
    """Factory for ad-hoc color tokens."""
    return color_token
