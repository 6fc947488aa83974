"""
Token document loading.

Reads a token graph from a JSON or YAML document:

    groups:
      - {id: root, name: Tokens, is_root: true}
      - {id: g-color, name: color, parent: root}
      - {id: g-blue, name: blue, parent: g-color}
    collections:
      - {id: c-brand, name: Brand}
    tokens:
      - id: t-blue-500
        type: color
        name: "500"
        group: g-blue
        value: "#1a73e8"
      - id: t-primary
        type: color
        name: primary
        group: g-color
        value: {ref: t-blue-500}
    themes:
      - name: dark
        overrides:
          - {token: t-primary, value: "#0b57d0"}

Group paths are derived from the `parent` chain unless given explicitly.
A `{ref: <id>}` value points at another token; its literal value is copied
from the referenced token unless a `value` is given alongside it.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from .errors import TokenSourceError
from .ir import (
    DIMENSION_TYPES,
    BorderValue,
    ColorValue,
    DimensionValue,
    GradientStop,
    GradientValue,
    ShadowLayer,
    ShadowValue,
    TextValue,
    Token,
    TokenCollection,
    TokenGraph,
    TokenGroup,
    TokenTheme,
    TokenType,
    TokenValue,
    TypographyValue,
    Unit,
)

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_DIMENSION = re.compile(r"^\s*(-?\d+(?:\.\d+)?|-?\.\d+)\s*(px|rem|em|%|ms|s)?\s*$")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# Unit assumed for bare numbers
_DEFAULT_UNITS: dict[TokenType, Unit] = {
    TokenType.OPACITY: Unit.RAW,
    TokenType.Z_INDEX: Unit.RAW,
    TokenType.LINE_HEIGHT: Unit.RAW,
    TokenType.DURATION: Unit.MS,
}

# Typography properties the `font` shorthand can't carry
_SEPARATE_TYPOGRAPHY_FIELDS = frozenset({"letter_spacing", "text_case", "text_decoration"})


def _snake_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Accept camelCase keys (fontFamily) alongside snake_case ones."""
    return {_CAMEL_BOUNDARY.sub("_", key).lower(): value for key, value in data.items()}


# =============================================================================
# Values
# =============================================================================


def parse_color(data: Any) -> ColorValue:
    """
    Parse a color literal.

    Accepts ``#rgb``, ``#rrggbb``, ``#rrggbbaa`` or ``{r, g, b, a}``.
    """
    if isinstance(data, str):
        match = _HEX_COLOR.match(data.strip())
        if not match:
            raise TokenSourceError(f"Invalid color: {data!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        opacity = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return ColorValue(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            opacity=round(opacity, 3),
        )
    if isinstance(data, dict):
        fields = _snake_keys(data)
        opacity = fields.get("opacity", fields.get("a", 1.0))
        return ColorValue(r=fields["r"], g=fields["g"], b=fields["b"], opacity=opacity)
    raise TokenSourceError(f"Invalid color: {data!r}")


def parse_dimension(data: Any, default_unit: Unit = Unit.PIXELS) -> DimensionValue:
    """
    Parse a dimension literal.

    Accepts numbers (in `default_unit`), strings such as ``"12px"`` or
    ``"1.5"``, or ``{measure, unit}``.
    """
    if isinstance(data, bool):
        raise TokenSourceError(f"Invalid dimension: {data!r}")
    if isinstance(data, int | float):
        return DimensionValue(measure=float(data), unit=default_unit)
    if isinstance(data, str):
        match = _DIMENSION.match(data)
        if not match:
            raise TokenSourceError(f"Invalid dimension: {data!r}")
        unit = Unit(match.group(2)) if match.group(2) else default_unit
        return DimensionValue(measure=float(match.group(1)), unit=unit)
    if isinstance(data, dict):
        return DimensionValue(
            measure=float(data["measure"]), unit=Unit(data.get("unit", default_unit))
        )
    raise TokenSourceError(f"Invalid dimension: {data!r}")


class _ValueParser:
    """Parses token values, resolving `{ref: id}` values against other tokens."""

    def __init__(self, raw_tokens: dict[str, dict[str, Any]]):
        self._raw = raw_tokens
        self._resolved: dict[str, TokenValue] = {}
        self._resolving: list[str] = []

    def token_type(self, token_id: str) -> TokenType:
        raw = self._raw.get(token_id)
        if raw is None:
            raise TokenSourceError(f"Reference to unknown token: {token_id}")
        try:
            return TokenType(raw["type"])
        except ValueError as e:
            raise TokenSourceError(f"Unknown token type for {token_id}: {raw['type']}") from e

    def resolved(self, token_id: str) -> TokenValue:
        """Resolved value of a token by id."""
        if token_id in self._resolved:
            return self._resolved[token_id]
        if token_id in self._resolving:
            cycle = " -> ".join([*self._resolving, token_id])
            raise TokenSourceError(f"Reference cycle: {cycle}")

        token_type = self.token_type(token_id)
        self._resolving.append(token_id)
        try:
            value = self.parse(token_type, self._raw[token_id].get("value"))
        finally:
            self._resolving.pop()
        self._resolved[token_id] = value
        return value

    def _referenced(
        self, data: Any, expected: type, parse: Callable[[Any], TokenValue]
    ) -> TokenValue | None:
        """Handle `{ref: id}` values; None when `data` isn't a reference."""
        if not isinstance(data, dict) or "ref" not in data:
            return None
        ref = data["ref"]
        if "value" in data:
            literal = parse(data["value"])
        else:
            literal = self.resolved(ref)
            if not isinstance(literal, expected):
                raise TokenSourceError(
                    f"Reference {ref} resolves to {type(literal).__name__}, "
                    f"expected {expected.__name__}"
                )
        return literal.model_copy(update={"referenced_token_id": ref})

    def color(self, data: Any) -> ColorValue:
        return self._wrap(data, ColorValue, parse_color)

    def dimension(self, data: Any, default_unit: Unit = Unit.PIXELS) -> DimensionValue:
        def parse(d: Any) -> DimensionValue:
            return parse_dimension(d, default_unit)

        return self._wrap(data, DimensionValue, parse)

    def parse(self, token_type: TokenType, data: Any) -> TokenValue:
        """Parse a value for a token type."""
        if data is None:
            raise TokenSourceError(f"Missing value for {token_type} token")

        if token_type == TokenType.COLOR:
            return self.color(data)
        if token_type == TokenType.TYPOGRAPHY:
            return self._wrap(data, TypographyValue, self._typography)
        if token_type == TokenType.SHADOW:
            return self._wrap(data, ShadowValue, self._shadow)
        if token_type == TokenType.BORDER:
            return self._wrap(data, BorderValue, self._border)
        if token_type == TokenType.GRADIENT:
            return self._wrap(data, GradientValue, self._gradient)
        if token_type in DIMENSION_TYPES:
            return self.dimension(data, _DEFAULT_UNITS.get(token_type, Unit.PIXELS))
        return self._wrap(data, TextValue, self._text)

    def _wrap(self, data: Any, expected: type, parse: Callable[[Any], TokenValue]) -> TokenValue:
        referenced = self._referenced(data, expected, parse)
        return referenced if referenced is not None else parse(data)

    def _text(self, data: Any) -> TextValue:
        if isinstance(data, dict):
            return TextValue(text=str(data["text"]))
        return TextValue(text=str(data))

    def _typography(self, data: Any) -> TypographyValue:
        fields = _snake_keys(data)
        unsupported = sorted(_SEPARATE_TYPOGRAPHY_FIELDS & fields.keys())
        if unsupported:
            raise TokenSourceError(
                f"Typography fields {unsupported} have no place in the CSS font shorthand; "
                "declare them as separate tokens"
            )
        line_height = fields.get("line_height")
        return TypographyValue(
            font_family=fields["font_family"],
            font_weight=str(fields.get("font_weight", "400")),
            font_size=self.dimension(fields["font_size"]),
            line_height=self.dimension(line_height, Unit.RAW) if line_height is not None else None,
            italic=bool(fields.get("italic", False)),
        )

    def _shadow(self, data: Any) -> ShadowValue:
        layers_data = data if isinstance(data, list) else data.get("layers", [data])
        layers = []
        for layer in layers_data:
            fields = _snake_keys(layer)
            layers.append(
                ShadowLayer(
                    x=fields.get("x", 0.0),
                    y=fields.get("y", 0.0),
                    radius=fields.get("radius", fields.get("blur", 0.0)),
                    spread=fields.get("spread", 0.0),
                    color=self.color(fields["color"]),
                    inset=bool(fields.get("inset", False)),
                )
            )
        return ShadowValue(layers=layers)

    def _border(self, data: Any) -> BorderValue:
        return BorderValue(
            width=self.dimension(data["width"]),
            style=data.get("style", "solid"),
            color=self.color(data["color"]),
        )

    def _gradient(self, data: Any) -> GradientValue:
        stops = [
            GradientStop(position=stop["position"], color=self.color(stop["color"]))
            for stop in data.get("stops", [])
        ]
        return GradientValue(
            kind=data.get("kind", "linear"),
            angle=data.get("angle", 180.0),
            stops=stops,
        )


# =============================================================================
# Graph
# =============================================================================


def _parse_groups(groups_data: list[dict[str, Any]]) -> list[TokenGroup]:
    """Parse groups, deriving `path` from the parent chain where missing."""
    raw = {str(g["id"]): g for g in groups_data}
    paths: dict[str, list[str]] = {}

    def full_path(group_id: str, seen: tuple[str, ...] = ()) -> list[str]:
        if group_id in seen:
            raise TokenSourceError(f"Group cycle at {group_id}")
        data = raw.get(group_id)
        if data is None:
            raise TokenSourceError(f"Unknown parent group: {group_id}")
        own = [] if data.get("is_root") else [data["name"]]
        return path_of(group_id, seen + (group_id,)) + own

    def path_of(group_id: str, seen: tuple[str, ...] = ()) -> list[str]:
        if group_id not in paths:
            data = raw[group_id]
            if "path" in data:
                paths[group_id] = list(data["path"])
            elif data.get("parent"):
                paths[group_id] = full_path(str(data["parent"]), seen)
            else:
                paths[group_id] = []
        return paths[group_id]

    return [
        TokenGroup(
            id=group_id,
            name=data["name"],
            path=path_of(group_id),
            is_root=bool(data.get("is_root", False)),
            parent_id=data.get("parent"),
        )
        for group_id, data in raw.items()
    ]


def parse_token_graph(data: dict[str, Any]) -> TokenGraph:
    """
    Build a TokenGraph from a parsed token document.

    Raises:
        TokenSourceError: On missing fields, malformed values or dangling ids
    """
    try:
        groups = _parse_groups(data.get("groups") or [])
        collections = [
            TokenCollection(id=str(c["id"]), name=c["name"]) for c in data.get("collections") or []
        ]

        raw_tokens = {str(t["id"]): t for t in data.get("tokens") or []}
        parser = _ValueParser(raw_tokens)
        tokens = [
            Token(
                id=token_id,
                token_type=parser.token_type(token_id),
                name=str(raw["name"]),
                description=raw.get("description") or "",
                parent_group_id=str(raw["group"]),
                collection_id=raw.get("collection"),
                value=parser.resolved(token_id),
            )
            for token_id, raw in raw_tokens.items()
        ]
        tokens_by_id = {token.id: token for token in tokens}

        themes = []
        for index, theme_data in enumerate(data.get("themes") or []):
            overridden = []
            for override in theme_data.get("overrides") or []:
                base = tokens_by_id.get(str(override["token"]))
                if base is None:
                    raise TokenSourceError(
                        f"Theme '{theme_data['name']}' overrides unknown token {override['token']}"
                    )
                value = parser.parse(base.token_type, override.get("value"))
                overridden.append(base.model_copy(update={"value": value}))
            themes.append(
                TokenTheme(
                    id=str(theme_data.get("id", f"theme-{index}")),
                    name=theme_data["name"],
                    overridden_tokens=overridden,
                )
            )
    except KeyError as e:
        raise TokenSourceError(f"Missing field in token document: {e}") from e
    except (ValueError, TypeError) as e:
        raise TokenSourceError(f"Invalid token document: {e}") from e

    return TokenGraph(tokens=tokens, groups=groups, collections=collections, themes=themes)


def load_token_graph(path: Path) -> TokenGraph:
    """
    Load a token graph from a `.json`, `.yaml` or `.yml` file.

    Raises:
        TokenSourceError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise TokenSourceError(f"Token file not found: {path}")

    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            data = json.loads(content)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            raise TokenSourceError(f"Unsupported token file type: {path.suffix}")
    except json.JSONDecodeError as e:
        raise TokenSourceError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise TokenSourceError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        logger.warning(f"Empty token document at {path}")
        return TokenGraph()
    if not isinstance(data, dict):
        raise TokenSourceError(f"Token document must be a mapping: {path}")

    graph = parse_token_graph(data)
    logger.info(
        f"Loaded {len(graph.tokens)} tokens, {len(graph.groups)} groups, "
        f"{len(graph.themes)} themes from {path}"
    )
    return graph
