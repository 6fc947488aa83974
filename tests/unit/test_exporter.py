"""Tests for full token graph export."""

from __future__ import annotations

import posixpath

import pytest

from radix_css.core.errors import ConfigError
from radix_css.core.exporter import export_tokens, generate_index_file, select_themes
from radix_css.core.ir import ExporterConfig, FileStructure
from radix_css.core.output import OutputFile
from radix_css.core.token_loader import parse_token_graph


def _config(**kwargs) -> ExporterConfig:
    options = {"show_generated_file_disclaimer": False, "show_descriptions": False}
    options.update(kwargs)
    return ExporterConfig(**options)


def _paths(files: list[OutputFile]) -> list[str]:
    return [posixpath.join(f.relative_path, f.file_name) for f in files]


class TestExportTokens:
    def test_split_mode(self, graph):
        files = export_tokens(graph, _config())
        assert _paths(files) == [
            "./base/color.css",
            "./base/space.css",
            "./dark/color.css",
            "./dark/space.css",
            "./base/radix-colors.css",
            "./base/custom-colors.css",
        ]

    def test_custom_colors_include_themes(self, graph):
        files = {f.file_name: f for f in export_tokens(graph, _config())}
        custom = files["custom-colors.css"].content
        assert '[data-theme="dark"] {\n    --accent: #ff00ff;' in custom

    def test_only_themed_tokens(self, graph):
        files = export_tokens(graph, _config(export_only_themed_tokens=True))
        assert "./dark/space.css" not in _paths(files)
        assert "./dark/color.css" in _paths(files)

    def test_single_file_mode(self, graph):
        files = export_tokens(graph, _config(file_structure=FileStructure.SINGLE_FILE))
        assert _paths(files) == ["./tokens.css", "./tokens.dark.css", "./base/radix-colors.css"]

    def test_single_file_mode_imports_palettes(self, graph):
        config = _config(file_structure=FileStructure.SINGLE_FILE)
        files = {f.file_name: f for f in export_tokens(graph, config)}
        assert "var(--blue-9)" in files["tokens.css"].content
        assert "@import '@radix-ui/colors/blue.css';" in files["radix-colors.css"].content

    def test_base_values_disabled(self, graph):
        files = export_tokens(graph, _config(export_base_values=False))
        assert "./base/color.css" not in _paths(files)
        assert "./dark/color.css" in _paths(files)

    def test_theme_selection(self, graph):
        files = export_tokens(graph, _config(themes=[]))
        assert not any(f.relative_path == "./dark" for f in files)

    def test_unknown_theme(self, graph):
        with pytest.raises(ConfigError, match="Unknown theme 'Sepia'"):
            export_tokens(graph, _config(themes=["Sepia"]))

    def test_index_file(self, graph):
        files = export_tokens(graph, _config(generate_index_file=True))
        index = files[-1]
        assert index.file_name == "index.css"
        assert index.relative_path == "./"
        assert index.content == (
            "@import './base/color.css';\n"
            "@import './base/space.css';\n"
            "@import './dark/color.css';\n"
            "@import './dark/space.css';"
        )


class TestSelectThemes:
    def test_all_by_default(self, graph):
        assert [t.name for t in select_themes(graph, _config())] == ["Dark"]

    def test_named(self, graph):
        assert [t.name for t in select_themes(graph, _config(themes=["Dark"]))] == ["Dark"]


class TestIndexFile:
    def test_nothing_to_import(self):
        assert generate_index_file([], _config()) is None

    def test_root_files_and_extension(self):
        files = [OutputFile(relative_path="./", file_name="tokens.css", content="")]
        index = generate_index_file(files, _config(index_file_name="all"))
        assert index.file_name == "all.css"
        assert index.content == "@import './tokens.css';"

    def test_disclaimer(self):
        files = [OutputFile(relative_path="styles", file_name="color.css", content="")]
        index = generate_index_file(files, _config(show_generated_file_disclaimer=True))
        assert index.content.endswith("\n\n@import './styles/color.css';")


class TestFlattenedThemes:
    @pytest.fixture
    def aliased_graph(self):
        return parse_token_graph(
            {
                "groups": [
                    {"id": "root", "name": "Tokens", "is_root": True},
                    {"id": "g-semantic", "name": "semantic", "parent": "root"},
                ],
                "tokens": [
                    {"id": "base", "type": "color", "name": "base", "group": "g-semantic",
                     "value": "#111111"},
                    {"id": "alias", "type": "color", "name": "alias", "group": "g-semantic",
                     "value": {"ref": "base"}},
                    {"id": "alias-2", "type": "color", "name": "alias-2", "group": "g-semantic",
                     "value": {"ref": "alias"}},
                ],
                "themes": [
                    {"name": "Dark", "overrides": [{"token": "base", "value": "#eeeeee"}]},
                ],
            }
        )

    def _color_files(self, graph, **kwargs):
        files = export_tokens(graph, _config(use_references=False, **kwargs))
        return {f.relative_path: f.content for f in files if f.file_name == "color.css"}

    def test_aliases_follow_theme_override(self, aliased_graph):
        dark = self._color_files(aliased_graph)["./dark"]
        assert "--color-semantic-base: #eeeeee;" in dark
        assert "--color-semantic-alias: #eeeeee;" in dark
        assert "--color-semantic-alias-2: #eeeeee;" in dark

    def test_base_values_unchanged(self, aliased_graph):
        base = self._color_files(aliased_graph)["./base"]
        assert "--color-semantic-alias: #111111;" in base
        assert "--color-semantic-alias-2: #111111;" in base

    def test_combined_file(self, aliased_graph):
        files = export_tokens(
            aliased_graph,
            _config(use_references=False, file_structure=FileStructure.SINGLE_FILE),
        )
        dark = {f.file_name: f.content for f in files}["tokens.dark.css"]
        assert "--color-semantic-alias: #eeeeee;" in dark
