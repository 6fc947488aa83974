"""
radix-css CLI.

Commands:
- export: Generate CSS files from a token document
- inspect: Show how each token is classified and named
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from radix_css._version import get_version
from radix_css.core.classification import classify
from radix_css.core.errors import ExporterError
from radix_css.core.exporter import export_tokens
from radix_css.core.manifest import load_config
from radix_css.core.token_loader import load_token_graph
from radix_css.core.variables import token_variable_name
from radix_css.core.writer import output_path, write_output_files

app = typer.Typer(
    help="Export design tokens as CSS custom properties",
    no_args_is_help=True,
)

console = Console()

TokensArg = Annotated[
    Path, typer.Argument(help="Token document (.json, .yaml or .yml)", show_default=False)
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Exporter config (defaults to ./radix-css.toml)"),
]


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"radix-css {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Export design tokens as CSS custom properties."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("export")
def export_command(
    tokens: TokensArg,
    config: ConfigOpt = None,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output directory")
    ] = Path("styles"),
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="List files without writing them")
    ] = False,
) -> None:
    """
    Generate CSS files from a token document.

    Writes one file per token type (or one combined file), theme variants,
    and the Radix palette and custom colors files.
    """
    try:
        exporter_config = load_config(config, use_defaults=config is None)
        graph = load_token_graph(tokens)
        files = export_tokens(graph, exporter_config)
    except ExporterError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    if not files:
        console.print("[yellow]No files generated[/yellow]")
        return

    table = Table(title="Dry run" if dry_run else "Generated files")
    table.add_column("File")
    table.add_column("Lines", justify="right")
    for file in files:
        table.add_row(str(output_path(file, output)), str(file.content.count("\n") + 1))
    console.print(table)

    if not dry_run:
        written = write_output_files(files, output)
        console.print(f"[green]Wrote {len(written)} file(s) to {output}[/green]")


@app.command("inspect")
def inspect_command(tokens: TokensArg, config: ConfigOpt = None) -> None:
    """Show each token's type, classification and CSS variable name."""
    try:
        exporter_config = load_config(config, use_defaults=config is None)
        graph = load_token_graph(tokens)
        rows = [
            (
                token,
                classify(token, graph.groups),
                token_variable_name(token, graph.groups, graph.collections, exporter_config),
            )
            for token in graph.tokens
        ]
    except ExporterError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    table = Table(title=f"{len(rows)} tokens")
    table.add_column("Id", style="dim")
    table.add_column("Type")
    table.add_column("Class")
    table.add_column("Variable", style="cyan")
    for token, token_class, name in rows:
        table.add_row(token.id, token.token_type.value, token_class.value, f"--{name}")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
