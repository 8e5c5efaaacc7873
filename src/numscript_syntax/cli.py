# src/numscript_syntax/cli.py
"""
numscript-syntax Command Line Interface (CLI).

Terminal front-end for the Numscript grammar, built with `typer` and `rich`.

Commands
--------
- **info**: Load the grammar and show its metadata (name, ABI, state and symbol counts).
- **parse**: Print the syntax tree of a file, as a tree view or an S-expression.
- **check**: Report syntax errors for one or more files (a table, or JSON with
  `--json`); exit 1 if any.

Usage
-----
    $ numscript-syntax info
    $ numscript-syntax parse examples/payout.num --sexp
    $ numscript-syntax check examples/*.num --json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree as RichTree
from tree_sitter import Language, Node, Parser

from numscript_syntax import __version__
from numscript_syntax.diagnostics import SyntaxIssue, check_source
from numscript_syntax.language import GRAMMAR_NAME, LOAD_ERROR, load_language
from numscript_syntax.parsing import SourceTooLargeError, parse_source

load_dotenv()

app = typer.Typer(
    help="numscript-syntax: parse and check Numscript programs.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _load_language_or_exit() -> Language:
    """Load the grammar, or print the load error and exit with code 1."""
    result = load_language()
    if result.is_err():
        console.print(f"[bold red]❌ {LOAD_ERROR}:[/bold red] {result.unwrap_err()}")
        raise typer.Exit(code=1)
    return result.unwrap()


def _read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        console.print(f"[bold red]❌ Cannot read {path}:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def _node_label(node: Node, field_name: str | None) -> Text:
    label = Text()
    if field_name:
        label.append(f"{field_name}: ", style="cyan")
    if node.is_missing:
        label.append(f"MISSING {node.type}", style="bold red")
    elif node.is_error:
        label.append("ERROR", style="bold red")
    else:
        label.append(node.type, style="bold" if node.child_count else "green")
    start, end = node.start_point, node.end_point
    label.append(f" [{start.row}:{start.column} - {end.row}:{end.column}]", style="dim")
    if node.child_count == 0 and not node.is_missing:
        text = (node.text or b"").decode("utf-8", errors="replace")
        label.append(f" {text!r}", style="yellow")
    return label


def _build_tree_view(node: Node, branch: RichTree) -> None:
    for index, child in enumerate(node.children):
        if not (child.is_named or child.is_missing):
            continue
        sub = branch.add(_node_label(child, node.field_name_for_child(index)))
        _build_tree_view(child, sub)


def _issues_table(path: Path, issues: list[SyntaxIssue]) -> Table:
    table = Table(title=str(path), title_justify="left", border_style="red")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Kind")
    table.add_column("Message")
    for issue in issues:
        table.add_row(
            str(issue.start.row + 1),
            str(issue.start.column + 1),
            issue.kind,
            Text(issue.message),
        )
    return table


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def info() -> None:
    """Show the metadata of the Numscript grammar."""
    language = _load_language_or_exit()
    lines = [
        f"[bold]Grammar:[/bold] {GRAMMAR_NAME}",
        f"[bold]ABI version:[/bold] {language.abi_version}",
        f"[bold]Parse states:[/bold] {language.parse_state_count}",
        f"[bold]Node kinds:[/bold] {language.node_kind_count}",
        f"[bold]Fields:[/bold] {language.field_count}",
    ]
    console.print(
        Panel.fit(
            "\n".join(lines),
            title=f"numscript-syntax {__version__}",
            border_style="cyan",
        )
    )


@app.command()  # type: ignore[misc]
def parse(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a Numscript source file.",
        ),
    ],
    sexp: Annotated[
        bool,
        typer.Option("--sexp", "-s", help="Print a single-line S-expression instead of a tree."),
    ] = False,
) -> None:
    """
    Parse a Numscript file and print its syntax tree.

    Exits with code 1 when the tree contains syntax errors.
    """
    parser = Parser(_load_language_or_exit())
    try:
        tree = parse_source(_read_source(file), parser)
    except SourceTooLargeError as e:
        console.print(f"[bold red]❌ {file}:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    root = tree.root_node
    if sexp:
        console.print(str(root), markup=False, emoji=False, highlight=False, soft_wrap=True)
    else:
        view = RichTree(_node_label(root, None))
        _build_tree_view(root, view)
        console.print(view)

    if root.has_error:
        console.print("[bold yellow]⚠️ Syntax errors found.[/bold yellow]")
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def check(
    files: Annotated[
        list[Path],
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Numscript source files to check.",
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit the issues as JSON."),
    ] = False,
) -> None:
    """
    Check Numscript files for syntax errors.

    Exits with code 1 if any file has issues.
    """
    parser = Parser(_load_language_or_exit())
    report: dict[str, list[SyntaxIssue]] = {}

    for path in files:
        try:
            result = check_source(_read_source(path), parser)
        except SourceTooLargeError as e:
            console.print(f"[bold red]❌ {path}:[/bold red] {e}")
            raise typer.Exit(code=1) from e
        report[str(path)] = [] if result.is_ok() else result.unwrap_err()

    failed = sum(1 for issues in report.values() if issues)
    if as_json:
        payload = {
            name: [issue.model_dump() for issue in issues] for name, issues in report.items()
        }
        console.print(
            json.dumps(payload, indent=2), markup=False, emoji=False, highlight=False, soft_wrap=True
        )
    else:
        for name, issues in report.items():
            if issues:
                console.print(_issues_table(Path(name), issues))
            else:
                console.print(f"[green]✅ {name}[/green]")
        console.print(f"\n{len(report) - failed} ok, {failed} with syntax errors")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
