"""
Syntax diagnostics.

Turns the ERROR and MISSING nodes of a parsed tree into flat, serialisable
:class:`SyntaxIssue` records for reporting (CLI tables, JSON output).

- ERROR node   -> ``kind="error"``, message quotes the unexpected text.
- MISSING node -> ``kind="missing"``, message names the expected token.

ERROR nodes are reported once; their contents are not inspected further.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from tree_sitter import Node, Parser, Tree

from numscript_syntax.core.result import Result, err, ok
from numscript_syntax.parsing import parse_source

_SNIPPET_LIMIT = 40


class Position(BaseModel):
    """Zero-based row and byte column."""

    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)


class SyntaxIssue(BaseModel):
    """One syntax problem found in a source file."""

    kind: Literal["error", "missing"]
    message: str
    start: Position
    end: Position
    start_byte: int = Field(..., ge=0)
    end_byte: int = Field(..., ge=0)


def _snippet(node: Node) -> str:
    text = (node.text or b"").decode("utf-8", errors="replace").strip()
    text = " ".join(text.split())
    if len(text) > _SNIPPET_LIMIT:
        text = text[: _SNIPPET_LIMIT - 3] + "..."
    return text


def _issue(node: Node) -> SyntaxIssue:
    if node.is_missing:
        kind: Literal["error", "missing"] = "missing"
        message = f"missing {node.type!r}"
    else:
        kind = "error"
        message = f"unexpected {_snippet(node)!r}"
    start, end = node.start_point, node.end_point
    return SyntaxIssue(
        kind=kind,
        message=message,
        start=Position(row=start.row, column=start.column),
        end=Position(row=end.row, column=end.column),
        start_byte=node.start_byte,
        end_byte=node.end_byte,
    )


def collect_syntax_issues(tree: Tree) -> list[SyntaxIssue]:
    """Return the syntax issues of ``tree`` in document order."""
    issues: list[SyntaxIssue] = []
    cursor = tree.walk()
    while True:
        node = cursor.node
        if node is None:
            return issues
        if node.is_error or node.is_missing:
            issues.append(_issue(node))
        elif node.has_error and cursor.goto_first_child():
            continue
        while not cursor.goto_next_sibling():
            if not cursor.goto_parent():
                return issues


def check_source(source: bytes | str, parser: Parser | None = None) -> Result[Tree, list[SyntaxIssue]]:
    """Parse ``source`` and return ``Ok(tree)`` or ``Err(issues)``.

    Parameters
    ----------
    source : bytes | str
        Numscript program text.
    parser : Parser | None
        Parser to reuse; a Numscript parser is created when omitted.

    Raises
    ------
    SourceTooLargeError
        If the source is larger than the configured limit.
    """
    tree = parse_source(source, parser)
    if not tree.root_node.has_error:
        return ok(tree)
    return err(collect_syntax_issues(tree))


__all__ = ["Position", "SyntaxIssue", "check_source", "collect_syntax_issues"]
