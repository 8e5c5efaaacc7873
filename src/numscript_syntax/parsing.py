"""
Parsing Numscript sources.

:func:`parse_source` is the single entry point the CLI and diagnostics use.
It encodes ``str`` input as UTF-8, enforces the configured size limit and
hands the bytes to a :class:`tree_sitter.Parser`. Malformed programs never
raise: problems show up as ERROR and MISSING nodes in the returned tree.
"""

from __future__ import annotations

import time

from tree_sitter import Parser, Tree

from numscript_syntax.core.settings import get_logger, load_settings
from numscript_syntax.language import LOAD_ERROR, load_language

_log = get_logger("numscript_syntax.parsing")


class SourceTooLargeError(ValueError):
    """The source exceeds ``NUMSCRIPT_MAX_SOURCE_BYTES``."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Source is {size} bytes, limit is {limit} bytes")
        self.size = size
        self.limit = limit


def new_parser() -> Parser:
    """Return a parser bound to the Numscript grammar.

    Raises
    ------
    RuntimeError
        With the ``Error loading Numscript grammar`` message when the grammar
        cannot be loaded.
    """
    return load_language().map(Parser).expect(LOAD_ERROR)


def parse_source(source: bytes | str, parser: Parser | None = None) -> Tree:
    """Parse ``source`` and return its syntax tree.

    Parameters
    ----------
    source : bytes | str
        Program text; ``str`` is encoded as UTF-8 first.
    parser : Parser | None
        Parser to reuse. A fresh Numscript parser is created when omitted.

    Raises
    ------
    SourceTooLargeError
        If the encoded source is larger than the configured limit.
    """
    data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    limit = load_settings().max_source_bytes
    if len(data) > limit:
        raise SourceTooLargeError(len(data), limit)
    if parser is None:
        parser = new_parser()

    started = time.perf_counter()
    tree = parser.parse(data)
    _log.debug(
        "Parsed %d bytes in %.2fms (has_error=%s)",
        len(data),
        (time.perf_counter() - started) * 1000,
        tree.root_node.has_error,
    )
    return tree


__all__ = ["SourceTooLargeError", "new_parser", "parse_source"]
