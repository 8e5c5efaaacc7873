"""Numscript grammar tooling for Python.

The compiled grammar ships as the ``tree_sitter_numscript`` binding and is
used like any other tree-sitter language:

    import tree_sitter_numscript
    from tree_sitter import Language, Parser

    parser = Parser(Language(tree_sitter_numscript.language()))
    tree = parser.parse(b"send [USD/2 100] (source = @world destination = @bob)")

This package layers loading, size-limited parsing, syntax diagnostics and a
CLI on top of that binding.
"""

from __future__ import annotations

from numscript_syntax.language import GRAMMAR_NAME, load_language
from numscript_syntax.parsing import parse_source

__all__ = ["GRAMMAR_NAME", "__version__", "load_language", "parse_source"]
__version__ = "0.1.0"
