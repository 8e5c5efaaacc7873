"""
Loading the compiled Numscript grammar.

``tree_sitter_numscript.language()`` returns a capsule around the generated
``TSLanguage``; wrapping it in :class:`tree_sitter.Language` checks that its
ABI version is one the installed runtime understands. A failed load is the
one expected failure of this package and is reported as
``Error loading Numscript grammar``.

Example
-------
>>> language = load_language().unwrap()
>>> language.abi_version
14
"""

from __future__ import annotations

import tree_sitter_numscript
from tree_sitter import Language

from numscript_syntax.core.result import Result, err, ok
from numscript_syntax.core.settings import get_logger

GRAMMAR_NAME = "numscript"
LOAD_ERROR = "Error loading Numscript grammar"

_log = get_logger("numscript_syntax.language")


def load_language() -> Result[Language, str]:
    """Wrap the compiled grammar in a :class:`tree_sitter.Language` without raising.

    Every call builds a fresh handle over the same static grammar, so
    repeated loads are independent and all succeed.

    Returns
    -------
    Result[Language, str]
        ``Ok(language)`` on success, ``Err(reason)`` if the runtime rejects
        the grammar (for example on an ABI version mismatch).
    """
    try:
        language = Language(tree_sitter_numscript.language())
    except (TypeError, ValueError) as exc:
        _log.error("%s: %s", LOAD_ERROR, exc)
        return err(str(exc))
    _log.debug(
        "Loaded %s grammar (ABI %d, %d node kinds)",
        GRAMMAR_NAME,
        language.abi_version,
        language.node_kind_count,
    )
    return ok(language)


__all__ = ["GRAMMAR_NAME", "LOAD_ERROR", "load_language"]
