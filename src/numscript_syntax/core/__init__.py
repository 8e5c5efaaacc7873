"""Core package initializer for numscript-syntax.

Holds the cross-cutting pieces shared by the grammar loader, diagnostics and the CLI:
    from numscript_syntax.core.settings import Settings, load_settings, get_logger
    from numscript_syntax.core.result import Result, ok, err
"""

from __future__ import annotations

__all__ = ["__doc__"]
