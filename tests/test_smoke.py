"""
Smoke tests for package structure and availability.

Scope
-----
These tests strictly verify that the package and its compiled grammar binding
are installed correctly and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from numscript_syntax import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("numscript_syntax")
    assert mod is not None
    assert callable(mod.load_language)
    assert callable(mod.parse_source)


def test_binding_importable() -> None:
    """The compiled extension exposes the zero-argument `language()` entry point."""
    binding = importlib.import_module("tree_sitter_numscript")
    assert callable(binding.language)


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_cli_module_exposes_app() -> None:
    """
    Ensure the CLI module exposes the Typer 'app' object.

    The presence of 'app' is required for the entry point defined in
    pyproject.toml (`numscript_syntax.cli:app`).
    """
    cli = importlib.import_module("numscript_syntax.cli")
    assert hasattr(cli, "app"), "numscript_syntax.cli must expose an 'app' Typer object."
