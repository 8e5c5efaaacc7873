"""Tests for the size-limited `parse_source` entry point and `new_parser`."""

from __future__ import annotations

from typing import Any

import pytest
from tree_sitter import Parser

from numscript_syntax import parsing
from numscript_syntax.core.result import err
from numscript_syntax.core.settings import load_settings
from numscript_syntax.parsing import SourceTooLargeError, new_parser, parse_source

PROGRAM = "send [USD/2 100] (source = @world destination = @bob)"


def test_new_parser_is_bound_to_numscript() -> None:
    parser = new_parser()

    assert isinstance(parser, Parser)
    assert parser.language is not None
    assert not parser.parse(PROGRAM.encode()).root_node.has_error


def test_new_parser_raises_load_error(monkeypatch: Any) -> None:
    monkeypatch.setattr(parsing, "load_language", lambda: err("bad ABI"))

    with pytest.raises(RuntimeError, match="Error loading Numscript grammar"):
        new_parser()


def test_str_and_bytes_parse_alike() -> None:
    from_str = parse_source(PROGRAM)
    from_bytes = parse_source(PROGRAM.encode(), new_parser())

    assert str(from_str.root_node) == str(from_bytes.root_node)
    assert from_str.root_node.end_byte == len(PROGRAM)


def test_source_limit_comes_from_settings(monkeypatch: Any) -> None:
    monkeypatch.setenv("NUMSCRIPT_MAX_SOURCE_BYTES", "16")
    load_settings.cache_clear()

    with pytest.raises(SourceTooLargeError) as info:
        parse_source(PROGRAM)

    assert info.value.limit == 16
    assert info.value.size == len(PROGRAM)
    assert "limit is 16 bytes" in str(info.value)


def test_source_at_the_limit_is_accepted(monkeypatch: Any) -> None:
    monkeypatch.setenv("NUMSCRIPT_MAX_SOURCE_BYTES", str(len(PROGRAM)))
    load_settings.cache_clear()

    assert parse_source(PROGRAM).root_node.type == "program"


def test_limit_counts_encoded_bytes(monkeypatch: Any) -> None:
    source = 'set_tx_meta("k", "ééé")'
    monkeypatch.setenv("NUMSCRIPT_MAX_SOURCE_BYTES", str(len(source)))
    load_settings.cache_clear()

    with pytest.raises(SourceTooLargeError):
        parse_source(source)
