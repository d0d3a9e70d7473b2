"""Unit tests for the troff and mdoc escaping helpers."""

from __future__ import annotations

import re

import pytest

from cmdman.generator.escaping import (
    backslashify,
    dashify,
    is_raw_markup,
    simple_to_mdoc,
    simple_to_troff,
)

UNESCAPED_BACKSLASH = re.compile(r"\\(?!e)")


def test_backslashify_leaves_no_unescaped_backslash() -> None:
    """Every backslash in the output should start the printable ``\\e`` escape."""
    result = backslashify(r"C:\path\to\file and \fB not bold")
    assert result == r"C:\epath\eto\efile and \efB not bold"
    assert UNESCAPED_BACKSLASH.search(result) is None


def test_backslashify_is_not_idempotent() -> None:
    """Escaping twice escapes the escapes again."""
    once = backslashify("a\\b")
    assert backslashify(once) != once


def test_dashify_escapes_every_hyphen() -> None:
    assert dashify("--dry-run -v") == r"\-\-dry\-run \-v"


@pytest.mark.parametrize(
    "text",
    [
        ".TH APP 1",
        "   .B bold\nwith-dash and \\ backslash",
        "\n\t.PP\nsecond line",
    ],
)
def test_raw_markup_passes_through_unchanged(text: str) -> None:
    """Text starting with a request is emitted verbatim by both dialects."""
    assert is_raw_markup(text)
    assert simple_to_troff(text) == text
    assert simple_to_mdoc(text) == text


def test_text_with_inner_dot_is_not_raw() -> None:
    assert not is_raw_markup("see app.conf")
    assert not is_raw_markup("")


def test_troff_escapes_and_guards_control_lines() -> None:
    """Lines that would be read as requests are guarded with ``\\&``."""
    text = "Use --force\n.not a request\n'neither\nC:\\tmp"
    assert simple_to_troff(text) == (
        "Use \\-\\-force\n\\&.not a request\n\\&'neither\nC:\\etmp"
    )


def test_troff_keeps_blank_lines_and_indentation() -> None:
    assert simple_to_troff("one\n\n  two") == "one\n\n  two"


def test_troff_normalizes_carriage_returns() -> None:
    assert simple_to_troff("one\r\ntwo\rthree") == "one\ntwo\nthree"


def test_mdoc_replaces_blank_lines_with_paragraph_macro() -> None:
    """Runs of blank lines collapse into one ``.Pp``; edges are dropped."""
    text = "\n  first para  \n\n\n second-para\n\n"
    assert simple_to_mdoc(text) == "first para\n.Pp\nsecond\\-para"


def test_mdoc_guards_control_lines_after_stripping() -> None:
    """Indented control characters become line-leading in mdoc and need a guard."""
    assert simple_to_mdoc("intro\n  'quoted\n  .dotted") == (
        "intro\n\\&'quoted\n\\&.dotted"
    )


def test_troff_and_mdoc_diverge_on_paragraphs() -> None:
    text = "alpha\n\n  beta"
    assert simple_to_troff(text) == "alpha\n\n  beta"
    assert simple_to_mdoc(text) == "alpha\n.Pp\nbeta"


def test_empty_text_stays_empty() -> None:
    assert simple_to_troff("") == ""
    assert simple_to_mdoc("") == ""
