r"""Escape user-authored text for troff and mdoc manual pages.

Help strings written for a terminal are not safe to drop into a man page
verbatim: backslashes start formatter escapes, ASCII hyphens may be turned
into typographic dashes, and a line beginning with ``.`` or ``'`` is read as a
request. The helpers here neutralize those characters. Text whose first
non-whitespace character is ``.`` is assumed to be hand-written markup and is
left untouched by both :func:`simple_to_troff` and :func:`simple_to_mdoc`.

Example
-------
>>> from cmdman.generator.escaping import simple_to_troff
>>> print(simple_to_troff("Use --force to skip C:\\checks"))
Use \-\-force to skip C:\echecks
>>> simple_to_troff(".B already troff")
'.B already troff'
"""

from __future__ import annotations

import re

CONTROL_CHARACTERS = (".", "'")
ZERO_WIDTH = "\\&"
PARAGRAPH_MACRO = ".Pp"
_NEWLINE_PATTERN = re.compile(r"\r\n?")


def backslashify(text: str) -> str:
    """Replace each backslash with the printable escape ``\\e``."""
    return text.replace("\\", "\\e")


def dashify(text: str) -> str:
    """Replace each ASCII hyphen with the minus-sign escape ``\\-``."""
    return text.replace("-", "\\-")


def is_raw_markup(text: str) -> bool:
    """Return whether ``text`` already starts with a formatter request."""
    return text.lstrip().startswith(".")


def _escape_inline(text: str) -> str:
    """Apply the escaping shared by every dialect."""
    return dashify(backslashify(_NEWLINE_PATTERN.sub("\n", text)))


def _guard_control_line(line: str) -> str:
    """Prefix a line that would be read as a request with ``\\&``."""
    if line.startswith(CONTROL_CHARACTERS):
        return ZERO_WIDTH + line
    return line


def simple_to_troff(text: str) -> str:
    """Convert plain text into text safe for a man(7) page.

    Parameters
    ----------
    text : str
        Plain help text, or raw troff starting with ``.``.

    Returns
    -------
    str
        ``text`` unchanged when it is raw markup; otherwise the escaped text
        with control lines guarded. Line structure is preserved.
    """
    if is_raw_markup(text):
        return text
    lines = _escape_inline(text).split("\n")
    return "\n".join(_guard_control_line(line) for line in lines)


def simple_to_mdoc(text: str) -> str:
    """Convert plain text into text safe for an mdoc(7) page.

    mdoc is stricter than plain troff: blank lines are not allowed, leading
    whitespace switches to literal output, and trailing whitespace is an
    error. Each line is therefore stripped, runs of blank lines become a
    single ``.Pp`` paragraph break, and blank lines at either end are
    dropped.

    Parameters
    ----------
    text : str
        Plain help text, or raw mdoc starting with ``.``.

    Returns
    -------
    str
        ``text`` unchanged when it is raw markup; otherwise the escaped mdoc
        body.
    """
    if is_raw_markup(text):
        return text
    output: list[str] = []
    pending_break = False
    for line in _escape_inline(text).split("\n"):
        stripped = line.strip()
        if not stripped:
            pending_break = bool(output)
            continue
        if pending_break:
            output.append(PARAGRAPH_MACRO)
            pending_break = False
        output.append(_guard_control_line(stripped))
    return "\n".join(output)


__all__ = [
    "backslashify",
    "dashify",
    "is_raw_markup",
    "simple_to_mdoc",
    "simple_to_troff",
]
