"""Generate troff man pages from a command-line tool's command tree.

This package exposes the CLI entry points used by ``uv run cmdman`` to render
one manual page per documented command, with cross-references between parent,
sibling, and child commands.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from cmdman import main
>>> main()  # doctest: +SKIP
>>> from cmdman import app
>>> app(["generate", "--config", "manpages.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
