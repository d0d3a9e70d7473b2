"""Cyclopts CLI entrypoint for generating man pages from a command tree.

The ``cmdman`` console script defined here reads a ``manpages.yaml`` file
describing a command-line tool (its commands, flags, and annotations) plus
run-wide page settings, and writes one troff man page per documented command.
Typical usage runs ``cmdman generate`` locally or in CI before packaging.

Examples
--------
Generate pages for the default configuration:

>>> from cmdman.cli import main
>>> main()  # doctest: +SKIP

Write pages for section 8 into a custom directory:

>>> from cmdman.cli import app
>>> app(
...     ["generate", "--section", "8", "--output-dir", "dist/man"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_manpage_config, parse_timestamp, read_template
from .generator import ManPageGenerator

DEFAULT_CONFIG = Path("manpages.yaml")

app = App(name="cmdman", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate man pages for every documented command.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to manpages config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    section: typ.Annotated[
        str | None,
        Parameter(help="Override the manual section", env_var="INPUT_SECTION"),
    ] = None,
    author: typ.Annotated[
        str | None,
        Parameter(help="Override the AUTHOR section", env_var="INPUT_AUTHOR"),
    ] = None,
    date: typ.Annotated[
        str | None,
        Parameter(help="Fixed ISO 8601 page date", env_var="INPUT_DATE"),
    ] = None,
    template: typ.Annotated[
        Path | None,
        Parameter(help="Template file replacing the default", env_var="INPUT_TEMPLATE"),
    ] = None,
) -> None:
    """Generate man pages for the configured command tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``manpages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Directory for the generated pages; replaces ``defaults.directory``.
    section : str or None, optional
        Manual section; replaces ``defaults.section``.
    author : str or None, optional
        AUTHOR section text; replaces ``defaults.author``.
    date : str or None, optional
        ISO 8601 date used in page footers instead of the current time.
    template : Path or None, optional
        Jinja template file used instead of the packaged default.

    Returns
    -------
    None
        Writes the pages and prints each generated path.

    Raises
    ------
    MissingCommandNameError
        If a documented command has an empty command path.
    ConfigError
        If the configuration or the ``date`` override is invalid.
    """
    manpage_config = load_manpage_config(config)

    overrides: dict[str, typ.Any] = {}
    if output_dir is not None:
        overrides["directory"] = output_dir
    if section:
        overrides["section"] = section
    if author is not None:
        overrides["author"] = author
    if date:
        overrides["date"] = parse_timestamp(date)
    if template is not None:
        overrides["template"] = read_template(template)
    options = dc.replace(manpage_config.options, **overrides)

    options.directory.mkdir(parents=True, exist_ok=True)
    written = ManPageGenerator(options).run(manpage_config.root)
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``cmdman`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
