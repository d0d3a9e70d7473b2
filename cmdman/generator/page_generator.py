"""High-level orchestration for man page generation.

This module walks a command tree and writes one troff page per documented
command. It exposes :class:`ManPageGenerator`, which consumes a
:class:`~cmdman.config.ManPageOptions`, builds a
:class:`~cmdman.generator.models.PageModel` for each command, renders it with
:class:`~cmdman.generator.renderer.ManPageRenderer`, and writes the result to
``<directory>/<command-path>.<section>``.

Pages are written in post-order: every documented child is finished before
its parent, so an aborted run leaves a consistent prefix of the full set.

Example
-------
>>> from pathlib import Path
>>> from cmdman.command import Command
>>> from cmdman.config import ManPageOptions
>>> from cmdman.generator import ManPageGenerator
>>> root = Command(use="app")
>>> root.add_command(Command(use="sub"))
>>> generator = ManPageGenerator(ManPageOptions(directory=Path("man")))
>>> generator.run(root)  # doctest: +SKIP
[PosixPath('man/app-sub.1'), PosixPath('man/app.1')]
"""

from __future__ import annotations

import typing as typ

from cmdman._constants import DEFAULT_COMMAND_SEPARATOR, DEFAULT_SECTION

from .builder import build_page_model
from .renderer import ManPageRenderer
from .see_also import is_documented
from .writer import write_page

if typ.TYPE_CHECKING:
    from pathlib import Path

    from cmdman.command import Command
    from cmdman.config import ManPageOptions

    from .builder import Clock


class MissingCommandNameError(ValueError):
    """Raised when a command path is empty and cannot name a page file."""


class ManPageGenerator:
    """Walk a command tree and emit a man page for each documented command."""

    def __init__(
        self,
        options: ManPageOptions,
        *,
        renderer: ManPageRenderer | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the generator with run-wide options.

        Parameters
        ----------
        options : ManPageOptions
            Output directory, section, and default section text.
        renderer : ManPageRenderer, optional
            Renderer to use; defaults to one built from ``options.template``.
        clock : Callable[[], datetime], optional
            Time source used when ``options.date`` is unset.
        """
        self.options = options
        self.renderer = renderer or ManPageRenderer(options.template)
        self.clock = clock

    def run(self, root: Command) -> list[Path]:
        """Generate pages for ``root`` and all of its documented descendants.

        Returns
        -------
        list[Path]
            Paths of the written pages in write order. Empty when ``root``
            itself is hidden, deprecated, or a help topic.

        Raises
        ------
        MissingCommandNameError
            When a documented command has an empty command path.
        OSError
            When a page file cannot be created or written.
        jinja2.TemplateError
            When the template fails to parse or render.

        Notes
        -----
        Pages written before a failure stay on disk.
        """
        written: list[Path] = []
        if is_documented(root):
            self._generate_tree(root, written)
        return written

    def page_path(self, cmd: Command) -> Path:
        """Return the output path for ``cmd``'s page."""
        separator = self.options.command_separator or DEFAULT_COMMAND_SEPARATOR
        section = self.options.section or DEFAULT_SECTION
        basename = cmd.command_path().replace(" ", separator)
        if not basename:
            msg = "you need a command name to have a man page"
            raise MissingCommandNameError(msg)
        return self.options.directory / f"{basename}.{section}"

    def _generate_tree(self, cmd: Command, written: list[Path]) -> None:
        for child in cmd.commands:
            if is_documented(child):
                self._generate_tree(child, written)
        written.append(self._generate_page(cmd))

    def _generate_page(self, cmd: Command) -> Path:
        """Render ``cmd`` and write its page, returning the written path."""
        path = self.page_path(cmd)
        model = build_page_model(cmd, self.options, clock=self.clock)
        return write_page(path, self.renderer.render(model))


__all__ = ["ManPageGenerator", "MissingCommandNameError"]
