"""Typed dataclasses describing cmdman generation settings."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
from pathlib import Path

from cmdman._constants import DEFAULT_COMMAND_SEPARATOR, DEFAULT_SECTION
from cmdman.command import Command  # noqa: TC001 - used for runtime type metadata


class ConfigError(ValueError):
    """Raised when the configuration or command tree is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ManPageOptions:
    """Settings shared by every page of a generation run.

    Attributes
    ----------
    directory : Path
        Folder the pages are written to.
    section : str
        Manual section number; an empty value falls back to ``"1"``.
    center_footer : str
        Centre footer text; defaults to the page date as ``"Jan 2026"``.
    date : datetime.datetime | None
        Fixed page date; the current time is used when ``None``.
    left_footer : str
        Left footer text used across all pages.
    center_header : str
        Centre header text used across all pages.
    files : str
        FILES section for every page unless a command overrides it with the
        ``man-files-section`` annotation.
    bugs : str
        BUGS section, overridable with ``man-bugs-section``.
    environment : str
        ENVIRONMENT section, overridable with ``man-environment-section``.
    author : str
        AUTHOR section used verbatim on every page.
    command_separator : str
        Replaces the spaces of a command path in page filenames.
    template : str | None
        Template source used instead of the packaged default.

    Free-text sections are escaped for troff when rendered unless they start
    with ``.``, in which case they are passed through as raw troff.
    """

    directory: Path
    section: str = DEFAULT_SECTION
    center_footer: str = ""
    date: dt.datetime | None = None
    left_footer: str = ""
    center_header: str = ""
    files: str = ""
    bugs: str = ""
    environment: str = ""
    author: str = ""
    command_separator: str = DEFAULT_COMMAND_SEPARATOR
    template: str | None = None


@dc.dataclass(slots=True)
class ManPageConfig:
    """A loaded configuration file: generation options plus the command tree."""

    options: ManPageOptions
    root: Command


__all__ = ["ConfigError", "ManPageConfig", "ManPageOptions"]
