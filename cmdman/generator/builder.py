"""Assemble the template-ready model for a single man page.

:func:`build_page_model` resolves every value a page needs from one command
and the run-wide :class:`~cmdman.config.ManPageOptions`: header and footer
defaults, the description fallback, filtered flag lists, the overridable free
text sections, and the cross-references. Per-command annotations win over the
run-wide text; a section with neither is left empty so templates can skip it.

Example
-------
>>> from pathlib import Path
>>> from cmdman.command import Command
>>> from cmdman.config import ManPageOptions
>>> from cmdman.generator.builder import build_page_model
>>> cmd = Command(use="app", short="Example tool")
>>> model = build_page_model(cmd, ManPageOptions(directory=Path("man")))
>>> model.description
'Example tool'
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from cmdman._constants import (
    ARG_HINTS_ANNOTATION,
    BUGS_SECTION_ANNOTATION,
    CENTER_FOOTER_DATE_FORMAT,
    DEFAULT_SECTION,
    ENVIRONMENT_SECTION_ANNOTATION,
    EXAMPLES_SECTION_ANNOTATION,
    FILES_SECTION_ANNOTATION,
)
from cmdman.command import ArgumentPolicy

from .models import FlagEntry, PageModel
from .see_also import generate_see_alsos, is_documented

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cmdman.command import Command, Flag
    from cmdman.config import ManPageOptions

Clock = typ.Callable[[], dt.datetime]


def utc_now() -> dt.datetime:
    """Return the current time in UTC."""
    return dt.datetime.now(dt.UTC)


def first_annotation(annotations: typ.Mapping[str, list[str]], key: str) -> str:
    """Return the first value recorded under ``key`` or an empty string."""
    values = annotations.get(key)
    if values:
        return values[0]
    return ""


def resolve_section_text(override: str, default: str) -> str:
    """Return ``override`` when non-empty, else ``default`` (possibly empty)."""
    return override or default


def genflag_entries(flags: cabc.Iterable[Flag]) -> tuple[FlagEntry, ...]:
    """Convert visible flags into template entries, preserving order.

    Hidden and deprecated flags are dropped. A shorthand is only kept when the
    shorthand itself is not deprecated.
    """
    entries: list[FlagEntry] = []
    for flag in flags:
        if flag.deprecated or flag.hidden:
            continue
        entries.append(
            FlagEntry(
                shorthand="" if flag.shorthand_deprecated else flag.shorthand,
                name=flag.name,
                no_opt_def_val=flag.no_opt_default,
                def_value=flag.default,
                usage=flag.usage,
                arg_hint=first_annotation(flag.annotations, ARG_HINTS_ANNOTATION),
            )
        )
    return tuple(entries)


def build_page_model(
    cmd: Command,
    options: ManPageOptions,
    *,
    clock: Clock | None = None,
) -> PageModel:
    """Return the fully resolved page model for ``cmd``.

    Parameters
    ----------
    cmd : Command
        Command to document.
    options : ManPageOptions
        Run-wide settings and default section text.
    clock : Callable[[], datetime], optional
        Source of the page date when ``options.date`` is unset; defaults to
        :func:`utc_now`.

    Returns
    -------
    PageModel
        Immutable model ready to hand to the renderer.
    """
    section = options.section or DEFAULT_SECTION
    date = options.date or (clock or utc_now)()
    center_footer = options.center_footer or date.strftime(CENTER_FOOTER_DATE_FORMAT)
    annotations = cmd.annotations

    return PageModel(
        date=date,
        section=section,
        center_footer=center_footer,
        left_footer=options.left_footer,
        center_header=options.center_header,
        use_line=cmd.use_line(),
        command_path=cmd.command_path(),
        short_description=cmd.short,
        description=cmd.long or cmd.short,
        no_args=cmd.args is ArgumentPolicy.NONE,
        all_flags=genflag_entries(cmd.all_flags()),
        inherited_flags=genflag_entries(cmd.inherited_flags()),
        non_inherited_flags=genflag_entries(cmd.non_inherited_flags()),
        see_alsos=tuple(generate_see_alsos(cmd, section)),
        sub_commands=tuple(
            child.command_path() for child in cmd.commands if is_documented(child)
        ),
        author=options.author,
        environment=resolve_section_text(
            first_annotation(annotations, ENVIRONMENT_SECTION_ANNOTATION),
            options.environment,
        ),
        files=resolve_section_text(
            first_annotation(annotations, FILES_SECTION_ANNOTATION), options.files
        ),
        bugs=resolve_section_text(
            first_annotation(annotations, BUGS_SECTION_ANNOTATION), options.bugs
        ),
        examples=resolve_section_text(
            first_annotation(annotations, EXAMPLES_SECTION_ANNOTATION), cmd.example
        ),
    )


__all__ = [
    "Clock",
    "build_page_model",
    "first_annotation",
    "genflag_entries",
    "resolve_section_text",
    "utc_now",
]
