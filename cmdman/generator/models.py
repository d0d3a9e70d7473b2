"""Shared dataclasses used by the man page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class FlagEntry:
    """A documented flag as exposed to the page template.

    Attributes
    ----------
    shorthand : str
        Single-letter alias, empty when absent or deprecated.
    name : str
        Long flag name.
    no_opt_def_val : str
        Value used when the flag is present without an argument.
    def_value : str
        Default value.
    usage : str
        Help text for the flag.
    arg_hint : str
        Placeholder for the flag's argument, empty when not annotated.
    """

    shorthand: str
    name: str
    no_opt_def_val: str
    def_value: str
    usage: str
    arg_hint: str = ""


@dc.dataclass(frozen=True, slots=True)
class SeeAlsoEntry:
    """A cross-reference to another command's page."""

    cmd_path: str
    section: str


@dc.dataclass(frozen=True, slots=True)
class PageModel:
    """Structured data passed to the man page template.

    Attributes
    ----------
    date : datetime.datetime
        Generation date for the page.
    section : str
        Manual section number.
    center_footer : str
        Text for the centre of the page footer.
    left_footer : str
        Text for the left of the page footer.
    center_header : str
        Text for the centre of the page header.
    use_line : str
        Full usage line, including the parent command path.
    command_path : str
        Space-separated path of the command.
    short_description : str
        One-line summary of the command.
    description : str
        Long description, or the short one when no long text is set.
    no_args : bool
        Whether the command rejects every positional argument.
    all_flags : tuple[FlagEntry, ...]
        Own and inherited flags.
    inherited_flags : tuple[FlagEntry, ...]
        Flags inherited from parent commands.
    non_inherited_flags : tuple[FlagEntry, ...]
        Flags defined on the command itself.
    see_alsos : tuple[SeeAlsoEntry, ...]
        Related pages in display order.
    sub_commands : tuple[str, ...]
        Command paths of the documented children.
    author, environment, files, bugs, examples : str
        Optional free-text sections; empty strings are omitted from output.
    """

    date: dt.datetime
    section: str
    center_footer: str
    left_footer: str
    center_header: str
    use_line: str
    command_path: str
    short_description: str
    description: str
    no_args: bool
    all_flags: tuple[FlagEntry, ...]
    inherited_flags: tuple[FlagEntry, ...]
    non_inherited_flags: tuple[FlagEntry, ...]
    see_alsos: tuple[SeeAlsoEntry, ...]
    sub_commands: tuple[str, ...]
    author: str = ""
    environment: str = ""
    files: str = ""
    bugs: str = ""
    examples: str = ""

    def as_context(self) -> dict[str, object]:
        """Return the template context, one entry per field."""
        return {field.name: getattr(self, field.name) for field in dc.fields(self)}


__all__ = ["FlagEntry", "PageModel", "SeeAlsoEntry"]
