"""Compute the SEE ALSO cross-references for a command's man page."""

from __future__ import annotations

import typing as typ

from .models import SeeAlsoEntry

if typ.TYPE_CHECKING:
    from cmdman.command import Command


def is_documented(cmd: Command) -> bool:
    """Return whether ``cmd`` gets its own page and appears in cross-references."""
    return cmd.is_available_command() and not cmd.is_additional_help_topic_command()


def _by_name(commands: list[Command]) -> list[Command]:
    return sorted(commands, key=lambda command: command.name)


def generate_see_alsos(cmd: Command, section: str) -> list[SeeAlsoEntry]:
    """Return cross-references for ``cmd`` in display order.

    The parent comes first, followed by the documented siblings and then the
    documented children, each group sorted by command name. Every entry
    carries ``section``.

    Parameters
    ----------
    cmd : Command
        Command whose page is being generated.
    section : str
        Manual section shared by every generated page.

    Returns
    -------
    list[SeeAlsoEntry]
        Ordered cross-reference entries; empty for a lone root command.
    """
    see_alsos: list[SeeAlsoEntry] = []
    if cmd.has_parent():
        parent = typ.cast("Command", cmd.parent)
        see_alsos.append(SeeAlsoEntry(cmd_path=parent.command_path(), section=section))
        for sibling in _by_name(parent.commands):
            if sibling.name == cmd.name or not is_documented(sibling):
                continue
            see_alsos.append(
                SeeAlsoEntry(cmd_path=sibling.command_path(), section=section)
            )
    if not cmd.has_sub_commands():
        return see_alsos
    for child in _by_name(cmd.commands):
        if not is_documented(child):
            continue
        see_alsos.append(SeeAlsoEntry(cmd_path=child.command_path(), section=section))
    return see_alsos


__all__ = ["generate_see_alsos", "is_documented"]
