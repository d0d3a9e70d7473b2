"""In-memory command tree consumed by the man page generator.

A :class:`Command` describes one node of a command-line tool: its usage line,
help text, flags, and child commands. The generator only ever reads from the
tree, so any object exposing the same attributes and methods can stand in for
it; :func:`cmdman.config.load_manpage_config` builds one from YAML.

Example
-------
>>> from cmdman.command import ArgumentPolicy, Command, Flag
>>> root = Command(use="app", short="Example tool")
>>> sub = Command(use="sub <file>", args=ArgumentPolicy.CUSTOM)
>>> sub.flags.append(Flag(name="force", shorthand="f", usage="Overwrite"))
>>> root.add_command(sub)
>>> sub.command_path()
'app sub'
>>> sub.use_line()
'app sub <file> [flags]'
"""

from __future__ import annotations

import dataclasses as dc
import enum


class ArgumentPolicy(enum.StrEnum):
    """How a command treats positional arguments."""

    ANY = "any"
    NONE = "none"
    CUSTOM = "custom"


@dc.dataclass(slots=True)
class Flag:
    """A single command-line flag.

    Attributes
    ----------
    name : str
        Long flag name without leading dashes.
    shorthand : str
        Single-letter alias, or empty.
    usage : str
        Help text shown for the flag.
    default : str
        Default value rendered as text.
    no_opt_default : str
        Value used when the flag is given without an argument.
    deprecated : str
        Deprecation message; a non-empty value marks the flag deprecated.
    shorthand_deprecated : str
        Deprecation message for the shorthand alone.
    hidden : bool
        Hidden flags are left out of help and documentation.
    persistent : bool
        Persistent flags are inherited by every descendant command.
    annotations : dict[str, list[str]]
        Free-form per-flag metadata (for example ``man-arg-hints``).
    """

    name: str
    shorthand: str = ""
    usage: str = ""
    default: str = ""
    no_opt_default: str = ""
    deprecated: str = ""
    shorthand_deprecated: str = ""
    hidden: bool = False
    persistent: bool = False
    annotations: dict[str, list[str]] = dc.field(default_factory=dict)


@dc.dataclass(slots=True, eq=False)
class Command:
    """A node in a command tree.

    ``use`` is the one-line usage message; its first word is the command
    name. ``flags`` holds the command's own flags, both local and
    persistent. Nodes compare by identity.
    """

    use: str
    short: str = ""
    long: str = ""
    example: str = ""
    args: ArgumentPolicy = ArgumentPolicy.ANY
    annotations: dict[str, list[str]] = dc.field(default_factory=dict)
    flags: list[Flag] = dc.field(default_factory=list)
    hidden: bool = False
    deprecated: str = ""
    runnable: bool = True
    commands: list[Command] = dc.field(default_factory=list)
    parent: Command | None = dc.field(default=None, repr=False)

    @property
    def name(self) -> str:
        """Return the first word of ``use``."""
        words = self.use.split()
        return words[0] if words else ""

    def add_command(self, *children: Command) -> None:
        """Attach ``children`` in order and point them back at this command."""
        for child in children:
            if child is self:
                msg = "A command cannot be its own child."
                raise ValueError(msg)
            child.parent = self
            self.commands.append(child)

    def has_parent(self) -> bool:
        """Return whether the command is attached below another command."""
        return self.parent is not None

    def has_sub_commands(self) -> bool:
        """Return whether any child commands are attached."""
        return bool(self.commands)

    def command_path(self) -> str:
        """Return the full space-separated path from the root to this command."""
        if self.parent is None:
            return self.name
        return f"{self.parent.command_path()} {self.name}"

    def use_line(self) -> str:
        """Return the usage line including the parent path."""
        if self.parent is None:
            line = self.use
        else:
            line = f"{self.parent.command_path()} {self.use}"
        if self.has_available_flags() and "[flags]" not in line:
            line = f"{line} [flags]"
        return line

    def is_available_command(self) -> bool:
        """Return whether the command belongs in help output and documentation."""
        if self.hidden or self.deprecated:
            return False
        if self.runnable:
            return True
        return any(child.is_available_command() for child in self.commands)

    def is_additional_help_topic_command(self) -> bool:
        """Return whether the command is a documentation-only help topic."""
        if self.runnable or self.hidden or self.deprecated:
            return False
        return all(
            child.is_additional_help_topic_command() for child in self.commands
        )

    def non_inherited_flags(self) -> list[Flag]:
        """Return the command's own flags sorted by name."""
        return _sorted_unique(self.flags)

    def inherited_flags(self) -> list[Flag]:
        """Return persistent ancestor flags not shadowed by a nearer flag."""
        own_names = {flag.name for flag in self.flags}
        inherited: list[Flag] = []
        seen: set[str] = set(own_names)
        ancestor = self.parent
        while ancestor is not None:
            for flag in ancestor.flags:
                if flag.persistent and flag.name not in seen:
                    seen.add(flag.name)
                    inherited.append(flag)
            ancestor = ancestor.parent
        return sorted(inherited, key=lambda flag: flag.name)

    def all_flags(self) -> list[Flag]:
        """Return own and inherited flags sorted by name."""
        return _sorted_unique([*self.flags, *self.inherited_flags()])

    def has_available_flags(self) -> bool:
        """Return whether any own or inherited flag is neither hidden nor deprecated."""
        return any(
            not flag.hidden and not flag.deprecated for flag in self.all_flags()
        )


def _sorted_unique(flags: list[Flag]) -> list[Flag]:
    """Sort ``flags`` by name, keeping the first flag seen for each name."""
    unique: dict[str, Flag] = {}
    for flag in flags:
        unique.setdefault(flag.name, flag)
    return sorted(unique.values(), key=lambda flag: flag.name)


__all__ = ["ArgumentPolicy", "Command", "Flag"]
