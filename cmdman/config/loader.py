"""Load cmdman configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from cmdman._constants import DEFAULT_COMMAND_SEPARATOR, DEFAULT_SECTION

from .helpers import _build_command, _optional_str, _text, parse_timestamp
from .models import ConfigError, ManPageConfig, ManPageOptions

DEFAULT_OUTPUT_DIR = Path("man")


def load_manpage_config(path: Path) -> ManPageConfig:
    """Load the YAML file describing generation defaults and the command tree.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``manpages.yaml``).

    Returns
    -------
    ManPageConfig
        Generation options built from the ``defaults`` mapping and the command
        tree rooted at ``command``.

    Raises
    ------
    FileNotFoundError
        If the configuration file (or a referenced template) does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If the command tree is missing or any command, flag, or default value
        is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from cmdman.config import load_manpage_config
    >>> config = load_manpage_config(Path("manpages.yaml"))  # doctest: +SKIP
    >>> config.root.command_path()  # doctest: +SKIP
    'app'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise ConfigError(msg)
    command_raw = raw.get("command")
    if not command_raw:
        msg = "No command tree defined under 'command'."
        raise ConfigError(msg)

    return ManPageConfig(
        options=_build_options(defaults, base_dir=path.parent),
        root=_build_command(command_raw),
    )


def _build_options(
    defaults: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> ManPageOptions:
    """Build ManPageOptions from the ``defaults`` mapping."""
    template_path = _optional_str(defaults.get("template_path"))
    template: str | None = None
    if template_path:
        template = read_template(base_dir / template_path)

    return ManPageOptions(
        directory=Path(defaults.get("directory") or DEFAULT_OUTPUT_DIR),
        section=_optional_str(defaults.get("section")) or DEFAULT_SECTION,
        center_footer=_text(defaults.get("center_footer")),
        date=parse_timestamp(defaults.get("date")),
        left_footer=_text(defaults.get("left_footer")),
        center_header=_text(defaults.get("center_header")),
        files=_text(defaults.get("files")),
        bugs=_text(defaults.get("bugs")),
        environment=_text(defaults.get("environment")),
        author=_text(defaults.get("author")),
        command_separator=_text(defaults.get("command_separator"))
        or DEFAULT_COMMAND_SEPARATOR,
        template=template,
    )


def read_template(path: Path) -> str:
    """Return the text of a template override file."""
    if not path.exists():
        msg = f"Template file '{path}' not found."
        raise FileNotFoundError(msg)
    return path.read_text(encoding="utf-8")


__all__ = ["DEFAULT_OUTPUT_DIR", "load_manpage_config", "read_template"]
