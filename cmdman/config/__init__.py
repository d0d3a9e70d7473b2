"""Load and validate cmdman configuration YAML.

This subpackage parses a ``manpages.yaml`` file holding the run-wide man page
settings (output directory, section, header and footer text, default section
bodies) together with the command tree to document, and produces typed
dataclasses (:class:`ManPageConfig`, :class:`ManPageOptions`) that the
generator consumes. The primary entry point is :func:`load_manpage_config`.

Examples
--------
>>> from pathlib import Path
>>> from cmdman.config import load_manpage_config
>>> config = load_manpage_config(Path("manpages.yaml"))  # doctest: +SKIP
>>> config.options.directory  # doctest: +SKIP
PosixPath('man')
"""

from .helpers import parse_timestamp
from .loader import load_manpage_config, read_template
from .models import ConfigError, ManPageConfig, ManPageOptions

__all__ = [
    "ConfigError",
    "ManPageConfig",
    "ManPageOptions",
    "load_manpage_config",
    "parse_timestamp",
    "read_template",
]
