"""Utilities for building, rendering, and writing cmdman man pages."""

from .builder import build_page_model
from .escaping import (
    backslashify,
    dashify,
    is_raw_markup,
    simple_to_mdoc,
    simple_to_troff,
)
from .models import FlagEntry, PageModel, SeeAlsoEntry
from .page_generator import ManPageGenerator, MissingCommandNameError
from .renderer import ManPageRenderer
from .see_also import generate_see_alsos
from .writer import write_page

__all__ = [
    "FlagEntry",
    "ManPageGenerator",
    "ManPageRenderer",
    "MissingCommandNameError",
    "PageModel",
    "SeeAlsoEntry",
    "backslashify",
    "build_page_model",
    "dashify",
    "generate_see_alsos",
    "is_raw_markup",
    "simple_to_mdoc",
    "simple_to_troff",
    "write_page",
]
