"""Render page models into troff with Jinja templates."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from cmdman._constants import DEFAULT_TEMPLATE_NAME

from .escaping import backslashify, dashify, simple_to_mdoc, simple_to_troff

if typ.TYPE_CHECKING:
    from jinja2 import Template

    from .models import PageModel

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def _upper(text: str) -> str:
    return text.upper()


TEMPLATE_HELPERS: dict[str, typ.Callable[[str], str]] = {
    "upper": _upper,
    "backslashify": backslashify,
    "dashify": dashify,
    "simple_to_troff": simple_to_troff,
    "simple_to_mdoc": simple_to_mdoc,
}


class ManPageRenderer:
    """Render :class:`PageModel` instances through a single man page template."""

    def __init__(
        self,
        template_source: str | None = None,
        *,
        templates_dir: Path | None = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> None:
        """Configure the Jinja environment and remember which template to use.

        Parameters
        ----------
        template_source : str, optional
            Template text that replaces the packaged default.
        templates_dir : Path, optional
            Directory containing the default template; defaults to the
            package ``templates`` folder.
        template_name : str, optional
            Name of the template loaded from ``templates_dir`` when no
            ``template_source`` is given.

        Notes
        -----
        The template is parsed on the first call to :meth:`render`, so a
        malformed override surfaces as ``jinja2.TemplateSyntaxError`` from
        there.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.template_source = template_source
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters.update(TEMPLATE_HELPERS)
        self.env.globals.update(TEMPLATE_HELPERS)
        self._template: Template | None = None

    @property
    def template(self) -> Template:
        """Return the compiled template, parsing it on first access."""
        if self._template is None:
            if self.template_source is not None:
                self._template = self.env.from_string(self.template_source)
            else:
                self._template = self.env.get_template(self.template_name)
        return self._template

    def render(self, model: PageModel) -> bytes:
        """Render ``model`` and return the UTF-8 encoded page.

        Raises
        ------
        jinja2.TemplateSyntaxError
            When the template cannot be parsed.
        jinja2.UndefinedError
            When the template refers to a field or helper that does not exist.
        """
        return self.template.render(**model.as_context()).encode("utf-8")


__all__ = ["DEFAULT_TEMPLATES_DIR", "TEMPLATE_HELPERS", "ManPageRenderer"]
