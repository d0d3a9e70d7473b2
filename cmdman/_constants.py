"""Common literal values used across cmdman.

These constants keep annotation keys and filename defaults centralized so the
command tree, the page model builder, the config loader, and tests can import
the same values without drifting.

Examples
--------
>>> from cmdman import _constants
>>> _constants.FILES_SECTION_ANNOTATION
'man-files-section'
>>> "app sub".replace(" ", _constants.DEFAULT_COMMAND_SEPARATOR)
'app-sub'
"""

DEFAULT_SECTION = "1"
DEFAULT_COMMAND_SEPARATOR = "-"
DEFAULT_TEMPLATE_NAME = "man_page.jinja"
CENTER_FOOTER_DATE_FORMAT = "%b %Y"

ENVIRONMENT_SECTION_ANNOTATION = "man-environment-section"
FILES_SECTION_ANNOTATION = "man-files-section"
BUGS_SECTION_ANNOTATION = "man-bugs-section"
EXAMPLES_SECTION_ANNOTATION = "man-examples-section"
ARG_HINTS_ANNOTATION = "man-arg-hints"
