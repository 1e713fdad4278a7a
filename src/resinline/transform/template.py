"""Inline ``template: require('./x.html')`` references.

Every match is replaced by ``template: "<content>"`` where *content* is the
referenced file's text with line breaks collapsed and double quotes escaped,
so the component no longer needs the ``.html`` file at runtime.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

# template: require('./foo.html') / template: require("./foo.html")
_TEMPLATE_RE = re.compile(r"""template:\s*require\(['"]([^']+?\.html)["']\)""")

# A line break plus the indentation that follows it, repeated.
_LINE_BREAK_RE = re.compile(r"([\n\r]\s*)+")


def normalize_template(text: str) -> str:
    """Collapse line breaks (and following whitespace) to one space, escape ``"``.

    Whitespace that does not follow a line break is preserved, and
    backslashes are left as they are.
    """
    return _LINE_BREAK_RE.sub(" ", text).replace('"', '\\"')


def inline_template(
    content: str,
    resolver: Callable[[str], str | Path],
    encoding: str = "utf-8",
) -> str:
    """Replace every template reference in *content* with the template text.

    Matches are handled left to right; each one is resolved through
    *resolver* and read independently, so several components in one file
    may point at different templates.

    Args:
        content: The source file's text.
        resolver: Maps the quoted relative path to a filesystem path.
        encoding: Encoding of the template files.

    Returns:
        The content with all templates inlined.

    Raises:
        FileNotFoundError: If a referenced template does not exist.
        UnicodeDecodeError: If a template is not valid in *encoding*.
    """

    def _replace(match: re.Match[str]) -> str:
        template_file = resolver(match.group(1))
        # Blocking read: runs on the event-loop thread inside the async runner.
        with open(template_file, "r", encoding=encoding, newline="") as f:
            template_content = f.read()
        return f'template: "{normalize_template(template_content)}"'

    return _TEMPLATE_RE.sub(_replace, content)
