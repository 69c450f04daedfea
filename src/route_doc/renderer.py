"""Notes renderer wrapper around Python-Markdown.

Route notes are usually written as indented multi-line strings, so the
common indentation is removed before conversion to HTML.
"""

import re

from markdown import markdown

DEFAULT_EXTENSIONS = ["extra"]

_LEADING_INDENT = re.compile(r"^[ \t]*(?=\S)", re.MULTILINE)


def strip_heredoc(text: str) -> str:
    """Remove the smallest leading indentation shared by non-blank lines."""
    indents = _LEADING_INDENT.findall(text)
    indent = min((len(i) for i in indents), default=0)
    return re.sub(rf"^[ \t]{{{indent}}}", "", text, flags=re.MULTILINE)


class NotesRenderer:
    """Converts route notes from Markdown to HTML."""

    def __init__(self, extensions: list[str] | None = None):
        self.extensions = DEFAULT_EXTENSIONS if extensions is None else extensions

    def render(self, notes: str) -> str:
        return markdown(strip_heredoc(notes), extensions=self.extensions)
