"""Render document bodies from Markdown into HTML with highlighted code."""

from __future__ import annotations

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")
CODEHILITE_CLASS = "codehilite"


class HtmlContentRenderer:
    """Convert Markdown bodies to HTML using one fixed extension set.

    Fenced blocks (backtick or tilde) are highlighted by Pygments through the
    ``codehilite`` extension; :attr:`stylesheet` provides the matching CSS.
    """

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass=CODEHILITE_CLASS)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{CODEHILITE_CLASS}")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML; blank input yields an empty string."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": CODEHILITE_CLASS,
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)


__all__ = ["HtmlContentRenderer"]
