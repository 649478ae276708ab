r"""Split Markdown source files into a display title and a renderable body.

staw follows a first-line convention: the first line of every ``.md`` file is
its display title and is never rendered as Markdown; everything after it is the
body handed to the HTML renderer. The menu builder only needs the title, so
:func:`read_title` stops after the first line, while the document renderer uses
:func:`parse_document` for both parts.

Example
-------
>>> from staw.markdown_parser import parse_document
>>> doc = parse_document("Home\nWelcome to the site")
>>> doc.title
'Home'
>>> doc.body
'Welcome to the site'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class Document:
    """Title line and Markdown body of one source document.

    Attributes
    ----------
    title : str
        First line of the source, without its line terminator.
    body : str
        Remaining Markdown text; empty when the source has a single line.
    """

    title: str
    body: str


def _clean_title(line: str) -> str:
    """Return ``line`` without its trailing line terminator."""
    return line.rstrip("\r\n")


def parse_document(text: str) -> Document:
    """Split ``text`` into its title line and Markdown body.

    Parameters
    ----------
    text : str
        Full contents of a Markdown source file.

    Returns
    -------
    Document
        The title (possibly empty for an empty file) and the body.
    """
    title, _sep, body = text.partition("\n")
    return Document(title=_clean_title(title), body=body)


def read_title(path: Path) -> str:
    """Return the display title of the Markdown file at ``path``.

    Only the first line is read. ``OSError`` and ``UnicodeDecodeError`` are
    left to the caller.
    """
    with path.open("r", encoding="utf-8") as handle:
        return _clean_title(handle.readline())


def load_document(path: Path) -> Document:
    """Read and split the Markdown file at ``path``."""
    return parse_document(path.read_text(encoding="utf-8"))


__all__ = ["Document", "load_document", "parse_document", "read_title"]
