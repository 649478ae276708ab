"""Build the navigation menu for one rendered page.

The menu lists the entries of a directory and expands exactly one branch: the
subdirectory named by the head of the selection path. Expansion recurses with
the remaining selection, so the result is the active spine of the site plus
the siblings at each level along it. A directory's ``index.md`` entry is
always placed first; every other entry keeps the directory's name order.

Example
-------
>>> from pathlib import Path
>>> from staw.generator.menu import build_menu
>>> menu = build_menu(Path("site"), "", "", ("blog", "post.md"))  # doctest: +SKIP
>>> [entry.name for entry in menu]  # doctest: +SKIP
['Home', 'blog/']
"""

from __future__ import annotations

import typing as typ

from staw._constants import INDEX_STEM, OUTPUT_DOCUMENT
from staw.markdown_parser import read_title

from .filesystem import document_stem, is_markdown, list_directory
from .models import MenuEntry, SiteBuildError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def build_menu(
    directory: Path,
    current_path: str,
    prefix: str,
    selection: cabc.Sequence[str],
) -> list[MenuEntry]:
    """Return the ordered menu entries for ``directory``.

    Parameters
    ----------
    directory : Path
        Source directory whose immediate children are listed.
    current_path : str
        Relative URL under which entries at this level live; ``""`` at the
        site root, otherwise ending in ``"/"``.
    prefix : str
        Site URL prefix copied onto every entry.
    selection : Sequence[str]
        Remaining names leading to the page being rendered. Empty once the
        active branch has been consumed.

    Returns
    -------
    list[MenuEntry]
        Landing entry first (when ``index.md`` exists), then the remaining
        directories and documents in name order.

    Raises
    ------
    SiteBuildError
        If the directory or a document title cannot be read.
    """
    head = selection[0] if selection else None
    menu: list[MenuEntry] = []
    for child in list_directory(directory):
        selected = child.name == head
        if child.is_dir():
            menu.append(
                _directory_entry(child, current_path, prefix, selection, selected)
            )
        elif is_markdown(child):
            entry = _document_entry(child, current_path, prefix, selected)
            if document_stem(child) == INDEX_STEM:
                menu.insert(0, entry)
            else:
                menu.append(entry)
    return menu


def _directory_entry(
    directory: Path,
    current_path: str,
    prefix: str,
    selection: cabc.Sequence[str],
    selected: bool,  # noqa: FBT001
) -> MenuEntry:
    """Return the entry for a subdirectory, expanded when it is selected."""
    path = f"{current_path}{directory.name}/"
    items: tuple[MenuEntry, ...] = ()
    if selected:
        items = tuple(build_menu(directory, path, prefix, selection[1:]))
    return MenuEntry(
        prefix=prefix,
        path=f"{path}{OUTPUT_DOCUMENT}",
        name=f"{directory.name}/",
        selected=selected,
        items=items,
    )


def _document_entry(
    document: Path,
    current_path: str,
    prefix: str,
    selected: bool,  # noqa: FBT001
) -> MenuEntry:
    """Return the leaf entry for a Markdown document."""
    try:
        title = read_title(document)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read title of '{document}': {exc}"
        raise SiteBuildError(msg) from exc
    stem = document_stem(document)
    if stem == INDEX_STEM:
        path = f"{current_path}{OUTPUT_DOCUMENT}"
    else:
        path = f"{current_path}{stem}/{OUTPUT_DOCUMENT}"
    return MenuEntry(prefix=prefix, path=path, name=title, selected=selected)


__all__ = ["build_menu"]
