"""Unit tests for navigation menu construction.

These tests build small source trees and check the ordering, selection, and
expansion rules of :func:`staw.generator.build_menu`: the landing document
always comes first, only the branch named by the selection path is expanded,
and non-document files never appear.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import pytest

from staw.generator import MenuEntry, SiteBuildError, build_menu

if typ.TYPE_CHECKING:
    from pathlib import Path


def _walk_levels(
    entries: cabc.Sequence[MenuEntry],
) -> cabc.Iterator[cabc.Sequence[MenuEntry]]:
    """Yield every menu level, depth first."""
    yield entries
    for entry in entries:
        if entry.items:
            yield from _walk_levels(entry.items)


def test_landing_entry_is_first(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    """``index.md`` is listed first even though it sorts after other entries."""
    write_source(
        {
            "about.md": "About\n",
            "blog": None,
            "index.md": "Home\n",
            "zebra.md": "Zebra\n",
        }
    )
    menu = build_menu(source_dir, "", "", ())
    names = [entry.name for entry in menu]
    assert names == ["Home", "About", "blog/", "Zebra"], (
        f"expected landing entry first then name order, got {names!r}"
    )


def test_entry_paths_follow_output_layout(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    write_source({"index.md": "Home\n", "post.md": "Post\n", "docs/guide.md": "G\n"})
    menu = build_menu(source_dir, "", "/site", ("docs",))
    paths = {entry.name: entry.path for entry in menu}
    assert paths == {
        "Home": "index.html",
        "Post": "post/index.html",
        "docs/": "docs/index.html",
    }
    docs = next(entry for entry in menu if entry.name == "docs/")
    assert [child.path for child in docs.items] == ["docs/guide/index.html"]
    assert docs.items[0].url == "/site/docs/guide/index.html"


def test_non_documents_are_not_listed(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    write_source({"logo.png": b"\x89PNG", "notes.txt": "x", "page.md": "Page\n"})
    menu = build_menu(source_dir, "", "", ())
    assert [entry.name for entry in menu] == ["Page"]


def test_dotted_stems_keep_everything_before_the_suffix(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    """``v1.2.md`` links to ``v1.2/``; a bare ``.md`` is an asset, not a page."""
    write_source({".md": "Hidden\n", "index.md.md": "Odd\n", "v1.2.md": "V\n"})
    menu = build_menu(source_dir, "", "", ())
    assert [(entry.name, entry.path) for entry in menu] == [
        ("Odd", "index.md/index.html"),
        ("V", "v1.2/index.html"),
    ]


def test_only_selected_branch_is_expanded(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    """Sibling ``a/`` and ``b/``: rendering inside ``a/`` expands only ``a/``."""
    write_source(
        {
            "a/first.md": "First\n",
            "a/nested/deep.md": "Deep\n",
            "b/second.md": "Second\n",
        }
    )
    menu = build_menu(source_dir, "", "", ("a", "first.md"))
    entries = {entry.name: entry for entry in menu}

    a_entry = entries["a/"]
    assert a_entry.selected, "expected a/ to be on the active branch"
    assert [child.name for child in a_entry.items] == ["First", "nested/"]
    first = a_entry.items[0]
    assert first.selected, "expected the rendered document to be selected"
    assert first.items == ()
    nested = a_entry.items[1]
    assert not nested.selected
    assert nested.items == (), "expected unselected nested/ to stay collapsed"

    b_entry = entries["b/"]
    assert not b_entry.selected
    assert b_entry.items == (), "expected b/ to be collapsed"


def test_selection_marks_at_most_one_entry_per_level(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    write_source(
        {
            "index.md": "Home\n",
            "x/index.md": "X\n",
            "x/y/z.md": "Z\n",
            "x/y/w.md": "W\n",
            "q/r.md": "R\n",
        }
    )
    menu = build_menu(source_dir, "", "", ("x", "y", "z.md"))
    for level in _walk_levels(menu):
        selected = [entry for entry in level if entry.selected]
        assert len(selected) <= 1, f"more than one selected entry in {level!r}"
        for entry in level:
            if not entry.selected:
                assert entry.items == (), f"unselected {entry.name} has children"


def test_selected_directory_without_documents_has_no_children(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    write_source({"assets/logo.png": b"\x00\x01"})
    menu = build_menu(source_dir, "", "", ("assets",))
    assert len(menu) == 1
    assert menu[0].selected
    assert menu[0].items == ()


def test_url_joins_prefix_and_path() -> None:
    entry = MenuEntry(prefix="http://localhost:8000/", path="blog/index.html", name="x")
    assert entry.url == "http://localhost:8000/blog/index.html"
    assert MenuEntry(prefix="", path="index.html", name="y").url == "/index.html"


def test_missing_directory_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(SiteBuildError, match="Unable to read directory"):
        build_menu(tmp_path / "missing", "", "", ())


def test_unreadable_title_is_fatal(
    source_dir: Path, write_source: cabc.Callable[..., Path]
) -> None:
    """A document whose first line is not UTF-8 aborts menu construction."""
    write_source({"broken.md": b"\xff\xfe\xfa\n"})
    with pytest.raises(SiteBuildError, match="broken.md"):
        build_menu(source_dir, "", "", ())
