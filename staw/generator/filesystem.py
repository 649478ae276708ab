"""Filesystem helpers shared by the menu builder and the tree renderer."""

from __future__ import annotations

import shutil
import typing as typ

from staw._constants import MARKDOWN_SUFFIX

from .models import SiteBuildError

if typ.TYPE_CHECKING:
    from pathlib import Path


def list_directory(directory: Path) -> list[Path]:
    """Return the immediate children of ``directory`` ordered by name.

    Raises
    ------
    SiteBuildError
        If the directory cannot be read.
    """
    try:
        return sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        msg = f"Unable to read directory '{directory}': {exc}"
        raise SiteBuildError(msg) from exc


def is_markdown(path: Path) -> bool:
    """Return ``True`` when ``path`` names a Markdown source file.

    A bare ``.md`` has no stem to publish under and is treated as an asset.
    """
    return path.name.endswith(MARKDOWN_SUFFIX) and len(path.name) > len(
        MARKDOWN_SUFFIX
    )


def document_stem(path: Path) -> str:
    """Return the name of ``path`` without its ``.md`` suffix.

    Only the final suffix is removed, so ``v1.2.md`` gives ``v1.2``. Both the
    menu links and the output directories are derived from this value.
    """
    return path.name[: -len(MARKDOWN_SUFFIX)]


def copy_file(source: Path, destination: Path) -> Path:
    """Copy ``source`` byte-for-byte to ``destination`` and return it."""
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        msg = f"Unable to copy '{source}' to '{destination}': {exc}"
        raise SiteBuildError(msg) from exc
    return destination


__all__ = ["copy_file", "document_stem", "is_markdown", "list_directory"]
