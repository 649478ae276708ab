"""Utility helpers shared by the staw configuration loader."""

from __future__ import annotations

from pathlib import Path

CONFIG_KEYS = frozenset(
    {"template", "input", "output", "title", "prefix", "css", "pygments_style"}
)
PATH_KEYS = frozenset({"template", "input", "output", "css"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None, *, base_dir: Path | None = None) -> Path | None:
    """Return ``value`` as a Path, resolved against ``base_dir`` when relative."""
    match value:
        case None:
            return None
        case Path():
            path = value
        case _:
            text = _optional_str(value)
            if text is None:
                return None
            path = Path(text).expanduser()
    if base_dir is not None and not path.is_absolute():
        return base_dir / path
    return path


def _first_set(*values: object | None) -> object | None:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


__all__ = [
    "CONFIG_KEYS",
    "PATH_KEYS",
    "_first_set",
    "_optional_path",
    "_optional_str",
]
