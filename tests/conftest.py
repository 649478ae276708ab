"""Shared fixtures for staw tests.

The fixtures here build throwaway source trees under ``tmp_path`` and matching
``SiteSettings`` that render through the packaged default template, so tests
can exercise the full build without any files from the repository.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import pytest

from staw._constants import DEFAULT_TEMPLATE
from staw.config import SiteSettings

if typ.TYPE_CHECKING:
    from pathlib import Path

TreeSpec = cabc.Mapping[str, "str | bytes | None"]


def write_tree(root: Path, files: TreeSpec) -> Path:
    """Create ``files`` under ``root``; ``None`` values create directories."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        target = root / relative
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _clear_staw_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``STAW_*`` variables from the caller's shell out of the tests."""
    for name in (
        "STAW_TPL",
        "STAW_IN",
        "STAW_OUT",
        "STAW_TITLE",
        "STAW_PREFIX",
        "STAW_CSS",
        "STAW_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Return an empty source directory named ``site``."""
    path = tmp_path / "site"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return the (not yet created) output directory path."""
    return tmp_path / "public"


@pytest.fixture
def make_settings(
    source_dir: Path, output_dir: Path
) -> cabc.Callable[..., SiteSettings]:
    """Return a factory for settings rooted at the test source/output dirs."""

    def _factory(**overrides: typ.Any) -> SiteSettings:
        values: dict[str, typ.Any] = {
            "template": DEFAULT_TEMPLATE,
            "input_dir": source_dir,
            "output_dir": output_dir,
            "site_title": "Test Site",
            "site_name": source_dir.name,
        }
        values.update(overrides)
        return SiteSettings(**values)

    return _factory


@pytest.fixture
def write_source(source_dir: Path) -> cabc.Callable[[TreeSpec], Path]:
    """Return a helper that writes files into the test source directory."""

    def _write(files: TreeSpec) -> Path:
        return write_tree(source_dir, files)

    return _write
