"""Typed dataclasses describing staw site settings."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site settings are invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SiteSettings:
    """Immutable, fully resolved settings for one site build.

    Attributes
    ----------
    template : Path
        Jinja template file every document is rendered through.
    input_dir : Path
        Root of the source tree; also the directory menus are built from.
    output_dir : Path
        Root of the generated tree.
    site_title : str
        Global site title exposed to templates as ``page.site_title``.
    site_name : str
        Display name of the site root (the input directory's name).
    prefix : str
        URL prefix prepended to every menu link.
    css : Path or None
        Optional stylesheet copied into the output root.
    pygments_style : str
        Pygments style used for fenced code blocks.
    """

    template: Path
    input_dir: Path
    output_dir: Path
    site_title: str
    site_name: str
    prefix: str = ""
    css: Path | None = None
    pygments_style: str = "monokai"


__all__ = ["SiteConfigError", "SiteSettings"]
