"""Shared dataclasses used by the site generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

if typ.TYPE_CHECKING:
    from pathlib import Path

    from staw.config import SiteSettings


class SiteBuildError(RuntimeError):
    """Raised when reading the source tree, rendering, or writing output fails."""


@dc.dataclass(frozen=True, slots=True)
class MenuEntry:
    """One node of the navigation menu handed to templates.

    Attributes
    ----------
    prefix : str
        URL prefix shared by every entry of the site.
    path : str
        Relative URL of the entry's landing document, e.g.
        ``"blog/post/index.html"``.
    name : str
        Display label: a document's title, or ``"<dirname>/"`` for directories.
    selected : bool
        ``True`` when the entry lies on the branch of the page being rendered.
    items : tuple[MenuEntry, ...]
        Children; only a selected directory entry carries any.
    """

    prefix: str
    path: str
    name: str
    selected: bool = False
    items: tuple[MenuEntry, ...] = ()

    @property
    def url(self) -> str:
        """Return the link target with the site prefix applied."""
        return f"{self.prefix.rstrip('/')}/{self.path}"


@dc.dataclass(slots=True)
class Page:
    """Structured data passed to the page template.

    Attributes
    ----------
    site : str
        Display name of the site root directory.
    site_title : str
        Global site title.
    prefix : str
        URL prefix shared by every link.
    title : str
        Page title; empty for a synthesized site root landing page.
    html_content : Markup
        Rendered body, marked safe so autoescaping leaves it intact.
    items : list[MenuEntry]
        Top-level navigation entries built from the site root.
    """

    site: str
    site_title: str
    prefix: str
    title: str = ""
    html_content: Markup = dc.field(default_factory=Markup)
    items: list[MenuEntry] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """State carried by the recursive walk for one source directory.

    Attributes
    ----------
    src_dir : Path
        Source directory currently being mirrored.
    dst_dir : Path
        Output directory matching ``src_dir``.
    selection : tuple[str, ...]
        Directory names leading from the site root to ``src_dir``.
    settings : SiteSettings
        Site-wide settings shared unchanged by every context.
    """

    src_dir: Path
    dst_dir: Path
    selection: tuple[str, ...]
    settings: SiteSettings

    @classmethod
    def for_site(cls, settings: SiteSettings) -> RenderContext:
        """Return the context for the site root."""
        return cls(
            src_dir=settings.input_dir,
            dst_dir=settings.output_dir,
            selection=(),
            settings=settings,
        )

    def descend(self, name: str) -> RenderContext:
        """Return a new context for the child directory ``name``."""
        return dc.replace(
            self,
            src_dir=self.src_dir / name,
            dst_dir=self.dst_dir / name,
            selection=(*self.selection, name),
        )

    def new_page(self) -> Page:
        """Return a blank page carrying the site-wide values."""
        return Page(
            site=self.settings.site_name,
            site_title=self.settings.site_title,
            prefix=self.settings.prefix,
        )


__all__ = ["MenuEntry", "Page", "RenderContext", "SiteBuildError"]
