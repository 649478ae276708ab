"""High-level orchestration for mirroring a Markdown tree into a static site.

This module walks the source tree depth first and writes the output tree as it
goes. :class:`SiteBuilder` owns the three moving parts of a build:

* :meth:`SiteBuilder.process_path` mirrors one directory, recursing into
  subdirectories, rendering ``.md`` files, and copying everything else. When a
  directory has no ``index.md`` it synthesizes a landing page so every output
  directory ends up with exactly one ``index.html``.
* :meth:`SiteBuilder.process_document` renders one page through the Jinja
  template, with a menu rebuilt from the site root for the page's selection
  path.
* :meth:`SiteBuilder.copy_stylesheet` copies the optional CSS file into the
  output root.

Any failure raises :class:`~staw.generator.models.SiteBuildError` and stops the
build; files already written are left in place.

Example
-------
>>> from pathlib import Path
>>> from staw.config import resolve_settings
>>> from staw.generator import SiteBuilder
>>> settings = resolve_settings(
...     template=Path("default.jinja"),
...     input_dir=Path("site"),
...     output_dir=Path("public"),
...     title="My Site",
... )  # doctest: +SKIP
>>> SiteBuilder(settings).run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import typing as typ

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from staw._constants import INDEX_SOURCE, INDEX_STEM, OUTPUT_DOCUMENT
from staw.markdown_parser import load_document

from .filesystem import copy_file, document_stem, is_markdown, list_directory
from .menu import build_menu
from .models import RenderContext, SiteBuildError
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Template

    from staw.config import SiteSettings


class SiteBuilder:
    """Render a Markdown source tree into a mirrored HTML output tree."""

    def __init__(self, settings: SiteSettings) -> None:
        """Initialize the builder, its Markdown renderer and Jinja template.

        Parameters
        ----------
        settings : SiteSettings
            Resolved site settings; shared unchanged by every render.

        Raises
        ------
        SiteBuildError
            If the template file cannot be found or does not compile.
        """
        self.settings = settings
        self.renderer = HtmlContentRenderer(settings.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(settings.template.parent)),
            autoescape=select_autoescape(["html", "htm", "xml", "jinja", "tpl"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self._load_template()

    def run(self) -> list[Path]:
        """Build the whole site and return every path written.

        Returns
        -------
        list[Path]
            Rendered documents and copied files in the order they were
            written, followed by the stylesheet when one is configured.
        """
        written = self.process_path(RenderContext.for_site(self.settings))
        stylesheet = self.copy_stylesheet()
        if stylesheet is not None:
            written.append(stylesheet)
        return written

    def process_path(self, context: RenderContext) -> list[Path]:
        """Mirror ``context.src_dir`` into ``context.dst_dir`` recursively.

        Parameters
        ----------
        context : RenderContext
            Directory pair and selection path for the directory to mirror.

        Returns
        -------
        list[Path]
            Paths written for this directory and all of its descendants.
        """
        _make_directory(context.dst_dir)
        written: list[Path] = []
        has_index = False
        for child in list_directory(context.src_dir):
            if child.is_dir():
                written.extend(self.process_path(context.descend(child.name)))
                continue
            if child.name == INDEX_SOURCE:
                has_index = True
            if is_markdown(child):
                written.append(self.process_document(context, child))
            else:
                written.append(copy_file(child, context.dst_dir / child.name))
        if not has_index:
            written.append(self.process_document(context, None))
        return written

    def process_document(self, context: RenderContext, source: Path | None) -> Path:
        """Render one page into ``context.dst_dir`` and return its path.

        Parameters
        ----------
        context : RenderContext
            Context of the directory holding the document.
        source : Path or None
            Markdown file to render, or ``None`` to synthesize the directory's
            landing page. A synthesized page is titled after the directory
            (``"<name>/"``) and has no body; at the site root it keeps the
            default empty title.

        Returns
        -------
        Path
            The written ``index.html``.
        """
        page = context.new_page()
        selection = context.selection
        if source is not None:
            selection = (*selection, source.name)
            try:
                document = load_document(source)
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Unable to read document '{source}': {exc}"
                raise SiteBuildError(msg) from exc
            page.title = document.title
            page.html_content = Markup(self.renderer.markdown(document.body))
        elif selection:
            page.title = f"{selection[-1]}/"

        page.items = build_menu(
            self.settings.input_dir, "", self.settings.prefix, selection
        )
        output_path = _document_destination(context.dst_dir, source)
        try:
            html = self.template.render(
                page=page, pygments_css=Markup(self.renderer.stylesheet)
            )
        except TemplateError as exc:
            msg = f"Unable to render '{output_path}': {exc}"
            raise SiteBuildError(msg) from exc
        if not html.endswith("\n"):
            html += "\n"
        try:
            output_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to write '{output_path}': {exc}"
            raise SiteBuildError(msg) from exc
        return output_path

    def copy_stylesheet(self) -> Path | None:
        """Copy the configured CSS file into the output root, if any."""
        css = self.settings.css
        if css is None:
            return None
        _make_directory(self.settings.output_dir)
        return copy_file(css, self.settings.output_dir / css.name)

    def _load_template(self) -> Template:
        """Return the compiled page template named by the settings."""
        name = self.settings.template.name
        try:
            return self.env.get_template(name)
        except (TemplateError, OSError) as exc:
            msg = f"Unable to load template '{self.settings.template}': {exc}"
            raise SiteBuildError(msg) from exc


def _make_directory(path: Path) -> None:
    """Create ``path`` and its parents; existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Unable to create directory '{path}': {exc}"
        raise SiteBuildError(msg) from exc


def _document_destination(dst_dir: Path, source: Path | None) -> Path:
    """Return the output path for ``source`` inside ``dst_dir``.

    ``index.md`` and synthesized landing pages become ``dst_dir/index.html``;
    any other ``<stem>.md`` becomes ``dst_dir/<stem>/index.html``.
    """
    stem = INDEX_STEM if source is None else document_stem(source)
    if stem == INDEX_STEM:
        return dst_dir / OUTPUT_DOCUMENT
    document_dir = dst_dir / stem
    _make_directory(document_dir)
    return document_dir / OUTPUT_DOCUMENT


__all__ = ["SiteBuilder"]
