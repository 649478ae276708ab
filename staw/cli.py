"""Cyclopts CLI entrypoint for building a staw site.

The ``staw`` console script defined here renders a tree of Markdown documents
into a mirrored tree of HTML pages through a Jinja template, copying every
other file verbatim. Values may come from command-line options, ``STAW_*``
environment variables, or an optional YAML config file; command-line values
win. All settings are validated before anything is written.

Examples
--------
Build a site from ``site/`` into ``public/``:

>>> from staw.cli import app
>>> app.run(
...     ["--tpl", "default.jinja", "--in", "site", "--out", "public", "-t", "Site"]
... )  # doctest: +SKIP

Or through the console script:

>>> from staw.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from .config import SiteConfigError, resolve_settings
from .generator import SiteBuildError, SiteBuilder

app = App(name="staw", help="Render a Markdown tree into a static HTML site.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    *,
    tpl: typ.Annotated[
        Path | None,
        Parameter(help="Template file to be used (required)", env_var="STAW_TPL"),
    ] = None,
    input_dir: typ.Annotated[
        Path | None,
        Parameter(
            name=["--in", "-i"],
            help="Input site directory (required)",
            env_var="STAW_IN",
        ),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(
            name=["--out", "-o"],
            help="Output site directory (required)",
            env_var="STAW_OUT",
        ),
    ] = None,
    title: typ.Annotated[
        str | None,
        Parameter(
            name=["--title", "-t"],
            help="Site title (required)",
            env_var="STAW_TITLE",
        ),
    ] = None,
    prefix: typ.Annotated[
        str | None,
        Parameter(
            name=["--prefix", "-p"],
            help="URL prefix, e.g. for local testing",
            env_var="STAW_PREFIX",
        ),
    ] = None,
    css: typ.Annotated[
        Path | None,
        Parameter(
            help="Stylesheet copied into the output directory", env_var="STAW_CSS"
        ),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Optional YAML config file", env_var="STAW_CONFIG"),
    ] = None,
) -> None:
    """Build the site described by the given options.

    Parameters
    ----------
    tpl : Path or None, optional
        Jinja template every page is rendered through.
    input_dir : Path or None, optional
        Root of the Markdown source tree.
    output_dir : Path or None, optional
        Directory the site is written to; created when missing.
    title : str or None, optional
        Site title available to templates as ``page.site_title``.
    prefix : str or None, optional
        URL prefix prepended to every menu link; defaults to ``""``.
    css : Path or None, optional
        Stylesheet copied verbatim into the output root.
    config : Path or None, optional
        YAML file supplying any of the values above.

    Returns
    -------
    None
        Writes the site and prints every generated path.

    Raises
    ------
    SiteConfigError
        If a required value is missing or invalid; nothing has been written.
    SiteBuildError
        If reading, rendering, or writing fails part-way through the build.
    """
    settings = resolve_settings(
        config_path=config,
        template=tpl,
        input_dir=input_dir,
        output_dir=output_dir,
        title=title,
        prefix=prefix,
        css=css,
    )
    written = SiteBuilder(settings).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``staw`` console command.

    Configuration and build errors are reported once, as the process exit
    message, with a non-zero status.
    """
    try:
        app()
    except (SiteConfigError, SiteBuildError) as exc:
        raise SystemExit(f"staw: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
