"""Load the optional YAML config file and resolve immutable site settings."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .helpers import CONFIG_KEYS, PATH_KEYS, _first_set, _optional_path, _optional_str
from .models import SiteConfigError, SiteSettings


def load_config_file(path: Path) -> dict[str, typ.Any]:
    """Load a staw YAML config file into a mapping of raw settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML file (for example, ``staw.yaml``).

    Returns
    -------
    dict[str, Any]
        Raw values keyed by ``template``, ``input``, ``output``, ``title``,
        ``prefix``, ``css`` and ``pygments_style``. Relative paths are
        resolved against the directory holding the config file.

    Raises
    ------
    SiteConfigError
        If the file is missing or unparsable, its top level is not a mapping,
        or it contains keys staw does not understand.

    Examples
    --------
    >>> from pathlib import Path
    >>> from staw.config import load_config_file
    >>> load_config_file(Path("staw.yaml"))["title"]  # doctest: +SKIP
    'My Site'
    """
    if not path.is_file():
        msg = f"Configuration file '{path}' not found."
        raise SiteConfigError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except (OSError, YAMLError) as exc:
        msg = f"Unable to read configuration file '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)

    unknown = sorted(str(key) for key in loaded if key not in CONFIG_KEYS)
    if unknown:
        msg = f"Unknown keys in '{path}': {', '.join(unknown)}"
        raise SiteConfigError(msg)

    base_dir = path.parent
    raw: dict[str, typ.Any] = {}
    for key, value in loaded.items():
        if key in PATH_KEYS:
            raw[key] = _optional_path(value, base_dir=base_dir)
        else:
            raw[key] = value
    return raw


def resolve_settings(
    *,
    config_path: Path | None = None,
    template: Path | None = None,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
    title: str | None = None,
    prefix: str | None = None,
    css: Path | None = None,
) -> SiteSettings:
    """Merge CLI values over the optional config file into ``SiteSettings``.

    Explicit arguments win over values read from ``config_path``. Validation
    happens here, before any directory is walked or created.

    Raises
    ------
    SiteConfigError
        If a required value is missing, the input directory does not exist,
        or the CSS file is missing.
    """
    file_values = load_config_file(config_path) if config_path else {}

    template_path = _optional_path(_first_set(template, file_values.get("template")))
    site_title = _optional_str(_first_set(title, file_values.get("title")))
    source = _optional_path(_first_set(input_dir, file_values.get("input")))
    destination = _optional_path(_first_set(output_dir, file_values.get("output")))

    if template_path is None:
        msg = "no template given"
        raise SiteConfigError(msg)
    if site_title is None:
        msg = "no site title given"
        raise SiteConfigError(msg)
    if source is None:
        msg = "no site input directory given"
        raise SiteConfigError(msg)
    if destination is None:
        msg = "no output directory given"
        raise SiteConfigError(msg)

    if not source.is_dir():
        msg = f"Input directory '{source}' does not exist or is not a directory."
        raise SiteConfigError(msg)
    if destination.resolve().is_relative_to(source.resolve()):
        msg = f"Output directory '{destination}' must not be inside '{source}'."
        raise SiteConfigError(msg)

    stylesheet = _optional_path(_first_set(css, file_values.get("css")))
    if stylesheet is not None and not stylesheet.is_file():
        msg = f"Stylesheet '{stylesheet}' not found."
        raise SiteConfigError(msg)

    url_prefix = _first_set(prefix, file_values.get("prefix"))
    pygments_style = _optional_str(file_values.get("pygments_style")) or "monokai"

    return SiteSettings(
        template=template_path,
        input_dir=source,
        output_dir=destination,
        site_title=site_title,
        site_name=source.resolve().name,
        prefix="" if url_prefix is None else str(url_prefix),
        css=stylesheet,
        pygments_style=pygments_style,
    )


__all__ = ["load_config_file", "resolve_settings"]
