"""Resolve staw site settings from CLI values and an optional YAML file.

This subpackage merges explicit command-line values over an optional
``staw.yaml`` file, validates that every required value is present before any
filesystem work starts, and produces the immutable :class:`SiteSettings` value
that is threaded through the whole build. The primary entry point is
:func:`resolve_settings`.

Examples
--------
>>> from pathlib import Path
>>> from staw.config import resolve_settings
>>> settings = resolve_settings(
...     template=Path("default.jinja"),
...     input_dir=Path("site"),
...     output_dir=Path("public"),
...     title="My Site",
... )  # doctest: +SKIP
>>> settings.site_name  # doctest: +SKIP
'site'
"""

from .loader import load_config_file, resolve_settings
from .models import SiteConfigError, SiteSettings

__all__ = [
    "SiteConfigError",
    "SiteSettings",
    "load_config_file",
    "resolve_settings",
]
