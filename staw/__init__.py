"""Static site generation from a tree of Markdown documents.

This package exposes the ``staw`` CLI, which mirrors a source directory into an
output directory, renders every ``.md`` file through a Jinja template with a
navigation menu reflecting the site hierarchy, and copies all other files.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from staw import main
>>> main()  # doctest: +SKIP
>>> from staw import app
>>> app.name[0]
'staw'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
