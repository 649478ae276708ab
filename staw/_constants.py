"""Common literal values used across staw.

These constants keep the source/output naming conventions in one place so the
menu builder, tree renderer, and tests agree on what counts as a document and
what a directory's landing page is called.

Examples
--------
>>> from staw import _constants
>>> _constants.INDEX_STEM + _constants.MARKDOWN_SUFFIX
'index.md'
>>> _constants.OUTPUT_DOCUMENT
'index.html'
"""

from pathlib import Path

MARKDOWN_SUFFIX = ".md"
INDEX_STEM = "index"
INDEX_SOURCE = f"{INDEX_STEM}{MARKDOWN_SUFFIX}"
OUTPUT_DOCUMENT = f"{INDEX_STEM}.html"
DEFAULT_TEMPLATE = Path(__file__).parent / "templates" / "default.jinja"
