"""Utilities for walking, rendering, and writing staw sites."""

from .menu import build_menu
from .models import MenuEntry, Page, RenderContext, SiteBuildError
from .renderer import HtmlContentRenderer
from .site_builder import SiteBuilder

__all__ = [
    "HtmlContentRenderer",
    "MenuEntry",
    "Page",
    "RenderContext",
    "SiteBuildError",
    "SiteBuilder",
    "build_menu",
]
