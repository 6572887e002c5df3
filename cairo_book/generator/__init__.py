"""Utilities for rendering chapter markdown into the book's HTML pages."""

from .models import PageModel
from .page_generator import BookBuildError, BookPageGenerator
from .renderer import HtmlContentRenderer, RenderedContent
from .section_collector import SectionCollectorExtension

__all__ = [
    "BookBuildError",
    "BookPageGenerator",
    "HtmlContentRenderer",
    "PageModel",
    "RenderedContent",
    "SectionCollectorExtension",
]
