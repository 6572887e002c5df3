"""Load and validate the book configuration YAML.

This subpackage parses ``config/book.yaml``, falls back to the static guides
and navigation defined in :mod:`cairo_book.content`, and produces typed
dataclasses (:class:`BookConfig`, :class:`NavigationGroup`, etc.) that the
components and generators consume. The primary entry point is
:func:`load_book_config`.

Examples
--------
>>> from pathlib import Path
>>> from cairo_book.config import load_book_config
>>> book = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
>>> book.find_link("/ch02-02-data-types")[1].title  # doctest: +SKIP
'Data Types'
"""

from .loader import load_book_config
from .models import (
    BookConfig,
    BookConfigError,
    GuideEntry,
    NavigationGroup,
    NavigationLink,
    ThemeConfig,
)

__all__ = [
    "BookConfig",
    "BookConfigError",
    "GuideEntry",
    "NavigationGroup",
    "NavigationLink",
    "ThemeConfig",
    "load_book_config",
]
