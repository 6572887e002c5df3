"""Utilities for rendering the Cairo book website.

This package holds the book's static guide and navigation content, the
components that turn it into HTML, and the CLI entry points used to build the
site (``book generate``).

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from cairo_book import main
>>> main()  # doctest: +SKIP
>>> from cairo_book import app
>>> app(["check", "--config", "config/book.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
