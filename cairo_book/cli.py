"""Cyclopts CLI entrypoint for building the Cairo book website.

The ``book`` console script defined here renders every chapter page from
Markdown, rebuilds the landing page with its guide cards, validates the book
configuration, and prints the navigation geometry computed for a given route.
Every option can also be supplied through a ``BOOK_``-prefixed environment
variable, which is how CI invokes it.

Examples
--------
Generate the whole site for the default configuration:

>>> from cairo_book.cli import main
>>> main()  # doctest: +SKIP

Regenerate a single chapter into a custom directory:

>>> from cairo_book.cli import app
>>> app(
...     ["generate", "--page", "/ch02-02-data-types", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .components import Navigation
from .config import load_book_config
from .generator import BookPageGenerator
from .index_page import IndexPageBuilder
from .routing import RouteState
from .sections import SectionStore

DEFAULT_CONFIG = Path("config/book.yaml")

app = App(name="book", config=cyclopts.config.Env("BOOK_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render the book's chapter pages and landing page to HTML.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the book config")
    ] = DEFAULT_CONFIG,
    page: typ.Annotated[
        list[str] | None,
        Parameter(help="Only render the page(s) with this navigation href"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    skip_index: typ.Annotated[
        bool, Parameter(help="Do not rebuild the landing page")
    ] = False,
) -> None:
    """Generate the book website for the requested configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``book.yaml`` configuration file (overridable via
        ``BOOK_CONFIG``).
    page : list[str] or None, optional
        Navigation hrefs to render; when ``None`` (default) every page is
        rendered.
    output_dir : Path or None, optional
        Override the output directory for chapter pages and the landing page.
    skip_index : bool, optional
        Leave the landing page untouched.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    KeyError
        If ``page`` names an href that is not in the navigation.
    BookBuildError
        If a chapter's markdown source is missing.
    """
    book = load_book_config(config)
    if output_dir is not None:
        book = dc.replace(
            book, output_dir=output_dir, index_output=output_dir / "index.html"
        )

    written = BookPageGenerator(book).run(hrefs=set(page) if page else None)
    for path in written:
        print(f"wrote {_format_path(path)}")
    if not skip_index:
        index_path = IndexPageBuilder(book).run()
        print(f"wrote {_format_path(index_path)}")


@app.command(help="Validate the book configuration and summarise its navigation.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the book config")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load ``config`` and print a summary; configuration errors propagate."""
    book = load_book_config(config)
    link_count = sum(len(group.links) for group in book.navigation)
    print(
        f"{_format_path(config)}: {len(book.navigation)} groups, "
        f"{link_count} links, {len(book.guides)} guides"
    )


@app.command(help="Print the navigation state computed for a route.")
def outline(
    *,
    route: typ.Annotated[str, Parameter(help="Current route to evaluate")],
    config: typ.Annotated[
        Path, Parameter(help="Path to the book config")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each group with its active flags, marker, and highlight geometry."""
    book = load_book_config(config)
    navigation = Navigation(
        book.navigation,
        route=RouteState(route),
        store=SectionStore(),
        root_font_size=book.root_font_size,
    )
    for group in navigation.groups():
        flag = "*" if group.is_active else " "
        print(f"{flag} {group.title}")
        for link in group.links:
            marker = ">" if link.active else " "
            print(f"    {marker} {link.title} ({link.href})")
        if group.marker is not None:
            print(f"    marker top={group.marker.top:g}px")
        if group.highlight is not None:
            print(
                f"    highlight top={group.highlight.top:g}px "
                f"height={group.highlight.height:g}px"
            )


def main() -> None:
    """Invoke the Cyclopts application that powers the ``book`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
