"""Cairo book landing page rendering pipeline.

This module turns the book configuration into the static ``public/index.html``
artefact: an optional ``index.md`` introduction from the content directory,
followed by the featured guide cards, with the sidebar navigation rendered for
the ``/`` route (which matches no chapter, so no group is marked active).

>>> from pathlib import Path
>>> from cairo_book.config import load_book_config
>>> builder = IndexPageBuilder(load_book_config(Path("config/book.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import datetime as dt
import functools
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import INDEX_ROUTE
from .components import GuideList, Navigation
from .generator import HtmlContentRenderer
from .routing import RouteState, static_href
from .sections import SectionStore

if typ.TYPE_CHECKING:
    from .config import BookConfig

logger = logging.getLogger(__name__)


class IndexPageBuilder:
    """Render the landing page from the book's guides and navigation."""

    def __init__(
        self,
        book: BookConfig,
        *,
        templates_dir: Path | None = None,
        output: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        book : BookConfig
            Parsed book configuration providing guides, navigation, theme, and
            content directory.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``cairo_book/templates``.
        output : Path, optional
            Override for ``book.index_output``.
        """
        self.book = book
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.output = output or book.index_output
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("index_page.jinja")
        self.href_formatter = functools.partial(
            static_href, pretty_urls=book.pretty_urls
        )

    def run(self) -> Path:
        """Render and write the landing page HTML, returning the output path."""
        renderer = HtmlContentRenderer(self.book.pygments_style)
        intro_path = self.book.content_dir / "index.md"
        intro_html = ""
        if intro_path.exists():
            intro_html = renderer.markdown(intro_path.read_text(encoding="utf-8"))
        else:
            logger.debug("no landing page intro at %s", intro_path)

        guides = GuideList(
            self.book.guides,
            heading=self.book.theme.guides_heading,
            cta_label=self.book.theme.guides_cta_label,
            href_formatter=self.href_formatter,
            templates_dir=self.templates_dir,
        )
        navigation = Navigation(
            self.book.navigation,
            route=RouteState(INDEX_ROUTE),
            store=SectionStore(),
            root_font_size=self.book.root_font_size,
            href_formatter=self.href_formatter,
            templates_dir=self.templates_dir,
        )
        context = {
            "theme": self.book.theme,
            "intro_html": intro_html,
            "guides_html": guides.render(),
            "navigation_html": navigation.render(class_="hidden lg:block"),
            "pygments_css": renderer.stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(html, encoding="utf-8")
        return self.output


__all__ = ["IndexPageBuilder"]
