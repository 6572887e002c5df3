"""High-level orchestration for rendering the book's chapter pages.

This module walks the navigation tree of a
:class:`~cairo_book.config.BookConfig`, renders each link's markdown source with
``HtmlContentRenderer``, publishes the page's sections into the section store,
and writes one themed HTML file per link. The sidebar on every page is produced
by :class:`~cairo_book.components.Navigation` with the page's own href as the
current route.

Example
-------
>>> from pathlib import Path
>>> from cairo_book.config import load_book_config
>>> from cairo_book.generator import BookPageGenerator
>>> book = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
>>> BookPageGenerator(book).run()  # doctest: +SKIP
[PosixPath('public/ch00-01-foreword.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import functools
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cairo_book.components import Navigation
from cairo_book.routing import RouteState, page_slug, static_href
from cairo_book.sections import SectionStore

from .models import PageModel
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from cairo_book.config import BookConfig, NavigationGroup, NavigationLink

logger = logging.getLogger(__name__)


class BookBuildError(RuntimeError):
    """Raised when a page cannot be rendered from its markdown source."""


class BookPageGenerator:
    """Read chapter markdown and emit one HTML page per navigation link."""

    def __init__(
        self,
        book: BookConfig,
        *,
        templates_dir: Path | None = None,
        content_dir: Path | None = None,
        output_dir: Path | None = None,
        store: SectionStore | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        book : BookConfig
            Book configuration describing navigation, content, and theming.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        content_dir : Path, optional
            Override for the markdown source directory.
        output_dir : Path, optional
            Override for the HTML output directory.
        store : SectionStore, optional
            Section store the pages publish into; a private store is used when
            omitted so repeated builds do not leak state.
        """
        self.book = book
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.content_dir = content_dir or book.content_dir
        self.output_dir = output_dir or book.output_dir
        self.store = store if store is not None else SectionStore()
        self.renderer = HtmlContentRenderer(book.pygments_style)
        self.href_formatter = functools.partial(
            static_href, pretty_urls=book.pretty_urls
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("book_page.jinja")

    def run(self, hrefs: typ.Collection[str] | None = None) -> list[Path]:
        """Render every navigation page (or only ``hrefs``) to disk.

        Returns
        -------
        list[Path]
            Paths to the generated HTML documents, in navigation order.

        Raises
        ------
        BookBuildError
            Raised when a page's markdown source is missing.
        KeyError
            Raised when ``hrefs`` names a page that is not in the navigation.
        """
        links = list(self.book.iter_links())
        if hrefs is not None:
            known = {link.href for _group, link in links}
            unknown = sorted(set(hrefs) - known)
            if unknown:
                msg = f"Unknown page(s): {', '.join(unknown)}"
                raise KeyError(msg)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        for index, (group, link) in enumerate(links):
            if hrefs is not None and link.href not in hrefs:
                continue
            previous = links[index - 1][1] if index > 0 else None
            following = links[index + 1][1] if index + 1 < len(links) else None
            page = self.build_page(group, link, previous=previous, following=following)
            written.append(self._write(page, generated_at))
        logger.info("rendered %d book pages into %s", len(written), self.output_dir)
        return written

    def build_page(
        self,
        group: NavigationGroup,
        link: NavigationLink,
        *,
        previous: NavigationLink | None = None,
        following: NavigationLink | None = None,
    ) -> PageModel:
        """Render the markdown and navigation for a single page."""
        slug = page_slug(link.href)
        source = self.content_dir / f"{slug}.md"
        if not source.exists():
            msg = f"Markdown source for '{link.href}' not found at '{source}'."
            raise BookBuildError(msg)
        rendered = self.renderer.render(source.read_text(encoding="utf-8"))

        self.store.reset()
        self.store.set_sections(rendered.sections)
        route = RouteState(link.href)
        logger.debug("rendering %s with %d sections", link.href, len(rendered.sections))

        return PageModel(
            title=link.title,
            group_title=group.title,
            href=link.href,
            slug=slug,
            body_html=rendered.html,
            navigation_html=self._navigation(route).render(class_="hidden lg:block"),
            mobile_navigation_html=self._navigation(
                route, inside_mobile_navigation=True
            ).render(class_="mobile-navigation"),
            previous=self._page_link(previous),
            next=self._page_link(following),
        )

    def _navigation(
        self, route: RouteState, *, inside_mobile_navigation: bool = False
    ) -> Navigation:
        return Navigation(
            self.book.navigation,
            route=route,
            store=self.store,
            inside_mobile_navigation=inside_mobile_navigation,
            root_font_size=self.book.root_font_size,
            href_formatter=self.href_formatter,
            templates_dir=self.templates_dir,
        )

    def _page_link(self, link: NavigationLink | None) -> dict[str, str] | None:
        if link is None:
            return None
        return {"title": link.title, "href": self.href_formatter(link.href)}

    def _write(self, page: PageModel, generated_at: dt.datetime) -> Path:
        context = {
            "page": page,
            "theme": self.book.theme,
            "html_title": f"{page.title} - {self.book.theme.site_name}",
            "home_href": self.href_formatter("/"),
            "pygments_css": self.renderer.stylesheet,
            "generated_at": generated_at,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path = self.output_dir / f"{page.slug}.html"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["BookBuildError", "BookPageGenerator"]
