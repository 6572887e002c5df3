"""Typed dataclasses describing the book's content and site configuration."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_ROOT_FONT_SIZE


class BookConfigError(ValueError):
    """Raised when the book configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class GuideEntry:
    """Featured guide shown as a card on the index page."""

    title: str
    description: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class NavigationLink:
    """Single page entry within a navigation group."""

    title: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class NavigationGroup:
    """Titled, ordered run of navigation links."""

    title: str
    links: tuple[NavigationLink, ...]


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to generated pages."""

    site_name: str = "The Cairo Programming Language"
    guides_heading: str = "Guides"
    guides_cta_label: str = "Read more"
    footer_note: str = ""


@dc.dataclass(slots=True)
class BookConfig:
    """Fully resolved book definition sourced from YAML config and defaults."""

    guides: tuple[GuideEntry, ...]
    navigation: tuple[NavigationGroup, ...]
    content_dir: Path = Path("src/pages")
    output_dir: Path = Path("public")
    index_output: Path = Path("public/index.html")
    pygments_style: str = "monokai"
    root_font_size: float = DEFAULT_ROOT_FONT_SIZE
    pretty_urls: bool = False
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)

    def iter_links(self) -> cabc.Iterator[tuple[NavigationGroup, NavigationLink]]:
        """Yield ``(group, link)`` pairs in navigation order."""
        for group in self.navigation:
            for link in group.links:
                yield group, link

    def find_link(
        self, href: str
    ) -> tuple[NavigationGroup, NavigationLink] | None:
        """Return the group and link whose href equals ``href``, if any."""
        for group, link in self.iter_links():
            if link.href == href:
                return group, link
        return None


__all__ = [
    "BookConfig",
    "BookConfigError",
    "GuideEntry",
    "NavigationGroup",
    "NavigationLink",
    "ThemeConfig",
]
