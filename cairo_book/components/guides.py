"""Grid of featured guide cards for the book's landing page."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..content import GUIDES
from .models import GuideCard

if typ.TYPE_CHECKING:
    from ..config import GuideEntry


def _identity(href: str) -> str:
    return href


class GuideList:
    """Render each guide as a card with a heading, blurb, and call to action."""

    def __init__(
        self,
        guides: cabc.Sequence[GuideEntry] = GUIDES,
        *,
        heading: str = "Guides",
        cta_label: str = "Read more",
        href_formatter: cabc.Callable[[str], str] = _identity,
        templates_dir: Path | None = None,
    ) -> None:
        self.guides = tuple(guides)
        self.heading = heading
        self.cta_label = cta_label
        self.href_formatter = href_formatter
        self.templates_dir = (
            templates_dir or Path(__file__).resolve().parents[1] / "templates"
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("guides.jinja")

    def cards(self) -> list[GuideCard]:
        """Return one card per guide, in input order."""
        return [
            GuideCard(
                title=guide.title,
                description=guide.description,
                href=self.href_formatter(guide.href),
                cta_label=self.cta_label,
            )
            for guide in self.guides
        ]

    def render(self, **attrs: str) -> str:
        """Render the guides block, passing ``attrs`` to its wrapper element."""
        wrapper_attrs = {
            key.rstrip("_").replace("_", "-"): value for key, value in attrs.items()
        }
        extra_class = wrapper_attrs.pop("class", None)
        return self.template.render(
            heading=self.heading,
            cards=self.cards(),
            extra_class=extra_class,
            wrapper_attrs=wrapper_attrs,
        )


__all__ = ["GuideList"]
