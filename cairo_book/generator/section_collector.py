"""Markdown extension recording a page's second-level headings as sections."""

from __future__ import annotations

import re
import typing as typ

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from cairo_book.sections import Section

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

TAG_ATTRIBUTE = "data-tag"


def _slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "section"


def _unique_slug(base: str, used: set[str]) -> str:
    """Generate a unique slug, appending numeric suffixes when needed."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


class SectionCollectorExtension(Extension):
    """Collect ``h2`` headings into :class:`~cairo_book.sections.Section` entries.

    Register alongside ``attr_list`` so authors can pin ids and tags with
    ``## Title {: #custom-id data-tag="trait" }``. Headings without an explicit
    id receive a unique slug. The collected sections are available on
    :attr:`sections` after each conversion and are cleared by ``Markdown.reset``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.sections: list[Section] = []

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the section treeprocessor after ``attr_list`` has run."""
        md.registerExtension(self)
        processor = SectionCollectorTreeprocessor(md, self)
        md.treeprocessors.register(processor, "cairo_book_sections", 5)

    def reset(self) -> None:
        """Forget sections collected by a previous conversion."""
        self.sections = []


class SectionCollectorTreeprocessor(Treeprocessor):
    """Assign ids to top-level ``h2`` elements and record them in order."""

    def __init__(self, md: Markdown, extension: SectionCollectorExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: Element) -> Element:
        """Walk the top-level headings of the parsed markdown tree."""
        used: set[str] = set()
        sections: list[Section] = []
        for element in root:
            if element.tag != "h2":
                continue
            title = "".join(element.itertext()).strip()
            anchor = element.get("id") or _slugify(title)
            anchor = _unique_slug(anchor, used)
            element.set("id", anchor)
            tag = element.attrib.pop(TAG_ATTRIBUTE, None)
            sections.append(Section(id=anchor, title=title, tag=tag or None))
        self.extension.sections = sections
        return root


__all__ = ["SectionCollectorExtension", "SectionCollectorTreeprocessor"]
