"""Render chapter markdown into highlighted HTML plus its section list.

Book chapters label their code fences the mdBook way, with comma-separated
attributes after the language (```` ```cairo,does_not_compile ````). Python-
Markdown only understands a bare language, so each opening fence is reduced to
its first token before conversion, and the token is re-attached to the
highlighted block as ``data-language`` afterwards.
"""

from __future__ import annotations

import dataclasses as dc
import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from cairo_book.sections import Section

from .section_collector import SectionCollectorExtension

FENCE_LINE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>[^`\r\n]*)$")
LANGUAGE_TOKEN = re.compile(r"[\w#.+-]*")
HIGHLIGHT_OPEN_TAG = '<div class="codehilite">'


@dc.dataclass(frozen=True, slots=True)
class RenderedContent:
    """HTML body of a page and the sections found in it."""

    html: str
    sections: tuple[Section, ...]


def prepare_fences(text: str) -> tuple[str, list[str]]:
    """Strip fence attributes and return the text with each block's language.

    Opening fences keep only their language token and lose up to three spaces
    of indentation. Lines inside a block are left untouched, including lines
    that look like fences of a different kind or length.

    Examples
    --------
    >>> prepare_fences("```rust,noplayground\\nlet x = 1;\\n```\\n")
    ('```rust\\nlet x = 1;\\n```\\n', ['rust'])
    """
    lines: list[str] = []
    languages: list[str] = []
    open_fence: str | None = None
    for line in text.splitlines():
        match = FENCE_LINE.match(line)
        if match is None:
            lines.append(line)
            continue
        fence, info = match["fence"], match["info"]
        if open_fence is None:
            first = info.split(",", 1)[0].strip()
            language = LANGUAGE_TOKEN.match(first).group()  # type: ignore[union-attr]
            languages.append(language or "text")
            lines.append(f"{fence}{language}")
            open_fence = fence
        elif (
            fence[0] == open_fence[0]
            and len(fence) >= len(open_fence)
            and not info.strip()
        ):
            lines.append(fence)
            open_fence = None
        else:
            lines.append(line)
    return "\n".join(lines) + "\n", languages


class HtmlContentRenderer:
    """Render markdown with consistent highlighting and section anchors."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer using ``pygments_style`` for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._sections = SectionCollectorExtension()
        codehilite = {
            "css_class": "codehilite",
            "guess_lang": False,
            "linenums": False,
            "pygments_style": pygments_style,
        }
        self._md = Markdown(
            extensions=[
                "attr_list",
                "codehilite",
                "fenced_code",
                "sane_lists",
                "tables",
                self._sections,
            ],
            extension_configs={"codehilite": codehilite},
            output_format="html",
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str) -> RenderedContent:
        """Render markdown into HTML and collect its ``h2`` sections."""
        if not text.strip():
            return RenderedContent(html="", sections=())
        source, languages = prepare_fences(text)
        self._md.reset()
        html = self._md.convert(source)
        return RenderedContent(
            html=_label_code_blocks(html, languages),
            sections=tuple(self._sections.sections),
        )

    def markdown(self, text: str) -> str:
        """Render markdown into HTML, discarding the section list."""
        return self.render(text).html


def _label_code_blocks(html: str, languages: list[str]) -> str:
    # Highlighted blocks appear in source order; extras fall back to "text".
    parts = html.split(HIGHLIGHT_OPEN_TAG)
    if len(parts) == 1:
        return html
    labelled = [parts[0]]
    for index, rest in enumerate(parts[1:]):
        language = languages[index] if index < len(languages) else "text"
        safe = escape(language, quote=True)
        labelled.append(f'<div class="codehilite" data-language="{safe}">{rest}')
    return "".join(labelled)


__all__ = ["HtmlContentRenderer", "RenderedContent", "prepare_fences"]
