"""Route state and static link helpers for the rendered book.

The navigation compares hrefs against the current route verbatim, so these
helpers never touch matching. They only decide where a page is written and how
an in-site href is spelled once the site is served as static files.

Examples
--------
>>> page_slug("/ch01-01-installation")
'ch01-01-installation'
>>> page_slug("./ch99-00-starknet-smart-contracts")
'ch99-00-starknet-smart-contracts'
>>> static_href("/ch02-02-data-types#integer-types")
'ch02-02-data-types.html#integer-types'
>>> static_href("https://book.cairo-lang.org")
'https://book.cairo-lang.org'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
from urllib.parse import urlsplit

from ._constants import INDEX_ROUTE


@dc.dataclass(slots=True)
class RouteState:
    """Current path reported by the host page."""

    pathname: str = INDEX_ROUTE

    def navigate(self, pathname: str) -> None:
        """Move the route to ``pathname``."""
        self.pathname = pathname


def page_slug(href: str) -> str:
    """Return the output slug for an in-site ``href``.

    Leading ``/`` and ``./`` segments are dropped, and the index route maps to
    ``"index"``.
    """
    path = urlsplit(href).path
    normalized = posixpath.normpath(path.lstrip("/")) if path.strip("/") else ""
    while normalized.startswith("../"):
        normalized = normalized[3:]
    if normalized in ("", ".", ".."):
        return "index"
    return normalized


def static_href(href: str, *, pretty_urls: bool = False) -> str:
    """Rewrite an in-site ``href`` so it resolves against static HTML files.

    External URLs, protocol-relative URLs, and fragment-only links pass through
    unchanged, as does everything when ``pretty_urls`` is set.
    """
    if pretty_urls or not href:
        return href
    if href.startswith(("#", "//")) or "://" in href:
        return href
    parsed = urlsplit(href)
    if parsed.scheme or parsed.netloc:
        return href
    rewritten = f"{page_slug(href)}.html"
    if parsed.query:
        rewritten = f"{rewritten}?{parsed.query}"
    if parsed.fragment:
        rewritten = f"{rewritten}#{parsed.fragment}"
    return rewritten


__all__ = ["RouteState", "page_slug", "static_href"]
