"""Shared dataclasses used by the book page generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class PageModel:
    """Structured data passed to the book page template.

    Attributes
    ----------
    title : str
        Page title taken from the navigation link.
    group_title : str
        Title of the navigation group that owns the page.
    href : str
        Route of the page, exactly as it appears in the navigation.
    slug : str
        Output file stem derived from ``href``.
    body_html : str
        Rendered HTML for the page's markdown source.
    navigation_html : str
        Desktop sidebar navigation for the page's route.
    mobile_navigation_html : str
        Overlay navigation rendered with a frozen snapshot.
    previous : dict[str, str] or None
        ``title``/``href`` of the preceding page in navigation order.
    next : dict[str, str] or None
        ``title``/``href`` of the following page in navigation order.
    """

    title: str
    group_title: str
    href: str
    slug: str
    body_html: str
    navigation_html: str
    mobile_navigation_html: str
    previous: dict[str, str] | None = None
    next: dict[str, str] | None = None


__all__ = ["PageModel"]
