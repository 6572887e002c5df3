"""View models produced by the components and consumed by their templates."""

from __future__ import annotations

import dataclasses as dc

from .motion import Motion


@dc.dataclass(frozen=True, slots=True)
class GuideCard:
    """One rendered guide card."""

    title: str
    description: str
    href: str
    cta_label: str


@dc.dataclass(frozen=True, slots=True)
class ActivePageMarker:
    """Vertical bar pointing at the active link, positioned in pixels."""

    top: float
    motion: Motion


@dc.dataclass(frozen=True, slots=True)
class VisibleSectionHighlight:
    """Box covering the active link's rows that are currently in view."""

    top: float
    height: float
    motion: Motion


@dc.dataclass(frozen=True, slots=True)
class NavLinkView:
    """Link row in the navigation tree.

    Attributes
    ----------
    title : str
        Label shown for the link.
    href : str
        Target as rendered into the page (already rewritten for static files).
    active : bool
        ``True`` only for the link whose href equals the current route.
    tag : str or None
        Optional badge label, used by section anchors.
    is_anchor_link : bool
        ``True`` for section sub-links, which are indented further.
    sections : tuple[NavLinkView, ...]
        Sub-links for the active page's sections; empty on every other link.
    """

    title: str
    href: str
    active: bool = False
    tag: str | None = None
    is_anchor_link: bool = False
    sections: tuple[NavLinkView, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavigationGroupView:
    """Fully computed state of one navigation group for a render pass."""

    title: str
    links: tuple[NavLinkView, ...]
    is_active: bool
    marker: ActivePageMarker | None = None
    highlight: VisibleSectionHighlight | None = None
    sections_motion: Motion | None = None
    class_name: str | None = None


__all__ = [
    "ActivePageMarker",
    "GuideCard",
    "NavLinkView",
    "NavigationGroupView",
    "VisibleSectionHighlight",
]
