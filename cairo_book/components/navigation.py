"""Sidebar navigation with active-page and visible-section indicators.

The navigation is a nested list: one block per group, one row per link. On top
of that list it positions two boxes:

* the *active page marker*, a thin bar next to the link whose href equals the
  current route, placed at ``offset + index * item_height``;
* the *visible section highlight*, a box spanning the rows of the active page
  (and its section sub-links) that are currently scrolled into view.

All geometry is derived from list indexes and a fixed row height, so the
functions below are pure and the :class:`Navigation` component only adds the
route/section snapshot handling and the Jinja rendering.

Examples
--------
>>> from cairo_book.config import NavigationGroup, NavigationLink
>>> group = NavigationGroup("X", (NavigationLink("A", "/a"), NavigationLink("B", "/b")))
>>> active_page_marker(group, "/b", item_height=32, offset=4).top
36.0
>>> active_page_marker(group, "/c", item_height=32, offset=4) is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .._constants import (
    DEFAULT_ROOT_FONT_SIZE,
    ITEM_HEIGHT_REM,
    MARKER_OFFSET_REM,
    TOP_SECTION_ID,
)
from ..routing import RouteState
from ..sections import Section, SectionStore, default_store
from ..units import rem_to_px
from .models import (
    ActivePageMarker,
    NavigationGroupView,
    NavLinkView,
    VisibleSectionHighlight,
)
from .motion import FADE_IN, SUBLIST_FADE

if typ.TYPE_CHECKING:
    from ..config import NavigationGroup

logger = logging.getLogger(__name__)

HrefFormatter = cabc.Callable[[str], str]


@dc.dataclass(frozen=True, slots=True)
class NavigationSnapshot:
    """Route and section state read by a single render pass."""

    pathname: str
    sections: tuple[Section, ...] = ()
    visible_sections: tuple[str, ...] = ()


def _identity(href: str) -> str:
    return href


def find_link_index(group: NavigationGroup, pathname: str) -> int:
    """Return the index of the link matching ``pathname`` exactly, else ``-1``."""
    for index, link in enumerate(group.links):
        if link.href == pathname:
            return index
    return -1


def is_active_group(group: NavigationGroup, pathname: str) -> bool:
    """Return whether ``group`` contains the link for ``pathname``."""
    return find_link_index(group, pathname) != -1


def first_visible_section_index(
    sections: cabc.Sequence[Section], visible_sections: cabc.Sequence[str]
) -> int:
    """Return the row of the first visible section below the active link.

    Row ``0`` is the implicit top-of-page pseudo-section (the active link
    itself). Unknown ids and an empty visible list both resolve to ``0``.
    """
    if not visible_sections:
        return 0
    first = visible_sections[0]
    ids = [TOP_SECTION_ID, *(section.id for section in sections)]
    try:
        return ids.index(first)
    except ValueError:
        return 0


def active_page_marker(
    group: NavigationGroup,
    pathname: str,
    *,
    item_height: float,
    offset: float,
) -> ActivePageMarker | None:
    """Return the marker for the active link of ``group``, or ``None``."""
    index = find_link_index(group, pathname)
    if index == -1:
        return None
    top = float(offset + index * item_height)
    return ActivePageMarker(top=top, motion=FADE_IN.without_initial())


def visible_section_highlight(
    group: NavigationGroup,
    pathname: str,
    sections: cabc.Sequence[Section],
    visible_sections: cabc.Sequence[str],
    *,
    item_height: float,
    is_present: bool = True,
    animate_initial: bool = True,
) -> VisibleSectionHighlight | None:
    """Return the highlight box geometry for the active group, or ``None``.

    The box is at least one row tall. While the highlight is being removed
    (``is_present`` false) it collapses to a single row.
    """
    index = find_link_index(group, pathname)
    if index == -1:
        return None
    rows = max(1, len(visible_sections)) if is_present else 1
    first_visible = first_visible_section_index(sections, visible_sections)
    top = float(index * item_height + first_visible * item_height)
    motion = FADE_IN if animate_initial else FADE_IN.without_initial()
    return VisibleSectionHighlight(
        top=top, height=float(rows * item_height), motion=motion
    )


def build_group(
    group: NavigationGroup,
    snapshot: NavigationSnapshot,
    *,
    item_height: float,
    marker_offset: float,
    inside_mobile_navigation: bool = False,
    is_present: bool = True,
    href_formatter: HrefFormatter = _identity,
    class_name: str | None = None,
) -> NavigationGroupView:
    """Compute the full view of ``group`` for one render pass."""
    pathname = snapshot.pathname
    links: list[NavLinkView] = []
    for link in group.links:
        active = link.href == pathname
        sub_links: tuple[NavLinkView, ...] = ()
        if active and snapshot.sections:
            sub_links = tuple(
                NavLinkView(
                    title=section.title,
                    href=href_formatter(f"{link.href}#{section.id}"),
                    tag=section.tag,
                    is_anchor_link=True,
                )
                for section in snapshot.sections
            )
        links.append(
            NavLinkView(
                title=link.title,
                href=href_formatter(link.href),
                active=active,
                sections=sub_links,
            )
        )

    active_group = is_active_group(group, pathname)
    marker = None
    highlight = None
    if active_group:
        marker = active_page_marker(
            group, pathname, item_height=item_height, offset=marker_offset
        )
        highlight = visible_section_highlight(
            group,
            pathname,
            snapshot.sections,
            snapshot.visible_sections,
            item_height=item_height,
            is_present=is_present,
            animate_initial=not inside_mobile_navigation,
        )
    return NavigationGroupView(
        title=group.title,
        links=tuple(links),
        is_active=active_group,
        marker=marker,
        highlight=highlight,
        sections_motion=SUBLIST_FADE.without_initial(),
        class_name=class_name,
    )


class Navigation:
    """Render the book's sidebar navigation for the current route.

    Inside the transient mobile overlay the component keeps the route and
    section snapshot taken when it was mounted, so the tree does not change
    while the overlay closes. :meth:`remount` takes a fresh snapshot, as
    re-opening the overlay would.
    """

    def __init__(
        self,
        groups: cabc.Sequence[NavigationGroup],
        *,
        route: RouteState,
        store: SectionStore | None = None,
        inside_mobile_navigation: bool = False,
        root_font_size: float = DEFAULT_ROOT_FONT_SIZE,
        href_formatter: HrefFormatter = _identity,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the component and take the mount-time snapshot.

        Parameters
        ----------
        groups : Sequence[NavigationGroup]
            Static navigation tree.
        route : RouteState
            Route collaborator reporting the current path.
        store : SectionStore, optional
            Section store to read; defaults to the process-wide store.
        inside_mobile_navigation : bool, optional
            Freeze the mount-time snapshot for the lifetime of the component.
        root_font_size : float, optional
            Root font size in pixels used to convert rem rhythm units.
        href_formatter : Callable[[str], str], optional
            Rewrites hrefs for output; matching always uses the raw href.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``cairo_book/templates``.
        """
        self.navigation = tuple(groups)
        self.route = route
        self.store = store if store is not None else default_store()
        self.inside_mobile_navigation = inside_mobile_navigation
        self.item_height = rem_to_px(ITEM_HEIGHT_REM, root_font_size)
        self.marker_offset = rem_to_px(MARKER_OFFSET_REM, root_font_size)
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
        self.template = self.env.get_template("navigation.jinja")
        self._initial = self._capture()

    def _capture(self) -> NavigationSnapshot:
        sections = self.store.snapshot()
        return NavigationSnapshot(
            pathname=self.route.pathname,
            sections=sections.sections,
            visible_sections=sections.visible_sections,
        )

    def snapshot(self) -> NavigationSnapshot:
        """Return the state this render pass should use."""
        if self.inside_mobile_navigation:
            return self._initial
        return self._capture()

    def remount(self) -> None:
        """Discard the mount-time snapshot and capture the current state."""
        self._initial = self._capture()

    def groups(self, *, is_present: bool = True) -> list[NavigationGroupView]:
        """Return the computed view of every navigation group."""
        snapshot = self.snapshot()
        views = [
            build_group(
                group,
                snapshot,
                item_height=self.item_height,
                marker_offset=self.marker_offset,
                inside_mobile_navigation=self.inside_mobile_navigation,
                is_present=is_present,
                href_formatter=self.href_formatter,
                class_name="md:mt-0" if index == 0 else None,
            )
            for index, group in enumerate(self.navigation)
        ]
        active = [view.title for view in views if view.is_active]
        logger.debug("navigation for %r: active groups %s", snapshot.pathname, active)
        return views

    def render(self, **attrs: str) -> str:
        """Render the ``<nav>`` element, passing ``attrs`` through to it.

        Trailing underscores are dropped from attribute names and remaining
        underscores become hyphens, so ``class_="lg:block"`` and
        ``aria_label="Book"`` work as expected.
        """
        nav_attrs = {
            key.rstrip("_").replace("_", "-"): value for key, value in attrs.items()
        }
        return self.template.render(
            groups=self.groups(),
            nav_attrs=nav_attrs,
            mobile=self.inside_mobile_navigation,
        )


__all__ = [
    "Navigation",
    "NavigationSnapshot",
    "active_page_marker",
    "build_group",
    "find_link_index",
    "first_visible_section_index",
    "is_active_group",
    "visible_section_highlight",
]
