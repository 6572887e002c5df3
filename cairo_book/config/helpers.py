"""Utility helpers shared by the book configuration loader."""

from __future__ import annotations

import typing as typ

from .models import (
    BookConfigError,
    GuideEntry,
    NavigationGroup,
    NavigationLink,
    ThemeConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first_str(payload: typ.Mapping[str, typ.Any], *keys: str) -> str | None:
    """Return the first non-empty string stored under any of ``keys``."""
    for key in keys:
        value = _optional_str(payload.get(key))
        if value:
            return value
    return None


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided ``site`` mapping."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=payload.get("title", base.site_name),
        guides_heading=payload.get("guides_heading", base.guides_heading),
        guides_cta_label=payload.get("guides_cta_label", base.guides_cta_label),
        footer_note=payload.get("footer_note", base.footer_note),
    )


def _build_guides(entries: object) -> tuple[GuideEntry, ...]:
    """Build guide entries, accepting ``name``/``title`` and ``href``/``link``."""
    match entries:
        case list() as items:
            pass
        case _:
            msg = "The 'guides' block must be a list."
            raise BookConfigError(msg)
    guides: list[GuideEntry] = []
    for entry in items:
        if not isinstance(entry, dict):
            msg = "Guide entries must be mappings."
            raise BookConfigError(msg)
        title = _first_str(entry, "title", "name")
        href = _first_str(entry, "href", "link")
        if not title or not href:
            msg = "Guide entries require a 'title' (or 'name') and an 'href'."
            raise BookConfigError(msg)
        guides.append(
            GuideEntry(
                title=title,
                description=_optional_str(entry.get("description")) or "",
                href=href,
            )
        )
    return tuple(guides)


def _build_navigation(groups: object) -> tuple[NavigationGroup, ...]:
    """Build navigation groups from a list of ``{title, links}`` mappings."""
    match groups:
        case list() as items:
            pass
        case _:
            msg = "The 'navigation' block must be a list of groups."
            raise BookConfigError(msg)
    navigation: list[NavigationGroup] = []
    for payload in items:
        match payload:
            case {"title": title, **rest}:
                pass
            case _:
                msg = "Navigation groups require a 'title'."
                raise BookConfigError(msg)
        group_title = _optional_str(title)
        if not group_title:
            msg = "Navigation groups require a non-empty 'title'."
            raise BookConfigError(msg)
        links = _build_links(group_title, rest.get("links"))
        navigation.append(NavigationGroup(title=group_title, links=links))
    _ensure_unique_hrefs(navigation)
    return tuple(navigation)


def _build_links(group_title: str, entries: object) -> tuple[NavigationLink, ...]:
    """Build the links of one navigation group."""
    links: list[NavigationLink] = []
    match entries:
        case list() as items:
            pass
        case _:
            items = []
    for entry in items:
        match entry:
            case {"title": title, "href": href, **_rest}:
                pass
            case _:
                msg = f"Links in '{group_title}' require 'title' and 'href'."
                raise BookConfigError(msg)
        link_title = _optional_str(title)
        link_href = _optional_str(href)
        if not link_title or not link_href:
            msg = f"Links in '{group_title}' require 'title' and 'href'."
            raise BookConfigError(msg)
        links.append(NavigationLink(title=link_title, href=link_href))
    if not links:
        msg = f"Navigation group '{group_title}' requires at least one link."
        raise BookConfigError(msg)
    return tuple(links)


def _ensure_unique_hrefs(navigation: typ.Iterable[NavigationGroup]) -> None:
    """Raise when two links anywhere in the tree share an href."""
    seen: dict[str, str] = {}
    for group in navigation:
        for link in group.links:
            if link.href in seen:
                msg = (
                    f"Duplicate navigation href '{link.href}' in "
                    f"'{group.title}' (already used in '{seen[link.href]}')."
                )
                raise BookConfigError(msg)
            seen[link.href] = group.title


__all__ = [
    "_build_guides",
    "_build_navigation",
    "_build_theme_config",
    "_ensure_unique_hrefs",
    "_optional_str",
]
