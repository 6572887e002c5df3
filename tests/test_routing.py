"""Unit tests for route state, slugs, and static link rewriting."""

from __future__ import annotations

import pytest

from cairo_book.routing import RouteState, page_slug, static_href
from cairo_book.units import rem_to_px


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("/ch01-01-installation", "ch01-01-installation"),
        ("./ch99-01-writing-starknet-contracts", "ch99-01-writing-starknet-contracts"),
        ("/appendix-00#tools", "appendix-00"),
        ("/", "index"),
        ("", "index"),
    ],
)
def test_page_slug(href: str, expected: str) -> None:
    """Slugs drop leading separators and fragments."""
    assert page_slug(href) == expected


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("/ch02-02-data-types", "ch02-02-data-types.html"),
        ("/ch02-02-data-types#integers", "ch02-02-data-types.html#integers"),
        ("./ch99-00-starknet-smart-contracts", "ch99-00-starknet-smart-contracts.html"),
        ("https://www.cairo-lang.org", "https://www.cairo-lang.org"),
        ("//cdn.example.invalid/x", "//cdn.example.invalid/x"),
        ("#guides", "#guides"),
    ],
)
def test_static_href(href: str, expected: str) -> None:
    """In-site hrefs map to static files; everything else passes through."""
    assert static_href(href) == expected


def test_static_href_keeps_pretty_urls() -> None:
    """With pretty URLs the host resolves routes, so hrefs stay unchanged."""
    assert static_href("/ch02-02-data-types", pretty_urls=True) == "/ch02-02-data-types"


def test_route_state_navigates() -> None:
    """The route collaborator reports the most recent path."""
    route = RouteState()
    assert route.pathname == "/"
    route.navigate("/ch00-01-foreword")
    assert route.pathname == "/ch00-01-foreword"


def test_rem_to_px() -> None:
    """Rem values scale with the root font size."""
    assert rem_to_px(2) == 32.0
    assert rem_to_px(0.25) == 4.0
    assert rem_to_px(2, root_font_size=10) == 20.0
