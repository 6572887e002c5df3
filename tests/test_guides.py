"""Unit tests for the guide cards on the landing page."""

from __future__ import annotations

from bs4 import BeautifulSoup

from cairo_book.components import GuideList
from cairo_book.config import GuideEntry
from cairo_book.content import GUIDES
from cairo_book.routing import static_href


def test_cards_follow_input_order() -> None:
    """Each guide becomes one card with matching fields, in order."""
    cards = GuideList().cards()
    assert len(cards) == 4
    assert [(card.title, card.description, card.href) for card in cards] == [
        (guide.title, guide.description, guide.href) for guide in GUIDES
    ]
    assert {card.cta_label for card in cards} == {"Read more"}


def test_render_emits_one_card_per_guide() -> None:
    """The rendered grid carries heading, body, and link for every guide."""
    soup = BeautifulSoup(GuideList().render(), "html.parser")
    heading = soup.select_one("h2#guides")
    assert heading is not None
    assert heading.get_text(strip=True) == "Guides"

    cards = soup.select(".guide-card")
    assert len(cards) == 4
    for card, guide in zip(cards, GUIDES, strict=True):
        assert card.select_one("h3").get_text(strip=True) == guide.title
        assert card.select_one("p").get_text(strip=True) == guide.description
        link = card.select_one("a.guide-card__cta")
        assert link.get("href") == guide.href
        assert "Read more" in link.get_text()


def test_render_escapes_text_and_rewrites_links() -> None:
    """Guide text is escaped and hrefs go through the formatter."""
    guides = [GuideEntry("Traits <T>", "Use & abuse", "/ch07-02-traits-in-cairo")]
    html = GuideList(guides, heading="Start here", href_formatter=static_href).render(
        class_="landing"
    )
    assert "Traits &lt;T&gt;" in html
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one(".guides").get("class") == [
        "guides",
        "my-16",
        "xl:max-w-none",
        "landing",
    ]
    assert soup.select_one("h2").get_text(strip=True) == "Start here"
    assert soup.select_one("a").get("href") == "ch07-02-traits-in-cairo.html"


def test_empty_guide_list_renders_heading_only() -> None:
    """No guides means an empty grid rather than an error."""
    soup = BeautifulSoup(GuideList([]).render(), "html.parser")
    assert soup.select(".guide-card") == []
    assert soup.select_one("h2#guides") is not None
