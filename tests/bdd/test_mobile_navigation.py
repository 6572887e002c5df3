"""Behaviour tests for the navigation inside the mobile overlay.

Backed by ``features/mobile_navigation.feature``. The overlay copy of the
navigation freezes the route and sections it was mounted with, while the
desktop sidebar follows every route change. Re-opening the overlay takes a
fresh snapshot.
"""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from cairo_book.components import Navigation
from cairo_book.content import NAVIGATION
from cairo_book.routing import RouteState
from cairo_book.sections import Section, SectionStore

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "mobile_navigation.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the book navigation")
def given_book_navigation(scenario_state: dict[str, object]) -> None:
    """Use the full static navigation tree with a private section store."""
    scenario_state["groups"] = NAVIGATION
    scenario_state["store"] = SectionStore()
    scenario_state["route"] = RouteState()


@given(parsers.parse('the reader is on "{route}" with sections "{ids}"'))
def given_reader_on_page(
    route: str, ids: str, scenario_state: dict[str, object]
) -> None:
    """Navigate to ``route`` and publish its sections."""
    state: RouteState = scenario_state["route"]  # type: ignore[assignment]
    state.navigate(route)
    store: SectionStore = scenario_state["store"]  # type: ignore[assignment]
    store.set_sections(
        Section(id=section_id.strip(), title=section_id.strip())
        for section_id in ids.split(",")
    )


def _open(scenario_state: dict[str, object], *, mobile: bool) -> None:
    scenario_state["navigation"] = Navigation(
        scenario_state["groups"],  # type: ignore[arg-type]
        route=scenario_state["route"],  # type: ignore[arg-type]
        store=scenario_state["store"],  # type: ignore[arg-type]
        inside_mobile_navigation=mobile,
    )


@given("the navigation is opened inside the mobile overlay")
def given_mobile_navigation(scenario_state: dict[str, object]) -> None:
    """Mount the navigation inside the overlay."""
    _open(scenario_state, mobile=True)


@given("the navigation is opened in the sidebar")
def given_sidebar_navigation(scenario_state: dict[str, object]) -> None:
    """Mount the navigation in the persistent sidebar."""
    _open(scenario_state, mobile=False)


@when(parsers.parse('the reader navigates to "{route}"'))
def when_navigate(route: str, scenario_state: dict[str, object]) -> None:
    """Change the route and clear the previous page's sections."""
    state: RouteState = scenario_state["route"]  # type: ignore[assignment]
    state.navigate(route)
    store: SectionStore = scenario_state["store"]  # type: ignore[assignment]
    store.reset()


@when("the overlay is reopened")
def when_reopened(scenario_state: dict[str, object]) -> None:
    """Remount the overlay navigation."""
    navigation: Navigation = scenario_state["navigation"]  # type: ignore[assignment]
    navigation.remount()


@when("the overlay is rendered")
def when_rendered(scenario_state: dict[str, object]) -> None:
    """Render the overlay navigation to HTML."""
    navigation: Navigation = scenario_state["navigation"]  # type: ignore[assignment]
    scenario_state["soup"] = BeautifulSoup(navigation.render(), "html.parser")


@then(parsers.parse('the active link is "{href}"'))
def then_active_link(href: str, scenario_state: dict[str, object]) -> None:
    """Exactly one link across all groups is active, and it is ``href``."""
    navigation: Navigation = scenario_state["navigation"]  # type: ignore[assignment]
    active = [
        link.href
        for group in navigation.groups()
        for link in group.links
        if link.active
    ]
    assert active == [href]


@then("the nav element is marked as mobile")
def then_marked_mobile(scenario_state: dict[str, object]) -> None:
    """The rendered ``<nav>`` flags itself for the overlay."""
    soup: BeautifulSoup = scenario_state["soup"]  # type: ignore[assignment]
    nav = soup.select_one("nav")
    assert nav is not None
    assert nav.get("data-mobile") == "true"


@then("the highlight has no initial animation state")
def then_no_initial(scenario_state: dict[str, object]) -> None:
    """The overlay's highlight appears without fading in."""
    soup: BeautifulSoup = scenario_state["soup"]  # type: ignore[assignment]
    highlight = soup.select_one(".nav-highlight")
    assert highlight is not None
    motion = msgspec_json.decode(highlight.get("data-motion"))
    assert "initial" not in motion
    assert motion["animate"] == {"opacity": 1, "transition": {"delay": 0.2}}
