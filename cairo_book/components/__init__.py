"""Presentational components rendering the book's guides and navigation."""

from .guides import GuideList
from .models import (
    ActivePageMarker,
    GuideCard,
    NavigationGroupView,
    NavLinkView,
    VisibleSectionHighlight,
)
from .motion import Motion
from .navigation import Navigation, NavigationSnapshot

__all__ = [
    "ActivePageMarker",
    "GuideCard",
    "GuideList",
    "Motion",
    "NavLinkView",
    "Navigation",
    "NavigationGroupView",
    "NavigationSnapshot",
    "VisibleSectionHighlight",
]
