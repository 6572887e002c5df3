"""Process-wide store describing the sections of the page being viewed.

A scroll observer (client-side, outside this package) owns the writes: it
publishes the page's ``h2`` sections once per page and then keeps
``visible_sections`` up to date with the ids currently inside the viewport.
The navigation only ever reads an immutable :class:`SectionSnapshot`.

Examples
--------
>>> store = SectionStore()
>>> seen = []
>>> unsubscribe = store.subscribe(lambda snap: seen.append(snap.visible_sections))
>>> store.set_sections([Section(id="intro", title="Intro")])
>>> store.set_visible_sections(["_top", "intro"])
>>> store.set_visible_sections(["_top", "intro"])
>>> seen
[(), ('_top', 'intro')]
>>> unsubscribe()
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging

from ._constants import TOP_SECTION_ID

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A page sub-heading that the navigation can link to.

    Attributes
    ----------
    id : str
        Anchor id of the heading within its page.
    title : str
        Heading text shown in the navigation sub-list.
    tag : str or None
        Optional short label rendered as a badge next to the title.
    """

    id: str
    title: str
    tag: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SectionSnapshot:
    """Immutable view of the store at a single point in time."""

    sections: tuple[Section, ...] = ()
    visible_sections: tuple[str, ...] = ()


Listener = cabc.Callable[[SectionSnapshot], None]


class SectionStore:
    """Observable holder for the current page's sections and visible ids."""

    def __init__(
        self,
        sections: cabc.Iterable[Section] = (),
        visible_sections: cabc.Iterable[str] = (),
    ) -> None:
        self._snapshot = SectionSnapshot(tuple(sections), tuple(visible_sections))
        self._listeners: list[Listener] = []

    @property
    def sections(self) -> tuple[Section, ...]:
        """Return the sections of the current page in document order."""
        return self._snapshot.sections

    @property
    def visible_sections(self) -> tuple[str, ...]:
        """Return the ids of the sections currently in view, top to bottom."""
        return self._snapshot.visible_sections

    def snapshot(self) -> SectionSnapshot:
        """Return the current immutable snapshot."""
        return self._snapshot

    def subscribe(self, listener: Listener) -> cabc.Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_sections(self, sections: cabc.Iterable[Section]) -> None:
        """Replace the page sections and notify listeners."""
        self._snapshot = dc.replace(self._snapshot, sections=tuple(sections))
        logger.debug("section store holds %d sections", len(self._snapshot.sections))
        self._notify()

    def set_visible_sections(self, visible_sections: cabc.Iterable[str]) -> None:
        """Replace the visible ids, notifying only when the sequence changes."""
        visible = tuple(visible_sections)
        if visible == self._snapshot.visible_sections:
            return
        self._snapshot = dc.replace(self._snapshot, visible_sections=visible)
        self._notify()

    def reset(self) -> None:
        """Clear both sections and visible ids, as when a new page mounts."""
        self._snapshot = SectionSnapshot()
        self._notify()

    def _notify(self) -> None:
        snapshot = self._snapshot
        for listener in list(self._listeners):
            listener(snapshot)


_DEFAULT_STORE = SectionStore()


def default_store() -> SectionStore:
    """Return the shared process-wide store."""
    return _DEFAULT_STORE


__all__ = [
    "TOP_SECTION_ID",
    "Listener",
    "Section",
    "SectionSnapshot",
    "SectionStore",
    "default_store",
]
