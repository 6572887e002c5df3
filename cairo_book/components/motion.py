"""Declarative animation descriptions handed to the client-side animator.

Components never step an animation themselves. They attach a :class:`Motion`
to the element it applies to, serialised into a ``data-motion`` attribute, and
the animation executor on the page interprets it (initial, animate, and exit
targets plus layout/presence hints).
"""

from __future__ import annotations

import dataclasses as dc

import msgspec.json as msgspec_json


@dc.dataclass(frozen=True, slots=True)
class Transition:
    """Timing applied when moving to a target state."""

    delay: float | None = None
    duration: float | None = None


@dc.dataclass(frozen=True, slots=True)
class MotionTarget:
    """Animated property values for one state."""

    opacity: float
    transition: Transition | None = None


@dc.dataclass(frozen=True, slots=True)
class Motion:
    """Full enter/exit description for an animated element.

    Attributes
    ----------
    initial : MotionTarget or None
        Starting state on mount; ``None`` skips the entry animation.
    animate : MotionTarget
        Target state once mounted.
    exit : MotionTarget or None
        State animated to before the element is removed.
    layout : bool
        Whether position and size changes are animated as layout transitions.
    mode : str
        Presence mode used while an exiting element is still on screen.
    """

    initial: MotionTarget | None
    animate: MotionTarget
    exit: MotionTarget | None = None
    layout: bool = False
    mode: str = "sync"

    def without_initial(self) -> Motion:
        """Return a copy that skips the entry animation."""
        return dc.replace(self, initial=None)

    def to_json(self) -> str:
        """Serialise to compact JSON, omitting unset timing fields."""
        return msgspec_json.encode(_prune(dc.asdict(self))).decode("utf-8")


def _prune(value: object) -> object:
    """Drop ``None`` entries from nested mappings."""
    if isinstance(value, dict):
        return {key: _prune(item) for key, item in value.items() if item is not None}
    return value


FADE_IN = Motion(
    initial=MotionTarget(opacity=0),
    animate=MotionTarget(opacity=1, transition=Transition(delay=0.2)),
    exit=MotionTarget(opacity=0),
    layout=True,
)

SUBLIST_FADE = Motion(
    initial=MotionTarget(opacity=0),
    animate=MotionTarget(opacity=1, transition=Transition(delay=0.1)),
    exit=MotionTarget(opacity=0, transition=Transition(duration=0.15)),
    mode="popLayout",
)


__all__ = ["FADE_IN", "SUBLIST_FADE", "Motion", "MotionTarget", "Transition"]
