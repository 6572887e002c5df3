"""Convert relative CSS length units into pixel counts."""

from __future__ import annotations

from ._constants import DEFAULT_ROOT_FONT_SIZE


def rem_to_px(rem: float, root_font_size: float = DEFAULT_ROOT_FONT_SIZE) -> float:
    """Return the pixel length of ``rem`` for the given root font size.

    Examples
    --------
    >>> rem_to_px(2)
    32.0
    >>> rem_to_px(0.25, root_font_size=20)
    5.0
    """
    return float(rem) * float(root_font_size)


__all__ = ["rem_to_px"]
