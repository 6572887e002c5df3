"""Load book configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .. import content
from .._constants import DEFAULT_ROOT_FONT_SIZE
from .helpers import (
    _build_guides,
    _build_navigation,
    _build_theme_config,
    _ensure_unique_hrefs,
)
from .models import BookConfig, BookConfigError

logger = logging.getLogger(__name__)


def load_book_config(path: Path) -> BookConfig:
    """Load the YAML configuration describing the book's site settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/book.yaml``).

    Returns
    -------
    BookConfig
        Parsed configuration. The ``guides`` and ``navigation`` blocks fall
        back to :mod:`cairo_book.content` when the file omits them.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    BookConfigError
        If the site settings, guides, or navigation are invalid (for example,
        two navigation links share an href).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
    >>> config.navigation[0].title  # doctest: +SKIP
    'The Cairo Programming Language'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = raw.get("site", {}) or {}
    if not isinstance(site, dict):
        msg = "The 'site' block must be a mapping."
        raise BookConfigError(msg)

    guides_raw = raw.get("guides")
    guides = content.GUIDES if guides_raw is None else _build_guides(guides_raw)
    navigation_raw = raw.get("navigation")
    if navigation_raw is None:
        navigation = content.NAVIGATION
        _ensure_unique_hrefs(navigation)
    else:
        navigation = _build_navigation(navigation_raw)

    output_dir = Path(site.get("output_dir", "public"))
    index_output = Path(site.get("index_output", output_dir / "index.html"))
    config = BookConfig(
        guides=guides,
        navigation=navigation,
        content_dir=Path(site.get("content_dir", "src/pages")),
        output_dir=output_dir,
        index_output=index_output,
        pygments_style=site.get("pygments_style", "monokai"),
        root_font_size=_parse_font_size(site.get("root_font_size")),
        pretty_urls=bool(site.get("pretty_urls", False)),
        theme=_build_theme_config(site),
    )
    logger.debug(
        "loaded %s: %d guides, %d navigation groups",
        path,
        len(config.guides),
        len(config.navigation),
    )
    return config


def _parse_font_size(value: object) -> float:
    """Return a positive root font size, defaulting when ``value`` is unset."""
    if value is None:
        return DEFAULT_ROOT_FONT_SIZE
    try:
        size = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"'root_font_size' must be a number, got {value!r}."
        raise BookConfigError(msg) from exc
    if size <= 0:
        msg = f"'root_font_size' must be positive, got {value!r}."
        raise BookConfigError(msg)
    return size


__all__ = ["load_book_config"]
