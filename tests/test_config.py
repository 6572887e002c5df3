"""Unit tests for loading ``book.yaml`` into typed configuration.

Each test writes a small YAML document into ``tmp_path`` and checks how
:func:`cairo_book.config.load_book_config` resolves defaults, overrides, and
authoring errors such as duplicate navigation hrefs.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from cairo_book.config import (
    BookConfigError,
    GuideEntry,
    NavigationLink,
    load_book_config,
)
from cairo_book.content import GUIDES, NAVIGATION

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "book.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_defaults_fall_back_to_static_content(tmp_path: Path) -> None:
    """Omitting guides and navigation uses the book's built-in content."""
    config = load_book_config(_write(tmp_path, "site:\n  title: Book\n"))
    assert config.guides == GUIDES
    assert config.navigation == NAVIGATION
    assert config.theme.site_name == "Book"
    assert config.root_font_size == 16.0
    assert config.output_dir == Path("public")
    assert config.index_output == Path("public/index.html")


def test_repository_config_loads() -> None:
    """The checked-in configuration is valid."""
    config = load_book_config(REPO_ROOT / "config" / "book.yaml")
    assert config.theme.site_name == "The Cairo Programming Language"
    assert len(config.navigation) == len(NAVIGATION)


def test_overrides_replace_guides_and_navigation(tmp_path: Path) -> None:
    """Explicit blocks replace defaults, accepting ``name``/``link`` spellings."""
    path = _write(
        tmp_path,
        f"""
        site:
          output_dir: {tmp_path / "out"}
          root_font_size: 20
          pretty_urls: true
        guides:
          - name: Ownership
            description: Values are used once.
            link: /ownership
        navigation:
          - title: Basics
            links:
              - title: Intro
                href: /intro
              - title: Types
                href: /types
        """,
    )
    config = load_book_config(path)
    assert config.guides == (
        GuideEntry("Ownership", "Values are used once.", "/ownership"),
    )
    assert [group.title for group in config.navigation] == ["Basics"]
    assert config.navigation[0].links[1] == NavigationLink("Types", "/types")
    assert config.root_font_size == 20.0
    assert config.pretty_urls is True
    assert config.index_output == tmp_path / "out" / "index.html"
    assert config.find_link("/types") == (
        config.navigation[0],
        NavigationLink("Types", "/types"),
    )
    assert config.find_link("/missing") is None


def test_duplicate_hrefs_are_rejected(tmp_path: Path) -> None:
    """Two links sharing an href anywhere in the tree is an authoring error."""
    path = _write(
        tmp_path,
        """
        navigation:
          - title: One
            links:
              - {title: A, href: /a}
          - title: Two
            links:
              - {title: Also A, href: /a}
        """,
    )
    with pytest.raises(BookConfigError, match="Duplicate navigation href '/a'"):
        load_book_config(path)


def test_empty_group_is_rejected(tmp_path: Path) -> None:
    """Groups must list at least one link."""
    path = _write(
        tmp_path,
        """
        navigation:
          - title: Empty
            links: []
        """,
    )
    with pytest.raises(BookConfigError, match="at least one link"):
        load_book_config(path)


def test_link_without_href_is_rejected(tmp_path: Path) -> None:
    """Links need both a title and an href."""
    path = _write(
        tmp_path,
        """
        navigation:
          - title: Broken
            links:
              - title: Nowhere
        """,
    )
    with pytest.raises(BookConfigError, match="require 'title' and 'href'"):
        load_book_config(path)


def test_guide_without_title_is_rejected(tmp_path: Path) -> None:
    """Guides need a title (or name) and an href."""
    path = _write(
        tmp_path,
        """
        guides:
          - description: Missing title
            href: /x
        """,
    )
    with pytest.raises(BookConfigError, match="Guide entries require"):
        load_book_config(path)


def test_invalid_font_size_is_rejected(tmp_path: Path) -> None:
    """The root font size must be a positive number."""
    path = _write(tmp_path, "site:\n  root_font_size: -4\n")
    with pytest.raises(BookConfigError, match="root_font_size"):
        load_book_config(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config file surfaces as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_book_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    """The YAML root must be a mapping."""
    path = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(TypeError):
        load_book_config(path)
