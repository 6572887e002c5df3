"""Common literal values used across cairo_book.

These constants keep the navigation rhythm and default paths centralized so
components, generators, and tests can import the same values without drifting.
Intended for internal use within the cairo_book package.

Examples
--------
>>> from cairo_book import _constants
>>> _constants.ITEM_HEIGHT_REM * _constants.DEFAULT_ROOT_FONT_SIZE
32.0
>>> _constants.TOP_SECTION_ID
'_top'
"""

DEFAULT_ROOT_FONT_SIZE = 16.0
ITEM_HEIGHT_REM = 2.0
MARKER_OFFSET_REM = 0.25
TOP_SECTION_ID = "_top"
INDEX_ROUTE = "/"
