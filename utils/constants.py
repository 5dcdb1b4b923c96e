"""
Central constants and enums used across the icon picker.

- Defaults for the picker dialog (title, labels, grid geometry).
- `ControllerOwnership` enum describing who owns a field's text controller.
"""

from enum import Enum

# --- Dialog defaults ---
DEFAULT_DIALOG_TITLE = 'Select an icon'
DEFAULT_CANCEL_TEXT = 'CANCEL'
DEFAULT_SEARCH_HINT = 'Search icon'
NO_RESULTS_TEXT = 'No icons found'

# Queries of this length or shorter do not filter the collection.
MIN_QUERY_LENGTH = 2

# --- Grid geometry ---
GRID_COLUMNS = 8
GRID_SPACING = 10
ICON_BUTTON_SIZE = 40
ICON_SIZE = 24
LEADING_ICON_SIZE = 20
EMPTY_ICON_SIZE = 50

# --- Icon colors ---
ICON_COLOR = '#5F6368'
ICON_ACTIVE_COLOR = '#1A73E8'
ERROR_COLOR = '#D32F2F'

# --- Glyphs used by the picker chrome ---
GLYPH_SEARCH = 'mdi6.magnify'
GLYPH_DROP_DOWN = 'mdi6.menu-down'
GLYPH_EMPTY = 'mdi6.apps'


class ControllerOwnership(str, Enum):
    """Who is responsible for disposing a field's text controller.

    Subclasses ``str`` so values behave like strings in logs and reprs.
    """
    OWNED = 'owned'
    BORROWED = 'borrowed'


class DialogState(str, Enum):
    """Lifecycle of an icon picker dialog: loading, ready, closed."""
    LOADING = 'loading'
    READY = 'ready'
    CLOSED = 'closed'
