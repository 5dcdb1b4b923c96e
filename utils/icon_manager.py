from typing import Dict, Optional, Tuple, Union
import logging

from PyQt6.QtGui import QIcon, QPixmap
import qtawesome as qta

from utils.constants import ICON_ACTIVE_COLOR, ICON_COLOR
from utils.icon_registry import IconDescriptor

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


_ICON_CACHE: Dict[Tuple[str, Optional[str], Optional[str]], QIcon] = {}
"""Cache for generated :class:`QIcon` objects.

The cache is unbounded and will grow until cleared via
``IconManager.clear_cache``.
"""

_PIXMAP_CACHE: Dict[Tuple[str, int, Optional[str]], QPixmap] = {}
"""Cache for generated :class:`QPixmap` objects.

This cache has no eviction policy.
"""


class IconManager:
    """Centralized manager for creating icons from qtawesome glyph names.

    Icons are cached by ``(glyph, color, active_color)`` and pixmaps by
    ``(glyph, size, color)``. Call :meth:`clear_cache` to release memory.
    """

    @staticmethod
    def create_icon(
        glyph: str,
        color: Optional[str] = None,
        active_color: Optional[str] = None,
    ) -> QIcon:
        """Create a ``QIcon`` from a qtawesome glyph name.

        Args:
            glyph (str): The qtawesome glyph name (e.g., 'mdi6.home').
            color (str, optional): Icon color. Defaults to ``ICON_COLOR``.
            active_color (str, optional): Color when active or selected.
                Defaults to ``ICON_ACTIVE_COLOR``.

        Returns:
            QIcon: The icon, or a null ``QIcon`` if the glyph is unknown.
        """
        key = (glyph, color, active_color)
        if key in _ICON_CACHE:
            return _ICON_CACHE[key]

        try:
            base_color = color if color is not None else ICON_COLOR
            selected_color = active_color if active_color is not None else ICON_ACTIVE_COLOR
            result = QIcon(
                qta.icon(
                    glyph,
                    color=base_color,
                    color_active=selected_color,
                    color_selected=selected_color,
                )
            )
        except Exception as e:
            logger.warning("Error creating icon %s: %s", glyph, e)
            result = QIcon()

        _ICON_CACHE[key] = result
        return result

    @staticmethod
    def create_pixmap(glyph: str, size: int, color: Optional[str] = None) -> QPixmap:
        """Create a square ``QPixmap`` of ``size`` pixels from a glyph name."""
        key = (glyph, size, color)
        if key in _PIXMAP_CACHE:
            return _PIXMAP_CACHE[key]

        try:
            base_color = color if color is not None else ICON_COLOR
            result = qta.icon(glyph, color=base_color).pixmap(size, size)
        except Exception as e:
            logger.warning("Error creating pixmap %s: %s", glyph, e)
            result = QPixmap()

        _PIXMAP_CACHE[key] = result
        return result

    @staticmethod
    def icon_for(descriptor: IconDescriptor, color: Optional[str] = None) -> QIcon:
        """Return the cached icon rendering ``descriptor``."""
        return IconManager.create_icon(descriptor.glyph, color=color)

    @staticmethod
    def to_icon(icon: Union[str, QIcon, QPixmap, None]) -> QIcon:
        """Convert a glyph name, ``QPixmap`` or ``QIcon`` to a ``QIcon``."""
        if icon is None:
            return QIcon()
        if isinstance(icon, QIcon):
            return icon
        if isinstance(icon, QPixmap):
            return QIcon(icon)
        return IconManager.create_icon(str(icon))

    @staticmethod
    def clear_cache():
        """Clear cached icons and pixmaps."""
        _ICON_CACHE.clear()
        _PIXMAP_CACHE.clear()
