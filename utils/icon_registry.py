"""Immutable icon collection used by the picker field and dialog.

An :class:`IconRegistry` is an ordered, read-only mapping from icon name to
:class:`IconDescriptor`. Insertion order is the display order. Registries are
either built from descriptors directly or from a ``{name: glyph}`` table whose
glyphs are resolved through qtawesome.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional
import json
import logging

import qtawesome as qta

from utils.material_icons import MATERIAL_ICONS

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class IconDescriptor:
    """Rendering identity of one icon.

    ``glyph`` is a qtawesome glyph id such as ``mdi6.home``; ``code_point``
    and ``font_family`` describe the same glyph inside its icon font.
    """
    name: str
    glyph: str
    code_point: int
    font_family: str


@dataclass(frozen=True)
class PickerValue:
    """Serialized value stored in a picker field once an icon is resolved."""
    icon_name: str
    code_point: int
    font_family: str

    @classmethod
    def from_descriptor(cls, descriptor: IconDescriptor) -> "PickerValue":
        return cls(descriptor.name, descriptor.code_point, descriptor.font_family)

    def to_json(self) -> str:
        """Return ``{"iconName": ..., "codePoint": ..., "fontFamily": ...}``."""
        return json.dumps(
            {
                "iconName": self.icon_name,
                "codePoint": self.code_point,
                "fontFamily": self.font_family,
            }
        )

    @classmethod
    def from_json(cls, text: Optional[str]) -> Optional["PickerValue"]:
        """Parse a serialized value.

        Plain text (anything that is not the JSON object written by
        :meth:`to_json`) yields ``None``.
        """
        if not text:
            return None
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        try:
            return cls(
                str(data["iconName"]),
                int(data["codePoint"]),
                str(data["fontFamily"]),
            )
        except (KeyError, TypeError, ValueError):
            return None


def describe_glyph(name: str, glyph: str) -> IconDescriptor:
    """Build a descriptor by looking ``glyph`` up in qtawesome's fonts.

    Raises ``KeyError`` or ``ValueError`` when the glyph is unknown. Needs a
    running ``QApplication`` since qtawesome loads its fonts on first use.
    """
    prefix, _, _ = glyph.partition(".")
    char = qta.charmap(glyph)
    family = qta.font(prefix, 16).family()
    return IconDescriptor(name, glyph, ord(char), family)


class IconRegistry(Mapping):
    """Ordered read-only mapping ``name -> IconDescriptor``."""

    def __init__(self, descriptors: Iterable[IconDescriptor] = ()):
        entries: Dict[str, IconDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in entries:
                raise ValueError(f"Duplicate icon name: {descriptor.name!r}")
            entries[descriptor.name] = descriptor
        self._entries = entries

    @classmethod
    def from_glyphs(cls, table: Mapping) -> "IconRegistry":
        """Resolve a ``{name: glyph}`` table through qtawesome.

        Glyphs missing from the installed icon fonts are skipped.
        """
        descriptors: List[IconDescriptor] = []
        for name, glyph in table.items():
            try:
                descriptors.append(describe_glyph(name, glyph))
            except (KeyError, ValueError) as e:
                logger.debug("Skipping icon %s (%s): %s", name, glyph, e)
        return cls(descriptors)

    def __getitem__(self, name: str) -> IconDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IconRegistry({len(self)} icons)"

    def descriptors(self) -> List[IconDescriptor]:
        """Return all descriptors in registry order."""
        return list(self._entries.values())

    def match(self, text: Optional[str]) -> Optional[IconDescriptor]:
        """Resolve free text to an entry.

        An exact name wins; otherwise the first name (registry order) that
        contains ``text``. Matching is case-sensitive. Empty text never
        matches.
        """
        if not text:
            return None
        exact = self._entries.get(text)
        if exact is not None:
            return exact
        for name, descriptor in self._entries.items():
            if text in name:
                return descriptor
        return None


@lru_cache(maxsize=1)
def material_icon_registry() -> IconRegistry:
    """Return the default Material icon registry, built once per process."""
    registry = IconRegistry.from_glyphs(MATERIAL_ICONS)
    logger.debug("Loaded %d of %d material icons", len(registry), len(MATERIAL_ICONS))
    return registry
