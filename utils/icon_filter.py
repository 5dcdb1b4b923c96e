"""Query filter applied to an icon registry by the picker dialog."""

from __future__ import annotations

from typing import List, Mapping

from utils.constants import MIN_QUERY_LENGTH
from utils.icon_registry import IconDescriptor


def filter_icons(
    registry: Mapping[str, IconDescriptor],
    query: str,
    case_sensitive: bool = True,
) -> List[IconDescriptor]:
    """Return the registry entries whose name contains ``query``.

    Queries of ``MIN_QUERY_LENGTH`` characters or fewer are treated as no
    filter and return the whole registry. Registry order is preserved.
    """
    query = query or ""
    if len(query) <= MIN_QUERY_LENGTH:
        return list(registry.values())

    if case_sensitive:
        return [d for name, d in registry.items() if query in name]

    needle = query.lower()
    return [d for name, d in registry.items() if needle in name.lower()]
