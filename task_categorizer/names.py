"""Category name derivation for delimited task names."""
from __future__ import annotations

from typing import List, Optional

DEFAULT_SEPARATOR = ":"


def parent_category(name: str, separator: str = DEFAULT_SEPARATOR) -> Optional[str]:
    """Return the category directly containing ``name``, e.g. ``a:b`` for ``a:b:c``."""
    index = name.rfind(separator)
    if index == -1:
        return None
    return name[:index]


def all_ancestor_categories(name: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """Return every category ``name`` belongs to, outermost first.

    ``a:b:c`` yields ``["a", "a:b"]``.
    """
    categories: List[str] = []
    index = name.find(separator)
    while index != -1:
        categories.append(name[:index])
        index = name.find(separator, index + len(separator))
    return categories
