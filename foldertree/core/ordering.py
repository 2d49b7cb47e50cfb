"""Display ordering for FolderTree.

Stored children are kept in insertion order (newest first). What a user
sees is a derived view: folders before files, each group sorted by name
ignoring case and accents. The view is computed on demand and never written
back into the tree.
"""

import locale
import unicodedata
from typing import List, Optional, Tuple

from ..config import SortConfig
from .node import Node


def _collation_key(name: str, config: SortConfig) -> str:
    key = name.casefold()
    if config.ignore_accents:
        key = ''.join(
            ch for ch in unicodedata.normalize('NFKD', key)
            if not unicodedata.combining(ch)
        )
    if config.use_locale:
        # strxfrm rejects embedded NUL
        key = locale.strxfrm(key.replace('\0', ''))
    return key


def sort_key(node: Node, config: Optional[SortConfig] = None) -> Tuple[int, str, str]:
    """Key placing folders first, then names in collation order.

    The raw name is the last element so names that collate equally
    ("Readme" and "readme") still come out in a fixed order.
    """
    config = config or SortConfig()
    group = 0 if (node.is_folder or not config.folders_first) else 1
    return (group, _collation_key(node.name, config), node.name)


def sorted_children(node: Node, config: Optional[SortConfig] = None) -> List[Node]:
    """Return ``node``'s direct children in display order.

    Args:
        node: Folder whose children to order (files yield an empty list)
        config: Ordering options

    Returns:
        New list of children; ``node.items`` is left untouched
    """
    if not node.is_folder:
        return []
    config = config or SortConfig()
    return sorted(node.items, key=lambda child: sort_key(child, config))
