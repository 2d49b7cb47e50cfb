"""Node value type for FolderTree.

A Node is an immutable value. Edits never change a node in place; they build
a new root that shares every untouched subtree with the old one. Nodes hold
no parent links; a node's parent is looked up from the root
(see ``traverser.find_parent``).
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from ..config import NamingConfig


@dataclass(frozen=True)
class Node:
    """A folder or a file in the namespace tree.

    Attributes:
        id: Opaque identifier, unique across the whole tree
        name: Display name
        is_folder: True for folders (containers), False for files (leaves)
        items: Children in stored order. Always empty for files.
    """

    id: Hashable
    name: str
    is_folder: bool = False
    items: Tuple['Node', ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, 'items', tuple(self.items))
        if not self.is_folder and self.items:
            raise ValueError(f"File {self.id!r} cannot have children")

    @classmethod
    def folder(cls, id: Hashable, name: str, items: Iterable['Node'] = ()) -> 'Node':
        """Create a folder node."""
        return cls(id, name, True, tuple(items))

    @classmethod
    def file(cls, id: Hashable, name: str) -> 'Node':
        """Create a file node."""
        return cls(id, name, False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Node':
        """Build a tree from a nested literal.

        Accepts the explorer data shape::

            {"id": 1, "name": "root", "isFolder": True, "items": [...]}

        ``is_folder`` is accepted as an alternative key. Items listed on a
        file must be empty.

        Args:
            data: Mapping describing the root node

        Returns:
            Root Node of the converted tree
        """
        if 'isFolder' in data:
            is_folder = bool(data['isFolder'])
        else:
            is_folder = bool(data.get('is_folder', False))
        children = data.get('items') or ()
        return cls(
            data['id'],
            data['name'],
            is_folder,
            tuple(cls.from_dict(child) for child in children),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the nested literal shape used by ``from_dict``."""
        return {
            'id': self.id,
            'name': self.name,
            'isFolder': self.is_folder,
            'items': [child.to_dict() for child in self.items],
        }

    def replace(self, **changes) -> 'Node':
        """Return a copy of this node with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.items

    def child_names(self) -> List[str]:
        """Names of direct children in stored order."""
        return [child.name for child in self.items]

    def find_child(self, name: str, naming: Optional[NamingConfig] = None) -> Optional['Node']:
        """Find a direct child by name using sibling comparison rules.

        Args:
            name: Name to look for
            naming: Comparison rules (defaults to trimmed, case-insensitive)

        Returns:
            Matching child or None
        """
        naming = naming or NamingConfig()
        wanted = naming.normalize(name)
        for child in self.items:
            if naming.normalize(child.name) == wanted:
                return child
        return None

    def __repr__(self) -> str:
        """Short representation that doesn't dump the subtree."""
        kind = 'folder' if self.is_folder else 'file'
        if self.is_folder:
            return f"Node(id={self.id!r}, name={self.name!r}, {kind}, {len(self.items)} items)"
        return f"Node(id={self.id!r}, name={self.name!r}, {kind})"


def check_invariants(tree: Node, naming: Optional[NamingConfig] = None) -> List[str]:
    """Check a tree for structural problems.

    Verifies that ids are unique across the tree, that no two siblings share
    a name under the comparison rules, that names are non-empty and that
    files have no children.

    Args:
        tree: Root of the tree to check
        naming: Sibling comparison rules (defaults to trimmed, case-insensitive)

    Returns:
        List of problems (empty if the tree is valid)
    """
    naming = naming or NamingConfig()
    errors = []
    seen_ids = set()
    stack = [tree]

    while stack:
        node = stack.pop()

        if node.id in seen_ids:
            errors.append(f"Duplicate id {node.id!r}")
        seen_ids.add(node.id)

        if not isinstance(node.name, str) or not node.name.strip():
            errors.append(f"Node {node.id!r} has an empty name")

        if not node.is_folder and node.items:
            errors.append(f"File {node.id!r} has children")

        seen_names = {}
        for child in node.items:
            key = naming.normalize(child.name) if isinstance(child.name, str) else child.name
            if key in seen_names:
                errors.append(
                    f"Siblings {seen_names[key]!r} and {child.id!r} under "
                    f"{node.id!r} share the name {child.name!r}"
                )
            else:
                seen_names[key] = child.id

        stack.extend(reversed(node.items))

    return errors
