"""Tree walks and lookups for FolderTree.

Traversers walk a Node tree in different orders. Lookups by id build on the
pre-order walk. All walks use an explicit stack or queue so arbitrarily deep
trees never hit the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Dict, Hashable, Iterator, List, Optional, Tuple

from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.items:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in stored order.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Reversed so the first child is popped first
                for child in reversed(node.items):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for aggregating subtree values.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        # Third slot marks whether children were already pushed
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded or not node.items or not self._should_explore(depth, max_depth):
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(node.items):
                stack.append((child, depth + 1, False))


_TRAVERSERS = {
    'bfs': BreadthFirstTraverser,
    'pre': DepthFirstPreOrderTraverser,
    'dfs_pre': DepthFirstPreOrderTraverser,
    'post': DepthFirstPostOrderTraverser,
    'dfs_post': DepthFirstPostOrderTraverser,
}


def create_traverser(order: str) -> TreeTraverser:
    """Create a traverser by name.

    Args:
        order: One of 'pre', 'post', 'bfs' (or 'dfs_pre', 'dfs_post')

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order is not recognized
    """
    try:
        return _TRAVERSERS[order]()
    except KeyError:
        raise ValueError(f"Unknown traversal order: {order!r}") from None


def walk(tree: Node,
         order: str = 'pre',
         max_depth: Optional[int] = None,
         min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
    """Walk the tree yielding (node, depth) pairs.

    Example:
        >>> for node, depth in walk(root):
        ...     print("  " * depth + node.name)
    """
    yield from create_traverser(order).traverse(root=tree, max_depth=max_depth, min_depth=min_depth)


def walk_breadth_first(tree: Node, max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
    """Walk the tree level by level."""
    yield from BreadthFirstTraverser().traverse(tree, max_depth=max_depth)


def iter_ids(tree: Node) -> Iterator[Hashable]:
    """Yield every id in the tree, pre-order."""
    for node, _ in walk(tree):
        yield node.id


def find_path(tree: Node, node_id: Hashable) -> Optional[Tuple[Node, ...]]:
    """Find the chain of nodes from the root down to ``node_id``.

    Args:
        tree: Root of the tree
        node_id: Id of the node to locate

    Returns:
        Tuple starting with ``tree`` and ending with the target,
        or None if no node carries ``node_id``
    """
    # Each stack entry carries the path of its parent
    stack: List[Tuple[Node, Tuple[Node, ...]]] = [(tree, ())]

    while stack:
        node, ancestors = stack.pop()
        path = ancestors + (node,)
        if node.id == node_id:
            return path
        for child in reversed(node.items):
            stack.append((child, path))

    return None


def find_node(tree: Node, node_id: Hashable) -> Optional[Node]:
    """Find the node carrying ``node_id`` anywhere in the tree."""
    for node, _ in walk(tree):
        if node.id == node_id:
            return node
    return None


def find_parent(tree: Node, node_id: Hashable) -> Optional[Node]:
    """Find the parent of ``node_id``.

    Returns:
        The parent node, or None when ``node_id`` is the root or absent
    """
    path = find_path(tree, node_id)
    if path is None or len(path) < 2:
        return None
    return path[-2]


def count_nodes(tree: Node, max_depth: Optional[int] = None) -> int:
    """Count nodes in the tree, root included."""
    return sum(1 for _ in walk(tree, max_depth=max_depth))


def get_leaf_nodes(tree: Node) -> List[Node]:
    """Return every node without children (files and empty folders)."""
    return [node for node, _ in walk(tree) if node.is_leaf()]


def get_tree_paths(tree: Node, separator: str = "/") -> Iterator[Tuple[str, Node]]:
    """Yield (display_path, node) for every node, pre-order.

    The root's path is its own name; descendants are joined with
    ``separator``.
    """
    stack: List[Tuple[Node, str]] = [(tree, tree.name)]

    while stack:
        node, path = stack.pop()
        yield path, node
        for child in reversed(node.items):
            stack.append((child, f"{path}{separator}{child.name}"))


def get_tree_stats(tree: Node) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, folders, files, empty_folders and max_depth
    """
    stats = {
        'total_nodes': 0,
        'folders': 0,
        'files': 0,
        'empty_folders': 0,
        'max_depth': 0,
    }

    for node, depth in walk(tree):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        if node.is_folder:
            stats['folders'] += 1
            if not node.items:
                stats['empty_folders'] += 1
        else:
            stats['files'] += 1

    return stats
