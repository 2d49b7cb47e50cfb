"""Core components of FolderTree: the node value, walks, and edit primitives."""

from .node import Node, check_invariants
from .ids import IdGenerator
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
    walk,
    walk_breadth_first,
    iter_ids,
    find_node,
    find_path,
    find_parent,
    count_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
)
from .naming import (
    normalize_name,
    has_duplicate_name,
    validate_name,
    validate_new_child_name,
    validate_rename,
)
from .ordering import sort_key, sorted_children
from .operations import insert_node, delete_node, rename_node

__all__ = [
    'Node',
    'check_invariants',
    'IdGenerator',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    'walk',
    'walk_breadth_first',
    'iter_ids',
    'find_node',
    'find_path',
    'find_parent',
    'count_nodes',
    'get_leaf_nodes',
    'get_tree_paths',
    'get_tree_stats',
    'normalize_name',
    'has_duplicate_name',
    'validate_name',
    'validate_new_child_name',
    'validate_rename',
    'sort_key',
    'sorted_children',
    'insert_node',
    'delete_node',
    'rename_node',
]
