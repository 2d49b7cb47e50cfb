"""FolderTree - In-memory Folder and File Namespace Engine.

FolderTree keeps a hierarchical namespace of folders and files as an
immutable value and edits it with pure functions: every insert, delete or
rename returns a new tree and leaves the old one untouched.

Two ways in:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Functions:
    from foldertree import insert, delete, rename, sorted_children

Command object:
    from foldertree import TreeEngine
━━━━━━━━━━━━━━━━━━━━━━━━━━

Sibling names are unique under trimmed, case-insensitive comparison, and
children are displayed folders first, then alphabetically.
"""

__version__ = "0.1.0"

from .config import EngineConfig, IdStrategy, NamingConfig, SortConfig
from .errors import (
    TreeEditError,
    ValidationError,
    EmptyNameError,
    DuplicateNameError,
    NotFoundError,
    NotAFolderError,
    RootNodeError,
    DuplicateIdError,
    ConfigurationError,
)
from .core import (
    Node,
    check_invariants,
    IdGenerator,
    walk,
    find_node,
    find_path,
    find_parent,
    count_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    normalize_name,
    has_duplicate_name,
    sort_key,
    sorted_children,
    insert_node,
    delete_node,
    rename_node,
)
from .api import insert, insert_with_id, delete, rename
from .engine import TreeEngine

__all__ = [
    "__version__",
    # Config
    "EngineConfig",
    "IdStrategy",
    "NamingConfig",
    "SortConfig",
    # Errors
    "TreeEditError",
    "ValidationError",
    "EmptyNameError",
    "DuplicateNameError",
    "NotFoundError",
    "NotAFolderError",
    "RootNodeError",
    "DuplicateIdError",
    "ConfigurationError",
    # Core
    "Node",
    "check_invariants",
    "IdGenerator",
    "walk",
    "find_node",
    "find_path",
    "find_parent",
    "count_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    "normalize_name",
    "has_duplicate_name",
    "sort_key",
    "sorted_children",
    "insert_node",
    "delete_node",
    "rename_node",
    # API
    "insert",
    "insert_with_id",
    "delete",
    "rename",
    "TreeEngine",
]
