"""High-level API for FolderTree.

This module provides simple, functional interfaces for editing a tree. Each
function validates its input, then delegates to the edit primitives in
``core.operations``. A rejected edit raises before any node is built, so the
caller's tree is always left as it was.

Example:
    >>> tree = Node.folder(1, "root")
    >>> tree = insert(tree, 1, "docs", is_folder=True)
    >>> tree = insert(tree, 1, "readme.txt", is_folder=False)
    >>> [child.name for child in sorted_children(tree)]
    ['docs', 'readme.txt']
"""

import logging
from typing import Hashable, Optional, Tuple

from .config import EngineConfig
from .core.ids import IdGenerator
from .core.node import Node
from .core.naming import has_duplicate_name, validate_new_child_name, validate_rename
from .core.operations import delete_node, insert_node, rename_node
from .core.ordering import sorted_children
from .core.traverser import (
    count_nodes,
    find_node,
    find_parent,
    find_path,
    get_tree_stats,
)
from .errors import ConfigurationError, NotAFolderError, NotFoundError

logger = logging.getLogger(__name__)


def checked_config(config: Optional[EngineConfig] = None) -> EngineConfig:
    """Return ``config`` (or the defaults) after validating it.

    Raises:
        ConfigurationError: If the configuration is inconsistent
    """
    config = config or EngineConfig()
    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )
    return config

# One generator per strategy, shared across calls
_shared_generators = {}


def _shared_generator(config: EngineConfig) -> IdGenerator:
    generator = _shared_generators.get(config.id_strategy)
    if generator is None:
        generator = _shared_generators[config.id_strategy] = IdGenerator(config.id_strategy)
    return generator


def _resolve_folder(tree: Node, folder_id: Hashable) -> Node:
    folder = find_node(tree, folder_id)
    if folder is None:
        logger.info("Insert rejected: no node %r", folder_id)
        raise NotFoundError(folder_id)
    if not folder.is_folder:
        logger.info("Insert rejected: %r is a file", folder_id)
        raise NotAFolderError(folder_id)
    return folder


def insert_with_id(tree: Node,
                   parent_id: Hashable,
                   name: str,
                   is_folder: bool,
                   config: Optional[EngineConfig] = None,
                   id_generator: Optional[IdGenerator] = None) -> Tuple[Node, Hashable]:
    """Create a node inside a folder and report its id.

    Args:
        tree: Root of the tree
        parent_id: Id of the folder receiving the node
        name: Name as typed; stored trimmed
        is_folder: Whether to create a folder or a file
        config: Engine configuration (defaults apply when omitted)
        id_generator: Source of the new id

    Returns:
        Tuple of (new_tree, new_node_id)

    Raises:
        ConfigurationError: If ``config`` is inconsistent
        NotFoundError: If ``parent_id`` is absent or names a file
        ValidationError: If the name is empty or taken in that folder
    """
    config = checked_config(config)
    folder = _resolve_folder(tree, parent_id)
    stored = validate_new_child_name(folder, name, config.naming)

    if id_generator is None:
        id_generator = _shared_generator(config)
        id_generator.seed_from(tree)
    node_id = id_generator.fresh_id(tree)

    return insert_node(tree, parent_id, stored, is_folder, node_id=node_id), node_id


def insert(tree: Node,
           parent_id: Hashable,
           name: str,
           is_folder: bool,
           config: Optional[EngineConfig] = None,
           id_generator: Optional[IdGenerator] = None) -> Node:
    """Create a node inside a folder.

    Same as ``insert_with_id`` but returns only the new tree. The new node
    is the first entry of the folder's ``items``.
    """
    new_tree, _ = insert_with_id(tree, parent_id, name, is_folder, config, id_generator)
    return new_tree


def delete(tree: Node, node_id: Hashable) -> Node:
    """Remove a node and its subtree.

    Deleting an absent id returns an equal tree.

    Raises:
        RootNodeError: If ``node_id`` is the root
    """
    return delete_node(tree, node_id)


def rename(tree: Node,
           node_id: Hashable,
           new_name: str,
           config: Optional[EngineConfig] = None) -> Node:
    """Give a node a new name, unique among its siblings.

    A node may be renamed to its own current name (or a different casing of
    it). The root has no siblings, so only the name itself is checked.

    Raises:
        ConfigurationError: If ``config`` is inconsistent
        NotFoundError: If ``node_id`` is absent and ``config.strict_rename``
        ValidationError: If the name is empty or taken by a sibling
    """
    config = checked_config(config)
    path = find_path(tree, node_id)
    if path is None:
        if config.strict_rename:
            logger.info("Rename rejected: no node %r", node_id)
            raise NotFoundError(node_id)
        return tree

    parent = path[-2] if len(path) > 1 else None
    stored = validate_rename(parent, node_id, new_name, config.naming)
    return rename_node(tree, node_id, stored)


__all__ = [
    'insert',
    'insert_with_id',
    'delete',
    'rename',
    'has_duplicate_name',
    'sorted_children',
    'find_node',
    'find_parent',
    'count_nodes',
    'get_tree_stats',
]
