"""Edit primitives for FolderTree.

Each primitive takes a tree and returns a new tree. Only the nodes on the
path from the root to the edited node are rebuilt; every other subtree is
shared with the input. The input tree is never modified.

These functions do not validate names. Callers check names first with the
helpers in ``naming`` (the ``api`` module and ``TreeEngine`` do this).
"""

import logging
from typing import Hashable, Optional, Tuple

from ..errors import DuplicateIdError, NotAFolderError, NotFoundError, RootNodeError
from .ids import IdGenerator
from .node import Node
from .traverser import find_node, find_path

logger = logging.getLogger(__name__)

_default_ids = IdGenerator()


def _rebuild(path: Tuple[Node, ...], replacement: Optional[Node]) -> Node:
    """Rebuild every ancestor on ``path`` around a changed last node.

    Args:
        path: Root-to-target chain as returned by ``find_path``
        replacement: New version of ``path[-1]``, or None to drop it

    Returns:
        The new root
    """
    for parent, old_child in zip(reversed(path[:-1]), reversed(path[1:])):
        if replacement is None:
            items = tuple(child for child in parent.items if child is not old_child)
        else:
            items = tuple(replacement if child is old_child else child for child in parent.items)
        replacement = parent.replace(items=items)
    return replacement


def insert_node(tree: Node,
                folder_id: Hashable,
                name: str,
                is_folder: bool,
                node_id: Optional[Hashable] = None,
                id_generator: Optional[IdGenerator] = None) -> Node:
    """Create a node at the front of a folder's children.

    Args:
        tree: Root of the tree
        folder_id: Id of the folder receiving the node
        name: Name of the new node (already validated)
        is_folder: Whether the new node is a folder
        node_id: Id for the new node; minted when omitted
        id_generator: Generator used when ``node_id`` is omitted

    Returns:
        New root with the node prepended to the folder's items

    Raises:
        NotFoundError: If ``folder_id`` is not in the tree
        NotAFolderError: If ``folder_id`` names a file
        DuplicateIdError: If ``node_id`` is already used in the tree
    """
    path = find_path(tree, folder_id)
    if path is None:
        logger.info("Insert rejected: no node %r", folder_id)
        raise NotFoundError(folder_id)

    target = path[-1]
    if not target.is_folder:
        logger.info("Insert rejected: %r is a file", folder_id)
        raise NotAFolderError(folder_id)

    if node_id is None:
        node_id = (id_generator or _default_ids).fresh_id(tree)
    elif find_node(tree, node_id) is not None:
        logger.info("Insert rejected: id %r already in use", node_id)
        raise DuplicateIdError(node_id)

    created = Node(node_id, name, is_folder)
    logger.debug("Inserting %r (%s) into %r", name, node_id, folder_id)
    return _rebuild(path, target.replace(items=(created,) + target.items))


def delete_node(tree: Node, node_id: Hashable) -> Node:
    """Remove a node together with its whole subtree.

    Deleting an id that isn't in the tree changes nothing.

    Raises:
        RootNodeError: If ``node_id`` is the root itself
    """
    path = find_path(tree, node_id)
    if path is None:
        logger.debug("Delete of %r: no such node", node_id)
        return tree
    if len(path) == 1:
        logger.info("Delete rejected: %r is the root", node_id)
        raise RootNodeError(node_id, "delete")

    logger.debug("Deleting %r from %r", node_id, path[-2].id)
    return _rebuild(path, None)


def rename_node(tree: Node, node_id: Hashable, new_name: str) -> Node:
    """Replace a node's name, keeping its id, kind and children.

    Renaming an id that isn't in the tree changes nothing.
    """
    path = find_path(tree, node_id)
    if path is None:
        logger.debug("Rename of %r: no such node", node_id)
        return tree

    logger.debug("Renaming %r to %r", node_id, new_name)
    return _rebuild(path, path[-1].replace(name=new_name))
