"""TreeEngine: the command interface a presentation layer talks to.

The engine bundles a configuration with an id generator and exposes the
edit and query calls a UI needs. It holds no tree: the caller passes the
current tree into every call and replaces it with the returned one.

Example:
    >>> engine = TreeEngine()
    >>> tree = Node.folder(1, "root")
    >>> tree, docs_id = engine.insert_with_id(tree, 1, "docs", is_folder=True)
    >>> tree = engine.rename(tree, docs_id, "documents")
"""

from typing import Hashable, Iterable, List, Optional, Tuple

from . import api
from .config import EngineConfig
from .core.ids import IdGenerator
from .core.naming import has_duplicate_name
from .core.node import Node
from .core.ordering import sorted_children


class TreeEngine:
    """Validated insert, delete and rename over immutable Node trees.

    Edits are applied one at a time by a single caller. Every method is a
    pure function of its arguments apart from the id generator, which only
    ever moves forward.
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 id_generator: Optional[IdGenerator] = None):
        """Create an engine.

        Args:
            config: Engine configuration (defaults apply when omitted)
            id_generator: Source of new ids (built from config when omitted)

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = api.checked_config(config)
        self.id_generator = id_generator or IdGenerator(self.config.id_strategy)

    def insert_with_id(self, tree: Node, parent_id: Hashable, name: str,
                       is_folder: bool) -> Tuple[Node, Hashable]:
        """Create a node under ``parent_id``; return (new_tree, new_id)."""
        self.id_generator.seed_from(tree)
        return api.insert_with_id(tree, parent_id, name, is_folder,
                                  config=self.config, id_generator=self.id_generator)

    def insert(self, tree: Node, parent_id: Hashable, name: str, is_folder: bool) -> Node:
        """Create a node under ``parent_id``; return the new tree."""
        new_tree, _ = self.insert_with_id(tree, parent_id, name, is_folder)
        return new_tree

    def delete(self, tree: Node, node_id: Hashable) -> Node:
        """Remove ``node_id`` and its subtree (no-op when absent)."""
        return api.delete(tree, node_id)

    def rename(self, tree: Node, node_id: Hashable, new_name: str) -> Node:
        """Rename ``node_id``, keeping sibling names unique."""
        return api.rename(tree, node_id, new_name, config=self.config)

    def has_duplicate_name(self, siblings: Iterable[Node], candidate: str,
                           exclude_id: Optional[Hashable] = None) -> bool:
        """Check ``candidate`` against sibling names under this engine's rules."""
        return has_duplicate_name(siblings, candidate, exclude_id, self.config.naming)

    def sorted_children(self, node: Node) -> List[Node]:
        """Children of ``node`` in display order."""
        return sorted_children(node, self.config.sort)

    def __repr__(self) -> str:
        return f"TreeEngine(id_strategy={self.config.id_strategy.value!r})"
