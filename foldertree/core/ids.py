"""Identifier minting for FolderTree.

New nodes need ids that are unique across the whole tree and are never
handed out again, even after the node that carried them is deleted.
"""

import itertools
import time
import uuid
from typing import Hashable, Optional

from ..config import IdStrategy
from .node import Node
from .traverser import iter_ids


class IdGenerator:
    """Mints fresh node identifiers.

    Each generator remembers what it has issued, so two calls never return
    the same id. ``fresh_id`` additionally checks the target tree, which
    protects against ids the caller assigned by hand.

    Example:
        >>> gen = IdGenerator(IdStrategy.SEQUENTIAL, start=100)
        >>> gen.next_id()
        100
        >>> gen.next_id()
        101
    """

    def __init__(self, strategy: IdStrategy = IdStrategy.TIMESTAMP, start: Optional[int] = None):
        """Initialize generator.

        Args:
            strategy: How ids are produced
            start: First value for SEQUENTIAL (default 1). Ignored otherwise.
        """
        self.strategy = strategy
        self._counter = itertools.count(1 if start is None else start)
        self._last_timestamp = 0

    def next_id(self) -> Hashable:
        """Return an id this generator has never returned before."""
        if self.strategy is IdStrategy.SEQUENTIAL:
            return next(self._counter)

        if self.strategy is IdStrategy.UUID:
            return uuid.uuid4().hex

        # Clock may stand still or step back; stay strictly increasing
        stamp = time.time_ns()
        if stamp <= self._last_timestamp:
            stamp = self._last_timestamp + 1
        self._last_timestamp = stamp
        return stamp

    def fresh_id(self, tree: Node) -> Hashable:
        """Return an id not used anywhere in ``tree``.

        Args:
            tree: Tree the new node will be inserted into

        Returns:
            Identifier safe to use for a new node
        """
        existing = set(iter_ids(tree))
        candidate = self.next_id()
        while candidate in existing:
            candidate = self.next_id()
        return candidate

    def seed_from(self, tree: Node) -> None:
        """Move integer-based generators past every integer id in ``tree``.

        Useful when the initial tree literal carries hand-written ids like
        1, 2, 3 and new ids should continue after them.
        """
        highest = max(
            (node_id for node_id in iter_ids(tree)
             if isinstance(node_id, int) and not isinstance(node_id, bool)),
            default=None,
        )
        if highest is None:
            return

        if self.strategy is IdStrategy.SEQUENTIAL:
            current = next(self._counter)
            self._counter = itertools.count(max(current, highest + 1))
        elif self.strategy is IdStrategy.TIMESTAMP:
            self._last_timestamp = max(self._last_timestamp, highest)

    def __repr__(self) -> str:
        return f"IdGenerator(strategy={self.strategy.value!r})"
