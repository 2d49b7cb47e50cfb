"""Exception hierarchy for FolderTree.

Every failure of a tree edit is reported by raising one of these. A failed
call never produces a partially edited tree: the caller's tree value is left
exactly as it was.
"""

from typing import Any, Optional


class TreeEditError(Exception):
    """Base class for all errors raised by the tree engine."""
    pass


class ValidationError(TreeEditError):
    """Raised when a name is rejected before any edit is attempted."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class EmptyNameError(ValidationError):
    """Raised when a name is empty after trimming."""

    def __init__(self, name: Optional[str] = None):
        super().__init__("Name is required", name)


class DuplicateNameError(ValidationError):
    """Raised when a sibling already uses the (normalized) name."""

    def __init__(self, name: str, parent_id: Any = None):
        super().__init__(
            f"An item named {name!r} already exists in this folder", name
        )
        self.parent_id = parent_id


class NotFoundError(TreeEditError):
    """Raised when the target id does not resolve to a usable node."""

    def __init__(self, node_id: Any, message: Optional[str] = None):
        super().__init__(message or f"No node with id {node_id!r}")
        self.node_id = node_id


class NotAFolderError(NotFoundError):
    """Raised when the target id names a file where a folder is required."""

    def __init__(self, node_id: Any):
        super().__init__(node_id, f"Node {node_id!r} is a file, not a folder")


class RootNodeError(TreeEditError):
    """Raised for edits that cannot apply to the root node."""

    def __init__(self, node_id: Any, operation: str):
        super().__init__(f"Cannot {operation} the root node {node_id!r}")
        self.node_id = node_id
        self.operation = operation


class DuplicateIdError(TreeEditError):
    """Raised when a caller-supplied id is already used in the tree."""

    def __init__(self, node_id: Any):
        super().__init__(f"Id {node_id!r} is already used in this tree")
        self.node_id = node_id


class ConfigurationError(TreeEditError):
    """Raised when an EngineConfig fails validation."""
    pass


__all__ = [
    'TreeEditError',
    'ValidationError',
    'EmptyNameError',
    'DuplicateNameError',
    'NotFoundError',
    'NotAFolderError',
    'RootNodeError',
    'DuplicateIdError',
    'ConfigurationError',
]
