"""Name normalisation and sibling uniqueness for FolderTree.

Two siblings may not share a name. Names are compared after trimming and
case-folding, so "Docs", " docs " and "DOCS" all collide. These checks run
before an edit; the edit primitives themselves never validate.
"""

import logging
import unicodedata
from typing import Hashable, Iterable, Optional

from ..config import NamingConfig
from ..errors import DuplicateNameError, EmptyNameError, ValidationError
from .node import Node

logger = logging.getLogger(__name__)


def normalize_name(name: str, config: Optional[NamingConfig] = None) -> str:
    """Return the comparison key for ``name``."""
    return (config or NamingConfig()).normalize(name)


def has_duplicate_name(siblings: Iterable[Node],
                       candidate: str,
                       exclude_id: Optional[Hashable] = None,
                       config: Optional[NamingConfig] = None) -> bool:
    """Check whether ``candidate`` collides with a sibling's name.

    Args:
        siblings: Flat sequence of nodes sharing one parent
        candidate: Prospective name
        exclude_id: Id to skip, so a node may be renamed to its own name
        config: Comparison rules (defaults to trimmed, case-insensitive)

    Returns:
        True if some sibling other than ``exclude_id`` uses the name
    """
    config = config or NamingConfig()
    wanted = config.normalize(candidate)
    return any(
        sibling.id != exclude_id and config.normalize(sibling.name) == wanted
        for sibling in siblings
    )


def validate_name(name: str, config: Optional[NamingConfig] = None) -> str:
    """Check a name on its own, without looking at siblings.

    Args:
        name: Name as typed by the user
        config: Naming rules

    Returns:
        The name as it should be stored (trimmed unless disabled)

    Raises:
        EmptyNameError: If the name is empty after trimming
        ValidationError: If the name is too long, has control characters
            or has forbidden characters
    """
    config = config or NamingConfig()
    if not isinstance(name, str):
        logger.info("Rejected name of type %s", type(name).__name__)
        raise ValidationError(f"Name must be a string, got {type(name).__name__}")

    stored = name.strip() if config.strip_whitespace else name
    if not stored.strip():
        logger.info("Rejected %r: name is empty", name)
        raise EmptyNameError(name)

    if config.max_length is not None and len(stored) > config.max_length:
        logger.info("Rejected %r: longer than %d characters", stored, config.max_length)
        raise ValidationError(
            f"Name is longer than {config.max_length} characters", name
        )

    control = sorted({ch for ch in stored if unicodedata.category(ch) == 'Cc'})
    if control:
        logger.info("Rejected %r: control characters %r", stored, control)
        raise ValidationError(f"Name contains control characters: {control!r}", name)

    bad = sorted(set(stored) & set(config.forbidden_chars))
    if bad:
        logger.info("Rejected %r: forbidden characters %r", stored, bad)
        raise ValidationError(f"Name contains forbidden characters: {bad!r}", name)

    return stored


def validate_new_child_name(folder: Node, name: str, config: Optional[NamingConfig] = None) -> str:
    """Validate a name for a node about to be created inside ``folder``.

    Returns:
        The name as it should be stored

    Raises:
        ValidationError: If the name is empty, malformed or already taken
    """
    stored = validate_name(name, config)
    if has_duplicate_name(folder.items, stored, config=config):
        logger.info("Rejected %r: duplicate in folder %r", stored, folder.id)
        raise DuplicateNameError(stored, folder.id)
    return stored


def validate_rename(parent: Optional[Node],
                    node_id: Hashable,
                    name: str,
                    config: Optional[NamingConfig] = None) -> str:
    """Validate a new name for ``node_id`` among its siblings.

    Args:
        parent: Parent of the renamed node, or None for the root
        node_id: Node being renamed (excluded from the duplicate check)
        name: Proposed name
        config: Naming rules

    Returns:
        The name as it should be stored

    Raises:
        ValidationError: If the name is empty, malformed or taken by a sibling
    """
    stored = validate_name(name, config)
    siblings = parent.items if parent is not None else ()
    if has_duplicate_name(siblings, stored, exclude_id=node_id, config=config):
        logger.info("Rejected rename of %r to %r: duplicate sibling", node_id, stored)
        raise DuplicateNameError(stored, parent.id)
    return stored
