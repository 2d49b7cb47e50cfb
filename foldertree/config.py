"""Configuration system for FolderTree.

This module defines how callers tune the engine: how names are compared
between siblings, how children are ordered for display, and how fresh node
identifiers are minted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional


class IdStrategy(Enum):
    """How fresh node identifiers are minted.

    All strategies guarantee an id is never handed out twice by the
    same generator.
    """
    TIMESTAMP = "timestamp"     # Nanosecond clock, strictly increasing
    SEQUENTIAL = "sequential"   # Integer counter
    UUID = "uuid"               # Random hex string


@dataclass
class NamingConfig:
    """Configuration for comparing and validating node names."""

    strip_whitespace: bool = True        # Trim before comparing and storing
    case_sensitive: bool = False         # Sibling comparison ignores case
    max_length: Optional[int] = None     # Upper bound on trimmed length
    forbidden_chars: FrozenSet[str] = frozenset()  # e.g. {"/"} for path-like names

    def normalize(self, name: str) -> str:
        """Return the form of ``name`` used for sibling comparison.

        Args:
            name: Raw name as typed by the user

        Returns:
            Normalized comparison key
        """
        if self.strip_whitespace:
            name = name.strip()
        if not self.case_sensitive:
            name = name.casefold()
        return name


@dataclass
class SortConfig:
    """Configuration for the derived display ordering of children."""

    folders_first: bool = True    # Every folder sorts before every file
    use_locale: bool = True       # Collate with locale.strxfrm
    ignore_accents: bool = True   # "é" sorts with "e"


@dataclass
class EngineConfig:
    """Complete configuration for a TreeEngine.

    This is the primary way callers adjust engine behavior. The defaults
    reproduce the classic explorer behavior: trimmed, case-insensitive
    sibling names and folders-first alphabetical display.
    """

    naming: NamingConfig = field(default_factory=NamingConfig)
    sort: SortConfig = field(default_factory=SortConfig)
    id_strategy: IdStrategy = IdStrategy.TIMESTAMP

    # Raise NotFoundError for renames of an absent id instead of a no-op
    strict_rename: bool = True

    @classmethod
    def case_sensitive(cls) -> 'EngineConfig':
        """Create config where "Readme" and "readme" may coexist.

        Returns:
            EngineConfig with case-sensitive sibling names
        """
        return cls(naming=NamingConfig(case_sensitive=True))

    @classmethod
    def path_safe(cls, max_length: int = 255) -> 'EngineConfig':
        """Create config that rejects names unusable as path segments.

        Args:
            max_length: Longest name accepted

        Returns:
            EngineConfig with length and separator checks enabled
        """
        return cls(
            naming=NamingConfig(
                max_length=max_length,
                forbidden_chars=frozenset({"/", "\\", "\0"}),
            )
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.naming.max_length is not None and self.naming.max_length <= 0:
            errors.append("max_length must be positive")

        for char in self.naming.forbidden_chars:
            if not isinstance(char, str) or len(char) != 1:
                errors.append(f"forbidden_chars entries must be single characters, got {char!r}")

        if not isinstance(self.id_strategy, IdStrategy):
            errors.append(f"Unknown id_strategy: {self.id_strategy!r}")

        return errors


__all__ = [
    'IdStrategy',
    'NamingConfig',
    'SortConfig',
    'EngineConfig',
]
