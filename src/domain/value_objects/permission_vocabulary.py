"""Immutable set of valid permission names.

The vocabulary is loaded from the permission store and handed to the
delegation guard, so the names the guard accepts are always the names the
store was seeded with. The wildcard ``*`` is always a member.

Usage:
    from src.domain.value_objects import PermissionVocabulary

    vocabulary = PermissionVocabulary.from_names(["view_users", "edit_users"])
    "view_users" in vocabulary  # True
    "*" in vocabulary           # True
    vocabulary.unknown(["view_users", "fly"])  # ("fly",)
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from src.domain.enums.permission import WILDCARD_PERMISSION, PermissionName


@dataclass(frozen=True)
class PermissionVocabulary:
    """Permission vocabulary value object.

    Attributes:
        names: Valid permission names, wildcard included.

    Raises:
        ValueError: If any name is empty or not a string.
    """

    names: frozenset[str]

    def __post_init__(self) -> None:
        for name in self.names:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Invalid permission name: {name!r}")
        if WILDCARD_PERMISSION not in self.names:
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(
                self, "names", frozenset(self.names | {WILDCARD_PERMISSION})
            )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Self:
        """Build a vocabulary from any iterable of names."""
        return cls(names=frozenset(names))

    @classmethod
    def default(cls) -> Self:
        """Vocabulary made of the built-in permission names."""
        return cls(names=frozenset(member.value for member in PermissionName))

    def unknown(self, candidates: Iterable[str]) -> tuple[str, ...]:
        """Return the sorted candidates that are not in the vocabulary."""
        return tuple(sorted({name for name in candidates if name not in self.names}))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)
