"""PermissionRepository protocol for the permission vocabulary store."""

from typing import Protocol

from src.domain.entities.permission import Permission
from src.domain.value_objects.permission_vocabulary import PermissionVocabulary


class PermissionRepository(Protocol):
    """Permission vocabulary repository protocol (port).

    Methods:
        list_all: All stored permissions ordered by name
        load_vocabulary: Stored names as a PermissionVocabulary
        add_missing: Insert permissions whose names are not yet stored
    """

    async def list_all(self) -> list[Permission]:
        """Return every stored permission, ordered by name."""
        ...

    async def load_vocabulary(self) -> PermissionVocabulary:
        """Return the stored names as a vocabulary (wildcard always included)."""
        ...

    async def add_missing(self, permissions: list[Permission]) -> int:
        """Insert the given permissions that do not exist yet.

        Returns:
            Number of permissions inserted.
        """
        ...
