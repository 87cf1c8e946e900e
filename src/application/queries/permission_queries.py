"""Permission vocabulary queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListPermissions:
    """List every permission in the vocabulary with its description."""
