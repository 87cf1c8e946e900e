"""Permission domain entity.

A row of the administratively maintained permission vocabulary.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Permission:
    """Named capability with a human-readable description.

    Attributes:
        name: Unique permission name (e.g. ``view_users``, ``*``)
        description: What the permission allows
        id: Integer primary key (None until persisted)
        created_at: Timestamp when the permission was added
    """

    name: str
    description: str | None = None
    id: int | None = None
    created_at: datetime | None = None
