"""Query definitions (CQRS read side)."""

from src.application.queries.permission_queries import ListPermissions
from src.application.queries.user_queries import (
    GetUser,
    GetUserPermissions,
    ListUsers,
)

__all__ = [
    "GetUser",
    "GetUserPermissions",
    "ListPermissions",
    "ListUsers",
]
