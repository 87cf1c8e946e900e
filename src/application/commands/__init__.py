"""Command definitions (CQRS write side)."""

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.user_commands import (
    UpdateUserPermissions,
    UpdateUserStatus,
)

__all__ = [
    "LoginUser",
    "RegisterUser",
    "UpdateUserPermissions",
    "UpdateUserStatus",
]
