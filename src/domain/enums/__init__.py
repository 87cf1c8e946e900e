"""Domain enums for business logic.

Available Enums:
    - UserStatus: Account lifecycle status (active, inactive, suspended)
    - PermissionName: Built-in permission names, including the wildcard
"""

from src.domain.enums.permission import (
    PERMISSION_DESCRIPTIONS,
    WILDCARD_PERMISSION,
    PermissionName,
)
from src.domain.enums.user_status import UserStatus

__all__ = [
    "PERMISSION_DESCRIPTIONS",
    "WILDCARD_PERMISSION",
    "PermissionName",
    "UserStatus",
]
