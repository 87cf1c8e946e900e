"""Database models.

Importing this package registers every model on BaseModel.metadata.
"""

from src.infrastructure.persistence.models.permission import Permission
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Permission",
    "User",
]
