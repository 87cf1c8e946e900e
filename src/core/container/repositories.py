"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        PermissionRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        @router.get("/users/me/permissions")
        async def my_permissions(
            user_repo: UserRepository = Depends(get_user_repository),
        ):
            user = await user_repo.find_by_id(current_user.user_id)
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_permission_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PermissionRepository":
    """Get permission vocabulary repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import PermissionRepository

    return PermissionRepository(session=session)
