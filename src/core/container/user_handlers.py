"""User administration handler dependency factories.

Request-scoped handler instances for user queries, permission delegation,
status changes and the permission vocabulary.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.update_user_permissions_handler import (
        UpdateUserPermissionsHandler,
    )
    from src.application.commands.handlers.update_user_status_handler import (
        UpdateUserStatusHandler,
    )
    from src.application.queries.handlers.get_user_handler import (
        GetUserHandler,
        GetUserPermissionsHandler,
    )
    from src.application.queries.handlers.list_permissions_handler import (
        ListPermissionsHandler,
    )
    from src.application.queries.handlers.list_users_handler import ListUsersHandler


# ============================================================================
# Command Handler Factories
# ============================================================================


async def get_update_user_permissions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateUserPermissionsHandler":
    """Get UpdateUserPermissions command handler (request-scoped).

    Both repositories share the request session, so the vocabulary read and
    the permission write happen on one connection.
    """
    from src.application.commands.handlers.update_user_permissions_handler import (
        UpdateUserPermissionsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        PermissionRepository,
        UserRepository,
    )

    return UpdateUserPermissionsHandler(
        user_repo=UserRepository(session=session),
        permission_repo=PermissionRepository(session=session),
        logger=get_logger(),
    )


async def get_update_user_status_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateUserStatusHandler":
    """Get UpdateUserStatus command handler (request-scoped)."""
    from src.application.commands.handlers.update_user_status_handler import (
        UpdateUserStatusHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return UpdateUserStatusHandler(
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


async def get_get_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserHandler":
    from src.application.queries.handlers.get_user_handler import GetUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return GetUserHandler(user_repo=UserRepository(session=session))


async def get_get_user_permissions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserPermissionsHandler":
    from src.application.queries.handlers.get_user_handler import (
        GetUserPermissionsHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return GetUserPermissionsHandler(user_repo=UserRepository(session=session))


async def get_list_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListUsersHandler":
    from src.application.queries.handlers.list_users_handler import ListUsersHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return ListUsersHandler(user_repo=UserRepository(session=session))


async def get_list_permissions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListPermissionsHandler":
    from src.application.queries.handlers.list_permissions_handler import (
        ListPermissionsHandler,
    )
    from src.infrastructure.persistence.repositories import PermissionRepository

    return ListPermissionsHandler(permission_repo=PermissionRepository(session=session))
