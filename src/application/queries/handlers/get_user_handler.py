"""User lookup query handlers.

Both handlers read the credential store, so results reflect permission
changes made after the caller's token was issued.
"""

from src.application.queries.user_queries import GetUser, GetUserPermissions
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository


def _user_not_found(user_id: int) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
        resource_id=str(user_id),
    )


class GetUserHandler:
    """Handler for fetching a single user."""

    def __init__(self, user_repo: UserRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for lookups.
        """
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[User, NotFoundError]:
        """Handle get user query.

        Returns:
            Success(User) if found.
            Failure(NotFoundError) otherwise.
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=_user_not_found(query.user_id))
        return Success(value=user)


class GetUserPermissionsHandler:
    """Handler for fetching a user's stored permissions."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(
        self, query: GetUserPermissions
    ) -> Result[frozenset[str], NotFoundError]:
        """Handle get user permissions query.

        Returns:
            Success(frozenset) with the stored set (possibly empty).
            Failure(NotFoundError) if the user does not exist.
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=_user_not_found(query.user_id))
        return Success(value=user.permissions)
