"""Update user status handler.

Flow:
1. Reject changes to the actor's own account
2. Validate the requested status
3. Find the target user
4. Persist the new status

The ``edit_users`` requirement is enforced before this handler runs, against
the actor's stored permissions.
"""

from src.application.commands.user_commands import UpdateUserStatus
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums.user_status import UserStatus
from src.domain.protocols import LoggerProtocol, UserRepository


class UpdateUserStatusHandler:
    """Handler for status change command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: UpdateUserStatus) -> Result[User, DomainError]:
        """Handle status change command.

        Returns:
            Success(User) with the updated user.
            Failure(AuthorizationError) for a self change,
            Failure(ValidationError) for an unknown status,
            Failure(NotFoundError) if the user does not exist.
        """
        if cmd.actor_id == cmd.user_id:
            self._logger.warning("status_change_denied", actor_id=cmd.actor_id)
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.STATUS_SELF_MODIFICATION,
                    message="You cannot change your own status",
                )
            )

        status = UserStatus.parse(cmd.status)
        if status is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_STATUS,
                    message=f"Status must be one of: {', '.join(UserStatus.values())}",
                    field="status",
                )
            )

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None or not await self._user_repo.update_status(cmd.user_id, status):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        user.status = status
        self._logger.info(
            "user_status_updated",
            actor_id=cmd.actor_id,
            user_id=cmd.user_id,
            status=status.value,
        )
        return Success(value=user)
