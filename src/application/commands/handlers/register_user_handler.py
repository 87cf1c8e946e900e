"""Registration handler.

Flow:
1. Check mobile number uniqueness
2. Check email uniqueness
3. Hash password
4. Create inactive User entity with no permissions
5. Save user (unique indexes reject a concurrent duplicate)
6. Return Success(user)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import RegisterUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums.user_status import UserStatus
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, ConflictError]:
        """Handle user registration command.

        Returns:
            Success(User) with the persisted user.
            Failure(ConflictError) if the mobile number or email is taken.
        """
        if await self._user_repo.exists_by_identifier(cmd.mobile_no):
            self._logger.warning("registration_rejected", reason="mobile_no_taken")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message="Mobile number already registered",
                    resource_type="User",
                    conflicting_field="mobile_no",
                )
            )

        if await self._user_repo.exists_by_email(cmd.email):
            self._logger.warning("registration_rejected", reason="email_taken")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message="Email already registered",
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        user = User(
            id=None,
            name=cmd.name,
            email=cmd.email,
            mobile_no=cmd.mobile_no,
            password_hash=self._password_service.hash_password(cmd.password),
            status=UserStatus.INACTIVE,
            permissions=frozenset(),
            image_url=cmd.image_url,
        )

        match await self._user_repo.save(user):
            case Failure(error=error):
                # A concurrent registration took the mobile number or email
                self._logger.warning(
                    "registration_rejected",
                    reason="unique_violation",
                    field=error.conflicting_field,
                )
                return Failure(error=error)
            case Success(value=saved):
                self._logger.info("user_registered", user_id=saved.id)
                return Success(value=saved)
