"""Login handler.

Flow:
1. Find user by identifier (mobile number)
2. Check account exists
3. Verify password
4. Check account active
5. Issue access token with the current permission snapshot
6. Return Success(LoginResult)

Unknown identifier and wrong password share one error so callers cannot
enumerate registered numbers. The status check runs after the password
check for the same reason.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories and services are injected via protocols
"""

from dataclasses import dataclass

from src.application.commands.auth_commands import LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Issued session.

    Attributes:
        access_token: Signed token.
        token_type: Always ``bearer``.
        expires_in: Token lifetime in seconds.
        user: Authenticated user.
    """

    access_token: str
    expires_in: int
    user: User
    token_type: str = "bearer"


class LoginUserHandler:
    """Handler for login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository for lookups.
            password_service: Password verification service.
            token_service: Access token issuer.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, AuthenticationError]:
        """Handle login command.

        Returns:
            Success(LoginResult) on valid credentials for an active account.
            Failure(AuthenticationError) with INVALID_CREDENTIALS or
            ACCOUNT_NOT_ACTIVE otherwise.

        Raises:
            RuntimeError: If no token signing secret is configured.
        """
        # Step 1-2: Find user
        user = await self._user_repo.find_by_identifier(cmd.identifier)
        if user is None or user.id is None:
            self._logger.warning("login_failed", reason="unknown_identifier")
            return Failure(error=_invalid_credentials())

        # Step 3: Verify password
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            self._logger.warning("login_failed", reason="wrong_password", user_id=user.id)
            return Failure(error=_invalid_credentials())

        # Step 4: Check status
        if not user.can_login():
            self._logger.warning(
                "login_failed",
                reason="account_not_active",
                user_id=user.id,
                status=user.status.value,
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_NOT_ACTIVE,
                    message="Account is not active",
                )
            )

        # Step 5: Issue token
        token = self._token_service.generate_access_token(
            user_id=user.id,
            identifier=user.mobile_no,
            permissions=user.permissions,
        )

        self._logger.info("login_succeeded", user_id=user.id)

        return Success(
            value=LoginResult(
                access_token=token,
                expires_in=self._token_service.expires_in_seconds,
                user=user,
            )
        )


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid identifier or password",
    )
