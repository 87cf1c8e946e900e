"""Bearer token authentication dependencies.

FastAPI dependencies that decode the session token and attach the caller's
identity and permission snapshot to the request.

Failures are always 401 with ``WWW-Authenticate: Bearer`` and a Problem
Details ``code``:
    - no_token (missing header or a non-Bearer scheme)
    - token_invalid (bad signature, malformed, missing claims, no secret)
    - token_expired

Usage:
    @router.get("/users/me")
    async def get_me(current_user: AuthenticatedUser):
        return {"id": current_user.user_id}
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_logger, get_token_service
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.presentation.routers.api.middleware.domain_http_exception import (
    DomainHTTPException,
)

# auto_error=False so a missing token is reported as 401, not 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller extracted from the session token.

    Attributes:
        user_id: User id (from the ``sub`` claim).
        identifier: Mobile number (from the ``identifier`` claim).
        permissions: Permission snapshot from when the token was issued.
            Use it for read-mostly checks only; it may be stale.
        token_jti: Token unique identifier.
    """

    user_id: int
    identifier: str
    permissions: frozenset[str]
    token_jti: str | None = None


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the bearer token.

    Raises:
        DomainHTTPException 401: NO_TOKEN, TOKEN_INVALID or TOKEN_EXPIRED.
    """
    if credentials is None:
        raise DomainHTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error=AuthenticationError(
                code=ErrorCode.NO_TOKEN,
                message="Not authenticated",
            ),
        )

    result = token_service.validate_access_token(credentials.credentials)

    if isinstance(result, Failure):
        get_logger().info("token_rejected", code=result.error.code.value)
        raise DomainHTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error=result.error,
        )

    claims = result.value
    return CurrentUser(
        user_id=claims.user_id,
        identifier=claims.identifier,
        permissions=claims.permissions,
        token_jti=claims.jti,
    )


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
