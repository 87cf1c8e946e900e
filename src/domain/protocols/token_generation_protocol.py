"""Token generation protocol for domain layer.

Session tokens are compact, signed and stateless. Each embeds the user id,
the login identifier and a snapshot of the user's permissions at issue time.

Token Strategy:
    - Signed with a server-held secret (HS256)
    - Snapshot is stale by construction; routes that mutate permissions
      re-read the store instead of trusting it
    - No revocation list; tokens expire naturally
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from src.core.errors import AuthenticationError
from src.core.result import Result


@dataclass(frozen=True)
class AccessTokenClaims:
    """Decoded, verified token claims.

    Attributes:
        user_id: Subject (``sub`` claim, integer user id).
        identifier: Login identifier (mobile number).
        permissions: Permission snapshot taken when the token was issued.
        jti: Unique token id.
        issued_at: ``iat`` claim.
        expires_at: ``exp`` claim.
    """

    user_id: int
    identifier: str
    permissions: frozenset[str]
    jti: str
    issued_at: datetime
    expires_at: datetime


class TokenGenerationProtocol(Protocol):
    """Access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            identifier=user.mobile_no,
            permissions=user.permissions,
        )

        match token_service.validate_access_token(token):
            case Success(value=claims):
                user_id = claims.user_id
            case Failure(error=error):
                # error.code is TOKEN_INVALID or TOKEN_EXPIRED
                ...
    """

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of newly issued tokens in seconds."""
        ...

    def generate_access_token(
        self,
        user_id: int,
        identifier: str,
        permissions: frozenset[str] | set[str] | None = None,
    ) -> str:
        """Issue a signed access token.

        Raises:
            RuntimeError: If no signing secret is configured.
        """
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[AccessTokenClaims, AuthenticationError]:
        """Verify a token and extract its claims.

        Returns:
            Success with the claims, or Failure with TOKEN_EXPIRED or
            TOKEN_INVALID (bad signature, malformed, missing claims,
            no signing secret configured). Never raises for bad input.
        """
        ...
