"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Fails closed: with no secret configured, generation raises and every
      token is rejected
    - Unique JWT ID (jti) per token

Claims:
    sub: user id (string)
    identifier: mobile number
    permissions: sorted permission snapshot
    iat, exp, jti
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.token_generation_protocol import AccessTokenClaims

REQUIRED_CLAIMS = ["sub", "identifier", "iat", "exp", "jti"]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            identifier=user.mobile_no,
            permissions=user.permissions,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self, secret_key: str | None, expiration_minutes: int = 24 * 60
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing, at least 32
                bytes. None means "not configured".
            expiration_minutes: Token lifetime in minutes.

        Raises:
            ValueError: If a secret is given but is shorter than 32 bytes.
        """
        if secret_key is not None and len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    @property
    def expires_in_seconds(self) -> int:
        return self._expiration_minutes * 60

    def generate_access_token(
        self,
        user_id: int,
        identifier: str,
        permissions: frozenset[str] | set[str] | None = None,
    ) -> str:
        """Generate JWT access token.

        Raises:
            RuntimeError: If no signing secret is configured.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(7, "0712345678", {"view_users"})
            >>> len(token.split("."))
            3
        """
        if self._secret_key is None:
            raise RuntimeError("Token signing secret is not configured")

        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "identifier": identifier,
            "permissions": sorted(permissions or ()),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid4()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[AccessTokenClaims, AuthenticationError]:
        """Validate JWT access token and extract claims.

        Returns:
            Success(AccessTokenClaims), or Failure(AuthenticationError) with
            TOKEN_EXPIRED for an expired token and TOKEN_INVALID for anything
            else (bad signature, malformed, missing claims, no secret).
        """
        if self._secret_key is None:
            return Failure(error=_invalid("Token signing secret is not configured"))

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )
        except InvalidTokenError:
            return Failure(error=_invalid("Token is invalid"))

        return _claims_from_payload(payload)


def _invalid(message: str) -> AuthenticationError:
    return AuthenticationError(code=ErrorCode.TOKEN_INVALID, message=message)


def _claims_from_payload(
    payload: dict[str, object],
) -> Result[AccessTokenClaims, AuthenticationError]:
    """Check claim types; a signed token with the wrong shape is still invalid."""
    sub = payload.get("sub")
    identifier = payload.get("identifier")
    permissions = payload.get("permissions", [])
    jti = payload.get("jti")

    if not isinstance(sub, str) or not sub.isdigit():
        return Failure(error=_invalid("Token subject is invalid"))
    if not isinstance(identifier, str) or not isinstance(jti, str):
        return Failure(error=_invalid("Token claims are invalid"))
    if not isinstance(permissions, list) or not all(
        isinstance(p, str) for p in permissions
    ):
        return Failure(error=_invalid("Token permissions claim is invalid"))

    return Success(
        value=AccessTokenClaims(
            user_id=int(sub),
            identifier=identifier,
            permissions=frozenset(permissions),
            jti=jti,
            issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),  # type: ignore[call-overload]
            expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),  # type: ignore[call-overload]
        )
    )
