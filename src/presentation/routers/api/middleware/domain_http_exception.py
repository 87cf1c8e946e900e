"""HTTPException that carries a DomainError.

Authentication and authorization dependencies run before the route handler,
so they cannot return a Problem Details response; they raise this instead.
The registered HTTPException handler renders the attached error through
ErrorResponseBuilder, giving gate failures the same ``code`` and ``errors``
fields as handler failures.
"""

from fastapi import HTTPException, status

from src.core.errors import DomainError

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class DomainHTTPException(HTTPException):
    """HTTPException raised from a dependency with a domain error attached.

    Attributes:
        error: Failure value to render as Problem Details.

    Example:
        >>> raise DomainHTTPException(
        ...     status_code=status.HTTP_401_UNAUTHORIZED,
        ...     error=AuthenticationError(code=ErrorCode.NO_TOKEN, message="..."),
        ... )
    """

    def __init__(self, status_code: int, error: DomainError) -> None:
        headers = (
            BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
        )
        super().__init__(status_code=status_code, detail=error.message, headers=headers)
        self.error = error
