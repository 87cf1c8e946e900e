"""Error response builder for RFC 9457 Problem Details.

Converts domain/application failures (DomainError values carried by
Failure results) into JSON responses.

Status mapping:
    400  MALFORMED_INPUT, UNKNOWN_PERMISSION, INVALID_STATUS
    401  NO_TOKEN, TOKEN_INVALID, TOKEN_EXPIRED, INVALID_CREDENTIALS,
         ACCOUNT_NOT_ACTIVE (with WWW-Authenticate: Bearer)
    403  PERMISSION_DENIED, SELF_MODIFICATION, STATUS_SELF_MODIFICATION,
         WILDCARD_NOT_DELEGABLE, INSUFFICIENT_DELEGATION_RIGHTS
    404  USER_NOT_FOUND, TARGET_NOT_FOUND
    409  USER_ALREADY_EXISTS

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, ValidationError
from src.domain.errors import DelegationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.MALFORMED_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_PERMISSION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_NOT_ACTIVE: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.SELF_MODIFICATION: status.HTTP_403_FORBIDDEN,
    ErrorCode.STATUS_SELF_MODIFICATION: status.HTTP_403_FORBIDDEN,
    ErrorCode.WILDCARD_NOT_DELEGABLE: status.HTTP_403_FORBIDDEN,
    ErrorCode.INSUFFICIENT_DELEGATION_RIGHTS: status.HTTP_403_FORBIDDEN,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TARGET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}

_TITLE_BY_STATUS: dict[int, str] = {
    400: "Bad Request",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    409: "Resource Conflict",
    422: "Validation Failed",
    500: "Internal Server Error",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error=error,
        ...             request=request,
        ...             trace_id=get_trace_id() or "",
        ...         )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
        field: str = "permissionsToKeep",
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Args:
            error: Failure value from a handler.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.
            field: Request field named in per-permission error entries.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLE_BY_STATUS.get(status_code, "Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            code=error.code.value,
            errors=ErrorResponseBuilder._error_details(error, field) or None,
            trace_id=trace_id,
        )

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map an error code to its HTTP status (500 if unmapped).

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.TARGET_NOT_FOUND)
            404
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _error_details(error: DomainError, field: str) -> list[ErrorDetail]:
        if isinstance(error, DelegationError):
            return [
                ErrorDetail(field=field, code=error.code.value, message=permission)
                for permission in error.permissions
            ]
        if isinstance(error, AuthorizationError):
            return [
                ErrorDetail(field="permissions", code=error.code.value, message=p)
                for p in error.missing_permissions
            ]
        if isinstance(error, ValidationError) and error.field:
            return [
                ErrorDetail(
                    field=error.field, code=error.code.value, message=error.message
                )
            ]
        return []
