"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

Exports:
    ErrorDetail: Individual error entry (field or offending permission)
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual error entry.

    Used for request validation failures (one entry per field) and for
    permission failures (one entry per offending permission name).

    Examples:
        >>> ErrorDetail(
        ...     field="permissionsToKeep",
        ...     code="insufficient_delegation_rights",
        ...     message="delete_systems",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Examples:
        >>> ProblemDetails(
        ...     type="https://api.kitsu.local/errors/self_modification",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="You cannot change your own permissions",
        ...     instance="/api/v1/users/permissions",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.kitsu.local/errors/permission_denied"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    code: str | None = Field(None, description="Machine-readable error code")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Field- or permission-specific errors",
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
