"""User administration request/response schemas.

Endpoints:
    GET   /api/v1/users                   - List users (paged)
    GET   /api/v1/users/me                - Current user
    GET   /api/v1/users/me/permissions    - Current user's stored permissions
    GET   /api/v1/users/{id}/permissions  - A user's stored permissions
    PATCH /api/v1/users/permissions       - Replace another user's permissions
    PATCH /api/v1/users/{id}/status       - Change another user's status
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.user import User


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: int
    name: str
    email: str
    mobile_no: str
    status: str
    permissions: list[str] = Field(..., description="Held permissions, sorted")
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or 0,
            name=user.name,
            email=user.email,
            mobile_no=user.mobile_no,
            status=user.status.value,
            permissions=user.sorted_permissions(),
            image_url=user.image_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponse(BaseModel):
    """One page of users."""

    model_config = ConfigDict(populate_by_name=True)

    users: list[UserResponse]
    page: int
    page_size: int = Field(..., alias="pageSize")
    total: int


class UserPermissionsResponse(BaseModel):
    """A user's stored permission set."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId")
    permissions: list[str]


class PermissionUpdateRequest(BaseModel):
    """Request schema for permission delegation.

    ``permissionsToKeep`` is the target's complete new permission set. Its
    shape is checked by the delegation guard, not here, so a malformed value
    is reported as MALFORMED_INPUT (400) rather than a 422.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "targetIdentifier": "0787654321",
                "permissionsToKeep": ["view_faults", "edit_systems"],
            }
        },
    )

    target_identifier: str = Field(..., alias="targetIdentifier", min_length=1)
    permissions_to_keep: Any = Field(None, alias="permissionsToKeep")


class PermissionUpdateResponse(BaseModel):
    """Response schema for a successful delegation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    target_identifier: str = Field(..., alias="targetIdentifier")
    permissions: list[str]


class UserStatusUpdateRequest(BaseModel):
    """Request schema for a status change (active, inactive, suspended)."""

    status: str = Field(..., examples=["active"])


class UserStatusUpdateResponse(BaseModel):
    """Response schema for a status change."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user_id: int = Field(..., alias="userId")
    status: str
