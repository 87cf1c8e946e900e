"""Permission vocabulary response schemas."""

from pydantic import BaseModel


class PermissionResponse(BaseModel):
    """One vocabulary entry."""

    name: str
    description: str | None = None


class PermissionListResponse(BaseModel):
    """Every permission in the vocabulary, ordered by name."""

    permissions: list[PermissionResponse]
