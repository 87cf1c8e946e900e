"""Users resource handlers.

Endpoints:
    GET   /api/v1/users/me                - Current user (auth only)
    GET   /api/v1/users/me/permissions    - Current user's stored permissions
    PATCH /api/v1/users/permissions       - Delegate (grant_permissions, from store)
    GET   /api/v1/users                   - List users (view_users)
    GET   /api/v1/users/{id}/permissions  - A user's permissions (view_users)
    PATCH /api/v1/users/{id}/status       - Change status (edit_users, from store)

Delegation requires ``grant_permissions`` in the caller's stored set before
the request body is validated, so callers without it cannot learn which targets
exist. The delegation guard then decides what may be granted, again from
the stored set.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.update_user_permissions_handler import (
    UpdateUserPermissionsHandler,
)
from src.application.commands.handlers.update_user_status_handler import (
    UpdateUserStatusHandler,
)
from src.application.commands.user_commands import (
    UpdateUserPermissions,
    UpdateUserStatus,
)
from src.application.queries.handlers.get_user_handler import (
    GetUserHandler,
    GetUserPermissionsHandler,
)
from src.application.queries.handlers.list_users_handler import ListUsersHandler
from src.application.queries.user_queries import (
    GetUser,
    GetUserPermissions,
    ListUsers,
)
from src.core.container import (
    get_get_user_handler,
    get_get_user_permissions_handler,
    get_list_users_handler,
    get_update_user_permissions_handler,
    get_update_user_status_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import PermissionName
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_current_permission,
    require_permission,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    get_request_trace_id,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.user_schemas import (
    PermissionUpdateRequest,
    PermissionUpdateResponse,
    UserListResponse,
    UserPermissionsResponse,
    UserResponse,
    UserStatusUpdateRequest,
    UserStatusUpdateResponse,
)

users_router = APIRouter(prefix="/users", tags=["Users"])


# =============================================================================
# Current user
# =============================================================================


@users_router.get("/me", response_model=UserResponse)
async def get_me(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserResponse | JSONResponse:
    """Return the authenticated user's profile (never the password hash)."""
    result = await handler.handle(GetUser(user_id=current_user.user_id))

    match result:
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )


@users_router.get("/me/permissions", response_model=UserPermissionsResponse)
async def get_my_permissions(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetUserPermissionsHandler = Depends(get_get_user_permissions_handler),
) -> UserPermissionsResponse | JSONResponse:
    """Return the authenticated user's permissions as currently stored.

    The token snapshot may be stale; this reads the store.
    """
    result = await handler.handle(GetUserPermissions(user_id=current_user.user_id))

    match result:
        case Success(value=permissions):
            return UserPermissionsResponse(
                user_id=current_user.user_id,
                permissions=sorted(permissions),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )


# =============================================================================
# Delegation
# =============================================================================


@users_router.patch(
    "/permissions",
    response_model=PermissionUpdateResponse,
    dependencies=[
        Depends(require_current_permission(PermissionName.GRANT_PERMISSIONS.value))
    ],
)
async def update_user_permissions(
    request: Request,
    data: PermissionUpdateRequest,
    current_user: AuthenticatedUser,
    handler: UpdateUserPermissionsHandler = Depends(
        get_update_user_permissions_handler
    ),
) -> PermissionUpdateResponse | JSONResponse:
    """Replace another user's permission set.

    PATCH /api/v1/users/permissions → 200 OK

    Returns:
        PermissionUpdateResponse with the target's new set.
        JSONResponse on refusal:
            400 MALFORMED_INPUT, UNKNOWN_PERMISSION
            403 PERMISSION_DENIED (no grant_permissions), SELF_MODIFICATION,
                WILDCARD_NOT_DELEGABLE, INSUFFICIENT_DELEGATION_RIGHTS
            404 TARGET_NOT_FOUND
    """
    command = UpdateUserPermissions(
        granter_id=current_user.user_id,
        target_identifier=data.target_identifier,
        permissions=data.permissions_to_keep,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=update):
            return PermissionUpdateResponse(
                target_identifier=update.target_identifier,
                permissions=sorted(update.permissions),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
                field="permissionsToKeep",
            )


# =============================================================================
# Administration
# =============================================================================


@users_router.get(
    "",
    response_model=UserListResponse,
    dependencies=[Depends(require_permission(PermissionName.VIEW_USERS.value))],
)
async def list_users(
    request: Request,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", ge=1)] = 20,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> UserListResponse | JSONResponse:
    """Page through all users (requires ``view_users``)."""
    result = await handler.handle(ListUsers(page=page, page_size=page_size))

    match result:
        case Success(value=user_page):
            return UserListResponse(
                users=[UserResponse.from_entity(u) for u in user_page.users],
                page=user_page.page,
                page_size=user_page.page_size,
                total=user_page.total,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )


@users_router.get(
    "/{user_id}/permissions",
    response_model=UserPermissionsResponse,
    dependencies=[Depends(require_permission(PermissionName.VIEW_USERS.value))],
)
async def get_user_permissions(
    request: Request,
    user_id: Annotated[int, Path(ge=1)],
    handler: GetUserPermissionsHandler = Depends(get_get_user_permissions_handler),
) -> UserPermissionsResponse | JSONResponse:
    """Return a user's stored permissions (requires ``view_users``)."""
    result = await handler.handle(GetUserPermissions(user_id=user_id))

    match result:
        case Success(value=permissions):
            return UserPermissionsResponse(
                user_id=user_id,
                permissions=sorted(permissions),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )


@users_router.patch(
    "/{user_id}/status",
    response_model=UserStatusUpdateResponse,
    dependencies=[
        Depends(require_current_permission(PermissionName.EDIT_USERS.value))
    ],
)
async def update_user_status(
    request: Request,
    user_id: Annotated[int, Path(ge=1)],
    data: UserStatusUpdateRequest,
    current_user: AuthenticatedUser,
    handler: UpdateUserStatusHandler = Depends(get_update_user_status_handler),
) -> UserStatusUpdateResponse | JSONResponse:
    """Change another user's status (requires ``edit_users`` in the store).

    Returns:
        UserStatusUpdateResponse on success.
        JSONResponse 403 for a self change, 400 for an unknown status,
        404 for a missing user.
    """
    command = UpdateUserStatus(
        actor_id=current_user.user_id,
        user_id=user_id,
        status=data.status,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=user):
            return UserStatusUpdateResponse(
                user_id=user_id,
                status=user.status.value,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )
