"""Permissions resource handlers.

Endpoints:
    GET /api/v1/permissions - Permission vocabulary with descriptions
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.list_permissions_handler import (
    ListPermissionsHandler,
)
from src.application.queries.permission_queries import ListPermissions
from src.core.container import get_list_permissions_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    get_request_trace_id,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.permission_schemas import PermissionListResponse, PermissionResponse

permissions_router = APIRouter(
    prefix="/permissions",
    tags=["Permissions"],
    dependencies=[Depends(get_current_user)],
)


@permissions_router.get("", response_model=PermissionListResponse)
async def list_permissions(
    request: Request,
    handler: ListPermissionsHandler = Depends(get_list_permissions_handler),
) -> PermissionListResponse | JSONResponse:
    """List the permission vocabulary (any authenticated user)."""
    result = await handler.handle(ListPermissions())

    match result:
        case Success(value=permissions):
            return PermissionListResponse(
                permissions=[
                    PermissionResponse(name=p.name, description=p.description)
                    for p in permissions
                ]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )
