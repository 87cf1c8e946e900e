"""Permission authorization dependencies.

Dependency factories that run after authentication and before the route
handler, so a missing permission is reported before any not-found result.

Snapshot checks (token permissions, fast, possibly stale):
    require_permission("view_users")
    require_any_permission("edit_systems", "delete_systems")
    require_all_permissions("view_faults", "edit_faults")

Store check (re-reads the caller's permissions, for mutating routes):
    require_current_permission("edit_users")

Declaring ``*`` as a requirement raises ValueError when the route module is
imported.

Usage:
    @router.get("/users", dependencies=[Depends(require_permission("view_users"))])
    async def list_users(...):
        ...
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Annotated

from fastapi import Depends, status

from src.core.container import get_logger, get_user_repository
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.domain.authorization import (
    allows,
    allows_all,
    allows_any,
    ensure_requirable,
    missing,
)
from src.domain.protocols import UserRepository
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.domain_http_exception import (
    DomainHTTPException,
)


def _forbidden(user: CurrentUser, permissions: Iterable[str]) -> DomainHTTPException:
    names = tuple(permissions)
    get_logger().info("permission_denied", user_id=user.user_id, missing=names)
    return DomainHTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        error=AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message=f"Permission denied: {', '.join(names)}",
            missing_permissions=names,
        ),
    )


def _requirements(permissions: tuple[str, ...]) -> tuple[str, ...]:
    if not permissions:
        raise ValueError("At least one permission must be required")
    return tuple(ensure_requirable(p) for p in permissions)


def require_permission(permission: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires one permission in the token snapshot.

    Raises:
        ValueError: At declaration, if ``permission`` is ``*`` or empty.
        DomainHTTPException 403 (PERMISSION_DENIED): At request time, if the permission is not held.
    """
    required = ensure_requirable(permission)

    async def permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> None:
        if not allows(current_user.permissions, required):
            raise _forbidden(current_user, [required])

    return permission_checker


def require_any_permission(*permissions: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires at least one of ``permissions``.

    The 403 detail names every alternative.
    """
    required = _requirements(permissions)

    async def any_permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> None:
        if not allows_any(current_user.permissions, required):
            raise _forbidden(current_user, sorted(required))

    return any_permission_checker


def require_all_permissions(*permissions: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires every one of ``permissions``.

    The 403 detail names only the permissions that are missing.
    """
    required = _requirements(permissions)

    async def all_permissions_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> None:
        if not allows_all(current_user.permissions, required):
            raise _forbidden(current_user, missing(current_user.permissions, required))

    return all_permissions_checker


def require_current_permission(permission: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that checks one permission against the store.

    The token snapshot is ignored, so a permission revoked after the token
    was issued is already denied. A caller whose account no longer exists
    holds nothing.
    """
    required = ensure_requirable(permission)

    async def current_permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    ) -> None:
        user = await user_repo.find_by_id(current_user.user_id)
        held = user.permissions if user is not None else frozenset()
        if not allows(held, required):
            raise _forbidden(current_user, [required])

    return current_permission_checker
