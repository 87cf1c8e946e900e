"""API v1 routers.

Resources:
    /api/v1/auth         - Registration and login
    /api/v1/users        - Current user, delegation, user administration
    /api/v1/permissions  - Permission vocabulary
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import auth_router
from src.presentation.routers.api.v1.permissions import permissions_router
from src.presentation.routers.api.v1.users import users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(permissions_router)

__all__ = [
    "v1_router",
]
