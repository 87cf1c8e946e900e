"""Fixtures for API tests.

The real app is used with its dependency factories overridden: handlers are
the real application handlers wired to in-memory repositories, and the token
service signs with the test secret.
"""

import pytest
from fastapi.testclient import TestClient

from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.update_user_permissions_handler import (
    UpdateUserPermissionsHandler,
)
from src.application.commands.handlers.update_user_status_handler import (
    UpdateUserStatusHandler,
)
from src.application.queries.handlers.get_user_handler import (
    GetUserHandler,
    GetUserPermissionsHandler,
)
from src.application.queries.handlers.list_permissions_handler import (
    ListPermissionsHandler,
)
from src.application.queries.handlers.list_users_handler import ListUsersHandler
from src.core.container import (
    get_get_user_handler,
    get_get_user_permissions_handler,
    get_list_permissions_handler,
    get_list_users_handler,
    get_login_user_handler,
    get_logger,
    get_register_user_handler,
    get_token_service,
    get_update_user_permissions_handler,
    get_update_user_status_handler,
    get_user_repository,
)
from src.domain.enums.user_status import UserStatus
from src.infrastructure.security import BcryptPasswordService
from src.main import app
from tests.utils.fakes import (
    InMemoryPermissionRepository,
    InMemoryUserRepository,
    make_user,
)

PASSWORD = "s3cret-Pass"

ADMIN_ID, ADMIN_NO = 1, "0700000001"
SYSADMIN_ID, SYSADMIN_NO = 2, "0700000002"
MANAGER_ID, MANAGER_NO = 3, "0700000003"
PENDING_ID, PENDING_NO = 4, "0700000004"


@pytest.fixture(scope="session")
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture(scope="session")
def password_hash(password_service) -> str:
    return password_service.hash_password(PASSWORD)


@pytest.fixture
def user_repo(password_hash) -> InMemoryUserRepository:
    """Admin holds '*', sysadmin edits systems, manager manages and delegates users."""
    return InMemoryUserRepository(
        [
            make_user(ADMIN_ID, ADMIN_NO, {"*"}, password_hash=password_hash),
            make_user(
                SYSADMIN_ID, SYSADMIN_NO, {"edit_systems"}, password_hash=password_hash
            ),
            make_user(
                MANAGER_ID,
                MANAGER_NO,
                {"view_users", "edit_users", "grant_permissions"},
                password_hash=password_hash,
            ),
            make_user(
                PENDING_ID,
                PENDING_NO,
                status=UserStatus.INACTIVE,
                password_hash=password_hash,
            ),
        ]
    )


@pytest.fixture(autouse=True)
def override_dependencies(user_repo, permission_repo, token_service, password_service):
    """Wire real handlers to in-memory repositories for every API test."""
    logger = get_logger()

    app.dependency_overrides.update(
        {
            get_token_service: lambda: token_service,
            get_user_repository: lambda: user_repo,
            get_register_user_handler: lambda: RegisterUserHandler(
                user_repo=user_repo, password_service=password_service, logger=logger
            ),
            get_login_user_handler: lambda: LoginUserHandler(
                user_repo=user_repo,
                password_service=password_service,
                token_service=token_service,
                logger=logger,
            ),
            get_update_user_permissions_handler: lambda: UpdateUserPermissionsHandler(
                user_repo=user_repo, permission_repo=permission_repo, logger=logger
            ),
            get_update_user_status_handler: lambda: UpdateUserStatusHandler(
                user_repo=user_repo, logger=logger
            ),
            get_get_user_handler: lambda: GetUserHandler(user_repo=user_repo),
            get_get_user_permissions_handler: lambda: GetUserPermissionsHandler(
                user_repo=user_repo
            ),
            get_list_users_handler: lambda: ListUsersHandler(user_repo=user_repo),
            get_list_permissions_handler: lambda: ListPermissionsHandler(
                permission_repo=permission_repo
            ),
        }
    )

    yield

    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """TestClient without lifespan (no database) that returns 500s as responses."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers(token_service, user_repo):
    """Build bearer headers for a stored user.

    ``permissions`` overrides the token snapshot, to simulate a stale token.
    """

    def _headers(user_id: int, permissions: set[str] | None = None) -> dict[str, str]:
        user = user_repo.get(user_id)
        token = token_service.generate_access_token(
            user_id=user.id,
            identifier=user.mobile_no,
            permissions=user.permissions if permissions is None else permissions,
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
