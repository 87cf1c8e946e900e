"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_user_repository, ...

The container is organized into modules:
- infrastructure: Core services (database, logging, password, tokens)
- repositories: Repository factories
- auth_handlers: Registration and login handler factories
- user_handlers: User administration and vocabulary handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_permission_repository,
    get_user_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_register_user_handler,
)

# User handlers
from src.core.container.user_handlers import (
    get_get_user_handler,
    get_get_user_permissions_handler,
    get_list_permissions_handler,
    get_list_users_handler,
    get_update_user_permissions_handler,
    get_update_user_status_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_permission_repository",
    "get_user_repository",
    # Auth handlers
    "get_login_user_handler",
    "get_register_user_handler",
    # User handlers
    "get_get_user_handler",
    "get_get_user_permissions_handler",
    "get_list_permissions_handler",
    "get_list_users_handler",
    "get_update_user_permissions_handler",
    "get_update_user_status_handler",
]
