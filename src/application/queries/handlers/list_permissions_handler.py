"""List permissions query handler."""

from src.application.queries.permission_queries import ListPermissions
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities.permission import Permission
from src.domain.protocols import PermissionRepository


class ListPermissionsHandler:
    """Handler for listing the permission vocabulary."""

    def __init__(self, permission_repo: PermissionRepository) -> None:
        self._permission_repo = permission_repo

    async def handle(
        self, query: ListPermissions
    ) -> Result[list[Permission], DomainError]:
        """Return every stored permission ordered by name."""
        return Success(value=await self._permission_repo.list_all())
