"""List users query handler."""

from dataclasses import dataclass

from src.application.queries.user_queries import ListUsers
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository

MAX_PAGE_SIZE = 100


@dataclass
class UserPage:
    """One page of users."""

    users: list[User]
    page: int
    page_size: int
    total: int


class ListUsersHandler:
    """Handler for paging through users.

    Page size is capped at MAX_PAGE_SIZE; pages past the end are empty.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for listing.
        """
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[UserPage, DomainError]:
        """Handle list users query.

        Returns:
            Success(UserPage) with the requested page and the total count.
        """
        page = max(query.page, 1)
        page_size = min(max(query.page_size, 1), MAX_PAGE_SIZE)

        users, total = await self._user_repo.list_users(
            offset=(page - 1) * page_size,
            limit=page_size,
        )

        return Success(
            value=UserPage(users=users, page=page, page_size=page_size, total=total)
        )
