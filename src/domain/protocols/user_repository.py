"""UserRepository protocol for credential storage.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.core.errors import ConflictError
from src.core.result import Result
from src.domain.entities.user import User
from src.domain.enums.user_status import UserStatus


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by integer id
        find_by_identifier: Retrieve user by mobile number
        exists_by_identifier: Check mobile number availability
        exists_by_email: Check email availability
        save: Create new user
        update_permissions: Replace a user's permission set
        update_status: Change a user's status
        list_users: Page through users
    """

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by id.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find user by login identifier (mobile number).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_identifier(self, identifier: str) -> bool:
        """Check whether a mobile number is already registered."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email is already registered (case-insensitive)."""
        ...

    async def save(self, user: User) -> Result[User, ConflictError]:
        """Create new user.

        Returns:
            Success(User) with id and timestamps populated.
            Failure(ConflictError) if the mobile number or email is already
            stored, including when a concurrent registration won the race.
        """
        ...

    async def update_permissions(
        self, user_id: int, permissions: frozenset[str]
    ) -> bool:
        """Replace the user's stored permission set with exactly ``permissions``.

        Implementations must issue a single keyed write.

        Returns:
            True if a row was updated, False if the user no longer exists.
        """
        ...

    async def update_status(self, user_id: int, status: UserStatus) -> bool:
        """Set the user's status.

        Returns:
            True if a row was updated, False if the user no longer exists.
        """
        ...

    async def list_users(self, *, offset: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users ordered by id, plus the total count."""
        ...
