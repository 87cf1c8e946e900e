"""Account status values.

Only ``active`` identities may sign in. New registrations start ``inactive``
and wait for an administrator holding ``edit_users`` to activate them.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Lifecycle status of a user account.

    String Enum:
        Inherits from str so values serialize directly into JSON responses
        and the ``users.status`` column.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]

    @classmethod
    def parse(cls, value: str) -> "UserStatus | None":
        """Resolve a raw string to a status, or None if it is not one.

        Example:
            >>> UserStatus.parse("active")
            <UserStatus.ACTIVE: 'active'>
            >>> UserStatus.parse("banned") is None
            True
        """
        try:
            return cls(value)
        except ValueError:
            return None
