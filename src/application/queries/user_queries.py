"""User queries (CQRS read operations).

Queries represent requests for data and never change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch a single user's profile.

    Attributes:
        user_id: Id of the user.
    """

    user_id: int


@dataclass(frozen=True, kw_only=True)
class GetUserPermissions:
    """Fetch a user's currently stored permissions (not a token snapshot).

    Attributes:
        user_id: Id of the user.
    """

    user_id: int


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Page through all users.

    Attributes:
        page: 1-based page number.
        page_size: Users per page.
    """

    page: int = 1
    page_size: int = 20
