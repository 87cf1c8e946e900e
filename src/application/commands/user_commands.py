"""User administration commands (CQRS write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class UpdateUserPermissions:
    """Replace another user's permission set.

    Attributes:
        granter_id: Id of the authenticated user making the change.
        target_identifier: Mobile number of the user being changed.
        permissions: Proposed complete permission set, exactly as received.
            Left untyped on purpose: the delegation guard decides whether it
            is a well-formed collection of names.
    """

    granter_id: int
    target_identifier: str
    permissions: object


@dataclass(frozen=True, kw_only=True)
class UpdateUserStatus:
    """Change another user's account status.

    Attributes:
        actor_id: Id of the authenticated user making the change.
        user_id: Id of the user being changed.
        status: Requested status as received (validated by the handler).
    """

    actor_id: int
    user_id: int
    status: str
