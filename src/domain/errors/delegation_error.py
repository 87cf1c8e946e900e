"""Delegation domain errors.

Returned (never raised) by the delegation guard and the permission update
handler when a grant is refused.

Error codes:
    - SELF_MODIFICATION: granter and target are the same identity
    - UNKNOWN_PERMISSION: requested names outside the vocabulary
    - MALFORMED_INPUT: requested value is not a collection of strings
    - WILDCARD_NOT_DELEGABLE: ``*`` requested by a non-wildcard holder
    - INSUFFICIENT_DELEGATION_RIGHTS: granter lacks a requested permission
    - TARGET_NOT_FOUND: no identity matches the target identifier

Usage:
    from src.domain.errors import DelegationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(
        error=DelegationError(
            code=ErrorCode.INSUFFICIENT_DELEGATION_RIGHTS,
            message="Cannot grant a permission you do not hold",
            permissions=("delete_systems",),
        )
    )
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DelegationError(DomainError):
    """Refused permission delegation.

    Attributes:
        permissions: Offending permission names, sorted. Empty when the
            failure is not about specific names (self-modification,
            malformed input, missing target).
    """

    permissions: tuple[str, ...] = ()
