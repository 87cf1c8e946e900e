"""Delegation guard: may a granter set a target's permissions?

The core rule is that you may only grant permissions you yourself hold.
Checks run in a fixed order and stop at the first failure:

    1. Granter and target are the same identity      -> SELF_MODIFICATION
    2. Requested string names outside the vocabulary -> UNKNOWN_PERMISSION
    3. Requested value is not a collection of strings -> MALFORMED_INPUT
    4. Granter holds ``*``                           -> allowed
    5. ``*`` requested                                -> WILDCARD_NOT_DELEGABLE
    6. First requested name (sorted) not held        -> INSUFFICIENT_DELEGATION_RIGHTS
    7. Otherwise                                      -> allowed

On success the value is the requested set itself. Callers replace the
target's stored set with exactly that value; this module never merges.

The unknown-name check runs before the shape check, so a collection mixing
unknown names with non-string members reports the unknown names.
"""

from collections.abc import Collection, Iterable, Mapping

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums.permission import WILDCARD_PERMISSION
from src.domain.errors.delegation_error import DelegationError
from src.domain.value_objects.permission_vocabulary import PermissionVocabulary


def _members(requested: object) -> list[object] | None:
    """Members of ``requested`` if it is a non-string, non-mapping collection."""
    if requested is None:
        return None
    if isinstance(requested, (str, bytes, bytearray, Mapping)):
        return None
    if not isinstance(requested, Collection):
        return None
    return list(requested)


def can_delegate(
    granter_id: int,
    granter_held: Iterable[str] | None,
    target_id: int,
    requested: object,
    vocabulary: PermissionVocabulary,
) -> Result[frozenset[str], DelegationError]:
    """Decide whether ``granter_id`` may set ``target_id``'s permissions.

    Args:
        granter_id: Id of the identity performing the change.
        granter_held: Granter's permissions, read from the store (never from
            a token snapshot).
        target_id: Id of the identity being changed.
        requested: Proposed complete permission set for the target. Anything
            other than a collection of strings is rejected.
        vocabulary: Valid permission names.

    Returns:
        Success with the frozen requested set (possibly empty, which revokes
        everything), or Failure with a DelegationError.

    Example:
        >>> can_delegate(1, {"*"}, 2, ["edit_systems"], vocabulary)
        Success(value=frozenset({'edit_systems'}))
        >>> can_delegate(1, {"edit_systems"}, 1, [], vocabulary)
        Failure(error=DelegationError(code=<ErrorCode.SELF_MODIFICATION: ...>, ...))
    """
    if granter_id == target_id:
        return Failure(
            error=DelegationError(
                code=ErrorCode.SELF_MODIFICATION,
                message="You cannot change your own permissions",
            )
        )

    members = _members(requested)

    if members is not None:
        unknown = vocabulary.unknown(m for m in members if isinstance(m, str))
        if unknown:
            return Failure(
                error=DelegationError(
                    code=ErrorCode.UNKNOWN_PERMISSION,
                    message=f"Unknown permissions: {', '.join(unknown)}",
                    permissions=unknown,
                )
            )

    if members is None or not all(isinstance(m, str) for m in members):
        return Failure(
            error=DelegationError(
                code=ErrorCode.MALFORMED_INPUT,
                message="Permissions must be a list of permission names",
            )
        )

    requested_set: frozenset[str] = frozenset(members)  # type: ignore[arg-type]
    held = frozenset(granter_held or ())

    if WILDCARD_PERMISSION in held:
        return Success(value=requested_set)

    if WILDCARD_PERMISSION in requested_set:
        return Failure(
            error=DelegationError(
                code=ErrorCode.WILDCARD_NOT_DELEGABLE,
                message="Only a holder of '*' can grant '*'",
                permissions=(WILDCARD_PERMISSION,),
            )
        )

    for permission in sorted(requested_set):
        if permission not in held:
            return Failure(
                error=DelegationError(
                    code=ErrorCode.INSUFFICIENT_DELEGATION_RIGHTS,
                    message=f"Cannot grant '{permission}': you do not hold it",
                    permissions=(permission,),
                )
            )

    return Success(value=requested_set)
