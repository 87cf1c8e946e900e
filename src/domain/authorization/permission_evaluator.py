"""Permission evaluation over held capability sets.

Pure, deterministic functions. A held set containing the wildcard ``*``
satisfies every requirement, including permissions added to the vocabulary
later. ``None`` or an empty held set satisfies nothing.

``*`` is only meaningful on the *held* side. Route declarations that name it
as a requirement are rejected by ``ensure_requirable`` when the route is
declared; the evaluation functions themselves never raise and treat a
required ``*`` as an ordinary literal.

Usage:
    from src.domain.authorization import allows, allows_all, missing

    allows({"view_users"}, "view_users")          # True
    allows({"*"}, "delete_systems")               # True
    allows_all({"view_users"}, ["view_users", "edit_users"])  # False
    missing({"view_users"}, ["view_users", "edit_users"])     # ("edit_users",)
"""

from collections.abc import Iterable

from src.domain.enums.permission import WILDCARD_PERMISSION

HeldPermissions = Iterable[str] | None


def _as_set(held: HeldPermissions) -> frozenset[str]:
    if held is None:
        return frozenset()
    if isinstance(held, frozenset):
        return held
    return frozenset(held)


def ensure_requirable(permission: str) -> str:
    """Validate a permission name used as a route requirement.

    Args:
        permission: Permission name to require.

    Returns:
        The permission unchanged.

    Raises:
        ValueError: If the name is empty or is the wildcard.

    Example:
        >>> ensure_requirable("view_users")
        'view_users'
        >>> ensure_requirable("*")
        ValueError: The wildcard permission cannot be required
    """
    if not isinstance(permission, str) or not permission.strip():
        raise ValueError(f"Invalid required permission: {permission!r}")
    if permission == WILDCARD_PERMISSION:
        raise ValueError("The wildcard permission cannot be required")
    return permission


def allows(held: HeldPermissions, required: str) -> bool:
    """Check a single required permission.

    Returns:
        True iff ``required`` is held or the wildcard is held.
    """
    held_set = _as_set(held)
    return WILDCARD_PERMISSION in held_set or required in held_set


def allows_any(held: HeldPermissions, required: Iterable[str]) -> bool:
    """Check that at least one required permission is held.

    An empty ``required`` is satisfied only by a wildcard holder.
    """
    held_set = _as_set(held)
    if WILDCARD_PERMISSION in held_set:
        return True
    return not held_set.isdisjoint(required)


def allows_all(held: HeldPermissions, required: Iterable[str]) -> bool:
    """Check that every required permission is held.

    An empty ``required`` is always satisfied.
    """
    held_set = _as_set(held)
    if WILDCARD_PERMISSION in held_set:
        return True
    return held_set.issuperset(required)


def missing(held: HeldPermissions, required: Iterable[str]) -> tuple[str, ...]:
    """Required permissions that are not satisfied, sorted.

    Empty when the wildcard is held. Used to name denials in 403 responses.
    """
    held_set = _as_set(held)
    if WILDCARD_PERMISSION in held_set:
        return ()
    return tuple(sorted(set(required) - held_set))
