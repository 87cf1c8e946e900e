"""Permission names used to guard the admin API.

Permissions are plain capability strings. The reserved wildcard ``*`` means
"every permission, including ones added later" and is only ever *held*; it is
never declared as a route requirement.

Reference:
    - src/domain/value_objects/permission_vocabulary.py (valid-name set)
    - src/infrastructure/persistence/seeds/permission_seeder.py (seeding)

Usage:
    from src.domain.enums import PermissionName, WILDCARD_PERMISSION

    require_permission(PermissionName.VIEW_USERS)
"""

from enum import Enum

WILDCARD_PERMISSION = "*"


class PermissionName(str, Enum):
    """Built-in permission names seeded into the vocabulary store.

    The vocabulary is open: administrators may add names to the
    ``permissions`` table without a code change. These members are the names
    routes refer to, plus the wildcard.
    """

    # Users and roles
    VIEW_USERS = "view_users"
    EDIT_USERS = "edit_users"
    DELETE_USERS = "delete_users"
    EDIT_ROLES = "edit_roles"
    DELETE_ROLES = "delete_roles"
    GRANT_PERMISSIONS = "grant_permissions"
    ADMIN = "admin"

    # Systems
    VIEW_SYSTEMS = "view_systems"
    EDIT_SYSTEMS = "edit_systems"
    DELETE_SYSTEMS = "delete_systems"

    # Faults
    VIEW_FAULTS = "view_faults"
    EDIT_FAULTS = "edit_faults"
    DELETE_FAULTS = "delete_faults"
    UPDATE_FAULT_REPORT = "update_fault_report"
    ASSIGN_TECHNICIAN = "assign_technician"

    # Locations
    EDIT_ROOMS = "edit_rooms"
    EDIT_BLOCKS = "edit_blocks"

    WILDCARD = WILDCARD_PERMISSION


PERMISSION_DESCRIPTIONS: dict[PermissionName, str] = {
    PermissionName.VIEW_USERS: "Can view users",
    PermissionName.EDIT_USERS: "Can edit users",
    PermissionName.DELETE_USERS: "Can delete users",
    PermissionName.EDIT_ROLES: "Can edit roles",
    PermissionName.DELETE_ROLES: "Can delete roles",
    PermissionName.GRANT_PERMISSIONS: "Can grant permissions to other users",
    PermissionName.ADMIN: "Administrative access",
    PermissionName.VIEW_SYSTEMS: "Can view systems",
    PermissionName.EDIT_SYSTEMS: "Can edit systems",
    PermissionName.DELETE_SYSTEMS: "Can delete systems",
    PermissionName.VIEW_FAULTS: "Can view faults",
    PermissionName.EDIT_FAULTS: "Can edit faults",
    PermissionName.DELETE_FAULTS: "Can delete faults",
    PermissionName.UPDATE_FAULT_REPORT: "Can update fault reports",
    PermissionName.ASSIGN_TECHNICIAN: "Can assign technicians to faults",
    PermissionName.EDIT_ROOMS: "Can edit rooms",
    PermissionName.EDIT_BLOCKS: "Can edit blocks",
    PermissionName.WILDCARD: "All permissions",
}
