"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming where it reads naturally.
Used with Result types for railway-oriented programming and surfaced to
API clients in Problem Details responses.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, NO_TOKEN, TOKEN_*)
- Authorization errors (PERMISSION_DENIED, STATUS_*)
- Delegation errors (SELF_MODIFICATION, *_PERMISSION, *_DELEGA*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_STATUS = "invalid_status"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    TARGET_NOT_FOUND = "target_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication errors
    NO_TOKEN = "no_token"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_NOT_ACTIVE = "account_not_active"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    STATUS_SELF_MODIFICATION = "status_self_modification"

    # Delegation errors
    SELF_MODIFICATION = "self_modification"
    UNKNOWN_PERMISSION = "unknown_permission"
    MALFORMED_INPUT = "malformed_input"
    WILDCARD_NOT_DELEGABLE = "wildcard_not_delegable"
    INSUFFICIENT_DELEGATION_RIGHTS = "insufficient_delegation_rights"
