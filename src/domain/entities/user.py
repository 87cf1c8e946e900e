"""User domain entity for the asset tracking admin.

Pure business logic, no framework dependencies.

Permissions:
    - permissions: the identity's held capability strings (unordered set)
    - The set is only ever replaced wholesale by the delegation flow;
      there is no incremental grant or revoke.
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.enums.user_status import UserStatus


@dataclass
class User:
    """User domain entity.

    Business Rules:
        - Only ACTIVE users can sign in
        - New registrations start INACTIVE with no permissions
        - A user never changes their own status or permissions

    Attributes:
        id: Integer primary key (None until persisted)
        name: Display name
        email: Contact email (unique)
        mobile_no: Mobile number, the login identifier (unique)
        password_hash: Bcrypt hash (never plaintext)
        status: Account status
        permissions: Held permission names; may include the wildcard ``*``
        image_url: Optional profile image location
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=7,
        ...     name="Ada",
        ...     email="ada@example.com",
        ...     mobile_no="0712345678",
        ...     password_hash="$2b$12$...",
        ...     status=UserStatus.ACTIVE,
        ...     permissions=frozenset({"view_users"}),
        ... )
        >>> user.can_login()
        True
    """

    id: int | None
    name: str
    email: str
    mobile_no: str
    password_hash: str
    status: UserStatus = UserStatus.INACTIVE
    permissions: frozenset[str] = field(default_factory=frozenset)
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def can_login(self) -> bool:
        """Check if the account status permits signing in."""
        return self.status == UserStatus.ACTIVE

    def is_same_identity(self, other_identifier: str) -> bool:
        """Check whether an identifier refers to this user.

        Used for self-modification checks, which compare identifiers before
        the target is even looked up.
        """
        return self.mobile_no == other_identifier

    def sorted_permissions(self) -> list[str]:
        """Held permissions in stable (sorted) order for serialization."""
        return sorted(self.permissions)
