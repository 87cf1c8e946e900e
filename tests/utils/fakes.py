"""In-memory repository fakes.

Structural implementations of UserRepository and PermissionRepository used
by handler and API tests. They mirror the SQLAlchemy repositories' contract:
permission writes replace the whole set, unknown ids return False.
"""

from dataclasses import replace
from datetime import UTC, datetime

from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission import Permission
from src.domain.entities.user import User
from src.domain.enums.permission import PERMISSION_DESCRIPTIONS, PermissionName
from src.domain.enums.user_status import UserStatus
from src.domain.value_objects import PermissionVocabulary


class InMemoryUserRepository:
    """Dict-backed user store keyed by id."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[int, User] = {}
        self.permission_writes: list[tuple[int, frozenset[str]]] = []
        for user in users or []:
            self.add(user)

    def add(self, user: User) -> User:
        if user.id is None:
            user = replace(user, id=max(self._users, default=0) + 1)
        self._users[user.id] = user  # type: ignore[index]
        return user

    def get(self, user_id: int) -> User:
        return self._users[user_id]

    @property
    def users(self) -> dict[int, User]:
        return self._users

    async def find_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user is not None else None

    async def find_by_identifier(self, identifier: str) -> User | None:
        for user in self._users.values():
            if user.mobile_no == identifier:
                return replace(user)
        return None

    async def exists_by_identifier(self, identifier: str) -> bool:
        return await self.find_by_identifier(identifier) is not None

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email.lower() == email.lower() for u in self._users.values())

    async def save(self, user: User) -> Result[User, ConflictError]:
        for existing in self._users.values():
            if existing.mobile_no == user.mobile_no:
                field = "mobile_no"
            elif existing.email.lower() == user.email.lower():
                field = "email"
            else:
                continue
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message=f"User with this {field} already exists",
                    resource_type="User",
                    conflicting_field=field,
                )
            )
        now = datetime.now(UTC)
        return Success(value=self.add(replace(user, created_at=now, updated_at=now)))

    async def update_permissions(
        self, user_id: int, permissions: frozenset[str]
    ) -> bool:
        if user_id not in self._users:
            return False
        self.permission_writes.append((user_id, permissions))
        self._users[user_id] = replace(
            self._users[user_id], permissions=frozenset(permissions)
        )
        return True

    async def update_status(self, user_id: int, status: UserStatus) -> bool:
        if user_id not in self._users:
            return False
        self._users[user_id] = replace(self._users[user_id], status=status)
        return True

    async def list_users(self, *, offset: int, limit: int) -> tuple[list[User], int]:
        ordered = [self._users[k] for k in sorted(self._users)]
        return ordered[offset : offset + limit], len(ordered)


class InMemoryPermissionRepository:
    """List-backed permission vocabulary store."""

    def __init__(self, permissions: list[Permission] | None = None) -> None:
        if permissions is None:
            permissions = [
                Permission(name=m.value, description=PERMISSION_DESCRIPTIONS.get(m))
                for m in PermissionName
            ]
        self._permissions = {p.name: p for p in permissions}

    async def list_all(self) -> list[Permission]:
        return [self._permissions[name] for name in sorted(self._permissions)]

    async def load_vocabulary(self) -> PermissionVocabulary:
        return PermissionVocabulary.from_names(self._permissions)

    async def add_missing(self, permissions: list[Permission]) -> int:
        added = 0
        for permission in permissions:
            if permission.name not in self._permissions:
                self._permissions[permission.name] = permission
                added += 1
        return added


def make_user(
    user_id: int | None = 1,
    mobile_no: str = "0700000001",
    permissions: set[str] | frozenset[str] | None = None,
    status: UserStatus = UserStatus.ACTIVE,
    name: str = "Test User",
    email: str | None = None,
    password_hash: str = "$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnot",
) -> User:
    """Build a User entity with sensible defaults."""
    return User(
        id=user_id,
        name=name,
        email=email or f"user{mobile_no}@example.com",
        mobile_no=mobile_no,
        password_hash=password_hash,
        status=status,
        permissions=frozenset(permissions or ()),
    )
