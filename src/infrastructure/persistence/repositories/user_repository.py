"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums.user_status import UserStatus
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_identifier("0712345678")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by id.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find user by mobile number (exact match).

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.mobile_no == identifier)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_identifier(self, identifier: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.mobile_no == identifier)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists (case-insensitive)."""
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> Result[User, ConflictError]:
        """Create new user in database.

        The unique indexes on mobile_no and email are the final arbiter: a
        registration that passed the exists_* checks can still lose a race.

        Returns:
            Success(User) with database-assigned id and timestamps.
            Failure(ConflictError) if mobile number or email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            field = _conflicting_field(e)
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message=(
                        f"User with this {field} already exists"
                        if field
                        else "User already exists"
                    ),
                    resource_type="User",
                    conflicting_field=field,
                )
            )
        await self.session.refresh(user_model)
        return Success(value=self._to_domain(user_model))

    async def update_permissions(
        self, user_id: int, permissions: frozenset[str]
    ) -> bool:
        """Replace the stored permission set in one UPDATE keyed by id.

        Returns:
            True if the user existed and was updated.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(permissions=sorted(permissions), updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def update_status(self, user_id: int, status: UserStatus) -> bool:
        """Set the user's status in one UPDATE keyed by id.

        Returns:
            True if the user existed and was updated.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(status=status.value, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def list_users(self, *, offset: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users ordered by id plus the total count."""
        stmt = select(UserModel).order_by(UserModel.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        users = [self._to_domain(model) for model in result.scalars().all()]

        total = await self.session.scalar(select(func.count()).select_from(UserModel))
        return users, int(total or 0)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Stored permission values are kept even if they have since left the
        vocabulary; non-string JSON members are dropped. An unrecognised
        stored status maps to INACTIVE so such accounts cannot sign in.
        """
        stored = user_model.permissions or []
        return User(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            mobile_no=user_model.mobile_no,
            password_hash=user_model.password_hash,
            status=UserStatus.parse(user_model.status) or UserStatus.INACTIVE,
            permissions=frozenset(p for p in stored if isinstance(p, str)),
            image_url=user_model.image_url,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to a new database model (id assigned on insert)."""
        return UserModel(
            name=user.name,
            email=user.email,
            mobile_no=user.mobile_no,
            password_hash=user.password_hash,
            status=user.status.value,
            permissions=user.sorted_permissions(),
            image_url=user.image_url,
        )


def _conflicting_field(error: IntegrityError) -> str | None:
    """Name the column whose unique index rejected the insert, if recognisable."""
    detail = str(error.orig)
    if "mobile_no" in detail:
        return "mobile_no"
    if "email" in detail:
        return "email"
    return None
