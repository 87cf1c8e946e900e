"""PermissionRepository - SQLAlchemy implementation of PermissionRepository protocol.

Maps between domain Permission entities and database PermissionModel, and
builds the PermissionVocabulary the delegation guard validates against.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.permission import Permission
from src.domain.value_objects.permission_vocabulary import PermissionVocabulary
from src.infrastructure.persistence.models.permission import (
    Permission as PermissionModel,
)


class PermissionRepository:
    """SQLAlchemy implementation of PermissionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[Permission]:
        stmt = select(PermissionModel).order_by(PermissionModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def load_vocabulary(self) -> PermissionVocabulary:
        """Build the vocabulary from stored names (wildcard always included)."""
        result = await self.session.execute(select(PermissionModel.name))
        return PermissionVocabulary.from_names(result.scalars().all())

    async def add_missing(self, permissions: list[Permission]) -> int:
        """Insert permissions whose names are not stored yet.

        Returns:
            Number of rows inserted.
        """
        result = await self.session.execute(select(PermissionModel.name))
        existing = set(result.scalars().all())

        new_models = [
            PermissionModel(name=p.name, description=p.description)
            for p in permissions
            if p.name not in existing
        ]
        if not new_models:
            return 0

        self.session.add_all(new_models)
        await self.session.commit()
        return len(new_models)

    def _to_domain(self, model: PermissionModel) -> Permission:
        return Permission(
            name=model.name,
            description=model.description,
            id=model.id,
            created_at=model.created_at,
        )
