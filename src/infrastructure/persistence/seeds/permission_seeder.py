"""Permission vocabulary seeder.

Seeds the built-in permission names (wildcard included) into the
permissions table. Idempotent: names already present are skipped, so it is
safe to run on every startup.

After initial seeding, new names are added administratively.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.permission import Permission
from src.domain.enums.permission import PERMISSION_DESCRIPTIONS, PermissionName
from src.infrastructure.persistence.repositories.permission_repository import (
    PermissionRepository,
)

logger = structlog.get_logger(__name__)


def default_permissions() -> list[Permission]:
    """Built-in permissions with their descriptions."""
    return [
        Permission(name=member.value, description=PERMISSION_DESCRIPTIONS.get(member))
        for member in PermissionName
    ]


async def seed_permissions(session: AsyncSession) -> int:
    """Seed the default permission vocabulary.

    Args:
        session: Async database session.

    Returns:
        Number of permissions inserted.
    """
    permissions = default_permissions()
    seeded_count = await PermissionRepository(session).add_missing(permissions)

    logger.info(
        "permission_seeding_complete",
        seeded=seeded_count,
        skipped=len(permissions) - seeded_count,
        total=len(permissions),
    )
    return seeded_count
