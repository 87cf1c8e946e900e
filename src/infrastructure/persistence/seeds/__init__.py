"""Database seeders."""

from src.infrastructure.persistence.seeds.permission_seeder import (
    default_permissions,
    seed_permissions,
)

__all__ = [
    "default_permissions",
    "seed_permissions",
]
