"""Permission database model (vocabulary store)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Permission(BaseModel):
    """One valid permission name.

    Rows are only ever added (idempotent seeding or administration);
    names are never renamed in place.
    """

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Permission(name={self.name})>"
