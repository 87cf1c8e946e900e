"""User database model (credential store).

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - permissions: JSON array of permission names, written as a whole
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for identities and their permission sets.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        name: Display name
        email: Unique email address (lowercase)
        mobile_no: Unique mobile number, the login identifier
        password_hash: Bcrypt hashed password
        status: active | inactive | suspended
        permissions: Sorted JSON array of permission names
        image_url: Optional profile image location

    Indexes:
        - mobile_no (unique) for login and delegation lookups
        - email (unique) for registration checks
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    mobile_no: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True,
        index=True,
        comment="Login identifier",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="inactive",
        server_default="inactive",
        comment="Account status (active, inactive, suspended)",
    )

    permissions: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Held permission names (sorted JSON array)",
    )

    image_url: Mapped[str | None] = mapped_column(
        String(1024),
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, mobile_no={self.mobile_no}, status={self.status})>"
