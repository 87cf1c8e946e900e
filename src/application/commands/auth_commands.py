"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    New accounts start inactive with no permissions. An administrator holding
    ``edit_users`` activates them.

    Attributes:
        name: Display name.
        email: Contact email (validated, normalized by the request schema).
        mobile_no: Mobile number used as the login identifier.
        password: Plain text password (hashed by the handler).
        image_url: Optional profile image location.
    """

    name: str
    email: str
    mobile_no: str
    password: str
    image_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange an identifier and secret for a session token.

    Attributes:
        identifier: Mobile number.
        password: Plain text password.

    Example:
        >>> command = LoginUser(identifier="0712345678", password="s3cret-Pass")
        >>> result = await handler.handle(command)
    """

    identifier: str
    password: str
