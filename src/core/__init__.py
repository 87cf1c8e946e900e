"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented programming
- Base error classes and error codes
- Settings and the dependency container

The core module has NO dependencies on the domain, application or
presentation layers (the container imports them lazily).
"""

from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
