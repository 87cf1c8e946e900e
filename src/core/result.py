"""Result types for railway-oriented programming.

Operations that can fail in an expected way (bad credentials, a denied
delegation, a missing user) return a Result instead of raising. Exceptions
stay reserved for programming errors and infrastructure failures.

Usage:
    def find_target(identifier: str) -> Result[User, DelegationError]:
        user = lookup(identifier)
        if user is None:
            return Failure(error=target_not_found(identifier))
        return Success(value=user)

    match find_target("9876543210"):
        case Success(value=user):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
