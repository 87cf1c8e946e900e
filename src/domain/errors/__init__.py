"""Domain errors package.

Usage:
    from src.domain.errors import DelegationError
"""

from src.domain.errors.delegation_error import DelegationError

__all__ = [
    "DelegationError",
]
