"""Authorization rules: permission evaluation and delegation.

Pure functions with no I/O. Callers supply the held permissions (from a
token snapshot or the store) and the vocabulary.
"""

from src.domain.authorization.delegation_guard import can_delegate
from src.domain.authorization.permission_evaluator import (
    allows,
    allows_all,
    allows_any,
    ensure_requirable,
    missing,
)

__all__ = [
    "allows",
    "allows_all",
    "allows_any",
    "can_delegate",
    "ensure_requirable",
    "missing",
]
