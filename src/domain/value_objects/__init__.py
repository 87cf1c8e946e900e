"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.permission_vocabulary import PermissionVocabulary

__all__ = [
    "PermissionVocabulary",
]
