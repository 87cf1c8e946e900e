"""Domain layer - Pure business logic.

This layer contains the permission rules, entities, value objects and
protocols (ports). The domain layer has NO dependencies on any framework
or infrastructure - it is pure Python.

Structure:
- authorization/: Permission evaluation and the delegation guard
- entities/: Domain entities (User, Permission)
- enums/: Permission names and user status
- errors/: Domain error types
- value_objects/: Immutable values (permission vocabulary)
- protocols/: Repository and service interfaces

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
