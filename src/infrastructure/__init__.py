"""Infrastructure layer - Adapters for the domain protocols.

Structure:
- persistence/: PostgreSQL credential store and permission vocabulary
  (SQLAlchemy async models, repositories, seeders)
- security/: Bcrypt password hashing and JWT session tokens
- logging/: Structured console logging (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
