"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state (register, login,
  permission delegation, status changes)
- Queries: Read operations that fetch data (users, vocabulary)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)

The application layer orchestrates domain logic but contains no business rules.
"""
