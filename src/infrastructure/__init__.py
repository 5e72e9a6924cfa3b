"""Infrastructure layer - Adapters for domain protocols.

Structure:
- persistence/: SQLAlchemy models and repositories
- authorization/: Casbin RBAC adapter, model and policy
- security/: Password hashing and JWT tokens
- logging/: structlog console adapter
- identifiers/: UUIDv7 id generator

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
