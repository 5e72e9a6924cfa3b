"""Database persistence infrastructure.

- BaseModel: Declarative base for the catalog tables
- Database: Async engine and unit-of-work sessions
- models/: SQLAlchemy models
- repositories/: Protocol implementations mapping models to entities
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
