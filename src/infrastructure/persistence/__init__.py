"""Database persistence infrastructure.

- Base model for all tables
- Database connection and session management
- ORM models and repository implementations (subpackages)
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
